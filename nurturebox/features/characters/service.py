# nurturebox/features/characters/service.py
from typing import List

from fastapi.concurrency import run_in_threadpool

from nurturebox.exceptions import ValidationFailure
from .schemas import Character, CharacterFields, CharacterOrder

MISSING_FIELDS = "Please fill in both character name and profile"

def validate_character_fields(fields: CharacterFields) -> None:
    if not fields.character_name.strip() or not fields.profile_text.strip():
        raise ValidationFailure(MISSING_FIELDS)

async def list_characters(store, order: CharacterOrder = CharacterOrder.created_at) -> List[Character]:
    return await run_in_threadpool(store.list_characters, order)

async def create_character(store, fields: CharacterFields) -> Character:
    validate_character_fields(fields)
    # stored as entered; only the presence check trims
    return await run_in_threadpool(store.insert_character, fields.character_name, fields.profile_text)

async def update_character(store, character_id: str, fields: CharacterFields) -> Character:
    validate_character_fields(fields)
    return await run_in_threadpool(
        store.update_character, character_id, fields.character_name, fields.profile_text
    )

async def delete_character(store, character_id: str) -> None:
    await run_in_threadpool(store.delete_character, character_id)
