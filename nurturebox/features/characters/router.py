# nurturebox/features/characters/router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from nurturebox.dependencies import get_character_store
from nurturebox.exceptions import CharacterNotFound, StoreError, ValidationFailure
from nurturebox.logger import get_logger
from nurturebox.schemas import Notification
from .schemas import (
    Character,
    CharacterFields,
    CharacterListResponse,
    CharacterMutationResponse,
    CharacterOrder,
)
from .service import create_character, delete_character, list_characters, update_character

router = APIRouter(prefix="/api/v1", tags=["characters"])
log = get_logger(__name__)

def _to_http(e: Exception) -> HTTPException:
    if isinstance(e, ValidationFailure):
        return HTTPException(400, str(e))
    if isinstance(e, CharacterNotFound):
        return HTTPException(404, "Character not found")
    return HTTPException(502, str(e))

async def _refreshed(store) -> Optional[List[Character]]:
    # the mutation already succeeded; a failed refresh must not report it as failed
    try:
        return await list_characters(store, CharacterOrder.created_at)
    except StoreError as e:
        log.warning(f"listing refresh after mutation failed: {e}")
        return None

@router.get("/characters", response_model=CharacterListResponse)
async def list_characters_endpoint(
    order: CharacterOrder = CharacterOrder.created_at,
    store=Depends(get_character_store),
) -> CharacterListResponse:
    try:
        return CharacterListResponse(characters=await list_characters(store, order))
    except StoreError as e:
        raise _to_http(e)

@router.post("/characters", status_code=201, response_model=CharacterMutationResponse)
async def create_character_endpoint(
    fields: CharacterFields,
    store=Depends(get_character_store),
) -> CharacterMutationResponse:
    try:
        created = await create_character(store, fields)
    except (ValidationFailure, StoreError) as e:
        raise _to_http(e)
    return CharacterMutationResponse(
        character=created,
        characters=await _refreshed(store),
        notification=Notification.success("Character saved successfully"),
    )

@router.put("/characters/{character_id}", response_model=CharacterMutationResponse)
async def update_character_endpoint(
    character_id: str,
    fields: CharacterFields,
    store=Depends(get_character_store),
) -> CharacterMutationResponse:
    try:
        updated = await update_character(store, character_id, fields)
    except (ValidationFailure, StoreError) as e:
        raise _to_http(e)
    return CharacterMutationResponse(
        character=updated,
        characters=await _refreshed(store),
        notification=Notification.success("Character updated successfully"),
    )

@router.delete("/characters/{character_id}", response_model=CharacterMutationResponse)
async def delete_character_endpoint(
    character_id: str,
    store=Depends(get_character_store),
) -> CharacterMutationResponse:
    try:
        await delete_character(store, character_id)
    except CharacterNotFound:
        log.info(f"delete of missing character {character_id} treated as done")
    except StoreError as e:
        raise _to_http(e)
    return CharacterMutationResponse(
        characters=await _refreshed(store),
        notification=Notification.success("Character deleted successfully"),
    )
