# nurturebox/lib/character_store.py
"""
Character persistence.

``SupabaseCharacterStore`` talks to the ``characters`` table through the
Supabase SDK (select-all-with-ordering, insert-one, update-by-id,
delete-by-id). ``InMemoryCharacterStore`` has the same surface and backs
local runs without credentials and the test-suite.

All methods are synchronous; callers run them in a threadpool.
"""
from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from nurturebox.exceptions import CharacterNotFound, StoreError
from nurturebox.features.characters.schemas import Character, CharacterOrder
from nurturebox.logger import get_logger

log = get_logger(__name__)

FETCH_FAILED = "Failed to fetch characters"
SAVE_FAILED = "Failed to save character"
DELETE_FAILED = "Failed to delete character"


class SupabaseCharacterStore:
    """Storage operations for character records in a Supabase table."""

    def __init__(self, client: Any, table: str = "characters"):
        self._client = client
        self.table = table

    def _table(self):
        return self._client.table(self.table)

    def list_characters(self, order: CharacterOrder = CharacterOrder.created_at) -> List[Character]:
        try:
            resp = self._table().select("*").order(order.column, desc=False).execute()
        except Exception as e:
            log.exception(f"select from {self.table} failed: {e}")
            raise StoreError(FETCH_FAILED) from e
        rows = resp.data or []
        log.debug(f"fetched {len(rows)} characters ordered by {order.column}")
        # name order is casefolded whatever the database collation
        return order.sort([Character.model_validate(r) for r in rows])

    def insert_character(self, character_name: str, profile_text: str) -> Character:
        try:
            resp = self._table().insert(
                [{"character_name": character_name, "profile_text": profile_text}]
            ).execute()
        except Exception as e:
            log.exception(f"insert into {self.table} failed: {e}")
            raise StoreError(SAVE_FAILED) from e
        if not resp.data:
            raise StoreError(SAVE_FAILED)
        created = Character.model_validate(resp.data[0])
        log.info(f"character created: {created.id}")
        return created

    def update_character(self, character_id: str, character_name: str, profile_text: str) -> Character:
        try:
            resp = self._table().update(
                {"character_name": character_name, "profile_text": profile_text}
            ).eq("id", character_id).execute()
        except Exception as e:
            log.exception(f"update of {self.table}/{character_id} failed: {e}")
            raise StoreError(SAVE_FAILED) from e
        if not resp.data:
            raise CharacterNotFound(character_id)
        log.info(f"character updated: {character_id}")
        return Character.model_validate(resp.data[0])

    def delete_character(self, character_id: str) -> None:
        try:
            resp = self._table().delete().eq("id", character_id).execute()
        except Exception as e:
            log.exception(f"delete of {self.table}/{character_id} failed: {e}")
            raise StoreError(DELETE_FAILED) from e
        if not resp.data:
            raise CharacterNotFound(character_id)
        log.info(f"character deleted: {character_id}")


class InMemoryCharacterStore:
    """Process-local store with the same contract as the Supabase one."""

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None):
        self._rows: Dict[str, Character] = {}
        self._lock = threading.Lock()
        for row in seed or []:
            self.insert_character(row["character_name"], row["profile_text"])

    def list_characters(self, order: CharacterOrder = CharacterOrder.created_at) -> List[Character]:
        with self._lock:
            rows = [c.model_copy() for c in self._rows.values()]
        return order.sort(rows)

    def insert_character(self, character_name: str, profile_text: str) -> Character:
        created = Character(
            id=str(uuid.uuid4()),
            character_name=character_name,
            profile_text=profile_text,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._rows[created.id] = created
        return created.model_copy()

    def update_character(self, character_id: str, character_name: str, profile_text: str) -> Character:
        with self._lock:
            current = self._rows.get(character_id)
            if current is None:
                raise CharacterNotFound(character_id)
            updated = current.model_copy(update={"character_name": character_name, "profile_text": profile_text})
            self._rows[character_id] = updated
        return updated.model_copy()

    def delete_character(self, character_id: str) -> None:
        with self._lock:
            if self._rows.pop(character_id, None) is None:
                raise CharacterNotFound(character_id)
