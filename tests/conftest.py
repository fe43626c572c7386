# tests/conftest.py
import os

# config is read once at import time
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("GENERATION_DELAY_SECONDS", "0")

import pytest
from fastapi.testclient import TestClient

from nurturebox.dependencies import get_character_store
from nurturebox.exceptions import StoreError
from nurturebox.lib.character_store import InMemoryCharacterStore
from nurturebox.main import app


class FlakyStore:
    """
    Wraps an in-memory store; any method named in `fail` raises StoreError,
    the way a network or server error from Supabase surfaces.
    """

    def __init__(self, inner: InMemoryCharacterStore):
        self.inner = inner
        self.fail = set()

    def _call(self, name, *args):
        if name in self.fail:
            raise StoreError("store unavailable")
        return getattr(self.inner, name)(*args)

    def list_characters(self, *args):
        return self._call("list_characters", *args)

    def insert_character(self, *args):
        return self._call("insert_character", *args)

    def update_character(self, *args):
        return self._call("update_character", *args)

    def delete_character(self, *args):
        return self._call("delete_character", *args)


# -------- Stores --------
@pytest.fixture
def store():
    return InMemoryCharacterStore()

@pytest.fixture
def seeded_store():
    # inserted in this order, so creation order differs from name order
    return InMemoryCharacterStore(seed=[
        {"character_name": "Borin", "profile_text": "Dwarf smith, gruff, loyal."},
        {"character_name": "Aria", "profile_text": "Young duelist with a borrowed sword."},
        {"character_name": "Cael", "profile_text": "Court magician, speaks in riddles."},
    ])

@pytest.fixture
def flaky_store(seeded_store):
    return FlakyStore(seeded_store)

# -------- Test client --------
@pytest.fixture
def client(seeded_store):
    app.dependency_overrides[get_character_store] = lambda: seeded_store
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def flaky_client(flaky_store):
    app.dependency_overrides[get_character_store] = lambda: flaky_store
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def ids(seeded_store) -> dict:
    """Character name -> id for the seeded store."""
    return {c.character_name: c.id for c in seeded_store.list_characters()}
