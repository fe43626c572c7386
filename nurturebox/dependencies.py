"""
FastAPI ``Depends()`` factories.

Routers get the character store from here instead of building one at module
level, so tests can swap it through ``app.dependency_overrides``.
"""
from functools import lru_cache

from nurturebox.config import config
from nurturebox.lib.character_store import InMemoryCharacterStore, SupabaseCharacterStore
from nurturebox.logger import get_logger

log = get_logger(__name__)


@lru_cache(maxsize=1)
def get_character_store():
    """Singleton store selected by STORE_BACKEND."""
    if config.store_backend == "memory":
        log.warning("STORE_BACKEND=memory: characters live only as long as this process")
        return InMemoryCharacterStore()
    if config.store_backend != "supabase":
        raise ValueError(f"unknown STORE_BACKEND: {config.store_backend}")
    from nurturebox.lib.supabase_client import get_client
    return SupabaseCharacterStore(get_client(), table=config.characters_table)
