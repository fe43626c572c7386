# nurturebox/lib/supabase_client.py
from typing import Optional

from supabase import Client, create_client

from nurturebox.config import config
from nurturebox.exceptions import StoreError
from nurturebox.logger import get_logger

log = get_logger(__name__)

_client: Optional[Client] = None

def get_client() -> Client:
    """Create the Supabase client on first use; importing this module never touches the network."""
    global _client
    if _client is None:
        if not config.supabase_url or not config.supabase_key:
            raise StoreError("Supabase is not configured: set SUPABASE_URL and SUPABASE_KEY")
        _client = create_client(config.supabase_url, config.supabase_key)
        log.info(f"Supabase client initialized for {config.supabase_url}")
    return _client
