# nurturebox/config.py
import os
from dataclasses import dataclass
from typing import List

def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)

@dataclass(frozen=True)
class Config:
    app_title: str
    # Supabase
    supabase_url: str
    supabase_key: str
    characters_table: str
    store_backend: str      # "supabase" or "memory"
    # API / CORS
    allowed_origins: List[str]
    # Logging
    log_level: str
    # Storyboard
    generation_delay_seconds: float  # simulated generation time, presentation only
    debug: bool

def load_config() -> Config:
    supabase_url = os.getenv("SUPABASE_URL", "")
    return Config(
        app_title = os.getenv("APP_TITLE", "Narrative Nurture Box"),
        supabase_url = supabase_url,
        supabase_key = os.getenv("SUPABASE_KEY", os.getenv("SUPABASE_ANON_KEY", "")),
        characters_table = os.getenv("CHARACTERS_TABLE", "characters"),
        store_backend = os.getenv("STORE_BACKEND", "supabase" if supabase_url else "memory").strip().lower(),
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        log_level = os.getenv("LOG_LEVEL", "INFO"),
        generation_delay_seconds = _env_float("GENERATION_DELAY_SECONDS", 2.0),
        debug = _env_bool("DEBUG", False),
    )

# Load once
config = load_config()
