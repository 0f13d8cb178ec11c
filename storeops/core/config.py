"""
Configuration helpers for the storeops backend.

Routers and services read a Settings object instead of fetching os.environ
directly, so tests can swap the environment and call get_settings.cache_clear().
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_DIR = ROOT_DIR / "public"
DEV_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:4000",
    "http://127.0.0.1:4000",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_dir: Path
    log_level: str
    cors_origins: tuple[str, ...]
    serialize_writes: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _origins(value: str | None) -> tuple[str, ...]:
        return tuple(o.strip().rstrip("/") for o in (value or "").split(",") if o.strip())

    data_dir = (os.getenv("DATA_DIR") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "4000"), 4000),
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        serialize_writes=_bool(os.getenv("SERIALIZE_WRITES"), True),
    )
