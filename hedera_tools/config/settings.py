"""
Application settings.

Typed, read-once view of the environment used by the API server and the
entry point. Handlers receive it through a FastAPI dependency so tests can
swap it out.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from hedera_tools.config.env import env_bool, env_int, env_str, load_env

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_SECRET_KEY = "secret"
DEFAULT_SESSION_MAX_AGE_SEC = 14 * 24 * 60 * 60


@dataclass(frozen=True)
class Settings:
    """Service configuration resolved from the environment."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    secret_key: str = DEFAULT_SECRET_KEY
    """Signs the session cookie. The default is unsafe outside local development."""
    strict_network: bool = False
    """Reject unrecognised network names instead of falling back to testnet."""
    session_max_age_sec: int = DEFAULT_SESSION_MAX_AGE_SEC
    log_level: str = "info"

    @property
    def uses_default_secret(self) -> bool:
        return self.secret_key == DEFAULT_SECRET_KEY


def settings_from_env() -> Settings:
    """Build Settings from the current environment (uncached)."""
    load_env()
    return Settings(
        port=env_int("PORT", DEFAULT_PORT),
        host=env_str("HOST", DEFAULT_HOST),
        secret_key=env_str("SECRET_KEY", DEFAULT_SECRET_KEY),
        strict_network=env_bool("STRICT_NETWORK", False),
        session_max_age_sec=env_int("SESSION_MAX_AGE", DEFAULT_SESSION_MAX_AGE_SEC),
        log_level=env_str("LOG_LEVEL", "info").lower(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once on first call."""
    return settings_from_env()
