"""
Environment variable loading for Hedera Tools.

- PORT: listen port (default: 3000)
- HOST: bind address (default: 0.0.0.0)
- SECRET_KEY: session signing secret (default: "secret")
- STRICT_NETWORK: reject network names other than mainnet/testnet (default: false)
- SESSION_MAX_AGE: session cookie lifetime in seconds (default: 14 days)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is hedera_tools/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

_TRUE_VALUES = ("1", "true", "yes", "on")


def load_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH, override=False)


def env_str(name: str, default: str) -> str:
    """Stripped env value, or default when unset or blank."""
    return (os.getenv(name) or "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def env_bool(name: str, default: bool = False) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE_VALUES
