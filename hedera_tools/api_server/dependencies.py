"""
FastAPI dependencies shared by the routers.

Tests replace these through app.dependency_overrides (fake ledger, custom settings).
"""

from __future__ import annotations

from hedera_tools.config import Settings, get_settings
from hedera_tools.ledger import HieroLedger

_ledger = HieroLedger()


def get_ledger() -> HieroLedger:
    """Dependency: the SDK-backed ledger. Stateless; clients are built per call."""
    return _ledger


def get_app_settings() -> Settings:
    return get_settings()
