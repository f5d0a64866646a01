"""
Network profile selection.

Only "mainnet" selects mainnet. Any other value falls back to testnet unless
strict mode is on, in which case anything but mainnet/testnet is rejected.
"""

from __future__ import annotations

from enum import Enum

from hedera_tools.hedera_logging import get_logger

logger = get_logger(__name__)


class LedgerNetwork(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


class UnknownNetworkError(ValueError):
    """Network name is neither mainnet nor testnet (strict mode only)."""

    def __init__(self, name: str):
        super().__init__(f"Unknown network {name!r}; expected mainnet or testnet")
        self.name = name


def resolve_network(name: str, *, strict: bool = False) -> LedgerNetwork:
    """
    Map a request's network field to a profile.

    Comparison is exact: "Mainnet" is not mainnet. In lenient mode (default)
    unrecognised names resolve to TESTNET and a warning is logged.
    """
    if name == LedgerNetwork.MAINNET.value:
        return LedgerNetwork.MAINNET
    if name == LedgerNetwork.TESTNET.value:
        return LedgerNetwork.TESTNET
    if strict:
        raise UnknownNetworkError(name)
    logger.warning("network_fallback_to_testnet", requested=str(name)[:32])
    return LedgerNetwork.TESTNET
