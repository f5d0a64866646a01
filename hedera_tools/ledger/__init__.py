"""
Ledger package — the only code that touches the Hedera SDK.

network: mainnet/testnet selection. client: operator and per-request client
factory. gateway: one method per ledger operation. models: plain dataclasses
passed in and out of the gateway.
"""

from hedera_tools.ledger.client import Operator
from hedera_tools.ledger.gateway import HieroLedger
from hedera_tools.ledger.network import LedgerNetwork, UnknownNetworkError, resolve_network

__all__ = ["HieroLedger", "LedgerNetwork", "Operator", "UnknownNetworkError", "resolve_network"]
