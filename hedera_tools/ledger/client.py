"""
Ledger client factory.

Every request gets a fresh SDK client for its network with the request's
operator set. Nothing is pooled or reused. The SDK module is imported lazily so
the API can be imported (and tested with a fake ledger) without it.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Any

from hedera_tools.ledger.network import LedgerNetwork


@dataclass(frozen=True)
class Operator:
    """Account id + private key authorising one transaction on one network."""

    network: LedgerNetwork
    account_id: str
    private_key: str

    def __repr__(self) -> str:
        # private key intentionally omitted
        return f"Operator(network={self.network.value!r}, account_id={self.account_id!r})"


def load_sdk() -> ModuleType:
    """Import the Hedera SDK (hiero-sdk-python)."""
    import hiero_sdk_python

    return hiero_sdk_python


def build_client(operator: Operator, sdk: Any | None = None) -> Any:
    """
    Return an SDK Client for operator.network with the operator set.

    No key format validation happens here; malformed ids or keys raise from
    the SDK and are reported by the caller as operation errors.
    """
    sdk = sdk or load_sdk()
    network = sdk.Network(network=operator.network.value)
    client = sdk.Client(network)
    client.set_operator(
        sdk.AccountId.from_string(operator.account_id),
        sdk.PrivateKey.from_string(operator.private_key),
    )
    return client
