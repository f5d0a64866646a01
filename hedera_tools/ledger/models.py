"""
Data passed to and returned from the ledger gateway.

Plain dataclasses with snake_case fields; the API layer maps request bodies
onto them. Optional fields left as None are not applied to the transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields


@dataclass
class TokenKeys:
    """Role keys gating future token operations (key strings as supplied)."""

    admin_key: str | None = None
    kyc_key: str | None = None
    freeze_key: str | None = None
    wipe_key: str | None = None
    supply_key: str | None = None
    fee_schedule_key: str | None = None
    pause_key: str | None = None

    def present(self) -> dict[str, str]:
        """Role name -> key for every role that was supplied."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


@dataclass
class NewToken:
    name: str
    symbol: str
    initial_supply: int
    decimals: int | None = None
    max_supply: int | None = None
    freeze_default: bool | None = None
    token_type: str | None = None
    """FungibleCommon (default) or NonFungibleUnique."""
    keys: TokenKeys = field(default_factory=TokenKeys)
    auto_renew_account: str | None = None
    auto_renew_period: int | None = None
    """Seconds."""
    expiration_time: int | None = None
    """Unix seconds."""
    memo: str | None = None


@dataclass
class TokenUpdate:
    name: str | None = None
    symbol: str | None = None
    keys: TokenKeys = field(default_factory=TokenKeys)
    auto_renew_account: str | None = None
    auto_renew_period: int | None = None
    expiration_time: int | None = None
    memo: str | None = None


@dataclass
class AccountUpdate:
    new_key: str | None = None
    """Private key string; the account's new public key is derived from it."""
    auto_renew_period: int | None = None
    expiration_time: int | None = None
    memo: str | None = None


@dataclass
class AccountCreated:
    account_id: str
    private_key: str
    public_key: str
    transaction_id: str | None = None


@dataclass
class LedgerReceipt:
    """Outcome of a successful transaction."""

    transaction_id: str
    token_id: str | None = None
    account_id: str | None = None
