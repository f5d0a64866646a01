"""
Pytest fixtures for Hedera Tools tests.

The SDK-backed ledger is replaced by FakeLedger through app.dependency_overrides,
so no test talks to a Hedera network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from hedera_tools.ledger.models import AccountCreated, LedgerReceipt

OPERATOR_ID = "0.0.1001"
OPERATOR_KEY = "302e020100300506032b657004220420" + "11" * 32
SUPPLY_KEY = "302e020100300506032b657004220420" + "22" * 32
TOKEN_ID = "0.0.2002"


@dataclass
class LedgerCall:
    operation: str
    operator: Any
    args: tuple
    kwargs: dict


@dataclass
class FakeLedger:
    """Records every call; returns canned receipts or raises `error` when set."""

    calls: list[LedgerCall] = field(default_factory=list)
    error: Exception | None = None
    next_account_num: int = 5005
    next_token_num: int = 7007

    def _record(self, operation: str, operator: Any, *args: Any, **kwargs: Any) -> str:
        self.calls.append(LedgerCall(operation, operator, args, kwargs))
        if self.error is not None:
            raise self.error
        return f"{operator.account_id}@1700000000.{len(self.calls):09d}"

    @property
    def last(self) -> LedgerCall:
        return self.calls[-1]

    def create_account(self, operator, initial_balance, memo=None):
        tx_id = self._record("create_account", operator, initial_balance, memo=memo)
        return AccountCreated(
            account_id=f"0.0.{self.next_account_num}",
            private_key="302e020100300506032b657004220420" + "ab" * 32,
            public_key="302a300506032b6570032100" + "cd" * 32,
            transaction_id=tx_id,
        )

    def update_account(self, operator, account_id, changes):
        tx_id = self._record("update_account", operator, account_id, changes)
        return LedgerReceipt(transaction_id=tx_id, account_id=account_id)

    def create_token(self, operator, token):
        tx_id = self._record("create_token", operator, token)
        return LedgerReceipt(transaction_id=tx_id, token_id=f"0.0.{self.next_token_num}")

    def mint_token(self, operator, token_id, supply_key, amount=None, metadata=None):
        tx_id = self._record("mint_token", operator, token_id, supply_key, amount=amount, metadata=metadata)
        return LedgerReceipt(transaction_id=tx_id, token_id=token_id)

    def burn_token(self, operator, token_id, supply_key, amount=None, metadata=None):
        tx_id = self._record("burn_token", operator, token_id, supply_key, amount=amount, metadata=metadata)
        return LedgerReceipt(transaction_id=tx_id, token_id=token_id)

    def transfer_token(self, operator, token_id, to_account_id, amount=None, metadata=None):
        tx_id = self._record("transfer_token", operator, token_id, to_account_id, amount=amount, metadata=metadata)
        return LedgerReceipt(transaction_id=tx_id, token_id=token_id)

    def associate_token(self, operator, token_id, account_id, account_key):
        tx_id = self._record("associate_token", operator, token_id, account_id, account_key)
        return LedgerReceipt(transaction_id=tx_id, token_id=token_id, account_id=account_id)

    def dissociate_token(self, operator, token_id, account_id, account_key):
        tx_id = self._record("dissociate_token", operator, token_id, account_id, account_key)
        return LedgerReceipt(transaction_id=tx_id, token_id=token_id, account_id=account_id)

    def update_token(self, operator, token_id, changes):
        tx_id = self._record("update_token", operator, token_id, changes)
        return LedgerReceipt(transaction_id=tx_id, token_id=token_id)

    def delete_token(self, operator, token_id, admin_key):
        tx_id = self._record("delete_token", operator, token_id, admin_key)
        return LedgerReceipt(transaction_id=tx_id, token_id=token_id)


@pytest.fixture
def operator_body() -> dict[str, Any]:
    return {"network": "testnet", "accountId": OPERATOR_ID, "userPrivateKey": OPERATOR_KEY}


@pytest.fixture
def fake_ledger():
    return FakeLedger()


@pytest.fixture
def settings():
    from hedera_tools.config import Settings

    return Settings()


@pytest.fixture
def client(fake_ledger, settings):
    """FastAPI TestClient with the fake ledger and default settings injected."""
    from fastapi.testclient import TestClient

    from hedera_tools.api_server.dependencies import get_app_settings, get_ledger
    from hedera_tools.api_server.server import app

    app.dependency_overrides[get_ledger] = lambda: fake_ledger
    app.dependency_overrides[get_app_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def strict_client(client, settings):
    """Same client, with STRICT_NETWORK behaviour."""
    from dataclasses import replace

    from hedera_tools.api_server.dependencies import get_app_settings
    from hedera_tools.api_server.server import app

    app.dependency_overrides[get_app_settings] = lambda: replace(settings, strict_network=True)
    return client
