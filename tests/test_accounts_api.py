"""
Pytest tests for account endpoints (POST /accounts, PUT /accounts/{id}/update).

The ledger is the FakeLedger from conftest; nothing reaches a network.
"""

from __future__ import annotations

import pytest

from hedera_tools.ledger.models import AccountUpdate
from hedera_tools.ledger.network import LedgerNetwork

from conftest import OPERATOR_ID, OPERATOR_KEY


def test_create_account_success(client, fake_ledger, operator_body):
    """Scenario: testnet operator, initialBalance 10 -> new id and both keys as strings."""
    r = client.post("/api/accounts", json={**operator_body, "initialBalance": 10})
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "success"
    assert data["newAccountId"] == "0.0.5005"
    assert isinstance(data["newPrivateKey"], str) and data["newPrivateKey"]
    assert isinstance(data["newPublicKey"], str) and data["newPublicKey"]
    assert data["transactionId"] == f"{OPERATOR_ID}@1700000000.000000001"

    call = fake_ledger.last
    assert call.operation == "create_account"
    assert call.operator.network is LedgerNetwork.TESTNET
    assert call.operator.account_id == OPERATOR_ID
    assert call.operator.private_key == OPERATOR_KEY
    assert call.args == (10,)


def test_create_account_v1_prefix(client, fake_ledger, operator_body):
    r = client.post("/api/v1/accounts", json={**operator_body, "initialBalance": 2.5})
    assert r.status_code == 200
    assert r.json()["newAccountId"] == "0.0.5005"
    assert fake_ledger.last.args == (2.5,)


def test_create_account_memo_passed(client, fake_ledger, operator_body):
    client.post("/api/accounts", json={**operator_body, "initialBalance": 1, "memo": "savings"})
    assert fake_ledger.last.kwargs == {"memo": "savings"}


@pytest.mark.parametrize(
    ("field", "message"),
    [
        ("network", "Network is required"),
        ("accountId", "Account ID is required"),
        ("userPrivateKey", "User Private Key is required"),
        ("initialBalance", "Initial Balance is required"),
    ],
)
def test_create_account_missing_field(client, fake_ledger, operator_body, field, message):
    body = {**operator_body, "initialBalance": 10}
    del body[field]
    r = client.post("/api/accounts", json=body)
    assert r.status_code == 500
    assert r.json() == {"status": 500, "message": message, "code": f"{field}-error"}
    assert fake_ledger.calls == []


def test_create_account_zero_balance_is_missing(client, operator_body):
    """Falsy values count as missing."""
    r = client.post("/api/accounts", json={**operator_body, "initialBalance": 0})
    assert r.json()["code"] == "initialBalance-error"


def test_create_account_empty_body_reports_network_first(client):
    r = client.post("/api/accounts")
    assert r.status_code == 500
    assert r.json()["code"] == "network-error"


def test_create_account_only_first_missing_reported(client):
    r = client.post("/api/accounts", json={"network": "testnet"})
    assert r.json() == {"status": 500, "message": "Account ID is required", "code": "accountId-error"}


def test_create_account_sdk_error(client, fake_ledger, operator_body):
    fake_ledger.error = RuntimeError("INVALID_SIGNATURE")
    r = client.post("/api/accounts", json={**operator_body, "initialBalance": 10})
    assert r.status_code == 500
    assert r.json() == {"status": 500, "message": "INVALID_SIGNATURE", "code": "add-account-error"}


def test_create_account_wrong_type_is_invalid_body(client, fake_ledger, operator_body):
    r = client.post("/api/accounts", json={**operator_body, "initialBalance": "lots"})
    assert r.status_code == 400
    data = r.json()
    assert data["code"] == "invalid-body-error"
    assert data["status"] == 400
    assert "initialBalance" in data["message"]
    assert fake_ledger.calls == []


def test_update_account_success(client, fake_ledger):
    body = {
        "network": "mainnet",
        "userPrivateKey": OPERATOR_KEY,
        "autoRenewPeriod": 7776000,
        "memo": "renamed",
    }
    r = client.put("/api/accounts/0.0.3003/update", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "success"
    assert data["accountId"] == "0.0.3003"
    assert data["transactionId"].startswith("0.0.3003@")

    call = fake_ledger.last
    assert call.operation == "update_account"
    assert call.operator.network is LedgerNetwork.MAINNET
    assert call.operator.account_id == "0.0.3003"
    account_id, changes = call.args
    assert account_id == "0.0.3003"
    assert changes == AccountUpdate(new_key=None, auto_renew_period=7776000, expiration_time=None, memo="renamed")


@pytest.mark.parametrize(
    ("field", "message"),
    [
        ("network", "Network is required"),
        ("userPrivateKey", "User Private Key is required"),
    ],
)
def test_update_account_missing_field(client, fake_ledger, field, message):
    body = {"network": "testnet", "userPrivateKey": OPERATOR_KEY}
    del body[field]
    r = client.put("/api/v1/accounts/0.0.3003/update", json=body)
    assert r.json() == {"status": 500, "message": message, "code": f"{field}-error"}
    assert fake_ledger.calls == []


def test_update_account_sdk_error(client, fake_ledger):
    fake_ledger.error = ValueError("Invalid account id")
    r = client.put("/api/accounts/not-an-id/update", json={"network": "testnet", "userPrivateKey": OPERATOR_KEY})
    assert r.json() == {"status": 500, "message": "Invalid account id", "code": "update-account-error"}


def test_numeric_account_id_accepted(client, fake_ledger):
    body = {"network": "testnet", "accountId": 1001, "userPrivateKey": OPERATOR_KEY, "initialBalance": 1}
    r = client.post("/api/accounts", json=body)
    assert r.status_code == 200
    assert fake_ledger.last.operator.account_id == "1001"
