"""
Hedera Tools API Python client example.

Uses the requests library. Run: pip install requests

Usage:
    from docs.python_client_example import HederaToolsClient
    client = HederaToolsClient("http://localhost:3000", network="testnet",
                               account_id="0.0.1001", private_key="302e...")
    account = client.create_account(initial_balance=10)
"""

from __future__ import annotations

from typing import Any

import requests


class HederaToolsClientError(Exception):
    """Raised when the API returns an error body {status, message, code}."""

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class HederaToolsClient:
    """Client for the Hedera Tools API. Operator credentials are sent with every call."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        *,
        network: str = "testnet",
        account_id: str,
        private_key: str,
        api_prefix: str = "/api/v1",
        timeout: float = 60.0,
    ):
        self.base_url = base_url.rstrip("/") + api_prefix
        self.timeout = timeout
        self._operator = {"network": network, "accountId": account_id, "userPrivateKey": private_key}
        self._session = requests.Session()

    def _request(self, method: str, path: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        payload = {**self._operator, **{k: v for k, v in (body or {}).items() if v is not None}}
        resp = self._session.request(method, f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        is_json = resp.headers.get("content-type", "").startswith("application/json")
        if not resp.ok:
            data = resp.json() if is_json else {}
            raise HederaToolsClientError(
                f"API error: {data.get('message', resp.text)}",
                status_code=resp.status_code,
                code=data.get("code"),
            )
        return resp.json()

    def create_account(self, initial_balance: float, memo: str | None = None) -> dict[str, Any]:
        """Create an account; returns newAccountId, newPrivateKey, newPublicKey."""
        return self._request("POST", "/accounts", {"initialBalance": initial_balance, "memo": memo})

    def update_account(self, account_id: str, **changes: Any) -> dict[str, Any]:
        """changes: newKey, autoRenewPeriod, expirationTime, memo. Operator account must be account_id."""
        return self._request("PUT", f"/accounts/{account_id}/update", changes)

    def create_token(self, name: str, symbol: str, initial_supply: int, **options: Any) -> dict[str, Any]:
        body = {"tokenName": name, "tokenSymbol": symbol, "initialSupply": initial_supply, **options}
        return self._request("POST", "/tokens", body)

    def mint(self, token_id: str, supply_key: str, amount: int | None = None, metadata: Any = None) -> dict[str, Any]:
        return self._request("POST", f"/tokens/{token_id}/mint", {"supplyKey": supply_key, "amount": amount, "metadata": metadata})

    def burn(self, token_id: str, supply_key: str, amount: int | None = None, metadata: Any = None) -> dict[str, Any]:
        return self._request("POST", f"/tokens/{token_id}/burn", {"supplyKey": supply_key, "amount": amount, "metadata": metadata})

    def transfer(self, token_id: str, to_account_id: str, amount: int | None = None, metadata: Any = None) -> dict[str, Any]:
        """Fungible transfer of amount, or NFT transfer of the serial(s) in metadata."""
        body = {"toAccountId": to_account_id, "amount": amount, "metadata": metadata}
        return self._request("POST", f"/tokens/{token_id}/transfer", body)

    def associate(self, token_id: str, account_id: str, account_key: str) -> dict[str, Any]:
        body = {"accountIdToAssociate": account_id, "associateKey": account_key}
        return self._request("POST", f"/tokens/{token_id}/associate", body)

    def dissociate(self, token_id: str, account_id: str, account_key: str) -> dict[str, Any]:
        body = {"accountIdToDissociate": account_id, "dissociateKey": account_key}
        return self._request("POST", f"/tokens/{token_id}/dissociate", body)

    def update_token(self, token_id: str, **changes: Any) -> dict[str, Any]:
        return self._request("PUT", f"/tokens/{token_id}/update", changes)

    def delete_token(self, token_id: str, admin_key: str) -> dict[str, Any]:
        return self._request("DELETE", f"/tokens/{token_id}/delete", {"adminKey": admin_key})


# -----------------------------------------------------------------------------
# Example usage
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    import os

    client = HederaToolsClient(
        "http://localhost:3000",
        network="testnet",
        account_id=os.environ["OPERATOR_ID"],
        private_key=os.environ["OPERATOR_KEY"],
    )

    account = client.create_account(initial_balance=10)
    print("New account:", account["newAccountId"])

    token = client.create_token("Example", "EXM", 1000, decimals=2, supplyKey=account["newPublicKey"])
    print("New token:", token["tokenId"])

    try:
        client.burn(token["tokenId"], supply_key="")
    except HederaToolsClientError as e:
        print("Expected validation error:", e.code)
