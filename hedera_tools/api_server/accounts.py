"""
FastAPI router: account operations.

POST /accounts              create an account funded by the operator
PUT  /accounts/{id}/update  update key, renewal, expiration or memo

Mounted under every API version prefix (see server.API_VERSIONS).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from hedera_tools.api_server.dependencies import get_app_settings, get_ledger
from hedera_tools.api_server.schemas import CreateAccountBody, UpdateAccountBody
from hedera_tools.api_server.validation import (
    ACCOUNT_ID,
    NETWORK,
    OPERATOR_FIELDS,
    USER_PRIVATE_KEY,
    operator_from,
    require,
)
from hedera_tools.config import Settings
from hedera_tools.core.exceptions import OperationError
from hedera_tools.hedera_logging import get_logger
from hedera_tools.ledger import HieroLedger
from hedera_tools.ledger.models import AccountUpdate

logger = get_logger(__name__)

router = APIRouter()

CREATE_ACCOUNT_FIELDS = OPERATOR_FIELDS + (("initialBalance", "Initial Balance is required"),)
UPDATE_ACCOUNT_FIELDS = (NETWORK, ACCOUNT_ID, USER_PRIVATE_KEY)


@router.post("")
def create_account(
    body: CreateAccountBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """
    Create an account with a freshly generated key pair.

    Returns the new account id, both keys as strings and the transaction id.
    """
    params = (body or CreateAccountBody()).params()
    require(params, CREATE_ACCOUNT_FIELDS)
    operator = operator_from(params, settings)
    logger.info("create_account_requested", network=operator.network.value, operator=operator.account_id)

    try:
        created = ledger.create_account(operator, params["initialBalance"], memo=params.get("memo"))
    except Exception as e:
        logger.exception("create_account_failed", network=operator.network.value, error=str(e))
        raise OperationError(str(e) or type(e).__name__, code="add-account-error") from e

    logger.info("create_account_succeeded", account_id=created.account_id)
    return {
        "status": "success",
        "newAccountId": created.account_id,
        "newPrivateKey": created.private_key,
        "newPublicKey": created.public_key,
        "transactionId": created.transaction_id,
    }


@router.put("/{account_id}/update")
def update_account(
    account_id: str,
    body: UpdateAccountBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """Update the account named in the path. Only supplied optional fields change."""
    params = (body or UpdateAccountBody()).params(accountId=account_id)
    require(params, UPDATE_ACCOUNT_FIELDS)
    operator = operator_from(params, settings)
    changes = AccountUpdate(
        new_key=params.get("newKey"),
        auto_renew_period=params.get("autoRenewPeriod"),
        expiration_time=params.get("expirationTime"),
        memo=params.get("memo"),
    )
    logger.info("update_account_requested", network=operator.network.value, account_id=account_id)

    try:
        receipt = ledger.update_account(operator, account_id, changes)
    except Exception as e:
        logger.exception("update_account_failed", account_id=account_id, error=str(e))
        raise OperationError(str(e) or type(e).__name__, code="update-account-error") from e

    return {
        "status": "success",
        "accountId": str(account_id),
        "transactionId": receipt.transaction_id,
    }
