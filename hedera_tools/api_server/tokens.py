"""
FastAPI router: token operations.

POST   /tokens                   create a token (operator is treasury)
POST   /tokens/{id}/mint         mint, signed with supplyKey
POST   /tokens/{id}/burn         burn, signed with supplyKey
POST   /tokens/{id}/transfer     operator -> toAccountId
POST   /tokens/{id}/associate    associate an account, signed with associateKey
POST   /tokens/{id}/dissociate   dissociate an account, signed with dissociateKey
PUT    /tokens/{id}/update       change supplied properties
DELETE /tokens/{id}/delete       delete, signed with adminKey

Every handler: ordered required-field check, operator, one ledger call,
JSON summary. Ledger failures become OperationError with the operation's code.
"""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter, Depends

from hedera_tools.api_server.dependencies import get_app_settings, get_ledger
from hedera_tools.api_server.schemas import (
    AssociateBody,
    CreateTokenBody,
    DeleteTokenBody,
    DissociateBody,
    SupplyChangeBody,
    TokenKeysBody,
    TransferBody,
    UpdateTokenBody,
)
from hedera_tools.api_server.validation import (
    ACCOUNT_ID,
    NETWORK,
    OPERATOR_FIELDS,
    TOKEN_ID,
    operator_from,
    require,
)
from hedera_tools.config import Settings
from hedera_tools.core.exceptions import OperationError
from hedera_tools.hedera_logging import get_logger
from hedera_tools.ledger import HieroLedger, Operator
from hedera_tools.ledger.models import LedgerReceipt, NewToken, TokenKeys, TokenUpdate

logger = get_logger(__name__)

router = APIRouter()

CREATE_TOKEN_FIELDS = (
    NETWORK,
    ACCOUNT_ID,
    ("userPrivateKey", "User private key is required"),
    ("tokenName", "Token name is required"),
    ("tokenSymbol", "Token symbol is required"),
    ("initialSupply", "Initial supply is required"),
)
SUPPLY_CHANGE_FIELDS = OPERATOR_FIELDS + (TOKEN_ID, ("supplyKey", "Supply Key is required"))
TRANSFER_FIELDS = OPERATOR_FIELDS + (TOKEN_ID, ("toAccountId", "Receipt Account ID is required"))
ASSOCIATE_FIELDS = OPERATOR_FIELDS + (
    TOKEN_ID,
    ("accountIdToAssociate", "Account ID to associate is required"),
    ("associateKey", "Associate Key is required"),
)
DISSOCIATE_FIELDS = OPERATOR_FIELDS + (
    TOKEN_ID,
    ("accountIdToDissociate", "Account ID to dissociate is required"),
    ("dissociateKey", "Dissociate key is required"),
)
UPDATE_TOKEN_FIELDS = OPERATOR_FIELDS + (TOKEN_ID,)
DELETE_TOKEN_FIELDS = OPERATOR_FIELDS + (TOKEN_ID, ("adminKey", "Admin key is required"))

# Never echoed back: operator credentials and role private keys
_CREDENTIAL_FIELDS = {"network", "account_id", "user_private_key"}


def _echo(body: Any, exclude: set[str] | None = None) -> dict[str, Any]:
    """Supplied body fields by wire name, minus credentials and anything in exclude."""
    return body.model_dump(by_alias=True, exclude_none=True, exclude=_CREDENTIAL_FIELDS | (exclude or set()))


def _keys(body: TokenKeysBody) -> TokenKeys:
    return TokenKeys(
        admin_key=body.admin_key,
        kyc_key=body.kyc_key,
        freeze_key=body.freeze_key,
        wipe_key=body.wipe_key,
        supply_key=body.supply_key,
        fee_schedule_key=body.fee_schedule_key,
        pause_key=body.pause_key,
    )


def _run(operation: str, code: str, call: Callable[[], LedgerReceipt], **log_fields: Any) -> LedgerReceipt:
    """Run one ledger call; any exception becomes OperationError(code)."""
    logger.info(f"{operation}_requested", **log_fields)
    try:
        receipt = call()
    except Exception as e:
        logger.exception(f"{operation}_failed", error=str(e), **log_fields)
        raise OperationError(str(e) or type(e).__name__, code=code) from e
    logger.info(f"{operation}_succeeded", transaction_id=receipt.transaction_id, **log_fields)
    return receipt


def _log_fields(operator: Operator, token_id: str | None = None) -> dict[str, Any]:
    fields: dict[str, Any] = {"network": operator.network.value, "operator": operator.account_id}
    if token_id:
        fields["token_id"] = token_id
    return fields


@router.post("")
def create_token(
    body: CreateTokenBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """Create a token. Returns the new token id plus the supplied properties."""
    body = body or CreateTokenBody()
    params = body.params()
    require(params, CREATE_TOKEN_FIELDS)
    operator = operator_from(params, settings)
    token = NewToken(
        name=body.token_name,
        symbol=body.token_symbol,
        initial_supply=body.initial_supply,
        decimals=body.decimals,
        max_supply=body.max_supply,
        freeze_default=body.freeze_default,
        token_type=body.token_type,
        keys=_keys(body),
        auto_renew_account=body.auto_renew_account,
        auto_renew_period=body.auto_renew_period,
        expiration_time=body.expiration_time,
        memo=body.memo,
    )
    receipt = _run(
        "create_token",
        "add-token-error",
        lambda: ledger.create_token(operator, token),
        **_log_fields(operator),
    )
    return {
        "status": "success",
        "tokenId": receipt.token_id,
        **_echo(body),
        "transactionId": receipt.transaction_id,
    }


def _supply_change(
    operation: str,
    code: str,
    token_id: str,
    body: SupplyChangeBody | None,
    ledger_call: Callable[..., LedgerReceipt],
    settings: Settings,
) -> dict[str, Any]:
    body = body or SupplyChangeBody()
    params = body.params(tokenId=token_id)
    require(params, SUPPLY_CHANGE_FIELDS)
    operator = operator_from(params, settings)
    receipt = _run(
        operation,
        code,
        lambda: ledger_call(operator, token_id, body.supply_key, amount=body.amount, metadata=body.metadata),
        **_log_fields(operator, token_id),
    )
    return {
        "status": "success",
        "tokenId": str(token_id),
        **_echo(body, exclude={"supply_key"}),
        "transactionId": receipt.transaction_id,
    }


@router.post("/{token_id}/mint")
def mint_token(
    token_id: str,
    body: SupplyChangeBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    return _supply_change("mint_token", "mint-token-error", token_id, body, ledger.mint_token, settings)


@router.post("/{token_id}/burn")
def burn_token(
    token_id: str,
    body: SupplyChangeBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    return _supply_change("burn_token", "burn-token-error", token_id, body, ledger.burn_token, settings)


@router.post("/{token_id}/transfer")
def transfer_token(
    token_id: str,
    body: TransferBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """Transfer from the operator account; submitted exactly once."""
    body = body or TransferBody()
    params = body.params(tokenId=token_id)
    require(params, TRANSFER_FIELDS)
    operator = operator_from(params, settings)
    receipt = _run(
        "transfer_token",
        "transfer-token-error",
        lambda: ledger.transfer_token(
            operator, token_id, body.to_account_id, amount=body.amount, metadata=body.metadata
        ),
        to_account_id=body.to_account_id,
        **_log_fields(operator, token_id),
    )
    return {
        "status": "success",
        "tokenId": str(token_id),
        **_echo(body),
        "transactionId": receipt.transaction_id,
    }


@router.post("/{token_id}/associate")
def associate_token(
    token_id: str,
    body: AssociateBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    body = body or AssociateBody()
    params = body.params(tokenId=token_id)
    require(params, ASSOCIATE_FIELDS)
    operator = operator_from(params, settings)
    receipt = _run(
        "associate_token",
        "associate-token-error",
        lambda: ledger.associate_token(operator, token_id, body.account_id_to_associate, body.associate_key),
        account_id=body.account_id_to_associate,
        **_log_fields(operator, token_id),
    )
    return {
        "status": "success",
        "tokenId": str(token_id),
        "accountIdToAssociate": body.account_id_to_associate,
        "transactionId": receipt.transaction_id,
    }


@router.post("/{token_id}/dissociate")
def dissociate_token(
    token_id: str,
    body: DissociateBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    body = body or DissociateBody()
    params = body.params(tokenId=token_id)
    require(params, DISSOCIATE_FIELDS)
    operator = operator_from(params, settings)
    receipt = _run(
        "dissociate_token",
        "dissociate-token-error",
        lambda: ledger.dissociate_token(operator, token_id, body.account_id_to_dissociate, body.dissociate_key),
        account_id=body.account_id_to_dissociate,
        **_log_fields(operator, token_id),
    )
    return {
        "status": "success",
        "tokenId": str(token_id),
        "accountIdToDissociate": body.account_id_to_dissociate,
        "transactionId": receipt.transaction_id,
    }


@router.put("/{token_id}/update")
def update_token(
    token_id: str,
    body: UpdateTokenBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """Apply the supplied properties; everything else is left unchanged."""
    body = body or UpdateTokenBody()
    params = body.params(tokenId=token_id)
    require(params, UPDATE_TOKEN_FIELDS)
    operator = operator_from(params, settings)
    changes = TokenUpdate(
        name=body.token_name,
        symbol=body.token_symbol,
        keys=_keys(body),
        auto_renew_account=body.auto_renew_account,
        auto_renew_period=body.auto_renew_period,
        expiration_time=body.expiration_time,
        memo=body.memo,
    )
    receipt = _run(
        "update_token",
        "update-token-error",
        lambda: ledger.update_token(operator, token_id, changes),
        **_log_fields(operator, token_id),
    )
    return {
        "status": "success",
        "tokenId": str(token_id),
        **_echo(body),
        "transactionId": receipt.transaction_id,
    }


@router.delete("/{token_id}/delete")
def delete_token(
    token_id: str,
    body: DeleteTokenBody | None = None,
    ledger: HieroLedger = Depends(get_ledger),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    body = body or DeleteTokenBody()
    params = body.params(tokenId=token_id)
    require(params, DELETE_TOKEN_FIELDS)
    operator = operator_from(params, settings)
    receipt = _run(
        "delete_token",
        "remove-token-error",
        lambda: ledger.delete_token(operator, token_id, body.admin_key),
        **_log_fields(operator, token_id),
    )
    return {
        "status": "success",
        "tokenId": str(token_id),
        "transactionId": receipt.transaction_id,
    }
