"""
Request field validation.

Required fields are checked one at a time in a fixed order; the first one that
is missing (absent, null, empty, zero or false) ends the request with a
MissingFieldError named after it. Only one validation error is ever reported.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from hedera_tools.config import Settings
from hedera_tools.core.exceptions import MissingFieldError
from hedera_tools.hedera_logging import get_logger
from hedera_tools.ledger import Operator, UnknownNetworkError, resolve_network

logger = get_logger(__name__)

# (wire field name, error message)
Requirement = tuple[str, str]

NETWORK: Requirement = ("network", "Network is required")
ACCOUNT_ID: Requirement = ("accountId", "Account ID is required")
USER_PRIVATE_KEY: Requirement = ("userPrivateKey", "User Private Key is required")
TOKEN_ID: Requirement = ("tokenId", "Token ID is required")

OPERATOR_FIELDS: tuple[Requirement, ...] = (NETWORK, ACCOUNT_ID, USER_PRIVATE_KEY)


def require(params: Mapping[str, Any], requirements: Iterable[Requirement]) -> None:
    """Raise MissingFieldError for the first requirement whose value is falsy."""
    for field, message in requirements:
        if not params.get(field):
            logger.info("request_field_missing", field=field)
            raise MissingFieldError(field, message)


def operator_from(
    params: Mapping[str, Any],
    settings: Settings,
    account_field: str = "accountId",
) -> Operator:
    """
    Build the Operator for a validated request.

    In strict mode an unrecognised network is reported like a missing
    network field; otherwise resolve_network falls back to testnet.
    """
    try:
        network = resolve_network(params["network"], strict=settings.strict_network)
    except UnknownNetworkError as e:
        logger.info("request_network_rejected", network=str(e.name)[:32])
        raise MissingFieldError("network", "Network must be mainnet or testnet") from e
    return Operator(
        network=network,
        account_id=str(params[account_field]),
        private_key=str(params["userPrivateKey"]),
    )
