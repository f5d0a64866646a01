"""
Request bodies.

Wire names are camelCase (accountId, userPrivateKey, ...); Python attributes
are snake_case. Every field is optional at the schema level: presence of
required fields is checked in order by validation.require() so that the first
missing one determines the error code.
"""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _id_as_text(value: Any) -> Any:
    return str(value) if isinstance(value, int) and not isinstance(value, bool) else value


# Ledger entity ids (0.0.1001) may arrive as bare numbers; handlers see text.
EntityId = Annotated[Union[str, None], BeforeValidator(_id_as_text)]

# NFT metadata or serial numbers, as one value or a list.
NftValues = Union[int, str, list[Union[int, str]], None]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def params(self, **path: str) -> dict:
        """Body fields by wire name, merged with path parameters."""
        return {**self.model_dump(by_alias=True), **path}


class OperatorBody(ApiModel):
    network: str | None = Field(None, description="mainnet or testnet")
    account_id: EntityId = Field(None, description="Operator account id, e.g. 0.0.1001")
    user_private_key: str | None = Field(None, description="Operator private key")


class CreateAccountBody(OperatorBody):
    initial_balance: float | None = Field(None, description="Initial balance of the new account (hbar)")
    memo: str | None = None


class UpdateAccountBody(ApiModel):
    """PUT /accounts/{id}/update body. The account id comes from the path."""

    network: str | None = None
    user_private_key: str | None = None
    new_key: str | None = Field(None, description="Private key whose public key becomes the account key")
    auto_renew_period: int | None = Field(None, description="Seconds")
    expiration_time: int | None = Field(None, description="Unix seconds")
    memo: str | None = None


class TokenKeysBody(ApiModel):
    admin_key: str | None = None
    kyc_key: str | None = None
    freeze_key: str | None = None
    wipe_key: str | None = None
    supply_key: str | None = None
    fee_schedule_key: str | None = None
    pause_key: str | None = None


class CreateTokenBody(OperatorBody, TokenKeysBody):
    token_name: str | None = None
    token_symbol: str | None = None
    initial_supply: int | None = None
    decimals: int | None = None
    max_supply: int | None = None
    freeze_default: bool | None = None
    auto_renew_account: EntityId = None
    auto_renew_period: int | None = None
    expiration_time: int | None = None
    memo: str | None = None
    token_type: str | None = Field(None, description="FungibleCommon (default) or NonFungibleUnique")


class SupplyChangeBody(OperatorBody):
    """Mint and burn."""

    amount: int | None = None
    metadata: NftValues = None
    supply_key: str | None = Field(None, description="Supply private key")


class TransferBody(OperatorBody):
    to_account_id: EntityId = None
    amount: int | None = None
    metadata: NftValues = Field(None, description="NFT serial number(s)")


class AssociateBody(OperatorBody):
    account_id_to_associate: EntityId = None
    associate_key: str | None = None


class DissociateBody(OperatorBody):
    account_id_to_dissociate: EntityId = None
    dissociate_key: str | None = None


class UpdateTokenBody(OperatorBody, TokenKeysBody):
    token_name: str | None = None
    token_symbol: str | None = None
    auto_renew_account: EntityId = None
    auto_renew_period: int | None = None
    expiration_time: int | None = None
    memo: str | None = None


class DeleteTokenBody(OperatorBody):
    admin_key: str | None = Field(None, description="Admin private key")
