"""
Hedera ledger gateway: one method per account/token operation.

Each method builds exactly one SDK transaction against a fresh client for the
operator's network, applies only the optional fields that were supplied,
freezes and signs with any role key the operation needs, executes it once, and
checks the receipt status.
- Operator signature is added by the SDK on execute.
- Role-key operations (mint, burn, associate, dissociate, delete, account
  update) freeze with the client before signing.
- A receipt with a status other than SUCCESS raises LedgerError.
SDK exceptions propagate unchanged; the API layer maps them to error codes.
"""

from __future__ import annotations

from typing import Any, Iterable

from hedera_tools.core.exceptions import LedgerError
from hedera_tools.hedera_logging import get_logger
from hedera_tools.ledger.client import Operator, build_client, load_sdk
from hedera_tools.ledger.models import (
    AccountCreated,
    AccountUpdate,
    LedgerReceipt,
    NewToken,
    TokenKeys,
    TokenUpdate,
)

logger = get_logger(__name__)

# Request values for tokenType -> SDK TokenType member name
TOKEN_TYPES = {
    "FungibleCommon": "FUNGIBLE_COMMON",
    "FUNGIBLE_COMMON": "FUNGIBLE_COMMON",
    "NonFungibleUnique": "NON_FUNGIBLE_UNIQUE",
    "NON_FUNGIBLE_UNIQUE": "NON_FUNGIBLE_UNIQUE",
}
DEFAULT_TOKEN_TYPE = "FungibleCommon"


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class HieroLedger:
    """Ledger backed by hiero-sdk-python. Stateless; safe to share across requests."""

    def __init__(self, sdk: Any | None = None):
        self._sdk = sdk

    @property
    def sdk(self) -> Any:
        if self._sdk is None:
            self._sdk = load_sdk()
        return self._sdk

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _client(self, operator: Operator) -> Any:
        return build_client(operator, self.sdk)

    def _private_key(self, value: str) -> Any:
        return self.sdk.PrivateKey.from_string(value)

    def _public_key(self, value: str) -> Any:
        return self.sdk.PublicKey.from_string(value)

    def _account_id(self, value: str) -> Any:
        return self.sdk.AccountId.from_string(value)

    def _token_id(self, value: str) -> Any:
        return self.sdk.TokenId.from_string(value)

    def _token_type(self, value: str | None) -> Any:
        member = TOKEN_TYPES.get(value or DEFAULT_TOKEN_TYPE)
        if member is None:
            raise ValueError(f"Unsupported token type {value!r}; use FungibleCommon or NonFungibleUnique")
        return getattr(self.sdk.TokenType, member)

    def _status_name(self, status: Any) -> str:
        try:
            return self.sdk.ResponseCode(status).name
        except (ValueError, TypeError):
            return str(status)

    def _submit(
        self,
        operation: str,
        transaction: Any,
        client: Any,
        signers: Iterable[str] = (),
    ) -> tuple[Any, str]:
        """Freeze + sign with each signer key (if any), execute once, verify receipt."""
        signer_keys = [self._private_key(k) for k in signers]
        if signer_keys:
            transaction.freeze_with(client)
            for key in signer_keys:
                transaction.sign(key)
        receipt = transaction.execute(client)
        if receipt.status != self.sdk.ResponseCode.SUCCESS:
            status = self._status_name(receipt.status)
            logger.warning("ledger_tx_rejected", operation=operation, status=status)
            raise LedgerError(f"Transaction failed with status {status}", status=status)
        transaction_id = str(transaction.transaction_id)
        logger.info("ledger_tx_confirmed", operation=operation, transaction_id=transaction_id)
        return receipt, transaction_id

    def _apply_keys(self, transaction: Any, keys: TokenKeys) -> None:
        for role, value in keys.present().items():
            getattr(transaction, f"set_{role}")(self._public_key(value))

    def _apply_renewal(
        self,
        transaction: Any,
        auto_renew_account: str | None,
        auto_renew_period: int | None,
        expiration_time: int | None,
    ) -> None:
        if auto_renew_account:
            transaction.set_auto_renew_account_id(self._account_id(auto_renew_account))
        if auto_renew_period:
            transaction.set_auto_renew_period(self.sdk.Duration(int(auto_renew_period)))
        if expiration_time:
            transaction.set_expiration_time(self.sdk.Timestamp(int(expiration_time), 0))

    # ------------------------------------------------------------------
    # accounts
    # ------------------------------------------------------------------

    def create_account(
        self,
        operator: Operator,
        initial_balance: float,
        memo: str | None = None,
    ) -> AccountCreated:
        """Generate a new ED25519 key pair and create an account funded with initial_balance hbar."""
        sdk = self.sdk
        client = self._client(operator)
        new_key = sdk.PrivateKey.generate_ed25519()
        public_key = new_key.public_key()

        transaction = sdk.AccountCreateTransaction()
        transaction.set_key_without_alias(public_key)
        transaction.set_initial_balance(sdk.Hbar(initial_balance))
        if memo:
            transaction.set_account_memo(memo)

        receipt, transaction_id = self._submit("create_account", transaction, client)
        return AccountCreated(
            account_id=str(receipt.account_id),
            private_key=new_key.to_string_der(),
            public_key=public_key.to_string_der(),
            transaction_id=transaction_id,
        )

    def update_account(self, operator: Operator, account_id: str, changes: AccountUpdate) -> LedgerReceipt:
        sdk = self.sdk
        client = self._client(operator)
        transaction = sdk.AccountUpdateTransaction()
        transaction.set_account_id(self._account_id(account_id))

        signers = [operator.private_key]
        if changes.new_key:
            transaction.set_key(self._private_key(changes.new_key).public_key())
            signers.append(changes.new_key)
        if changes.auto_renew_period:
            transaction.set_auto_renew_period(sdk.Duration(int(changes.auto_renew_period)))
        if changes.expiration_time:
            transaction.set_expiration_time(sdk.Timestamp(int(changes.expiration_time), 0))
        if changes.memo:
            transaction.set_account_memo(changes.memo)

        _, transaction_id = self._submit("update_account", transaction, client, signers)
        return LedgerReceipt(transaction_id=transaction_id, account_id=account_id)

    # ------------------------------------------------------------------
    # tokens
    # ------------------------------------------------------------------

    def create_token(self, operator: Operator, token: NewToken) -> LedgerReceipt:
        """Create a token with the operator account as treasury."""
        sdk = self.sdk
        client = self._client(operator)
        transaction = sdk.TokenCreateTransaction()
        transaction.set_token_name(token.name)
        transaction.set_token_symbol(token.symbol)
        transaction.set_treasury_account_id(self._account_id(operator.account_id))
        transaction.set_token_type(self._token_type(token.token_type))
        transaction.set_initial_supply(int(token.initial_supply or 0))

        if token.decimals:
            transaction.set_decimals(int(token.decimals))
        if token.max_supply:
            transaction.set_supply_type(sdk.SupplyType.FINITE)
            transaction.set_max_supply(int(token.max_supply))
        if token.freeze_default is not None:
            transaction.set_freeze_default(bool(token.freeze_default))
        self._apply_keys(transaction, token.keys)
        self._apply_renewal(transaction, token.auto_renew_account, token.auto_renew_period, token.expiration_time)
        if token.memo:
            transaction.set_memo(token.memo)

        receipt, transaction_id = self._submit("create_token", transaction, client)
        return LedgerReceipt(transaction_id=transaction_id, token_id=str(receipt.token_id))

    def mint_token(
        self,
        operator: Operator,
        token_id: str,
        supply_key: str,
        amount: int | None = None,
        metadata: int | str | list[int | str] | None = None,
    ) -> LedgerReceipt:
        """Mint fungible units (amount) or NFTs (one per metadata entry), signed with the supply key."""
        client = self._client(operator)
        transaction = self.sdk.TokenMintTransaction()
        transaction.set_token_id(self._token_id(token_id))
        if amount:
            transaction.set_amount(int(amount))
        if metadata:
            transaction.set_metadata([str(m).encode("utf-8") for m in _as_list(metadata)])

        _, transaction_id = self._submit("mint_token", transaction, client, [supply_key])
        return LedgerReceipt(transaction_id=transaction_id, token_id=token_id)

    def burn_token(
        self,
        operator: Operator,
        token_id: str,
        supply_key: str,
        amount: int | None = None,
        metadata: int | str | list[int | str] | None = None,
    ) -> LedgerReceipt:
        """Burn fungible units (amount) or NFT serials (metadata), signed with the supply key."""
        client = self._client(operator)
        transaction = self.sdk.TokenBurnTransaction()
        transaction.set_token_id(self._token_id(token_id))
        if amount:
            transaction.set_amount(int(amount))
        if metadata:
            transaction.set_serials([int(s) for s in _as_list(metadata)])

        _, transaction_id = self._submit("burn_token", transaction, client, [supply_key])
        return LedgerReceipt(transaction_id=transaction_id, token_id=token_id)

    def transfer_token(
        self,
        operator: Operator,
        token_id: str,
        to_account_id: str,
        amount: int | None = None,
        metadata: int | str | list[int | str] | None = None,
    ) -> LedgerReceipt:
        """
        Move tokens from the operator account to to_account_id.

        metadata, when given, holds NFT serial numbers and an NFT transfer is
        built for each; otherwise amount fungible units are moved.
        """
        sdk = self.sdk
        client = self._client(operator)
        token = self._token_id(token_id)
        sender = self._account_id(operator.account_id)
        receiver = self._account_id(to_account_id)

        transaction = sdk.TransferTransaction()
        if metadata:
            for serial in _as_list(metadata):
                transaction.add_nft_transfer(sdk.NftId(token, int(serial)), sender, receiver)
        elif amount:
            transaction.add_token_transfer(token, sender, -int(amount))
            transaction.add_token_transfer(token, receiver, int(amount))
        else:
            raise ValueError("Transfer needs an amount or NFT serial numbers in metadata")

        _, transaction_id = self._submit("transfer_token", transaction, client)
        return LedgerReceipt(transaction_id=transaction_id, token_id=token_id)

    def associate_token(self, operator: Operator, token_id: str, account_id: str, account_key: str) -> LedgerReceipt:
        """Associate account_id with the token; signed with that account's key."""
        client = self._client(operator)
        transaction = self.sdk.TokenAssociateTransaction()
        transaction.set_account_id(self._account_id(account_id))
        transaction.add_token_id(self._token_id(token_id))

        _, transaction_id = self._submit("associate_token", transaction, client, [account_key])
        return LedgerReceipt(transaction_id=transaction_id, token_id=token_id, account_id=account_id)

    def dissociate_token(self, operator: Operator, token_id: str, account_id: str, account_key: str) -> LedgerReceipt:
        client = self._client(operator)
        transaction = self.sdk.TokenDissociateTransaction()
        transaction.set_account_id(self._account_id(account_id))
        transaction.add_token_id(self._token_id(token_id))

        _, transaction_id = self._submit("dissociate_token", transaction, client, [account_key])
        return LedgerReceipt(transaction_id=transaction_id, token_id=token_id, account_id=account_id)

    def update_token(self, operator: Operator, token_id: str, changes: TokenUpdate) -> LedgerReceipt:
        """Apply supplied changes. Signed by the operator only."""
        client = self._client(operator)
        transaction = self.sdk.TokenUpdateTransaction()
        transaction.set_token_id(self._token_id(token_id))
        if changes.name:
            transaction.set_token_name(changes.name)
        if changes.symbol:
            transaction.set_token_symbol(changes.symbol)
        self._apply_keys(transaction, changes.keys)
        self._apply_renewal(transaction, changes.auto_renew_account, changes.auto_renew_period, changes.expiration_time)
        if changes.memo:
            transaction.set_token_memo(changes.memo)

        _, transaction_id = self._submit("update_token", transaction, client)
        return LedgerReceipt(transaction_id=transaction_id, token_id=token_id)

    def delete_token(self, operator: Operator, token_id: str, admin_key: str) -> LedgerReceipt:
        client = self._client(operator)
        transaction = self.sdk.TokenDeleteTransaction()
        transaction.set_token_id(self._token_id(token_id))

        _, transaction_id = self._submit("delete_token", transaction, client, [admin_key])
        return LedgerReceipt(transaction_id=transaction_id, token_id=token_id)
