# evm_approvals/core/chain_client.py
"""Thin wrapper over web3.py for the three chain operations the approval
engine needs: contract reads, signed submissions and receipt waits.

Every raw web3/eth-account failure is re-raised as one of
:class:`ChainQueryError`, :class:`SubmissionError` or
:class:`ConfirmationError` with the original message preserved.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, TYPE_CHECKING

from web3 import Web3

from ..config import ERC20_ABI, DEFAULT_CONFIRMATION_TIMEOUT
from ..exceptions import ChainQueryError, SubmissionError, ConfirmationError
from ..utils.web3_utils import get_raw_transaction, to_hex_hash, describe_exception

if TYPE_CHECKING:
    from ..models import WalletHandle

logger = logging.getLogger(__name__)

__all__ = ["ChainClient", "TransactionHandle", "ConfirmationResult"]


@dataclass(frozen=True, slots=True)
class TransactionHandle:
    tx_hash: str                  # 0x-prefixed, known as soon as the tx is broadcast
    sender: str
    nonce: int


@dataclass(frozen=True, slots=True)
class ConfirmationResult:
    tx_hash: str
    status: int                   # 1 = success, 0 = reverted
    block_number: int
    receipt: Any = field(default=None, repr=False)

    @property
    def success(self) -> bool:
        return self.status == 1


class ChainClient:
    """Chain access for ERC-20 contracts through a connected ``Web3`` instance."""

    def __init__(self, w3: Web3, confirmation_timeout: int = DEFAULT_CONFIRMATION_TIMEOUT, abi=None):
        self.w3 = w3
        self.confirmation_timeout = confirmation_timeout
        self.abi = abi or ERC20_ABI

    def _contract(self, contract_address: str):
        return self.w3.eth.contract(address=self.w3.to_checksum_address(contract_address), abi=self.abi)

    # ------------------------------------------------------------------ #
    # Reads                                                               #
    # ------------------------------------------------------------------ #
    def read_contract_value(self, contract_address: str, function_name: str, args: Sequence[Any] = ()) -> Any:
        """Call a view function and return its decoded value."""
        try:
            contract = self._contract(contract_address)
            value = getattr(contract.functions, function_name)(*args).call()
        except Exception as e:
            logger.debug("%s(%s) on %s failed: %r", function_name, args, contract_address, e)
            raise ChainQueryError(describe_exception(e)) from e
        logger.debug("%s(%s) on %s -> %s", function_name, args, contract_address, value)
        return value

    def get_balance(self, address: str) -> int:
        """Native balance in wei."""
        try:
            return self.w3.eth.get_balance(self.w3.to_checksum_address(address))
        except Exception as e:
            raise ChainQueryError(describe_exception(e)) from e

    def is_connected(self) -> bool:
        return self.w3.is_connected()

    def describe_network(self) -> tuple[int, int]:
        """(chain id, latest block number)."""
        try:
            return self.w3.eth.chain_id, self.w3.eth.block_number
        except Exception as e:
            raise ChainQueryError(describe_exception(e)) from e

    # ------------------------------------------------------------------ #
    # Writes                                                              #
    # ------------------------------------------------------------------ #
    def submit_transaction(self, contract_address: str, function_name: str, args: Sequence[Any],
                           signer: "WalletHandle") -> TransactionHandle:
        """Build, sign locally and broadcast a contract call from ``signer``.

        Gas and fee fields are left to web3's transaction defaults; the nonce
        is the signer's pending transaction count.
        """
        try:
            contract = self._contract(contract_address)
            nonce = self.w3.eth.get_transaction_count(signer.address, "pending")
            tx = getattr(contract.functions, function_name)(*args).build_transaction({
                "from": signer.address,
                "nonce": nonce,
            })
            logger.debug("built %s tx from %s nonce=%s gas=%s", function_name, signer.address, nonce, tx.get("gas"))
            signed_tx = signer.account.sign_transaction(tx)
            raw_hash = self.w3.eth.send_raw_transaction(get_raw_transaction(signed_tx))
        except Exception as e:
            logger.debug("submission of %s from %s failed: %r", function_name, signer.address, e)
            raise SubmissionError(describe_exception(e)) from e

        handle = TransactionHandle(tx_hash=to_hex_hash(raw_hash), sender=signer.address, nonce=nonce)
        logger.debug("broadcast %s", handle)
        return handle

    def await_confirmation(self, handle: TransactionHandle, timeout: Optional[int] = None) -> ConfirmationResult:
        """Block until ``handle`` is mined. Raises ConfirmationError if the wait fails."""
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                handle.tx_hash, timeout=timeout or self.confirmation_timeout
            )
        except Exception as e:
            logger.debug("waiting for %s failed: %r", handle.tx_hash, e)
            raise ConfirmationError(describe_exception(e), tx_hash=handle.tx_hash) from e

        result = ConfirmationResult(
            tx_hash=handle.tx_hash,
            status=receipt["status"],
            block_number=receipt["blockNumber"],
            receipt=receipt,
        )
        logger.debug("receipt for %s: status=%s block=%s", handle.tx_hash, result.status, result.block_number)
        return result
