# evm_approvals/managers/approval_executor.py
import logging
from typing import Optional

from ..config import MAX_UINT256
from ..exceptions import ChainQueryError, RevertedError
from ..models import ApprovalOutcome, TokenInfo
from ..utils.web3_utils import describe_exception
from .allowance_inspector import AllowanceInspector

logger = logging.getLogger(__name__)

REVERTED_MESSAGE = "transaction failed"


class ApprovalExecutor:
    """Brings one (wallet, token, spender) triple to an unlimited allowance."""

    def __init__(self, chain, view, inspector: Optional[AllowanceInspector] = None):
        self.chain = chain
        self.view = view
        self.inspector = inspector or AllowanceInspector(chain)

    def resolve_token(self, token_address: str) -> TokenInfo:
        """Fetches symbol and decimals from the chain. Not cached."""
        symbol = self.chain.read_contract_value(token_address, "symbol", [])
        decimals = self.chain.read_contract_value(token_address, "decimals", [])
        try:
            return TokenInfo(address=token_address, symbol=str(symbol), decimals=int(decimals))
        except (TypeError, ValueError) as e:
            raise ChainQueryError(f"Malformed token metadata from {token_address}: {e}") from e

    def approve(self, wallet, token_address: str, spender_address: str, confirm: bool = True) -> ApprovalOutcome:
        """
        Ensures ``spender_address`` holds an unlimited allowance on ``token_address`` for ``wallet``.

        Skips when the current allowance is already MAX_UINT256, otherwise submits
        ``approve(spender, MAX_UINT256)`` and, if ``confirm`` is set, waits for the receipt.

        Returns:
            Exactly one ApprovalOutcome. Errors are reported in the outcome, never raised.
        """
        token_symbol = None
        tx_hash = None
        try:
            token = self.resolve_token(token_address)
            token_symbol = token.symbol
            self.view.display_token_progress(token.symbol)

            current_allowance = self.inspector.get_allowance(wallet, token_address, spender_address)
            self.view.display_verbose(f"{token.symbol} allowance for {spender_address}: {current_allowance}")

            if current_allowance >= MAX_UINT256:
                self.view.display_skip(token.symbol)
                return ApprovalOutcome.skipped_for(
                    wallet.address, token_address, spender_address, token_symbol=token_symbol
                )

            handle = self.chain.submit_transaction(
                token_address, "approve", [spender_address, MAX_UINT256], wallet
            )
            tx_hash = handle.tx_hash
            self.view.display_tx_sent(tx_hash)

            if confirm:
                result = self.chain.await_confirmation(handle)
                if not result.success:
                    raise RevertedError(REVERTED_MESSAGE, receipt=result.receipt)
                self.view.display_confirmed(token.symbol, result.block_number)

            return ApprovalOutcome.succeeded_for(
                wallet.address, token_address, spender_address, tx_hash, token_symbol=token_symbol
            )
        except Exception as e:
            message = describe_exception(e)
            logger.debug("approval %s/%s/%s failed", wallet.address, token_address, spender_address, exc_info=True)
            self.view.display_approval_failed(token_symbol, message)
            return ApprovalOutcome.failed_for(
                wallet.address, token_address, spender_address, message,
                tx_hash=tx_hash, token_symbol=token_symbol
            )
