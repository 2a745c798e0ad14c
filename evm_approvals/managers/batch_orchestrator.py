# evm_approvals/managers/batch_orchestrator.py
from typing import List, Sequence, Union

from ..models import ApprovalOutcome
from ..utils.web3_utils import describe_exception


class BatchOrchestrator:
    """Runs the executor over every spender × wallet × token combination, one at a time."""

    def __init__(self, executor, view):
        self.executor = executor
        self.view = view

    def run_approval_batch(self, wallets: Sequence, tokens: Sequence[str],
                           spenders: Union[str, Sequence[str]], confirm: bool = True) -> List[ApprovalOutcome]:
        """
        Approves every token for every spender from every wallet.

        Order is spenders (outer), wallets (middle), tokens (inner); each call
        completes before the next starts so a wallet's nonces stay in token order.

        Returns:
            One ApprovalOutcome per combination, in processing order.
        """
        if isinstance(spenders, str):
            spenders = [spenders]

        outcomes: List[ApprovalOutcome] = []
        for spender in spenders:
            self.view.display_batch_header(spender, len(tokens), len(wallets))
            for position, wallet in enumerate(wallets, start=1):
                self.view.display_wallet_header(position, len(wallets), wallet)
                for token in tokens:
                    try:
                        outcome = self.executor.approve(wallet, token, spender, confirm=confirm)
                    except Exception as e:
                        outcome = ApprovalOutcome.failed_for(wallet.address, token, spender, describe_exception(e))
                    outcomes.append(outcome)
        return outcomes
