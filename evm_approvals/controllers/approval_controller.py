# evm_approvals/controllers/approval_controller.py
from typing import List, Mapping, Optional, Sequence, Tuple

from eth_utils import is_address, to_checksum_address

from ..cli.view import View
from ..contracts import target
from ..core import ApprovalContext, check_connection, derive_all_wallets
from ..exceptions import ChainQueryError, ConfigurationError
from ..managers import AllowanceInspector, ApprovalExecutor, BatchOrchestrator, summarize


def _checksum_all(addresses: Sequence[str], label: str) -> Tuple[str, ...]:
    result = []
    for address in addresses:
        if not is_address(address):
            raise ConfigurationError(f"Invalid {label} address: '{address}'")
        result.append(to_checksum_address(address))
    return tuple(result)


def resolve_plan(target_name: str, tokens: Optional[List[str]] = None,
                 spenders: Optional[List[str]] = None,
                 env: Optional[Mapping[str, str]] = None) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Token and spender lists for a named target, with CLI overrides applied.

    Target addresses come from ``env`` (``os.environ`` when omitted) at call time.
    """
    try:
        plan = target(target_name, env)
    except KeyError as e:
        raise ConfigurationError(e.args[0]) from e
    return (
        _checksum_all(tokens or plan.tokens, "token"),
        _checksum_all(spenders or plan.spenders, "spender"),
    )


class ApprovalController:
    """Handles the wallets / check / approve commands."""

    def __init__(self, context: ApprovalContext, view: View):
        self.context = context
        self.chain = context.chain
        self.view = view
        self.inspector = AllowanceInspector(self.chain)
        self.executor = ApprovalExecutor(self.chain, view, inspector=self.inspector)

    def _prepare_wallets(self):
        """Connection check + derivation. Returns None if the node is unreachable."""
        self.view.display_message("📡 Initializing provider...\n")
        if not check_connection(self.chain, self.view):
            return None
        self.view.display_message("")
        self.view.display_settings(self.context.settings)
        self.view.display_message("🔐 Deriving wallets from all mnemonics...")
        return derive_all_wallets(self.context.settings)

    def _balances(self, wallets) -> dict:
        balances = {}
        for wallet in wallets:
            try:
                balances[wallet.address] = self.chain.get_balance(wallet.address)
            except ChainQueryError as e:
                self.view.display_verbose(f"Balance lookup failed for {wallet.address}: {e}")
                balances[wallet.address] = None
        return balances

    def show_wallets(self) -> int:
        wallets = self._prepare_wallets()
        if wallets is None:
            return 1
        self.view.display_wallet_info(wallets, self._balances(wallets))
        return 0

    def check_allowances(self, tokens: Sequence[str], spenders: Sequence[str]) -> int:
        """Prints current allowances without sending anything."""
        wallets = self._prepare_wallets()
        if wallets is None:
            return 1
        token_infos = {}
        for spender in spenders:
            self.view.display_message(f"\nAllowances for spender {spender}:")
            for wallet in wallets:
                for token_address in tokens:
                    try:
                        if token_address not in token_infos:
                            token_infos[token_address] = self.executor.resolve_token(token_address)
                        allowance = self.inspector.get_allowance(wallet, token_address, spender)
                    except ChainQueryError as e:
                        self.view.display_error(f"{wallet.address} / {token_address}: {e}")
                        continue
                    self.view.display_allowance(wallet.address, token_infos[token_address], spender, allowance)
        return 0

    def run_approvals(self, tokens: Sequence[str], spenders: Sequence[str],
                      confirm: bool = True, assume_yes: bool = False) -> int:
        wallets = self._prepare_wallets()
        if wallets is None:
            return 1
        self.view.display_wallet_info(wallets, self._balances(wallets))
        self.view.display_approval_plan(tokens, spenders, confirm)

        if not assume_yes and not self.view.confirm_action("Send approval transactions now?"):
            self.view.display_message("Aborted. No transactions were sent.")
            return 1

        orchestrator = BatchOrchestrator(self.executor, self.view)
        outcomes = orchestrator.run_approval_batch(wallets, list(tokens), list(spenders), confirm=confirm)
        self.view.display_summary(summarize(outcomes))
        self.view.display_message("\n✅ Approval process completed!\n")
        return 0
