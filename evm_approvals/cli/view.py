from decimal import Decimal, ROUND_DOWN

from ..config import MAX_UINT256
from ..utils.web3_utils import short_address

RULE = "=" * 70


class View:
    """Handles all console output and presentation."""

    def __init__(self, verbose=False):
        self.verbose = verbose

    def _floor_to_6(self, val):
        """Floor a number to 6 decimal places for safe display."""
        if val is None:
            return 0.0
        try:
            d_val = Decimal(str(val))
            rounded = d_val.quantize(Decimal('0.000001'), rounding=ROUND_DOWN)
            return float(rounded)
        except Exception:
            return 0.0

    # --- Generic output ---

    def display_error(self, message: str):
        """Displays an error message."""
        print(f"❌ ERROR: {message}")

    def display_message(self, message: str):
        """Displays a general message."""
        print(message)

    def display_verbose(self, message: str):
        """Displays a message only if verbose mode is enabled."""
        if self.verbose:
            print(f"[VERBOSE] {message}")

    def confirm_action(self, prompt: str) -> bool:
        """Asks the user for confirmation."""
        try:
            response = input(f"{prompt} (y/n): ").lower().strip()
        except EOFError:
            print("")
            return False
        return response == 'y'

    # --- Setup ---

    def display_banner(self):
        print("\n" + RULE)
        print("  UNISWAP V3 APPROVAL TOOL - ERC20 Token Approvals")
        print(RULE + "\n")

    def display_settings(self, settings):
        print("🔑 Mnemonic Configuration:")
        print(f"   - Mnemonics found: {len(settings.mnemonics)}")
        for info in settings.mnemonic_info():
            print(f"   - {info}")
        print(f"   - Wallets per mnemonic: {settings.wallets_per_mnemonic}")
        print(f"   - Total wallets: {settings.total_wallets}\n")

    def display_wallet_info(self, wallets, balances: dict):
        """Addresses and ETH balances, grouped by mnemonic. ``balances`` maps address -> wei (or None)."""
        print(f"\n{RULE}")
        print("WALLET INFORMATION")
        print(RULE)
        previous_mnemonic = None
        for i, wallet in enumerate(wallets, start=1):
            if previous_mnemonic is not None and wallet.mnemonic_number != previous_mnemonic:
                print("")
            previous_mnemonic = wallet.mnemonic_number
            balance_wei = balances.get(wallet.address)
            print(f"\nWallet {i} (MNEMONIC_{wallet.mnemonic_number}, Derivation Index: {wallet.derivation_index}):")
            print(f"  Address: {wallet.address}")
            if balance_wei is None:
                print("  Balance: unavailable")
            else:
                eth = Decimal(balance_wei) / Decimal(10**18)
                print(f"  Balance: {self._floor_to_6(eth):.6f} ETH")
        print(f"\n{RULE}\n")

    def display_approval_plan(self, tokens, spenders, confirm: bool):
        print("📋 Approval Configuration:")
        for token in tokens:
            print(f"   - Token: {token}")
        for spender in spenders:
            print(f"   - Spender: {spender}")
        print("   - Approval Amount: Unlimited (max uint256)")
        print(f"   - Wait for confirmations: {'yes' if confirm else 'no'}\n")
        print("⚠️  WARNING: This will send transactions from your wallets.")
        print("   Make sure you have sufficient ETH for gas fees.\n")

    # --- Batch progress ---

    def display_batch_header(self, spender: str, token_count: int, wallet_count: int):
        print(f"\n{RULE}")
        print("STARTING APPROVAL PROCESS")
        print(RULE)
        print(f"Tokens to approve: {token_count}")
        print(f"Wallets: {wallet_count}")
        print(f"Spender: {spender}")

    def display_wallet_header(self, position: int, total: int, wallet):
        print(f"\n[Wallet {position}/{total}] {wallet.address}")

    def display_token_progress(self, symbol: str):
        print(f"\n  → Approving {symbol}...")

    def display_skip(self, symbol: str):
        print(f"    ✓ {symbol} already has unlimited approval - skipping")

    def display_tx_sent(self, tx_hash: str):
        print(f"    ⏳ Transaction sent: {tx_hash}")

    def display_confirmed(self, symbol: str, block_number: int):
        print(f"    ✓ {symbol} approval confirmed (Block: {block_number})")

    def display_approval_failed(self, symbol, error: str):
        label = symbol or "Approval"
        print(f"    ✗ {label} failed: {error}")

    # --- Reports ---

    def display_allowance(self, wallet_address: str, token, spender: str, allowance: int):
        if allowance >= MAX_UINT256:
            amount = "unlimited"
        else:
            amount = token.format_amount(allowance)
        print(f"  {short_address(wallet_address)}  {token.symbol:<8} → {short_address(spender)}: {amount}")

    def display_summary(self, summary):
        print(f"\n{RULE}")
        print("APPROVAL SUMMARY")
        print(RULE)
        print(f"Total approvals processed: {summary.total}")
        print(f"✓ Successful: {summary.succeeded}")
        print(f"⏭ Already Approved (Skipped): {summary.skipped}")
        print(f"✗ Failed: {summary.failed}")

        if summary.failed > 0:
            print("\nFailed approvals:")
            for outcome in summary.failure_details:
                token_label = outcome.token_symbol or outcome.token_address
                print(f"  - {outcome.wallet_address} → {token_label} (spender {outcome.spender_address})")
                if outcome.tx_hash:
                    print(f"    Tx: {outcome.tx_hash}")
                if outcome.error:
                    print(f"    Error: {outcome.error}")

        print(RULE)
