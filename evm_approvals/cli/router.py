import argparse
import sys

from .view import View
from ..contracts import TARGET_NAMES
from ..controllers import ApprovalController, resolve_plan
from ..exceptions import ConfigurationError


class Router:
    """Parses CLI arguments and dispatches commands to the controller."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        parser = argparse.ArgumentParser(
            prog='evm-approvals',
            description='Batch ERC20 approvals for DEX contracts across HD wallets'
        )

        subparsers = parser.add_subparsers(dest='command', help='Command to run', required=True)

        # --- Wallets Command ---
        subparsers.add_parser('wallets', help='Show derived wallet addresses and ETH balances')

        # --- Check / Approve Commands (share the plan arguments) ---
        plan_parent = argparse.ArgumentParser(add_help=False)
        plan_parent.add_argument('--target', choices=TARGET_NAMES, default='uniswap-v3',
                                 help='Named token/spender plan (default: uniswap-v3)')
        plan_parent.add_argument('--token', action='append', dest='tokens', metavar='ADDRESS',
                                 help='Token address to use instead of the target tokens (repeatable)')
        plan_parent.add_argument('--spender', action='append', dest='spenders', metavar='ADDRESS',
                                 help='Spender address to use instead of the target spender (repeatable)')

        subparsers.add_parser('check', parents=[plan_parent],
                              help='Show current allowances without sending transactions')

        approve_parser = subparsers.add_parser('approve', parents=[plan_parent],
                                               help='Approve unlimited spending for every wallet/token/spender')
        approve_parser.add_argument('--no-wait', action='store_true',
                                    help='Do not wait for confirmations (report success on broadcast)')
        approve_parser.add_argument('--yes', '-y', action='store_true',
                                    help='Skip the interactive confirmation prompt')

        return parser

    def dispatch(self, context, argv=None) -> int:
        """Parses arguments and calls the appropriate controller method. Returns an exit code."""
        if argv is None:
            argv = sys.argv[1:]

        args = self.parser.parse_args(argv)
        view = View(verbose=getattr(context, 'verbose', False))
        controller = ApprovalController(context, view)

        try:
            if args.command == 'wallets':
                return controller.show_wallets()

            tokens, spenders = resolve_plan(args.target, args.tokens, args.spenders)
            if args.command == 'check':
                return controller.check_allowances(tokens, spenders)
            if args.command == 'approve':
                return controller.run_approvals(tokens, spenders, confirm=not args.no_wait, assume_yes=args.yes)

            view.display_error(f"Unknown command: {args.command}")
            self.parser.print_help()
            return 2
        except ConfigurationError as e:
            view.display_error(str(e))
            return 1
