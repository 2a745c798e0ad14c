#!/usr/bin/env python3
"""
EVM Approvals - main entry point.

Approves unlimited ERC20 spending for DEX contracts (Uniswap V3 by default)
across every wallet derived from MNEMONIC_1, MNEMONIC_2, ...
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from evm_approvals.cli.router import Router
from evm_approvals.cli.view import View
from evm_approvals.core import build_context
from evm_approvals.exceptions import ConfigurationError


def configure_logging(verbose: bool = False):
    """Third-party loggers stay at WARNING; web3 debug lines carry the full RPC URL."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(logging.WARNING)
    logging.getLogger("evm_approvals").setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv=None) -> int:
    """Main entry point."""
    load_dotenv()

    # Context args first, the router parses the rest
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument('--rpc', type=str, help='RPC URL (overrides RPC_URL / ALCHEMY_API_KEY)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output')
    context_args, remaining_argv = parser.parse_known_args(argv)

    configure_logging(context_args.verbose)

    view = View(verbose=context_args.verbose)
    view.display_banner()
    try:
        context = build_context(rpc_url=context_args.rpc, verbose=context_args.verbose)
    except ConfigurationError as e:
        view.display_error(str(e))
        return 1

    return Router().dispatch(context, remaining_argv)


if __name__ == '__main__':
    sys.exit(main())
