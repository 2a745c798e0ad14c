# evm_approvals/core/__init__.py
from .chain_client import ChainClient, TransactionHandle, ConfirmationResult
from .provider import get_web3, check_connection
from .wallets import derive_wallets, derive_all_wallets
from .context import ApprovalContext, build_context

__all__ = [
    "ChainClient",
    "TransactionHandle",
    "ConfirmationResult",
    "get_web3",
    "check_connection",
    "derive_wallets",
    "derive_all_wallets",
    "ApprovalContext",
    "build_context"
]
