# evm_approvals/models/__init__.py
from .approval_model import ApprovalStatus, ApprovalOutcome, TokenInfo, WalletHandle

__all__ = [
    "ApprovalStatus",
    "ApprovalOutcome",
    "TokenInfo",
    "WalletHandle"
]
