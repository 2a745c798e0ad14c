"""
EVM approval tools: batch ERC20 allowances for DEX contracts across HD wallets.
"""

from evm_approvals.config import MAX_UINT256
from evm_approvals.exceptions import (
    ApprovalError,
    ConfigurationError,
    ChainQueryError,
    SubmissionError,
    ConfirmationError,
    RevertedError
)
from evm_approvals.models import ApprovalStatus, ApprovalOutcome, TokenInfo, WalletHandle
from evm_approvals.managers import (
    AllowanceInspector,
    ApprovalExecutor,
    BatchOrchestrator,
    ApprovalSummary,
    summarize
)

__all__ = [
    'MAX_UINT256',
    'ApprovalError',
    'ConfigurationError',
    'ChainQueryError',
    'SubmissionError',
    'ConfirmationError',
    'RevertedError',
    'ApprovalStatus',
    'ApprovalOutcome',
    'TokenInfo',
    'WalletHandle',
    'AllowanceInspector',
    'ApprovalExecutor',
    'BatchOrchestrator',
    'ApprovalSummary',
    'summarize'
]
