# evm_approvals/managers/__init__.py
from .allowance_inspector import AllowanceInspector
from .approval_executor import ApprovalExecutor, REVERTED_MESSAGE
from .batch_orchestrator import BatchOrchestrator
from .summary_reporter import ApprovalSummary, summarize

__all__ = [
    "AllowanceInspector",
    "ApprovalExecutor",
    "REVERTED_MESSAGE",
    "BatchOrchestrator",
    "ApprovalSummary",
    "summarize"
]
