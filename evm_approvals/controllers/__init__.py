# evm_approvals/controllers/__init__.py
from .approval_controller import ApprovalController, resolve_plan

__all__ = [
    "ApprovalController",
    "resolve_plan"
]
