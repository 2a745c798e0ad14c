# evm_approvals/managers/summary_reporter.py
from dataclasses import dataclass, field
from typing import Iterable, List

from ..models import ApprovalOutcome, ApprovalStatus


@dataclass(frozen=True, slots=True)
class ApprovalSummary:
    total: int
    succeeded: int
    skipped: int
    failed: int
    failure_details: List[ApprovalOutcome] = field(default_factory=list)


def summarize(outcomes: Iterable[ApprovalOutcome]) -> ApprovalSummary:
    """Counts per status plus the failed records, in batch order."""
    outcomes = list(outcomes)
    succeeded = sum(1 for o in outcomes if o.status is ApprovalStatus.SUCCEEDED)
    skipped = sum(1 for o in outcomes if o.status is ApprovalStatus.SKIPPED)
    failures = [o for o in outcomes if o.status is ApprovalStatus.FAILED]
    return ApprovalSummary(
        total=len(outcomes),
        succeeded=succeeded,
        skipped=skipped,
        failed=len(failures),
        failure_details=failures,
    )
