# evm_approvals/exceptions.py
from typing import Optional


class ApprovalError(Exception):
    """Base class for every error raised by evm_approvals."""


class ConfigurationError(ApprovalError):
    """Setup problem (missing mnemonics, RPC credentials, bad addresses). Aborts the run."""


class ChainQueryError(ApprovalError):
    """A read call (symbol, decimals, allowance, balanceOf) could not complete."""


class SubmissionError(ApprovalError):
    """Building, signing or broadcasting a transaction failed."""


class ConfirmationError(ApprovalError):
    """The transaction was broadcast but its receipt could not be observed."""

    def __init__(self, message, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class RevertedError(ApprovalError):
    """The transaction was mined with a failure status."""

    def __init__(self, message="transaction failed", receipt=None):
        super().__init__(message)
        self.receipt = receipt
