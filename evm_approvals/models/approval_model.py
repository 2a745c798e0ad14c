# evm_approvals/models/approval_model.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from eth_account.signers.local import LocalAccount

__all__ = ["ApprovalStatus", "ApprovalOutcome", "TokenInfo", "WalletHandle"]


class ApprovalStatus(str, Enum):
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class WalletHandle:
    """A signer-capable account plus where it was derived from."""
    address: str
    account: "LocalAccount" = field(repr=False)
    mnemonic_number: int = 1      # 1-based, matches MNEMONIC_<n>
    derivation_index: int = 0     # m/44'/60'/0'/0/<index>


@dataclass(frozen=True, slots=True)
class TokenInfo:
    address: str
    symbol: str
    decimals: int

    def format_amount(self, raw_amount: int) -> str:
        if self.decimals == 0:
            return str(raw_amount)
        whole, frac = divmod(raw_amount, 10 ** self.decimals)
        frac_str = str(frac).rjust(self.decimals, "0").rstrip("0")
        return f"{whole}.{frac_str}" if frac_str else str(whole)


@dataclass(frozen=True, slots=True)
class ApprovalOutcome:
    """Result of one (wallet, token, spender) approval attempt."""
    wallet_address: str
    token_address: str
    spender_address: str
    status: ApprovalStatus
    tx_hash: Optional[str] = None     # only when a transaction was submitted
    error: Optional[str] = None       # only when failed
    token_symbol: Optional[str] = None

    @classmethod
    def skipped_for(cls, wallet_address, token_address, spender_address, token_symbol=None) -> "ApprovalOutcome":
        return cls(wallet_address, token_address, spender_address, ApprovalStatus.SKIPPED,
                   token_symbol=token_symbol)

    @classmethod
    def succeeded_for(cls, wallet_address, token_address, spender_address, tx_hash, token_symbol=None) -> "ApprovalOutcome":
        return cls(wallet_address, token_address, spender_address, ApprovalStatus.SUCCEEDED,
                   tx_hash=tx_hash, token_symbol=token_symbol)

    @classmethod
    def failed_for(cls, wallet_address, token_address, spender_address, error, tx_hash=None, token_symbol=None) -> "ApprovalOutcome":
        return cls(wallet_address, token_address, spender_address, ApprovalStatus.FAILED,
                   tx_hash=tx_hash, error=error, token_symbol=token_symbol)
