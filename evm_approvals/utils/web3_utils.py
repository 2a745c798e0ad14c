# evm_approvals/utils/web3_utils.py
from web3 import Web3


def get_raw_transaction(signed_tx) -> bytes:
    """Return the signed payload; eth-account renamed ``rawTransaction`` to ``raw_transaction``."""
    raw = getattr(signed_tx, "raw_transaction", None)
    if raw is None:
        raw = signed_tx.rawTransaction
    return raw


def to_hex_hash(tx_hash) -> str:
    """0x-prefixed hex for a HexBytes/bytes/str hash (HexBytes.hex() drops the prefix on hexbytes>=1.0)."""
    if isinstance(tx_hash, str):
        return tx_hash if tx_hash.startswith("0x") else f"0x{tx_hash}"
    return Web3.to_hex(tx_hash)


def short_address(address: str) -> str:
    return f"{address[:6]}…{address[-4:]}"


def describe_exception(exc: BaseException) -> str:
    """Message for outcome records; falls back to the class name for empty messages."""
    message = str(exc)
    return message if message else exc.__class__.__name__
