# evm_approvals/config/settings.py
"""Run-time settings gathered once from the process environment.

Nothing below this layer reads ``os.environ``: the entry point builds a
:class:`Settings` and hands it to the provider and wallet provisioning.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from ..exceptions import ConfigurationError
from .network import DEFAULT_CONFIRMATION_TIMEOUT, alchemy_url

__all__ = ["Settings", "load_mnemonics", "get_wallets_per_mnemonic"]


def load_mnemonics(env: Mapping[str, str]) -> Tuple[str, ...]:
    """Collect MNEMONIC_1, MNEMONIC_2, ... stopping at the first gap."""
    mnemonics = []
    index = 1
    while True:
        phrase = env.get(f"MNEMONIC_{index}")
        if not phrase:
            break
        mnemonics.append(phrase.strip())
        index += 1

    if not mnemonics:
        raise ConfigurationError(
            "No mnemonics found in environment variables. "
            "Please add MNEMONIC_1, MNEMONIC_2, etc. to your .env file."
        )
    return tuple(mnemonics)


def get_wallets_per_mnemonic(env: Mapping[str, str]) -> int:
    raw = env.get("WALLETS_PER_MNEMONIC")
    if raw:
        try:
            parsed = int(raw)
        except ValueError:
            return 1
        if parsed > 0:
            return parsed
    return 1


@dataclass(frozen=True, slots=True)
class Settings:
    rpc_url: str
    mnemonics: Tuple[str, ...]
    wallets_per_mnemonic: int = 1
    confirmation_timeout: int = DEFAULT_CONFIRMATION_TIMEOUT

    def __repr__(self) -> str:
        # Never leak seed phrases or the API key embedded in the RPC URL.
        return (
            f"Settings(mnemonics={len(self.mnemonics)}, "
            f"wallets_per_mnemonic={self.wallets_per_mnemonic}, "
            f"confirmation_timeout={self.confirmation_timeout})"
        )

    @property
    def total_wallets(self) -> int:
        return len(self.mnemonics) * self.wallets_per_mnemonic

    def mnemonic_info(self) -> list[str]:
        """Word counts per configured mnemonic, safe to print."""
        return [
            f"MNEMONIC_{i} ({len(phrase.split())} words)"
            for i, phrase in enumerate(self.mnemonics, start=1)
        ]

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, rpc_url: Optional[str] = None) -> "Settings":
        """Build settings from ``env`` (defaults to ``os.environ``).

        ``rpc_url`` overrides RPC_URL / ALCHEMY_API_KEY (the ``--rpc`` flag).
        """
        env = os.environ if env is None else env

        url = rpc_url or env.get("RPC_URL")
        if not url:
            api_key = env.get("ALCHEMY_API_KEY")
            if not api_key:
                raise ConfigurationError(
                    "Neither RPC_URL nor ALCHEMY_API_KEY is set in environment variables. "
                    "Please check your .env file."
                )
            url = alchemy_url(api_key)

        timeout_raw = env.get("CONFIRMATION_TIMEOUT")
        try:
            timeout = int(timeout_raw) if timeout_raw else DEFAULT_CONFIRMATION_TIMEOUT
        except ValueError as exc:
            raise ConfigurationError(f"CONFIRMATION_TIMEOUT must be an integer, got '{timeout_raw}'") from exc

        return cls(
            rpc_url=url,
            mnemonics=load_mnemonics(env),
            wallets_per_mnemonic=get_wallets_per_mnemonic(env),
            confirmation_timeout=timeout,
        )
