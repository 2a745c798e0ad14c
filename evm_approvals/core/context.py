# evm_approvals/core/context.py
from dataclasses import dataclass
from typing import Optional

from ..config import Settings
from .chain_client import ChainClient
from .provider import get_web3


@dataclass
class ApprovalContext:
    """Everything a command needs: settings plus the chain connection built from them."""
    settings: Settings
    chain: ChainClient
    verbose: bool = False


def build_context(rpc_url: Optional[str] = None, verbose: bool = False, env=None) -> ApprovalContext:
    """Raises ConfigurationError when the environment is incomplete."""
    settings = Settings.from_env(env, rpc_url=rpc_url)
    w3 = get_web3(settings)
    chain = ChainClient(w3, confirmation_timeout=settings.confirmation_timeout)
    return ApprovalContext(settings=settings, chain=chain, verbose=verbose)
