# evm_approvals/core/provider.py
from web3 import Web3

from ..config import Settings
from ..exceptions import ChainQueryError


def get_web3(settings: Settings) -> Web3:
    """HTTP provider for the configured endpoint (RPC_URL or Alchemy mainnet)."""
    return Web3(Web3.HTTPProvider(settings.rpc_url))


def check_connection(chain, view) -> bool:
    """Print chain id and block number; False if the node cannot be reached."""
    if not chain.is_connected():
        view.display_error("Provider connection failed: node not reachable")
        return False
    try:
        chain_id, block_number = chain.describe_network()
    except ChainQueryError as e:
        view.display_error(f"Provider connection failed: {e}")
        return False

    view.display_message(f"✓ Connected to network (chainId: {chain_id})")
    view.display_message(f"✓ Current block number: {block_number}")
    return True
