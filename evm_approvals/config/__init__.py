"""
Configuration package for evm_approvals.
"""

from evm_approvals.config.network import (
    ALCHEMY_URL_TEMPLATE,
    DEFAULT_CONFIRMATION_TIMEOUT,
    alchemy_url
)

from evm_approvals.config.abis import (
    ERC20_ABI,
    MAX_UINT256
)

from evm_approvals.config.settings import (
    Settings,
    load_mnemonics,
    get_wallets_per_mnemonic
)

__all__ = [
    # Network
    'ALCHEMY_URL_TEMPLATE',
    'DEFAULT_CONFIRMATION_TIMEOUT',
    'alchemy_url',

    # ABIs
    'ERC20_ABI',
    'MAX_UINT256',

    # Settings
    'Settings',
    'load_mnemonics',
    'get_wallets_per_mnemonic'
]
