# evm_approvals/core/wallets.py
"""Wallet provisioning: BIP-44 derivation of signer handles from seed phrases."""

from typing import List

from eth_account import Account
from eth_utils import ValidationError

from ..config import Settings
from ..exceptions import ConfigurationError
from ..models import WalletHandle

# Standard Ethereum derivation path
DERIVATION_PATH_TEMPLATE = "m/44'/60'/0'/0/{index}"

Account.enable_unaudited_hdwallet_features()


def derive_wallets(mnemonic: str, count: int = 1, mnemonic_number: int = 1) -> List[WalletHandle]:
    """
    Derives ``count`` wallets from one mnemonic at indices 0..count-1.

    Args:
        mnemonic: BIP-39 phrase.
        count: Number of wallets to derive.
        mnemonic_number: 1-based position of the phrase (MNEMONIC_<n>), kept on each handle.

    Returns:
        Wallet handles in derivation order.
    """
    wallets = []
    for index in range(count):
        path = DERIVATION_PATH_TEMPLATE.format(index=index)
        try:
            account = Account.from_mnemonic(mnemonic, account_path=path)
        except (ValidationError, ValueError) as e:
            # The library message echoes the words back, so it is not propagated.
            raise ConfigurationError(f"MNEMONIC_{mnemonic_number} is not a valid BIP-39 mnemonic") from e
        wallets.append(WalletHandle(
            address=account.address,
            account=account,
            mnemonic_number=mnemonic_number,
            derivation_index=index,
        ))
    return wallets


def derive_all_wallets(settings: Settings) -> List[WalletHandle]:
    """Wallets for every configured mnemonic, grouped by mnemonic, in derivation order."""
    all_wallets = []
    for number, mnemonic in enumerate(settings.mnemonics, start=1):
        all_wallets.extend(derive_wallets(mnemonic, settings.wallets_per_mnemonic, mnemonic_number=number))
    if not all_wallets:
        raise ConfigurationError("No wallets could be derived from the configured mnemonics")
    return all_wallets
