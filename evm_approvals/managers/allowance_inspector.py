# evm_approvals/managers/allowance_inspector.py
from ..exceptions import ChainQueryError


class AllowanceInspector:
    """Reads the live ERC-20 allowance for an (owner, token, spender) triple."""

    def __init__(self, chain):
        self.chain = chain

    def get_allowance(self, wallet, token_address: str, spender_address: str) -> int:
        """
        Queries ``allowance(owner, spender)`` on the token at call time. Never cached.

        Args:
            wallet: Wallet handle of the owner.
            token_address: ERC-20 contract address.
            spender_address: Address allowed to spend.

        Returns:
            The allowance as a non-negative int.

        Raises:
            ChainQueryError: if the read fails or returns something that is not a uint.
        """
        value = self.chain.read_contract_value(token_address, "allowance", [wallet.address, spender_address])
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ChainQueryError(f"Malformed allowance response from {token_address}: {value!r}")
        return value
