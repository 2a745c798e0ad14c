"""Registry of the Ethereum mainnet tokens and DEX contracts the approval
tool works with. Nothing here touches the chain at runtime.

Addresses are read from the environment when the registry is built, not at
import time, so values loaded from ``.env`` by the entry point are honoured.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

__all__ = [
    "Contracts", "ApprovalTarget", "DEFAULT_ADDRESSES", "TARGET_NAMES",
    "load_contracts", "approval_targets", "target",
]


@dataclass(frozen=True, slots=True)
class Contracts:
    # Token contracts
    usdc: str
    vult: str
    weth: str
    # Uniswap V3 contracts
    uniswap_v3_position_manager: str
    uniswap_v3_swap_router: str
    usdc_vult_pair: str          # pool, informational only


@dataclass(frozen=True, slots=True)
class ApprovalTarget:
    name: str
    tokens: Tuple[str, ...]      # approved in this order
    spenders: Tuple[str, ...]    # outer loop, in this order
    description: str = ""


# field name -> (env override, mainnet default)
DEFAULT_ADDRESSES: Mapping[str, Tuple[str, str]] = {
    "usdc": ("USDC_ADDRESS", "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"),
    "vult": ("VULT_ADDRESS", "0xb788144DF611029C60b859DF47e79B7726C4DEBa"),
    "weth": ("WETH_ADDRESS", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
    "uniswap_v3_position_manager": (
        "UNISWAP_V3_POSITION_MANAGER_ADDRESS", "0xC36442b4a4522E871399CD717aBDD847Ab11FE88"
    ),
    "uniswap_v3_swap_router": (
        "UNISWAP_V3_SWAP_ROUTER_ADDRESS", "0xE592427A0AEce92De3Edee1F18E0157C05861564"
    ),
    "usdc_vult_pair": ("USDC_VULT_PAIR_ADDRESS", "0x6Df52cC6E2E6f6531E4ceB4b083CF49864A89020"),
}

TARGET_NAMES: Tuple[str, ...] = ("uniswap-v3", "uniswap-v3-swap", "uniswap-v3-all")


def load_contracts(env: Optional[Mapping[str, str]] = None) -> Contracts:
    """Build the registry from ``env`` (defaults to ``os.environ``). Empty values fall back to mainnet."""
    if env is None:
        env = os.environ
    return Contracts(**{
        field: env.get(var) or default
        for field, (var, default) in DEFAULT_ADDRESSES.items()
    })


def approval_targets(contracts: Contracts) -> Dict[str, ApprovalTarget]:
    return {
        "uniswap-v3": ApprovalTarget(
            name="uniswap-v3",
            tokens=(contracts.usdc, contracts.vult),
            spenders=(contracts.uniswap_v3_position_manager,),
            description="USDC + VULT for the Uniswap V3 Position Manager (liquidity)",
        ),
        "uniswap-v3-swap": ApprovalTarget(
            name="uniswap-v3-swap",
            tokens=(contracts.usdc, contracts.vult, contracts.weth),
            spenders=(contracts.uniswap_v3_swap_router,),
            description="USDC + VULT + WETH for the Uniswap V3 SwapRouter",
        ),
        "uniswap-v3-all": ApprovalTarget(
            name="uniswap-v3-all",
            tokens=(contracts.usdc, contracts.vult),
            spenders=(contracts.uniswap_v3_position_manager, contracts.uniswap_v3_swap_router),
            description="USDC + VULT for both the Position Manager and the SwapRouter",
        ),
    }


def target(name: str, env: Optional[Mapping[str, str]] = None) -> ApprovalTarget:
    try:
        return approval_targets(load_contracts(env))[name]
    except KeyError as exc:
        raise KeyError(
            f"Unknown approval target '{name}'. Valid: {list(TARGET_NAMES)}"
        ) from exc
