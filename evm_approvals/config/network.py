# evm_approvals/config/network.py
ALCHEMY_URL_TEMPLATE = "https://eth-mainnet.g.alchemy.com/v2/{api_key}"

DEFAULT_CONFIRMATION_TIMEOUT = 180    # seconds


def alchemy_url(api_key: str) -> str:
    return ALCHEMY_URL_TEMPLATE.format(api_key=api_key)
