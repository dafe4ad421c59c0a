import os

LOCAL_CHAIN_ID = 31337
SEPOLIA_CHAIN_ID = 11155111

DEVELOPMENT_CHAINS = ["pyevm", "eravm", "anvil", "localhost"]

# VRF coordinator mock constructor args
BASE_FEE = 25 * 10**16  # 0.25 LINK per request
GAS_PRICE_LINK = 10**9  # LINK per gas
VRF_SUB_FUND_AMOUNT = 10**18

NETWORK_CONFIG = {
    LOCAL_CHAIN_ID: {
        "name": "localhost",
        "entrance_fee": 10**16,  # 0.01 ETH
        "key_hash": "0xd89b2bf150e3b9e13446986e571fb9cab24b13cea0a43ea20a6049a85cc807cc",
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    SEPOLIA_CHAIN_ID: {
        "name": "sepolia",
        "entrance_fee": 10**16,
        "key_hash": "0x474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c",
        "vrf_coordinator": "0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
        "subscription_id": 0,  # VRF_SUBSCRIPTION_ID overrides
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
}


class NetworkConfigError(KeyError):
    pass


def is_development_chain(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS


def get_network_config(chain_id: int) -> dict:
    try:
        return NETWORK_CONFIG[chain_id]
    except KeyError:
        raise NetworkConfigError(f"No lottery config for chain id {chain_id}") from None


def get_subscription_id(network_config: dict) -> int:
    """VRF_SUBSCRIPTION_ID from the environment, else the table value.

    An empty variable, as left by a copied .env template, counts as unset.
    """
    return int(os.getenv("VRF_SUBSCRIPTION_ID") or network_config.get("subscription_id") or 0)
