import os

import boa
from eth_account import Account
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.deploy_mock import VRF_COORDINATOR_MOCK, deploy_mocks
from script.deployments import Deployments
from script.helper_config import (
    LOCAL_CHAIN_ID,
    VRF_SUB_FUND_AMOUNT,
    NetworkConfigError,
    get_network_config,
    get_subscription_id,
    is_development_chain,
)
from src import lottery

LOTTERY = "Lottery"
TAGS = ("all", "lottery")


def get_deployer() -> str:
    """Address every deploy step sends from.

    Development chains use boa's default EOA. On live chains a PRIVATE_KEY
    from the environment wins over the moccasin default account.
    """
    active_network = get_active_network()
    if is_development_chain(active_network.name):
        return boa.env.eoa

    private_key = os.getenv("PRIVATE_KEY")
    if private_key:
        account = Account.from_key(private_key)
        boa.env.add_account(account, force_eoa=True)
        return account.address

    account = active_network.get_default_account()
    if account is None:
        return boa.env.eoa
    return account.address


def create_subscription(coordinator: VyperContract, amount: int = VRF_SUB_FUND_AMOUNT) -> int:
    subscription_id = coordinator.create_subscription()
    coordinator.fund_subscription(subscription_id, amount)
    print(f"Created VRF subscription {subscription_id} funded with {amount}")
    return subscription_id


def deploy_lottery(deployments: Deployments | None = None) -> VyperContract:
    active_network = get_active_network()
    development_chain = is_development_chain(active_network.name)
    if deployments is None:
        deployments = Deployments()

    if development_chain:
        if VRF_COORDINATOR_MOCK not in deployments:
            deploy_mocks(deployments)
        coordinator = deployments.get(VRF_COORDINATOR_MOCK).contract
        vrf_coordinator_address = coordinator.address
        subscription_id = create_subscription(coordinator)
        network_config = get_network_config(LOCAL_CHAIN_ID)
    else:
        network_config = get_network_config(active_network.chain_id)
        vrf_coordinator_address = network_config["vrf_coordinator"]
        subscription_id = get_subscription_id(network_config)
        if not subscription_id:
            raise NetworkConfigError(
                f"Set VRF_SUBSCRIPTION_ID before deploying to {network_config['name']}"
            )

    args = [
        vrf_coordinator_address,
        network_config["entrance_fee"],
        bytes.fromhex(network_config["key_hash"].removeprefix("0x")),
        subscription_id,
        network_config["callback_gas_limit"],
        network_config["interval"],
    ]

    deployer = get_deployer()
    with boa.env.prank(deployer):
        lottery_contract = lottery.deploy(*args)
    deployments.save(LOTTERY, lottery_contract, args, TAGS, deployer=deployer)
    print(f"Lottery deployed at: {lottery_contract.address} by {deployer}")

    if development_chain:
        coordinator.add_consumer(subscription_id, lottery_contract.address)
        print(f"Added consumer {lottery_contract.address} to subscription {subscription_id}")

    if not development_chain and os.getenv("ETHERSCAN_API_KEY"):
        print("Verifying...")
        result = active_network.moccasin_verify(lottery_contract)
        result.wait_for_verification()
    print("-----------------------------------")
    return lottery_contract


def moccasin_main() -> VyperContract:
    return deploy_lottery()
