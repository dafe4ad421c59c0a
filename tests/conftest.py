import boa
import pytest
from moccasin._sys_path_and_config_setup import _setup_network_and_account_from_config_and_cli
from moccasin.config import get_active_network, get_or_initialize_config

from script.deploy import LOTTERY
from script.deploy_mock import VRF_COORDINATOR_MOCK
from script.deployments import Deployments
from script.helper_config import LOCAL_CHAIN_ID, get_network_config, is_development_chain

# Replicate the setup `mox test` performs before handing off to pytest,
# so the suite also runs under plain `python3 -m pytest`.
get_or_initialize_config()
_setup_network_and_account_from_config_and_cli()

STARTING_BALANCE = 10**18  # 1 ETH


@pytest.fixture(scope="session")
def network_name():
    """Name of the network the tests run against"""
    return get_active_network().name


@pytest.fixture(scope="session")
def development_chain(network_name):
    return is_development_chain(network_name)


@pytest.fixture(scope="session")
def local_config():
    return get_network_config(LOCAL_CHAIN_ID)


@pytest.fixture
def account():
    """The deployer, funded with 1 ETH"""
    acct = boa.env.eoa
    boa.env.set_balance(acct, STARTING_BALANCE)
    return acct


@pytest.fixture
def deployments(account):
    """A fresh `all` deployment for every test"""
    return Deployments().fixture("all")


@pytest.fixture
def lottery_contract(deployments):
    return deployments.get(LOTTERY).contract


@pytest.fixture
def vrf_coordinator(deployments):
    return deployments.get(VRF_COORDINATOR_MOCK).contract


@pytest.fixture
def entrance_fee(lottery_contract):
    return lottery_contract.get_entrance_fee()


@pytest.fixture
def interval(lottery_contract):
    return lottery_contract.get_interval()


@pytest.fixture
def funded_players():
    def _players(count):
        players = [boa.env.generate_address() for _ in range(count)]
        for player in players:
            boa.env.set_balance(player, STARTING_BALANCE)
        return players

    return _players
