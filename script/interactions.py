import os
import time

import boa
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.deploy import LOTTERY
from script.deploy_mock import VRF_COORDINATOR_MOCK
from script.deployments import Deployments
from script.helper_config import is_development_chain
from src import lottery

WINNER_TIMEOUT = 300  # seconds
POLL_INTERVAL = 5


class UpkeepNotNeededError(RuntimeError):
    pass


class WinnerTimeoutError(TimeoutError):
    pass


def enter_lottery(lottery_contract: VyperContract, value: int | None = None) -> None:
    if value is None:
        value = lottery_contract.get_entrance_fee()
    lottery_contract.enter_lottery(value=value)
    print(f"Entered the lottery with {value}")


def mock_offchain(lottery_contract: VyperContract, coordinator: VyperContract) -> str:
    """Play the Automation node and the VRF oracle for one round.

    Only meaningful against the coordinator mock on a development chain.
    Returns the address of the winner.
    """
    upkeep_needed, _ = lottery_contract.check_upkeep(b"")
    if not upkeep_needed:
        raise UpkeepNotNeededError(
            f"Upkeep not needed: state={lottery_contract.get_lottery_state()} "
            f"players={lottery_contract.get_number_of_players()}"
        )
    lottery_contract.perform_upkeep(b"")
    request_id = coordinator.last_request_id()
    print(f"Performed upkeep with request id {request_id}")

    coordinator.fulfill_random_words(request_id, lottery_contract.address)
    winner = lottery_contract.get_recent_winner()
    print(f"The winner is: {winner}")
    return winner


def wait_for_winner(
    lottery_contract: VyperContract,
    starting_timestamp: int,
    timeout: float = WINNER_TIMEOUT,
    poll_interval: float = POLL_INTERVAL,
) -> str:
    """Block until a winner has been picked after `starting_timestamp`.

    A pick always moves the last timestamp forward, so that is what gets
    polled. Raises WinnerTimeoutError once `timeout` seconds have elapsed.
    """
    deadline = time.monotonic() + timeout
    while True:
        if lottery_contract.get_last_timestamp() > starting_timestamp:
            winner = lottery_contract.get_recent_winner()
            print(f"WinnerPicked: {winner}")
            return winner
        if time.monotonic() >= deadline:
            raise WinnerTimeoutError(f"No winner picked within {timeout} seconds")
        time.sleep(poll_interval)


def moccasin_main() -> str | None:
    active_network = get_active_network()
    if is_development_chain(active_network.name):
        deployments = Deployments().fixture("all")
        lottery_contract = deployments.get(LOTTERY).contract
        coordinator = deployments.get(VRF_COORDINATOR_MOCK).contract
        enter_lottery(lottery_contract)
        boa.env.time_travel(seconds=lottery_contract.get_interval() + 1)
        return mock_offchain(lottery_contract, coordinator)

    lottery_contract = lottery.at(os.environ["LOTTERY_ADDRESS"])
    enter_lottery(lottery_contract)
    return None
