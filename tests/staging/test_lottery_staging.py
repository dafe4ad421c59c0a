import os

import boa
import pytest

from script.interactions import enter_lottery, wait_for_winner
from src import lottery

# Live Automation + VRF usually answer within a few minutes.
WINNER_TIMEOUT = 600


@pytest.fixture
def live_lottery(development_chain, network_name):
    if development_chain:
        pytest.skip(f"staging tests run on live networks, not {network_name}")
    address = os.getenv("LOTTERY_ADDRESS")
    if not address:
        pytest.skip("LOTTERY_ADDRESS is not set")
    return lottery.at(address)


def test_works_with_live_automation_and_vrf(live_lottery):
    entrance_fee = live_lottery.get_entrance_fee()
    starting_timestamp = live_lottery.get_last_timestamp()
    player = boa.env.eoa

    enter_lottery(live_lottery)
    winner_starting_balance = boa.env.get_balance(player)

    winner = wait_for_winner(live_lottery, starting_timestamp, timeout=WINNER_TIMEOUT)

    assert winner == player
    assert live_lottery.get_lottery_state() == 0
    assert boa.env.get_balance(player) == winner_starting_balance + entrance_fee
    assert live_lottery.get_last_timestamp() > starting_timestamp
    with boa.reverts():
        live_lottery.get_player(0)
