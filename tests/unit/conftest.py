import pytest


@pytest.fixture(autouse=True)
def only_on_development_chains(development_chain, network_name):
    if not development_chain:
        pytest.skip(f"unit tests run on development chains, not {network_name}")
