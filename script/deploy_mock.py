from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.deployments import Deployments
from script.helper_config import BASE_FEE, GAS_PRICE_LINK, is_development_chain
from src.mocks import mock_vrf_coordinator

VRF_COORDINATOR_MOCK = "VRFCoordinatorV2Mock"
TAGS = ("all", "mocks")


def deploy_mocks(deployments: Deployments | None = None) -> VyperContract | None:
    active_network = get_active_network()
    if not is_development_chain(active_network.name):
        print(f"{active_network.name} is not a development chain, skipping mocks")
        return None

    if deployments is None:
        deployments = Deployments()

    args = [BASE_FEE, GAS_PRICE_LINK]
    mock = mock_vrf_coordinator.deploy(*args)
    deployments.save(VRF_COORDINATOR_MOCK, mock, args, TAGS)
    print(f"Mock VRF Coordinator at: {mock.address}")
    print("-----------------------------------")
    return mock


def moccasin_main() -> VyperContract | None:
    return deploy_mocks()
