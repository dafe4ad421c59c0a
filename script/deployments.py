from dataclasses import dataclass, field
from typing import Any

from moccasin.boa_tools import VyperContract


class DeploymentNotFoundError(KeyError):
    pass


@dataclass
class DeploymentRecord:
    name: str
    address: str
    args: list = field(default_factory=list)
    tags: tuple = ()
    contract: Any = None
    deployer: str | None = None


class Deployments:
    """Contracts deployed in this session, looked up by name.

    `fixture(*tags)` runs the tagged deploy steps the same way a
    `deployments.fixture("all")` call would, so tests and scripts can ask for
    just the mocks or the full stack.
    """

    def __init__(self):
        self._records = {}

    def __contains__(self, name: str) -> bool:
        return name in self._records

    def save(
        self, name: str, contract: VyperContract, args=(), tags=(), deployer: str | None = None
    ) -> DeploymentRecord:
        record = DeploymentRecord(
            name=name,
            address=contract.address,
            args=list(args),
            tags=tuple(tags),
            contract=contract,
            deployer=deployer,
        )
        self._records[name] = record
        return record

    def get(self, name: str) -> DeploymentRecord:
        try:
            return self._records[name]
        except KeyError:
            raise DeploymentNotFoundError(f"No deployment named {name}") from None

    def names(self) -> list:
        return list(self._records)

    def fixture(self, *tags: str) -> "Deployments":
        tags = set(tags or ("all",))
        for name, step_tags, step in deploy_steps():
            if name in self or not tags.intersection(step_tags):
                continue
            step(self)
        return self


def deploy_steps():
    # Imported here, the step modules need this module for their registry type.
    from script.deploy import LOTTERY, TAGS as LOTTERY_TAGS, deploy_lottery
    from script.deploy_mock import VRF_COORDINATOR_MOCK, TAGS as MOCK_TAGS, deploy_mocks

    return [
        (VRF_COORDINATOR_MOCK, MOCK_TAGS, deploy_mocks),
        (LOTTERY, LOTTERY_TAGS, deploy_lottery),
    ]
