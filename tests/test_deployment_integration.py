"""
Integration Tests
Deploys the compiled Project contract to a local Hardhat node
"""

import os
import pytest
from web3 import Web3

from blockchain import DeploymentRuntime
from utils.network_config import NetworkConfig


# Note: These tests require a local Hardhat node and compiled artifacts
# Run: npx hardhat compile && npx hardhat node
# Then: pytest tests/test_deployment_integration.py

RPC_URL = os.getenv('RPC_URL', 'http://127.0.0.1:8545')
ARTIFACTS_DIR = os.getenv('ARTIFACTS_DIR', 'artifacts')


@pytest.fixture
def runtime():
    """Runtime connected to the local node, skipped when it is not running"""
    if not os.path.isdir(ARTIFACTS_DIR):
        pytest.skip(f"No artifacts in {ARTIFACTS_DIR}")

    config = NetworkConfig(name="localhost", rpc_url=RPC_URL, artifacts_dir=ARTIFACTS_DIR)

    try:
        return DeploymentRuntime.from_config(config)
    except ConnectionError:
        pytest.skip(f"No node at {RPC_URL}")


class TestProjectDeployment:
    """Deploy Project against a live node"""

    def test_deployment(self, runtime):
        project = runtime.get_contract_factory("Project").deploy()
        project.wait_for_deployment(timeout=30)

        address = project.get_address()

        assert Web3.is_checksum_address(address)
        assert len(runtime.w3.eth.get_code(address)) > 0

    def test_each_deployment_gets_new_address(self, runtime):
        factory = runtime.get_contract_factory("Project")

        first = factory.deploy().wait_for_deployment(timeout=30).get_address()
        second = factory.deploy().wait_for_deployment(timeout=30).get_address()

        assert first != second
