"""
Smart Contract Deployment Script
Deploys the Project contract and prints its address

Run from the project root: python -m scripts.deploy_contract
"""

import sys
from loguru import logger

from blockchain import DeploymentRuntime
from utils.logging_setup import configure_logging
from utils.network_config import load_network_config


CONTRACT_NAME = "Project"

SUCCESS_MESSAGE = "✅ BlockNova Labs contract deployed at:"
FAILURE_MESSAGE = "❌ Deployment failed:"


def deploy_project(runtime: DeploymentRuntime, contract_name: str = CONTRACT_NAME) -> str:
    """
    Deploy a contract once and wait for it to be mined

    Args:
        runtime: Deployment runtime for the target network
        contract_name: Contract to deploy

    Returns:
        Deployed contract address
    """
    factory = runtime.get_contract_factory(contract_name)
    project = factory.deploy()

    project.wait_for_deployment(timeout=runtime.config.timeout)

    return project.get_address()


def main(runtime: DeploymentRuntime = None) -> int:
    """
    Run the deployment and report the outcome

    Returns:
        Process exit code (0 = deployed, 1 = failed)
    """
    try:
        configure_logging()

        if runtime is None:
            runtime = DeploymentRuntime.from_config(load_network_config())

        address = deploy_project(runtime)

    except Exception as e:
        logger.opt(exception=e).debug("Deployment failed")
        print(f"{FAILURE_MESSAGE} {e}", file=sys.stderr)
        return 1

    print(f"{SUCCESS_MESSAGE} {address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
