"""
Deployment Runtime
Connection, deployer and artifacts for one target network
"""

from web3 import Web3
from loguru import logger

from utils.network_config import NetworkConfig
from .artifacts import load_artifact
from .contract_factory import ContractFactory
from .signer import Signer


class DeploymentRuntime:
    """
    Bundles everything needed to turn a contract name into a deployment:
    web3 connection, deployer signer and the artifacts directory
    """

    def __init__(self, w3: Web3, signer: Signer, config: NetworkConfig):
        self.w3 = w3
        self.signer = signer
        self.config = config

    @classmethod
    def from_config(cls, config: NetworkConfig) -> "DeploymentRuntime":
        """
        Connect to the configured network and resolve the deployer

        Args:
            config: Network configuration

        Returns:
            DeploymentRuntime
        """
        w3 = Web3(Web3.HTTPProvider(config.rpc_url))

        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to {config.name} at {config.rpc_url}")

        logger.info(f"Connected to {config.name} (block {w3.eth.block_number})")

        if config.private_key:
            signer = Signer.from_private_key(w3, config.private_key)
        else:
            signer = Signer.from_node(w3)

        return cls(w3, signer, config)

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Contract factory for a compiled contract

        Args:
            name: Contract name or fully qualified name

        Returns:
            ContractFactory
        """
        artifact = load_artifact(name, self.config.artifacts_dir)
        logger.info(f"Resolved artifact {artifact.fully_qualified_name}")

        return ContractFactory(
            self.w3,
            artifact,
            self.signer,
            chain_id=self.config.chain_id
        )
