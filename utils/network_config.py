"""
Network Configuration
Loads the target network from config/network_config.json and .env overrides
"""

import os
import json
from dataclasses import dataclass
from typing import Optional
from loguru import logger
from dotenv import load_dotenv

load_dotenv()


# Looked up in the working directory first, then next to the source tree
DEFAULT_CONFIG_PATH = os.path.join('config', 'network_config.json')
SOURCE_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    DEFAULT_CONFIG_PATH
)
DEFAULT_TIMEOUT = 120.0


def find_config_path() -> str:
    """config/network_config.json of the working directory, else of the source tree"""
    if os.path.isfile(DEFAULT_CONFIG_PATH) or not os.path.isfile(SOURCE_CONFIG_PATH):
        return DEFAULT_CONFIG_PATH

    return SOURCE_CONFIG_PATH


@dataclass
class NetworkConfig:
    """Everything the deployment runtime needs to reach a network"""

    name: str
    rpc_url: str
    chain_id: Optional[int] = None
    private_key: Optional[str] = None
    artifacts_dir: str = "artifacts"
    timeout: float = DEFAULT_TIMEOUT


def load_network_config(
    name: Optional[str] = None,
    path: Optional[str] = None
) -> NetworkConfig:
    """
    Load network settings

    Environment variables take precedence over the JSON file:
    DEPLOY_NETWORK, RPC_URL, DEPLOYER_PRIVATE_KEY, ARTIFACTS_DIR, DEPLOY_TIMEOUT

    Args:
        name: Network name (None = DEPLOY_NETWORK or the file's default_network)
        path: Path to the network config JSON (None = find_config_path())

    Returns:
        NetworkConfig
    """
    path = path or find_config_path()

    with open(path, 'r') as f:
        config = json.load(f)

    network_name = name or os.getenv('DEPLOY_NETWORK') or config.get('default_network', 'localhost')
    networks = config.get('networks', {})

    if network_name not in networks:
        raise ValueError(
            f"Unknown network '{network_name}' (configured: {', '.join(sorted(networks))})"
        )

    network = networks[network_name]

    rpc_url = os.getenv('RPC_URL') or network.get('url')
    if not rpc_url and network.get('url_env'):
        rpc_url = os.getenv(network['url_env'])

    if not rpc_url:
        raise ValueError(f"No RPC URL configured for network '{network_name}'")

    private_key = os.getenv('DEPLOYER_PRIVATE_KEY')
    if not private_key and network.get('private_key_env'):
        private_key = os.getenv(network['private_key_env'])

    timeout = os.getenv('DEPLOY_TIMEOUT')

    network_config = NetworkConfig(
        name=network_name,
        rpc_url=rpc_url,
        chain_id=network.get('chain_id'),
        private_key=private_key or None,
        artifacts_dir=os.getenv('ARTIFACTS_DIR', 'artifacts'),
        timeout=float(timeout) if timeout else DEFAULT_TIMEOUT
    )

    logger.debug(f"Network config loaded: {network_name} ({rpc_url})")
    return network_config
