"""
Utilities Package
Network configuration and logging setup
"""

from .network_config import NetworkConfig, load_network_config
from .logging_setup import configure_logging

__all__ = [
    'NetworkConfig',
    'load_network_config',
    'configure_logging'
]
