"""
Blockchain Deployment Package
Handles artifact lookup, contract factories and deployer accounts
"""

from .errors import DeploymentError, ArtifactNotFoundError
from .artifacts import ContractArtifact, load_artifact
from .signer import Signer
from .contract_factory import ContractFactory, DeployedContract
from .runtime import DeploymentRuntime

__all__ = [
    'DeploymentError',
    'ArtifactNotFoundError',
    'ContractArtifact',
    'load_artifact',
    'Signer',
    'ContractFactory',
    'DeployedContract',
    'DeploymentRuntime'
]
