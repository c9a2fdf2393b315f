"""
Deployment Errors
Exceptions raised by the deployment layer
"""


class DeploymentError(Exception):
    """Raised when a contract cannot be deployed"""


class ArtifactNotFoundError(DeploymentError):
    """Raised when a contract artifact is missing, ambiguous or malformed"""
