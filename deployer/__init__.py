"""
Contract Deployment Package
Handles network configuration, artifact loading and contract deployment
"""

from .artifacts import ArtifactNotFoundError, ContractArtifact, load_artifact
from .chain_client import ChainClient, ContractFactory, ContractRevertedError, PendingDeployment
from .network_config import ConfigurationError, NetworkDescriptor, get_network, load_networks
from .runner import DeploymentError, DeploymentRequest, DeploymentResult, DeploymentRunner

__all__ = [
    'ArtifactNotFoundError',
    'ContractArtifact',
    'load_artifact',
    'ChainClient',
    'ContractFactory',
    'ContractRevertedError',
    'PendingDeployment',
    'ConfigurationError',
    'NetworkDescriptor',
    'get_network',
    'load_networks',
    'DeploymentError',
    'DeploymentRequest',
    'DeploymentResult',
    'DeploymentRunner'
]
