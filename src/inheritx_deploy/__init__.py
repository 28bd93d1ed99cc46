"""
inheritx-deploy: build, deploy and initialize InheritX Soroban contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .client import NetworkClient, StellarCli
from .exceptions import (
    BuildError,
    ClientCommandError,
    ConfigurationError,
    DeploymentError,
    IdentityResolutionError,
    InitializationError,
    NetworkCheckError,
    PersistenceError,
    PipelineError,
)
from .networks import resolve_network_profile
from .pipeline import DeploymentPipeline
from .types import (
    ContractArtifact,
    DeployedContract,
    DeploymentRequest,
    DeploymentResult,
    NetworkName,
    NetworkProfile,
    ResolvedIdentity,
)

try:
    __version__ = version("inheritx-deploy")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentPipeline",
    "NetworkClient",
    "StellarCli",
    "resolve_network_profile",
    "ContractArtifact",
    "DeployedContract",
    "DeploymentRequest",
    "DeploymentResult",
    "NetworkName",
    "NetworkProfile",
    "ResolvedIdentity",
    "PipelineError",
    "ConfigurationError",
    "IdentityResolutionError",
    "BuildError",
    "DeploymentError",
    "InitializationError",
    "NetworkCheckError",
    "PersistenceError",
    "ClientCommandError",
]
