"""Custom exception classes for inheritx-deploy."""

from typing import Optional, Sequence


class PipelineError(Exception):
    """Base exception for deployment pipeline errors."""

    pass


class ConfigurationError(PipelineError, ValueError):
    """Raised for an unknown network, missing identity or missing contracts directory."""

    pass


class IdentityResolutionError(PipelineError, LookupError):
    """Raised when no public address can be derived for an identity."""

    pass


class BuildError(PipelineError, RuntimeError):
    """Raised when the contract build or optimize pass fails."""

    pass


class DeploymentError(PipelineError, RuntimeError):
    """Raised when submitting a contract artifact fails."""

    pass


class InitializationError(PipelineError, RuntimeError):
    """Raised when the privileged initialization call fails."""

    pass


class PersistenceError(PipelineError, OSError):
    """Raised when deployed contract IDs cannot be written to the state file."""

    pass


class NetworkCheckError(PipelineError, ConnectionError):
    """Raised when the RPC endpoint cannot be queried."""

    pass


class ClientCommandError(PipelineError, RuntimeError):
    """Raised when an external network client command fails."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = list(command) if command is not None else []
        self.returncode = returncode
        self.stderr = stderr
