"""Unit tests for custom exception classes."""

import pytest

from inheritx_deploy.exceptions import (
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

ALL_EXCEPTIONS = [
    ConfigurationError,
    IdentityResolutionError,
    BuildError,
    DeploymentError,
    InitializationError,
    PersistenceError,
    NetworkCheckError,
    ClientCommandError,
]


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_configuration_error_as_value_error(self):
        """Test that ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise ConfigurationError("test")

    def test_catch_identity_resolution_error_as_lookup_error(self):
        """Test that IdentityResolutionError can be caught as LookupError."""
        with pytest.raises(LookupError):
            raise IdentityResolutionError("test")

    @pytest.mark.parametrize("exc_class", [BuildError, DeploymentError, InitializationError])
    def test_catch_stage_failures_as_runtime_error(self, exc_class):
        """Test that stage failures can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            raise exc_class("test")

    def test_catch_network_check_error_as_connection_error(self):
        """Test that NetworkCheckError can be caught as ConnectionError."""
        with pytest.raises(ConnectionError):
            raise NetworkCheckError("test")

    def test_catch_persistence_error_as_os_error(self):
        """Test that PersistenceError can be caught as OSError."""
        with pytest.raises(OSError):
            raise PersistenceError("test")

    def test_catch_all_as_pipeline_error(self):
        """Test that all custom exceptions can be caught as PipelineError."""
        for exc_class in ALL_EXCEPTIONS:
            with pytest.raises(PipelineError):
                raise exc_class("test")


class TestClientCommandError:
    """Test the extra context carried by ClientCommandError."""

    def test_keeps_command_details(self):
        exc = ClientCommandError(
            "failed", command=("stellar", "keys", "address", "alice"), returncode=1, stderr="boom"
        )

        assert str(exc) == "failed"
        assert exc.command == ["stellar", "keys", "address", "alice"]
        assert exc.returncode == 1
        assert exc.stderr == "boom"

    def test_defaults(self):
        exc = ClientCommandError("failed")

        assert exc.command == []
        assert exc.returncode is None
        assert exc.stderr == ""
