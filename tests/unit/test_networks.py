"""Unit tests for network profile resolution."""

import pytest

from inheritx_deploy.exceptions import ConfigurationError
from inheritx_deploy.networks import (
    is_funding_network,
    resolve_network_profile,
    supported_networks,
)
from inheritx_deploy.types import NetworkName, NetworkProfile


class TestResolveNetworkProfile:
    """Test the resolve_network_profile function."""

    def test_testnet_profile(self):
        profile = resolve_network_profile("testnet")

        assert profile == NetworkProfile(
            name=NetworkName.TESTNET,
            rpc_url="https://soroban-testnet.stellar.org:443",
            passphrase="Test SDF Network ; September 2015",
        )

    def test_mainnet_profile(self):
        profile = resolve_network_profile("mainnet")

        assert profile == NetworkProfile(
            name=NetworkName.MAINNET,
            rpc_url="https://soroban-rpc.mainnet.stellar.org:443",
            passphrase="Public Global Stellar Network ; September 2015",
        )

    def test_accepts_enum_member(self):
        assert resolve_network_profile(NetworkName.MAINNET) == resolve_network_profile("mainnet")

    @pytest.mark.parametrize("name", ["futurenet", "devnet", "", "Testnet"])
    def test_unsupported_network_raises(self, name):
        """Test that unknown names fail and the message lists the supported set."""
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_network_profile(name)

        message = str(exc_info.value)
        assert "testnet" in message
        assert "mainnet" in message

    def test_profile_is_immutable(self):
        profile = resolve_network_profile("testnet")

        with pytest.raises(AttributeError):
            profile.rpc_url = "http://localhost:8000"  # type: ignore[misc]


class TestSupportedNetworks:
    """Test the supported_networks function."""

    def test_lists_deployable_networks(self):
        assert supported_networks() == ["testnet", "mainnet"]

    def test_futurenet_not_deployable(self):
        assert "futurenet" not in supported_networks()


class TestIsFundingNetwork:
    """Test the is_funding_network function."""

    @pytest.mark.parametrize("name", ["testnet", "futurenet", NetworkName.FUTURENET])
    def test_test_networks_are_funded(self, name):
        assert is_funding_network(name) is True

    @pytest.mark.parametrize("name", ["mainnet", NetworkName.MAINNET, "unknown"])
    def test_other_networks_are_not_funded(self, name):
        assert is_funding_network(name) is False
