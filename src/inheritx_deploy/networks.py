"""Network profile resolution for inheritx-deploy."""

from typing import List, Union

from .constants import FUNDING_NETWORKS, NETWORK_CONFIG
from .exceptions import ConfigurationError
from .types import NetworkName, NetworkProfile


def supported_networks() -> List[str]:
    """
    Get names of networks that can be deployed to.

    Returns:
        List of network names in table order (e.g., ["testnet", "mainnet"])
    """
    return list(NETWORK_CONFIG.keys())


def _network_value(name: Union[str, NetworkName]) -> str:
    if isinstance(name, NetworkName):
        return name.value
    return name


def resolve_network_profile(name: Union[str, NetworkName]) -> NetworkProfile:
    """
    Map a network name to its fixed profile.

    Args:
        name: Network name ("testnet" or "mainnet")

    Returns:
        NetworkProfile with the network's RPC URL and passphrase

    Raises:
        ConfigurationError: If the network is not deployable
    """
    value = _network_value(name)
    if value not in NETWORK_CONFIG:
        raise ConfigurationError(
            f"Unknown network '{value}'. "
            f"Supported networks: {', '.join(supported_networks())}"
        )

    config = NETWORK_CONFIG[value]
    return NetworkProfile(
        name=NetworkName(value),
        rpc_url=config["rpc_url"],
        passphrase=config["passphrase"],
    )


def is_funding_network(name: Union[str, NetworkName]) -> bool:
    """
    Check whether friendbot funding should be requested on a network.

    Args:
        name: Network name

    Returns:
        True for test networks (testnet, futurenet), False otherwise
    """
    return _network_value(name) in FUNDING_NETWORKS
