"""Soroban RPC preflight checks for inheritx-deploy."""

import logging

import requests

from .exceptions import ConfigurationError, NetworkCheckError
from .types import NetworkInfo, NetworkProfile

logger = logging.getLogger(__name__)


def get_network_info(rpc_url: str, timeout: float = 30) -> NetworkInfo:
    """
    Ask a Soroban RPC server which network it serves.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        NetworkInfo reported by the server

    Raises:
        NetworkCheckError: If the request fails or the server returns an error
    """
    try:
        response = requests.post(
            rpc_url,
            json={"jsonrpc": "2.0", "id": 1, "method": "getNetwork"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise NetworkCheckError(f"Network error during RPC call to {rpc_url}: {e}") from e

    if response.status_code != 200:
        raise NetworkCheckError(
            f"RPC request to {rpc_url} failed with status {response.status_code}"
        )

    try:
        result = response.json()
    except ValueError as e:
        raise NetworkCheckError(f"RPC response from {rpc_url} is not JSON") from e

    if "error" in result:
        raise NetworkCheckError(f"RPC error from {rpc_url}: {result['error']}")

    try:
        data = result["result"]
        return NetworkInfo(
            passphrase=data["passphrase"],
            protocol_version=data.get("protocolVersion"),
            friendbot_url=data.get("friendbotUrl"),
        )
    except (KeyError, TypeError) as e:
        raise NetworkCheckError(f"Unexpected RPC response from {rpc_url}: {result}") from e


def verify_network(profile: NetworkProfile) -> NetworkInfo:
    """
    Check that a profile's RPC endpoint serves the expected network.

    Raises:
        NetworkCheckError: If the endpoint is unreachable
        ConfigurationError: If the endpoint reports a different passphrase
    """
    info = get_network_info(profile.rpc_url)
    if info.passphrase != profile.passphrase:
        raise ConfigurationError(
            f"RPC endpoint {profile.rpc_url} serves '{info.passphrase}', "
            f"expected '{profile.passphrase}' for {profile.name.value}"
        )
    logger.info(
        "RPC endpoint OK (%s, protocol %s)", profile.name.value, info.protocol_version
    )
    return info
