"""Identity resolution and test network funding."""

import logging
from typing import Union

from .client import NetworkClient
from .exceptions import IdentityResolutionError, PipelineError
from .networks import is_funding_network
from .types import FundingResult, NetworkName, ResolvedIdentity

logger = logging.getLogger(__name__)


def resolve_address(client: NetworkClient, identity: str) -> ResolvedIdentity:
    """
    Derive the public address of a named identity.

    Args:
        client: Network client used for the lookup
        identity: stellar-cli identity name

    Returns:
        ResolvedIdentity with a non-empty address

    Raises:
        IdentityResolutionError: If the lookup fails or returns nothing
    """
    try:
        raw = client.resolve_address(identity)
    except (PipelineError, OSError) as e:
        raise IdentityResolutionError(
            f"Could not derive public address for identity '{identity}'. "
            "Make sure the identity exists: stellar keys ls"
        ) from e

    address = (raw or "").strip()
    if not address:
        raise IdentityResolutionError(
            f"Could not derive public address for identity '{identity}'. "
            "Create it first using: stellar keys add <identity>"
        )

    return ResolvedIdentity(identity=identity, address=address)


def ensure_funded(
    client: NetworkClient, identity: str, network: Union[str, NetworkName]
) -> FundingResult:
    """
    Request friendbot funding on test networks. Never raises for client errors.

    Args:
        client: Network client used for the funding request
        identity: stellar-cli identity name
        network: Network name; mainnet is never funded

    Returns:
        FundingResult describing what happened
    """
    name = network.value if isinstance(network, NetworkName) else network

    if not is_funding_network(name):
        logger.debug("Skipping funding on %s", name)
        return FundingResult(identity=identity, network=name, attempted=False)

    logger.info("Ensuring the account is funded on %s...", name)
    try:
        client.fund(identity, name)
    except Exception as e:
        # Any client failure, including already funded accounts and friendbot rate limits
        logger.warning("Funding %s on %s did not succeed: %s", identity, name, e)
        return FundingResult(
            identity=identity, network=name, attempted=True, funded=False, detail=str(e)
        )

    return FundingResult(identity=identity, network=name, attempted=True, funded=True)
