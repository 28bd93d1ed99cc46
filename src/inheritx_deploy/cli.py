"""Command line entry point for inheritx-deploy."""

import argparse
import logging
import sys
from typing import List, Optional

from .client import NetworkClient, StellarCli
from .constants import DEFAULT_NETWORK
from .exceptions import ConfigurationError, PipelineError
from .logging_utils import configure_logging
from .networks import resolve_network_profile, supported_networks
from .pipeline import DeploymentPipeline
from .types import DeploymentRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inheritx-deploy",
        description="Build, deploy and initialize the InheritX contracts.",
    )
    parser.add_argument(
        "--network",
        default=DEFAULT_NETWORK,
        help=f"Network to deploy to ({'/'.join(supported_networks())}). Default: {DEFAULT_NETWORK}",
    )
    parser.add_argument(
        "--admin",
        metavar="IDENTITY",
        default=None,
        help=(
            "Name of the stellar-cli identity used to deploy and initialize the contracts. "
            "(MANDATORY) Create it first using: stellar keys add <identity>"
        ),
    )
    parser.add_argument(
        "--state-file",
        default=None,
        help="KEY=VALUE file the contract IDs are written to. Default: ./.env",
    )
    parser.add_argument(
        "--stellar-bin",
        default=None,
        help="stellar CLI executable. Default: $STELLAR_BIN or 'stellar'",
    )
    parser.add_argument(
        "--check-rpc",
        action="store_true",
        help="Verify the RPC endpoint serves the expected network before building",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_request(args: argparse.Namespace) -> DeploymentRequest:
    """
    Turn parsed arguments into a DeploymentRequest.

    Raises:
        ConfigurationError: If the network is unknown or --admin is missing
    """
    profile = resolve_network_profile(args.network)

    admin = (args.admin or "").strip()
    if not admin:
        raise ConfigurationError(
            "--admin <identity> is required to deploy and initialize. "
            "Create it first using: stellar keys add <identity>"
        )

    return DeploymentRequest(network=profile, admin_identity=admin)


def main(argv: Optional[List[str]] = None, client: Optional[NetworkClient] = None) -> int:
    """
    Run the deployment from the command line.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        request = parse_request(args)
        if client is None:
            client = StellarCli(args.stellar_bin)
        pipeline = DeploymentPipeline(
            client, state_path=args.state_file, check_rpc=args.check_rpc
        )
        result = pipeline.run(request)
    except PipelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted. Local state was not updated.", file=sys.stderr)
        return 130

    for name, contract_id in result.contract_ids().items():
        print(f"{name}={contract_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
