"""Network client interface and the stellar-cli implementation."""

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional, Protocol, Union

from .constants import DEFAULT_STELLAR_BIN, STELLAR_BIN_ENV
from .exceptions import ClientCommandError
from .types import NetworkProfile

logger = logging.getLogger(__name__)


class NetworkClient(Protocol):
    """Operations the pipeline needs from the external network client."""

    def resolve_address(self, identity: str) -> str:
        ...

    def fund(self, identity: str, network: str) -> None:
        ...

    def build(self, package: Optional[str] = None, optimize: bool = False) -> None:
        ...

    def deploy(self, wasm_path: Union[Path, str], profile: NetworkProfile, identity: str) -> str:
        ...

    def invoke(
        self,
        contract_id: str,
        function: str,
        args: Mapping[str, str],
        profile: NetworkProfile,
        identity: str,
    ) -> str:
        ...


class StellarCli:
    """NetworkClient backed by the ``stellar`` command line tool."""

    def __init__(self, binary: Optional[str] = None):
        """
        Initialize the client.

        Args:
            binary: Path or name of the stellar executable.
                    If None, uses $STELLAR_BIN or "stellar".
        """
        if binary is None:
            binary = os.environ.get(STELLAR_BIN_ENV, DEFAULT_STELLAR_BIN)
        self.binary = binary

    def _run(self, args: List[str]) -> str:
        """
        Run a stellar subcommand and return its stdout.

        Only the trailing newline is removed so identifiers stay verbatim.

        Raises:
            ClientCommandError: If the binary is missing or exits non-zero
        """
        cmd = [self.binary, *args]
        logger.debug("> %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise ClientCommandError(
                f"stellar CLI not found ({self.binary}). "
                "Install it or set $STELLAR_BIN.",
                command=cmd,
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise ClientCommandError(
                f"Command failed with exit code {e.returncode}: {' '.join(cmd)}"
                + (f"\n{stderr}" if stderr else ""),
                command=cmd,
                returncode=e.returncode,
                stderr=stderr,
            ) from e
        return result.stdout.rstrip("\r\n")

    @staticmethod
    def _network_args(profile: NetworkProfile, identity: str) -> List[str]:
        return [
            "--rpc-url", profile.rpc_url,
            "--network-passphrase", profile.passphrase,
            "--source-account", identity,
        ]

    def resolve_address(self, identity: str) -> str:
        return self._run(["keys", "address", identity])

    def fund(self, identity: str, network: str) -> None:
        self._run(["keys", "fund", identity, "--network", network])

    def build(self, package: Optional[str] = None, optimize: bool = False) -> None:
        args = ["contract", "build"]
        if package is not None:
            args += ["--package", package]
        if optimize:
            args.append("--optimize")
        self._run(args)

    def deploy(self, wasm_path: Union[Path, str], profile: NetworkProfile, identity: str) -> str:
        return self._run(
            ["contract", "deploy", "--wasm", str(wasm_path)]
            + self._network_args(profile, identity)
        )

    def invoke(
        self,
        contract_id: str,
        function: str,
        args: Mapping[str, str],
        profile: NetworkProfile,
        identity: str,
    ) -> str:
        cmd = ["contract", "invoke", "--id", contract_id]
        cmd += self._network_args(profile, identity)
        cmd += ["--", function]
        for name, value in args.items():
            cmd += [f"--{name}", value]
        return self._run(cmd)
