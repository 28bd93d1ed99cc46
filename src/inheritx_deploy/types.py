"""Data types and dataclasses for inheritx-deploy."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class NetworkName(Enum):
    """Known network names. Not every member is deployable."""

    TESTNET = "testnet"
    MAINNET = "mainnet"
    FUTURENET = "futurenet"


@dataclass(frozen=True)
class NetworkProfile:
    """Endpoint and passphrase identifying a target network."""

    name: NetworkName
    rpc_url: str
    passphrase: str


@dataclass(frozen=True)
class DeploymentRequest:
    """Everything a run needs, fixed at startup."""

    network: NetworkProfile
    admin_identity: str  # Name of a stellar-cli identity, never a secret


@dataclass(frozen=True)
class ResolvedIdentity:
    """An identity together with its derived public address."""

    identity: str
    address: str  # e.g., "GADMIN..."


@dataclass(frozen=True)
class ContractArtifact:
    """A contract package and the wasm file its optimized build produces."""

    logical_name: str  # Also the state file key, e.g., "EXAMPLE_CONTRACT_ID"
    package_name: str  # Cargo package, e.g., "example-contract"
    wasm_path: str  # Relative to the contracts directory unless absolute


@dataclass(frozen=True)
class DeployedContract:
    """A contract ID assigned by the network to a deployed artifact."""

    logical_name: str
    contract_id: str  # Opaque, e.g., "CAEXAMPLE1"


@dataclass(frozen=True)
class FundingResult:
    """Outcome of a best-effort funding request. Safe to ignore."""

    identity: str
    network: str
    attempted: bool
    funded: bool = False
    detail: str = ""


@dataclass(frozen=True)
class NetworkInfo:
    """Network details reported by a Soroban RPC server."""

    passphrase: str
    protocol_version: Optional[int] = None
    friendbot_url: Optional[str] = None


@dataclass
class DeploymentResult:
    """Summary of a successful pipeline run."""

    request: DeploymentRequest
    admin: ResolvedIdentity
    contracts: List[DeployedContract] = field(default_factory=list)
    state_path: Optional[Path] = None

    def contract_ids(self) -> dict:
        """Map logical names to contract IDs, in deploy order."""
        return {c.logical_name: c.contract_id for c in self.contracts}
