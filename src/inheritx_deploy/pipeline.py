"""Build, deploy, initialize and persist: the deployment pipeline."""

import dataclasses
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from .client import NetworkClient
from .constants import CONTRACT_ARTIFACTS, INHERITANCE_CONTRACT_KEY, INITIALIZE_FUNCTION
from .exceptions import (
    BuildError,
    DeploymentError,
    InitializationError,
    PersistenceError,
    PipelineError,
)
from .identity import ensure_funded, resolve_address
from .paths import find_contracts_dir, get_default_state_path, working_directory
from .rpc import verify_network
from .state import load_state, upsert_state
from .types import (
    ContractArtifact,
    DeployedContract,
    DeploymentRequest,
    DeploymentResult,
    FundingResult,
    NetworkInfo,
    NetworkProfile,
    ResolvedIdentity,
)

logger = logging.getLogger(__name__)


def default_artifacts() -> List[ContractArtifact]:
    """Return the contracts this tool deploys, in deploy order."""
    return [ContractArtifact(**entry) for entry in CONTRACT_ARTIFACTS]


class DeploymentPipeline:
    """Runs every stage of a deployment in order, stopping at the first failure."""

    def __init__(
        self,
        client: NetworkClient,
        state_path: Optional[Union[Path, str]] = None,
        contracts_root: Optional[Union[Path, str]] = None,
        artifacts: Optional[Sequence[ContractArtifact]] = None,
        check_rpc: bool = False,
        rpc_check: Callable[[NetworkProfile], NetworkInfo] = verify_network,
    ):
        """
        Initialize the pipeline.

        Args:
            client: Network client that runs build/deploy/invoke operations
            state_path: KEY=VALUE file for contract IDs (defaults to ./.env)
            contracts_root: Directory to search for contracts/ from
                            (defaults to the current directory at build time)
            artifacts: Contracts to deploy (defaults to example + inheritance)
            check_rpc: Verify the RPC endpoint before building
            rpc_check: Function used for that verification
        """
        self.client = client
        self.state_path = Path(state_path) if state_path is not None else get_default_state_path()
        self.contracts_root = contracts_root
        self.artifacts = list(artifacts) if artifacts is not None else default_artifacts()
        self.check_rpc = check_rpc
        self.rpc_check = rpc_check

    def run(self, request: DeploymentRequest) -> DeploymentResult:
        """
        Deploy all artifacts and record their IDs.

        Args:
            request: Target network and admin identity

        Returns:
            DeploymentResult with the deployed contract IDs

        Raises:
            PipelineError: Subclass naming the stage that failed
        """
        profile = request.network
        logger.info("Building and deploying InheritX contracts")
        logger.info("Network: %s (%s)", profile.name.value, profile.rpc_url)
        logger.info("Admin identity: %s", request.admin_identity)

        self._report_previous_state()

        admin = self.resolve_identity(request)
        logger.info("Admin address: %s", admin.address)
        self.fund(request)

        if self.check_rpc:
            self.rpc_check(profile)

        artifacts = self.build()
        deployed = self.deploy_all(request, artifacts)
        self.initialize(request, admin, deployed)
        self.persist(deployed)

        logger.info("Deployment complete. Contract IDs saved to %s", self.state_path)
        return DeploymentResult(
            request=request, admin=admin, contracts=deployed, state_path=self.state_path
        )

    def _report_previous_state(self) -> None:
        previous = load_state(self.state_path)
        for artifact in self.artifacts:
            if artifact.logical_name in previous:
                logger.info(
                    "Replacing previous %s=%s",
                    artifact.logical_name,
                    previous[artifact.logical_name],
                )

    def resolve_identity(self, request: DeploymentRequest) -> ResolvedIdentity:
        return resolve_address(self.client, request.admin_identity)

    def fund(self, request: DeploymentRequest) -> FundingResult:
        return ensure_funded(self.client, request.admin_identity, request.network.name)

    def build(self) -> List[ContractArtifact]:
        """
        Build every contract package, then optimize each one.

        Returns:
            Artifacts with wasm paths made absolute

        Raises:
            ConfigurationError: If no contracts directory is found
            BuildError: If any build or optimize pass fails
        """
        contracts_dir = find_contracts_dir(self.contracts_root)

        with working_directory(contracts_dir):
            logger.info("[1/4] Building contracts...")
            try:
                self.client.build()
            except (PipelineError, OSError) as e:
                raise BuildError(f"Contract build failed: {e}") from e

            logger.info("[2/4] Optimizing contracts...")
            for artifact in self.artifacts:
                try:
                    self.client.build(artifact.package_name, optimize=True)
                except (PipelineError, OSError) as e:
                    raise BuildError(
                        f"Optimizing {artifact.package_name} failed: {e}"
                    ) from e

        return [
            dataclasses.replace(artifact, wasm_path=str(contracts_dir / artifact.wasm_path))
            for artifact in self.artifacts
        ]

    def deploy_all(
        self, request: DeploymentRequest, artifacts: Sequence[ContractArtifact]
    ) -> List[DeployedContract]:
        """
        Deploy artifacts one at a time, in the given order.

        Raises:
            BuildError: If an artifact's wasm file is missing
            DeploymentError: If a deployment fails. Earlier deployments stay live.
        """
        logger.info("[3/4] Deploying contracts...")
        deployed: List[DeployedContract] = []

        for artifact in artifacts:
            wasm_path = Path(artifact.wasm_path)
            if not wasm_path.is_file():
                raise BuildError(
                    f"Built artifact for {artifact.package_name} not found at {wasm_path}"
                )

            logger.info("- Deploying %s...", artifact.package_name)
            try:
                contract_id = self.client.deploy(
                    wasm_path, request.network, request.admin_identity
                )
            except (PipelineError, OSError) as e:
                raise DeploymentError(
                    f"Deploying {artifact.package_name} failed: {e}"
                    + _live_contracts_note(deployed)
                ) from e

            if not contract_id:
                raise DeploymentError(
                    f"Deploying {artifact.package_name} returned no contract ID"
                    + _live_contracts_note(deployed)
                )
            if "\n" in contract_id or "\r" in contract_id:
                raise DeploymentError(
                    f"Deploying {artifact.package_name} returned a multi-line contract ID "
                    f"{contract_id!r}" + _live_contracts_note(deployed)
                )

            logger.info("  ID: %s", contract_id)
            deployed.append(
                DeployedContract(logical_name=artifact.logical_name, contract_id=contract_id)
            )

        return deployed

    def initialize(
        self,
        request: DeploymentRequest,
        admin: ResolvedIdentity,
        deployed: Sequence[DeployedContract],
    ) -> None:
        """
        Call initialize_admin on the inheritance contract.

        Raises:
            InitializationError: If the contract is missing or the call fails
        """
        logger.info("[4/4] Initializing inheritance-contract...")
        contract_id = _find_contract_id(deployed, INHERITANCE_CONTRACT_KEY)
        if contract_id is None:
            raise InitializationError(
                f"No {INHERITANCE_CONTRACT_KEY} among deployed contracts"
            )
        if not admin.address:
            raise InitializationError("Admin address is empty; refusing to initialize")

        try:
            self.client.invoke(
                contract_id,
                INITIALIZE_FUNCTION,
                {"admin": admin.address},
                request.network,
                request.admin_identity,
            )
        except (PipelineError, OSError) as e:
            raise InitializationError(
                f"{INITIALIZE_FUNCTION} on {contract_id} failed "
                f"(was the contract already initialized?): {e}"
            ) from e

        logger.info("  Initialized successfully.")

    def persist(self, deployed: Sequence[DeployedContract]) -> None:
        """
        Write deployed contract IDs to the state file.

        Raises:
            PersistenceError: If the file cannot be written. The message lists
                              the IDs so they can be recorded by hand.
        """
        logger.info("Saving contract IDs to %s...", self.state_path)
        values: Dict[str, str] = {c.logical_name: c.contract_id for c in deployed}
        try:
            upsert_state(self.state_path, values)
        except (OSError, UnicodeError) as e:
            pairs = "\n".join(f"{key}={value}" for key, value in values.items())
            raise PersistenceError(
                f"Contracts were deployed and initialized, but saving to {self.state_path} "
                f"failed: {e}. Check the --state-file path and permissions, then record "
                f"these IDs manually:\n{pairs}"
            ) from e


def _find_contract_id(deployed: Sequence[DeployedContract], logical_name: str) -> Optional[str]:
    for contract in deployed:
        if contract.logical_name == logical_name:
            return contract.contract_id
    return None


def _live_contracts_note(deployed: Sequence[DeployedContract]) -> str:
    if not deployed:
        return ""
    ids = ", ".join(f"{c.logical_name}={c.contract_id}" for c in deployed)
    return f". Already deployed in this run (still live): {ids}"
