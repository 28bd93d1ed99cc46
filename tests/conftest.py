"""Shared pytest fixtures for inheritx-deploy tests."""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import pytest

from inheritx_deploy.constants import CONTRACT_ARTIFACTS
from inheritx_deploy.exceptions import ClientCommandError
from inheritx_deploy.networks import resolve_network_profile
from inheritx_deploy.types import DeploymentRequest, NetworkProfile


class FakeClient:
    """
    NetworkClient test double that records calls instead of spawning processes.

    Set ``fail_on`` to an operation name ("resolve_address", "fund", "build",
    "optimize:<package>", "deploy:<wasm file name>", "invoke") to make that
    call raise ClientCommandError.
    """

    def __init__(
        self,
        address: str = "GADMIN7XK2EXAMPLEADDRESS\n",
        contract_ids: Optional[Dict[str, str]] = None,
        fail_on: Tuple[str, ...] = (),
    ):
        self.address = address
        self.contract_ids = contract_ids or {
            "example_contract.wasm": "CAEXAMPLE1",
            "inheritance_contract.wasm": "CAINHERIT1",
        }
        self.fail_on = set(fail_on)
        self.calls: List[Tuple[Any, ...]] = []
        self.build_cwds: List[Path] = []

    def _maybe_fail(self, key: str) -> None:
        if key in self.fail_on:
            raise ClientCommandError(f"simulated failure: {key}", command=[key], returncode=1)

    def resolve_address(self, identity: str) -> str:
        self.calls.append(("resolve_address", identity))
        self._maybe_fail("resolve_address")
        return self.address

    def fund(self, identity: str, network: str) -> None:
        self.calls.append(("fund", identity, network))
        self._maybe_fail("fund")

    def build(self, package: Optional[str] = None, optimize: bool = False) -> None:
        self.calls.append(("build", package, optimize))
        self.build_cwds.append(Path.cwd())
        self._maybe_fail(f"optimize:{package}" if optimize else "build")

    def deploy(self, wasm_path: Union[Path, str], profile: NetworkProfile, identity: str) -> str:
        name = Path(wasm_path).name
        self.calls.append(("deploy", name, profile.name.value, identity))
        self._maybe_fail(f"deploy:{name}")
        return self.contract_ids[name]

    def invoke(
        self,
        contract_id: str,
        function: str,
        args: Mapping[str, str],
        profile: NetworkProfile,
        identity: str,
    ) -> str:
        self.calls.append(("invoke", contract_id, function, dict(args), identity))
        self._maybe_fail("invoke")
        return ""

    def operations(self) -> List[str]:
        """Return call names in order."""
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project root with a contracts/ directory holding built wasm files."""
    root = tmp_path / "project"
    contracts = root / "contracts"
    for entry in CONTRACT_ARTIFACTS:
        wasm = contracts / entry["wasm_path"]
        wasm.parent.mkdir(parents=True, exist_ok=True)
        wasm.write_bytes(b"\x00asm")
    return root


@pytest.fixture
def testnet_request() -> DeploymentRequest:
    return DeploymentRequest(network=resolve_network_profile("testnet"), admin_identity="alice")


@pytest.fixture
def mainnet_request() -> DeploymentRequest:
    return DeploymentRequest(network=resolve_network_profile("mainnet"), admin_identity="alice")


@pytest.fixture
def make_client():
    """Return the FakeClient class so tests can configure failures."""
    return FakeClient
