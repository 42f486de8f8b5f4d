"""Shared pytest fixtures for forge-bindings tests."""

import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from forge_bindings.config import SyncConfig, load_config
from forge_bindings.exceptions import ToolchainError

TOKEN_A_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TOKEN_B_ADDRESS = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"


class StubToolchain:
    """Toolchain returning canned answers instead of running cast/forge."""

    def __init__(
        self,
        checksums: Optional[Dict[str, str]] = None,
        abis: Optional[Dict[str, str]] = None,
        checksum_error: Optional[str] = None,
    ):
        self.checksums = checksums or {}
        self.abis = abis or {}
        self.checksum_error = checksum_error
        self.checksum_calls: List[str] = []
        self.inspect_calls: List[str] = []

    def to_checksum_address(self, address: str) -> str:
        self.checksum_calls.append(address)
        if self.checksum_error is not None:
            raise ToolchainError(self.checksum_error)
        if address.lower() not in self.checksums:
            raise ToolchainError(f"no canned checksum for {address}")
        return self.checksums[address.lower()]

    def inspect_abi(self, contract_name: str) -> str:
        self.inspect_calls.append(contract_name)
        if contract_name not in self.abis:
            raise ToolchainError(f"forge inspect {contract_name} abi exited with status 1")
        return self.abis[contract_name]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def contract_root(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample Foundry project into a temporary directory."""
    root = tmp_path / "contracts"
    shutil.copytree(fixtures_dir / "project", root)
    return root


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Return a not-yet-created binding output directory."""
    return tmp_path / "dapp" / "src" / "app" / "contracts"


@pytest.fixture
def sync_config(contract_root: Path, output_root: Path) -> SyncConfig:
    """Build a config pointing at the sample project."""
    return load_config(
        chain_id="31337", contract_root=contract_root, output_root=output_root, env={}
    )


@pytest.fixture
def stub_toolchain() -> StubToolchain:
    """Return a toolchain that checksums the sample addresses."""
    return StubToolchain(
        checksums={
            TOKEN_A_ADDRESS.lower(): TOKEN_A_ADDRESS,
            TOKEN_B_ADDRESS.lower(): TOKEN_B_ADDRESS,
        }
    )


@pytest.fixture
def generated_at() -> datetime:
    """Return a fixed generation time."""
    return datetime(2024, 6, 10, 8, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def make_toolchain():
    """Return the StubToolchain class for tests that need custom answers."""
    return StubToolchain
