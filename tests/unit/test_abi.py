"""Unit tests for ABI lookup."""

import json
from pathlib import Path

import pytest

from forge_bindings.abi import read_artifact_abi, require_abi, resolve_abi
from forge_bindings.exceptions import AbiNotFoundError, InvalidAbiError
from forge_bindings.types import AbiResolution, AbiSource

INSPECT_ABI = [
    {"type": "function", "name": "rate", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
    {"type": "event", "name": "Rated", "inputs": [], "anonymous": False},
]


class TestReadArtifactAbi:
    """Test the read_artifact_abi function."""

    def test_reads_abi_verbatim(self, contract_root: Path):
        """Test that the ABI is returned in file order, unmodified."""
        artifact_path = contract_root / "out" / "TokenA.sol" / "TokenA.json"
        with open(artifact_path) as f:
            expected = json.load(f)["abi"]

        abi = read_artifact_abi(artifact_path, "TokenA")

        assert abi == expected
        assert [entry["type"] for entry in abi] == ["constructor", "function", "event", "error"]
        assert list(abi[1].keys()) == ["type", "name", "inputs", "outputs", "stateMutability"]

    def test_invalid_json_raises(self, tmp_path: Path):
        """Test that a corrupted artifact raises InvalidAbiError."""
        path = tmp_path / "Broken.json"
        path.write_text("{ not json")

        with pytest.raises(InvalidAbiError, match="Invalid JSON"):
            read_artifact_abi(path, "Broken")

    def test_invalid_utf8_raises(self, tmp_path: Path):
        """Test that an artifact that is not UTF-8 raises InvalidAbiError naming the file."""
        path = tmp_path / "Bad.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(InvalidAbiError, match="Bad.json"):
            read_artifact_abi(path, "Bad")

    def test_unreadable_artifact_raises(self, tmp_path: Path):
        """Test that a directory in place of the artifact raises AbiNotFoundError."""
        path = tmp_path / "Dir.json"
        path.mkdir()

        with pytest.raises(AbiNotFoundError, match="Could not read artifact"):
            read_artifact_abi(path, "Dir")

    @pytest.mark.parametrize(
        "data", [{"bytecode": {}}, {"abi": {"type": "function"}}, {"abi": "[]"}, [{"type": "function"}]]
    )
    def test_non_array_abi_raises(self, tmp_path: Path, data):
        """Test that artifacts without an ABI array are rejected."""
        path = tmp_path / "Bad.json"
        path.write_text(json.dumps(data))

        with pytest.raises(InvalidAbiError, match="expected a JSON array"):
            read_artifact_abi(path, "Bad")


class TestResolveAbi:
    """Test the resolve_abi function."""

    def test_prefers_build_artifact(self, contract_root: Path, make_toolchain):
        """Test that an existing artifact is used without calling forge."""
        toolchain = make_toolchain(abis={"TokenA": "[]"})

        resolution = resolve_abi("TokenA", contract_root, toolchain)

        assert resolution.source is AbiSource.ARTIFACT
        assert resolution.found
        assert resolution.artifact_path == contract_root / "out" / "TokenA.sol" / "TokenA.json"
        assert len(resolution.abi) == 4
        assert toolchain.inspect_calls == []

    def test_falls_back_to_forge_inspect(self, contract_root: Path, make_toolchain):
        """Test that forge inspect is used when the artifact is missing."""
        toolchain = make_toolchain(abis={"MovieRating": json.dumps(INSPECT_ABI)})

        resolution = resolve_abi("MovieRating", contract_root, toolchain)

        assert resolution.source is AbiSource.INSPECT
        assert resolution.abi == INSPECT_ABI
        assert toolchain.inspect_calls == ["MovieRating"]

    def test_failed_inspect_is_not_found(self, contract_root: Path, make_toolchain):
        """Test that a failing fallback is reported, not raised."""
        toolchain = make_toolchain()

        resolution = resolve_abi("Missing", contract_root, toolchain)

        assert resolution.source is AbiSource.NOT_FOUND
        assert not resolution.found
        assert resolution.abi is None
        assert "exited with status 1" in resolution.reason

    def test_inspect_invalid_json_raises(self, contract_root: Path, make_toolchain):
        """Test that non-JSON inspect output raises InvalidAbiError."""
        toolchain = make_toolchain(abis={"Noisy": "Compiling 3 files...\n[]"})

        with pytest.raises(InvalidAbiError, match="invalid JSON"):
            resolve_abi("Noisy", contract_root, toolchain)

    def test_inspect_non_array_raises(self, contract_root: Path, make_toolchain):
        """Test that an inspect result that is not an array is rejected."""
        toolchain = make_toolchain(abis={"Odd": '{"type": "function"}'})

        with pytest.raises(InvalidAbiError, match="forge inspect"):
            resolve_abi("Odd", contract_root, toolchain)


class TestRequireAbi:
    """Test the require_abi function."""

    def test_returns_found_abi(self):
        """Test that found ABIs are returned."""
        resolution = AbiResolution("Token", AbiSource.INSPECT, abi=INSPECT_ABI)
        assert require_abi(resolution) is INSPECT_ABI

    def test_empty_abi_is_valid(self):
        """Test that an empty ABI array counts as found."""
        resolution = AbiResolution("Empty", AbiSource.ARTIFACT, abi=[])
        assert require_abi(resolution) == []

    def test_not_found_raises(self, tmp_path: Path):
        """Test that NOT_FOUND raises AbiNotFoundError with context."""
        resolution = AbiResolution(
            "Missing",
            AbiSource.NOT_FOUND,
            artifact_path=tmp_path / "out" / "Missing.sol" / "Missing.json",
            reason="forge not found",
        )

        with pytest.raises(AbiNotFoundError, match="Missing.*forge not found"):
            require_abi(resolution)

    def test_not_found_is_lookup_error(self):
        """Test that AbiNotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            require_abi(AbiResolution("Missing", AbiSource.NOT_FOUND))
