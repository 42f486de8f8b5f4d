"""Path management utilities for forge-bindings library."""

from pathlib import Path
from typing import Union

from .constants import (
    ABI_DIR_NAME,
    ABI_EXTENSION,
    ARTIFACTS_DIR_NAME,
    BINDING_EXTENSION,
    BROADCAST_DIR_NAME,
    RUN_FILE_NAME,
)


def get_default_contract_root() -> Path:
    """
    Get default Foundry project root.

    Returns:
        The current working directory
    """
    return Path.cwd()


def get_default_output_root(contract_root: Union[Path, str]) -> Path:
    """
    Get default binding output directory for a Foundry project.

    The frontend lives next to the contracts project:
    <contract_root>/../dapp/src/app/contracts

    Args:
        contract_root: Foundry project root

    Returns:
        Absolute path to the output directory
    """
    return (Path(contract_root).absolute().parent / "dapp" / "src" / "app" / "contracts").resolve()


def get_record_path(contract_root: Union[Path, str], deploy_script: str, chain_id: str) -> Path:
    """
    Get path to the broadcast run file for a chain.

    Args:
        contract_root: Foundry project root
        deploy_script: Deployment script file name, e.g. "Deploy.s.sol"
        chain_id: Chain ID as a decimal string

    Returns:
        <contract_root>/broadcast/<deploy_script>/<chain_id>/run-latest.json
    """
    return Path(contract_root) / BROADCAST_DIR_NAME / deploy_script / chain_id / RUN_FILE_NAME


def get_artifact_path(contract_root: Union[Path, str], contract_name: str) -> Path:
    """
    Get path to the compiled artifact for a contract.

    Args:
        contract_root: Foundry project root
        contract_name: Contract name, e.g. "MovieRating"

    Returns:
        <contract_root>/out/<Name>.sol/<Name>.json
    """
    artifact_dir = Path(contract_root) / ARTIFACTS_DIR_NAME / f"{contract_name}.sol"
    return artifact_dir / f"{contract_name}.json"


def get_binding_paths(
    output_root: Union[Path, str], contract_name: str, file_stem: str
) -> tuple[Path, Path]:
    """
    Get output file paths for a contract.

    Args:
        output_root: Binding output directory
        contract_name: Contract name, used for the raw ABI file
        file_stem: Camel-case stem, used for the TypeScript file

    Returns:
        Tuple of (binding_path, abi_path)
    """
    output_root = Path(output_root)
    binding_path = output_root / f"{file_stem}{BINDING_EXTENSION}"
    abi_path = output_root / ABI_DIR_NAME / f"{contract_name}{ABI_EXTENSION}"
    return (binding_path, abi_path)
