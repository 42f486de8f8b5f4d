"""Main API for forge-bindings library."""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .abi import require_abi, resolve_abi
from .checksum import canonicalize_address
from .config import SyncConfig
from .emitter import build_artifact, write_binding
from .exceptions import BindingError, ContractSyncError
from .records import load_created_contracts
from .toolchain import FoundryToolchain, Toolchain
from .types import AbiSource, BindingArtifact, SyncResult

logger = logging.getLogger(__name__)


def _display_path(path: Path) -> str:
    try:
        return os.path.relpath(path)
    except ValueError:
        # Different drive on Windows
        return str(path)


def prepare_binding(
    contract_name: str,
    raw_address: str,
    config: SyncConfig,
    toolchain: Toolchain,
) -> BindingArtifact:
    """
    Checksum the address and resolve the ABI for one contract.

    Args:
        contract_name: Contract name from the broadcast file
        raw_address: Contract address from the broadcast file
        config: Run configuration
        toolchain: Tool provider

    Returns:
        BindingArtifact ready to write

    Raises:
        ContractSyncError: If the ABI cannot be resolved
    """
    address = canonicalize_address(raw_address, toolchain)
    logger.info("Processing contract %s at %s", contract_name, address)

    try:
        resolution = resolve_abi(contract_name, config.contract_root, toolchain)
        abi = require_abi(resolution)
    except BindingError as e:
        raise ContractSyncError(contract_name, str(e)) from e

    match resolution.source:
        case AbiSource.ARTIFACT:
            logger.info("  ABI read from build artifact %s", _display_path(resolution.artifact_path))
        case AbiSource.INSPECT:
            logger.info("  ABI read from forge inspect")

    return build_artifact(contract_name, address, abi)


def sync_bindings(
    config: SyncConfig,
    toolchain: Optional[Toolchain] = None,
    generated_at: Optional[datetime] = None,
) -> SyncResult:
    """
    Generate TypeScript bindings for every contract created in a deployment.

    All contracts are prepared before any file is written, so an ABI error
    leaves the output directory untouched. A write error aborts immediately;
    files already written for earlier contracts stay on disk.

    Args:
        config: Run configuration
        toolchain: Tool provider (defaults to FoundryToolchain for the project)
        generated_at: Timestamp for file headers (defaults to now)

    Returns:
        SyncResult listing processed contracts and written files

    Raises:
        DeploymentRecordNotFoundError: If the broadcast file does not exist
        MalformedRecordError: If the broadcast file is invalid
        ContractSyncError: If any contract fails
    """
    if toolchain is None:
        toolchain = FoundryToolchain(config.contract_root)
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    logger.info("Syncing contract ABIs to frontend (chain ID %s)", config.chain_id)

    record, created = load_created_contracts(config.record_path, config.chain_id)
    result = SyncResult(chain_id=config.chain_id)

    if not created:
        logger.warning("No deployed contracts found in %s", _display_path(config.record_path))
        return result

    logger.info("Found %d deployed contract(s)", len(created))

    artifacts: List[BindingArtifact] = [
        prepare_binding(tx.contract_name, tx.contract_address, config, toolchain)
        for tx in created
    ]

    for artifact in artifacts:
        try:
            binding_path, abi_path = write_binding(
                artifact, config.output_root, config.chain_id, record.commit, generated_at
            )
        except BindingError as e:
            raise ContractSyncError(artifact.contract_name, str(e)) from e

        logger.info("  Generated %s", _display_path(binding_path))
        logger.info("  ABI JSON %s", _display_path(abi_path))
        result.written.extend([binding_path, abi_path])
        result.contracts.append(artifact.contract_name)

    logger.info(
        "Sync complete: %d contract(s) written to %s",
        result.count,
        _display_path(config.output_root),
    )
    return result
