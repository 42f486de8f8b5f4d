"""TypeScript binding generation for forge-bindings library."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import UNKNOWN_COMMIT
from .exceptions import BindingWriteError
from .naming import to_camel_case, to_constant_case
from .paths import get_binding_paths
from .types import BindingArtifact

logger = logging.getLogger(__name__)

BINDING_TEMPLATE = """\
// Auto-generated from contract deployment
// Generated at: {generated_at}
// Chain ID: {chain_id}
// Commit: {commit}
// DO NOT EDIT MANUALLY - changes will be overwritten

export const {prefix}_ADDRESS = '{address}' as const;

export const {prefix}_ABI = {abi} as const;

export const {prefix}_CONTRACT = {{
  address: {prefix}_ADDRESS,
  abi: {prefix}_ABI,
}} as const;
"""


def format_timestamp(moment: datetime) -> str:
    """
    Format a datetime as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Timezone-aware datetime

    Returns:
        String like "2024-01-31T12:00:00.000Z"
    """
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def serialize_abi(abi: List[Dict[str, Any]]) -> str:
    """
    Serialize an ABI as two-space indented JSON.

    Entry order and key order are kept exactly as given.

    Args:
        abi: ABI array

    Returns:
        JSON text without trailing newline
    """
    return json.dumps(abi, indent=2, ensure_ascii=False)


def build_artifact(contract_name: str, address: str, abi: List[Dict[str, Any]]) -> BindingArtifact:
    """
    Derive naming tokens for a contract.

    Args:
        contract_name: Contract name, e.g. "MovieRating"
        address: Checksummed (or raw) address
        abi: Resolved ABI

    Returns:
        BindingArtifact ready to render
    """
    return BindingArtifact(
        contract_name=contract_name,
        address=address,
        abi=abi,
        constant_prefix=to_constant_case(contract_name),
        file_stem=to_camel_case(contract_name),
    )


def render_binding(
    artifact: BindingArtifact,
    chain_id: str,
    commit: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Render the TypeScript binding module for a contract.

    Args:
        artifact: Contract to render
        chain_id: Chain ID the contract is deployed on
        commit: Commit hash from the broadcast file (defaults to "unknown")
        generated_at: Generation time (defaults to now)

    Returns:
        TypeScript source exporting <PREFIX>_ADDRESS, <PREFIX>_ABI and
        <PREFIX>_CONTRACT as const
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    return BINDING_TEMPLATE.format(
        generated_at=format_timestamp(generated_at),
        chain_id=chain_id,
        commit=commit or UNKNOWN_COMMIT,
        prefix=artifact.constant_prefix,
        address=artifact.address,
        abi=serialize_abi(artifact.abi),
    )


def write_binding(
    artifact: BindingArtifact,
    output_root: Path,
    chain_id: str,
    commit: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> tuple[Path, Path]:
    """
    Write the TypeScript binding and raw ABI JSON for a contract.

    Existing files are overwritten. output_root and output_root/abi are
    created if missing.

    Args:
        artifact: Contract to write
        output_root: Binding output directory
        chain_id: Chain ID the contract is deployed on
        commit: Commit hash from the broadcast file
        generated_at: Generation time (defaults to now)

    Returns:
        Tuple of (binding_path, abi_path)

    Raises:
        BindingWriteError: If a directory or file cannot be written
    """
    binding_path, abi_path = get_binding_paths(
        output_root, artifact.contract_name, artifact.file_stem
    )
    content = render_binding(artifact, chain_id, commit, generated_at)

    try:
        binding_path.parent.mkdir(parents=True, exist_ok=True)
        abi_path.parent.mkdir(parents=True, exist_ok=True)
        binding_path.write_text(content, encoding="utf-8")
        abi_path.write_text(serialize_abi(artifact.abi), encoding="utf-8")
    except OSError as e:
        raise BindingWriteError(
            f"Failed to write bindings for {artifact.contract_name}: {e}"
        ) from e

    logger.debug("Wrote %s and %s", binding_path, abi_path)
    return (binding_path, abi_path)
