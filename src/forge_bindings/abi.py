"""ABI lookup for forge-bindings library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .exceptions import AbiNotFoundError, InvalidAbiError, ToolchainError
from .paths import get_artifact_path
from .toolchain import Toolchain
from .types import AbiResolution, AbiSource

logger = logging.getLogger(__name__)


def _validate_abi(abi: Any, contract_name: str, source: str) -> List[Dict[str, Any]]:
    if not isinstance(abi, list):
        raise InvalidAbiError(
            f"Invalid ABI for {contract_name} from {source}: "
            f"expected a JSON array, got {type(abi).__name__}"
        )
    return abi


def read_artifact_abi(artifact_path: Path, contract_name: str) -> List[Dict[str, Any]]:
    """
    Read the ABI from a Foundry build artifact.

    Args:
        artifact_path: Path to out/<Name>.sol/<Name>.json
        contract_name: Contract name, for error messages

    Returns:
        The artifact's "abi" array, unmodified

    Raises:
        InvalidAbiError: If the file is not UTF-8 JSON or "abi" is not an array
        AbiNotFoundError: If the file cannot be opened
    """
    try:
        with open(artifact_path, encoding="utf-8") as f:
            artifact = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidAbiError(f"Invalid JSON in artifact {artifact_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidAbiError(f"Artifact {artifact_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise AbiNotFoundError(f"Could not read artifact {artifact_path}: {e}") from e

    abi = artifact.get("abi") if isinstance(artifact, dict) else None
    return _validate_abi(abi, contract_name, str(artifact_path))


def resolve_abi(contract_name: str, contract_root: Path, toolchain: Toolchain) -> AbiResolution:
    """
    Look up a contract's ABI.

    The build artifact under out/ is preferred. If it does not exist,
    `forge inspect <Name> abi` is tried instead. A failed inspect is reported
    as AbiSource.NOT_FOUND rather than raised.

    Args:
        contract_name: Contract name, e.g. "MovieRating"
        contract_root: Foundry project root
        toolchain: Tool provider used for the inspect fallback

    Returns:
        AbiResolution tagged with where the ABI came from

    Raises:
        InvalidAbiError: If an ABI was found but is not valid JSON or not an array
    """
    artifact_path = get_artifact_path(contract_root, contract_name)

    if artifact_path.exists():
        abi = read_artifact_abi(artifact_path, contract_name)
        return AbiResolution(
            contract_name=contract_name,
            source=AbiSource.ARTIFACT,
            abi=abi,
            artifact_path=artifact_path,
        )

    logger.info("Build artifact not found at %s, trying forge inspect", artifact_path)
    try:
        output = toolchain.inspect_abi(contract_name)
    except ToolchainError as e:
        return AbiResolution(
            contract_name=contract_name,
            source=AbiSource.NOT_FOUND,
            artifact_path=artifact_path,
            reason=str(e),
        )

    try:
        abi = json.loads(output)
    except json.JSONDecodeError as e:
        raise InvalidAbiError(
            f"forge inspect returned invalid JSON for {contract_name}: {e}"
        ) from e

    return AbiResolution(
        contract_name=contract_name,
        source=AbiSource.INSPECT,
        abi=_validate_abi(abi, contract_name, "forge inspect"),
    )


def require_abi(resolution: AbiResolution) -> List[Dict[str, Any]]:
    """
    Unwrap a resolution, treating NOT_FOUND as an error.

    Args:
        resolution: Result of resolve_abi()

    Returns:
        The resolved ABI

    Raises:
        AbiNotFoundError: If the ABI was not found
    """
    match resolution.source:
        case AbiSource.ARTIFACT | AbiSource.INSPECT:
            return resolution.abi  # type: ignore[return-value]
        case AbiSource.NOT_FOUND:
            raise AbiNotFoundError(
                f"No ABI for {resolution.contract_name}: artifact missing at "
                f"{resolution.artifact_path} and forge inspect failed ({resolution.reason})"
            )
        case _:
            # Unreachable but exhaustive
            raise AbiNotFoundError(f"No ABI for {resolution.contract_name}")
