"""Run configuration for forge-bindings library."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from .constants import (
    ABI_DIR_NAME,
    ARTIFACTS_DIR_NAME,
    DEFAULT_CHAIN_ID,
    DEFAULT_DEPLOY_SCRIPT,
    ENV_CONTRACT_ROOT,
    ENV_DEPLOY_SCRIPT,
    ENV_OUTPUT_DIR,
)
from .paths import get_default_contract_root, get_default_output_root, get_record_path


@dataclass(frozen=True)
class SyncConfig:
    """Paths and chain selection for one sync run."""

    chain_id: str
    contract_root: Path
    output_root: Path
    deploy_script: str = DEFAULT_DEPLOY_SCRIPT

    @property
    def record_path(self) -> Path:
        return get_record_path(self.contract_root, self.deploy_script, self.chain_id)

    @property
    def artifacts_root(self) -> Path:
        return self.contract_root / ARTIFACTS_DIR_NAME

    @property
    def abi_output_root(self) -> Path:
        return self.output_root / ABI_DIR_NAME


def validate_chain_id(chain_id: str) -> str:
    """
    Check that a chain ID is a decimal string.

    Args:
        chain_id: Chain ID as given on the command line

    Returns:
        The chain ID, stripped of surrounding whitespace

    Raises:
        ValueError: If the chain ID is empty or not numeric
    """
    chain_id = chain_id.strip()
    if not chain_id.isdigit():
        raise ValueError(f"Invalid chain ID '{chain_id}': expected a decimal number")
    return chain_id


def load_config(
    chain_id: Optional[str] = None,
    contract_root: Optional[Union[Path, str]] = None,
    output_root: Optional[Union[Path, str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> SyncConfig:
    """
    Build the run configuration.

    Explicit arguments take precedence over environment variables, which take
    precedence over defaults.

    Args:
        chain_id: Chain ID (defaults to 31337)
        contract_root: Foundry project root
                       (defaults to $FORGE_BINDINGS_CONTRACT_ROOT, then cwd)
        output_root: Binding output directory
                     (defaults to $FORGE_BINDINGS_OUTPUT_DIR,
                     then <contract_root>/../dapp/src/app/contracts)
        env: Environment mapping (defaults to os.environ)

    Returns:
        SyncConfig with absolute paths

    Raises:
        ValueError: If chain_id is not a decimal number
    """
    if env is None:
        env = os.environ

    if chain_id is None:
        chain_id = DEFAULT_CHAIN_ID
    chain_id = validate_chain_id(chain_id)

    if contract_root is None:
        contract_root = env.get(ENV_CONTRACT_ROOT) or get_default_contract_root()
    contract_root_path = Path(contract_root).absolute()

    if output_root is None:
        output_root = env.get(ENV_OUTPUT_DIR) or get_default_output_root(contract_root_path)
    output_root_path = Path(output_root).absolute()

    deploy_script = env.get(ENV_DEPLOY_SCRIPT) or DEFAULT_DEPLOY_SCRIPT

    return SyncConfig(
        chain_id=chain_id,
        contract_root=contract_root_path,
        output_root=output_root_path,
        deploy_script=deploy_script,
    )
