"""
forge-bindings: sync Foundry deployment addresses and ABIs into TypeScript bindings
"""

from importlib.metadata import PackageNotFoundError, version

from .config import SyncConfig, load_config
from .exceptions import (
    AbiNotFoundError,
    BindingError,
    BindingWriteError,
    ContractSyncError,
    DeploymentRecordNotFoundError,
    InvalidAbiError,
    MalformedRecordError,
    ToolchainError,
)
from .sync import sync_bindings
from .toolchain import FoundryToolchain, Toolchain
from .types import (
    AbiResolution,
    AbiSource,
    BindingArtifact,
    DeploymentRecord,
    SyncResult,
    TransactionEntry,
)

try:
    __version__ = version("forge-bindings")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "sync_bindings",
    "load_config",
    "SyncConfig",
    "Toolchain",
    "FoundryToolchain",
    "AbiResolution",
    "AbiSource",
    "BindingArtifact",
    "DeploymentRecord",
    "SyncResult",
    "TransactionEntry",
    "BindingError",
    "DeploymentRecordNotFoundError",
    "MalformedRecordError",
    "ToolchainError",
    "AbiNotFoundError",
    "InvalidAbiError",
    "BindingWriteError",
    "ContractSyncError",
]
