"""Data types and dataclasses for forge-bindings library."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TransactionEntry:
    """One transaction from a Foundry broadcast file."""

    transaction_type: str  # e.g., "CREATE", "CALL"
    contract_name: Optional[str]
    contract_address: Optional[str]


@dataclass(frozen=True)
class DeploymentRecord:
    """Parsed run-latest.json for a single chain."""

    chain_id: str
    transactions: List[TransactionEntry] = field(default_factory=list)
    commit: Optional[str] = None


class AbiSource(Enum):
    """
    Where an ABI came from.

    NOT_FOUND is a regular outcome; the caller decides whether it is fatal.
    """

    ARTIFACT = "artifact"
    INSPECT = "inspect"
    NOT_FOUND = "not-found"


@dataclass(frozen=True)
class AbiResolution:
    """Result of looking up a contract's ABI."""

    contract_name: str
    source: AbiSource
    abi: Optional[List[Dict[str, Any]]] = None
    artifact_path: Optional[Path] = None
    reason: Optional[str] = None  # Why the lookup failed (NOT_FOUND only)

    @property
    def found(self) -> bool:
        return self.source is not AbiSource.NOT_FOUND


@dataclass(frozen=True)
class BindingArtifact:
    """Everything needed to render one contract's binding files."""

    contract_name: str
    address: str  # Checksummed if cast was available, raw otherwise
    abi: List[Dict[str, Any]]
    constant_prefix: str  # e.g., "MOVIE_RATING"
    file_stem: str  # e.g., "movieRating"


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a full sync run."""

    chain_id: str
    written: List[Path] = field(default_factory=list)
    contracts: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.contracts)
