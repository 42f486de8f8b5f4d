"""Foundry broadcast file loading for forge-bindings library."""

import json
import logging
from pathlib import Path
from typing import Any, List

from .constants import CREATE_TRANSACTION_TYPE
from .exceptions import DeploymentRecordNotFoundError, MalformedRecordError
from .types import DeploymentRecord, TransactionEntry

logger = logging.getLogger(__name__)


def _parse_transaction(index: int, data: Any, record_path: Path) -> TransactionEntry:
    if not isinstance(data, dict):
        raise MalformedRecordError(
            f"Transaction #{index} in {record_path} is not an object"
        )
    for key in ("contractName", "contractAddress"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise MalformedRecordError(
                f"Transaction #{index} in {record_path} has non-string {key}: {value!r}"
            )
    return TransactionEntry(
        transaction_type=data.get("transactionType", ""),
        contract_name=data.get("contractName"),
        contract_address=data.get("contractAddress"),
    )


def load_deployment_record(record_path: Path, chain_id: str) -> DeploymentRecord:
    """
    Parse a Foundry broadcast run file.

    Args:
        record_path: Path to run-latest.json
        chain_id: Chain ID the file belongs to

    Returns:
        DeploymentRecord with every transaction in file order

    Raises:
        DeploymentRecordNotFoundError: If the file does not exist
        MalformedRecordError: If the file cannot be read, is not valid JSON,
                              lacks a transactions array, or has an entry
                              with a non-string name or address
    """
    if not record_path.exists():
        raise DeploymentRecordNotFoundError(
            f"Deployment broadcast not found at {record_path}. "
            "Run forge script to deploy the contracts first."
        )

    try:
        with open(record_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"Invalid JSON in {record_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedRecordError(f"Could not read {record_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("transactions"), list):
        raise MalformedRecordError(f"Missing 'transactions' array in {record_path}")

    transactions = [
        _parse_transaction(index, tx, record_path)
        for index, tx in enumerate(data["transactions"])
    ]

    commit = data.get("commit")
    if commit is not None and not isinstance(commit, str):
        commit = str(commit)

    return DeploymentRecord(chain_id=chain_id, transactions=transactions, commit=commit)


def created_contracts(record: DeploymentRecord) -> List[TransactionEntry]:
    """
    Select contract creation transactions, preserving file order.

    CREATE entries without a contract name are skipped with a warning; they
    cannot be turned into a binding.

    Args:
        record: Parsed deployment record

    Returns:
        CREATE transactions with a contract name and address

    Raises:
        MalformedRecordError: If a named CREATE entry has no contract address
    """
    result: List[TransactionEntry] = []
    for tx in record.transactions:
        if tx.transaction_type != CREATE_TRANSACTION_TYPE:
            continue

        if not tx.contract_name:
            logger.warning(
                "Skipping CREATE transaction without contract name (address %s)",
                tx.contract_address,
            )
            continue

        if not tx.contract_address:
            raise MalformedRecordError(
                f"CREATE transaction for {tx.contract_name} has no contract address"
            )

        result.append(tx)

    return result


def load_created_contracts(
    record_path: Path, chain_id: str
) -> tuple[DeploymentRecord, List[TransactionEntry]]:
    """
    Load a broadcast file and select its contract creations.

    Args:
        record_path: Path to run-latest.json
        chain_id: Chain ID the file belongs to

    Returns:
        Tuple of (record, created) where created lists the CREATE entries
    """
    record = load_deployment_record(record_path, chain_id)
    return record, created_contracts(record)
