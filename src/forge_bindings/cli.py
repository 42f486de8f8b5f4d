"""Command line entry point for forge-bindings."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import load_config
from .constants import DEFAULT_CHAIN_ID, ENV_LOG_LEVEL
from .exceptions import BindingError, ContractSyncError
from .logging_utils import configure_logging, parse_log_level
from .sync import sync_bindings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forge-bindings",
        description="Sync deployed contract addresses and ABIs into TypeScript bindings.",
    )
    parser.add_argument(
        "chain_id",
        nargs="?",
        default=DEFAULT_CHAIN_ID,
        help=f"Chain ID of the deployment to export (default: {DEFAULT_CHAIN_ID})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a sync from the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        0 on success (including no contracts found), 1 on any failure
    """
    args = build_parser().parse_args(argv)
    configure_logging(parse_log_level(os.environ.get(ENV_LOG_LEVEL)))

    try:
        config = load_config(chain_id=args.chain_id)
        sync_bindings(config)
    except ContractSyncError as e:
        logger.error("Failed to process contract %s: %s", e.contract_name, e.__cause__ or e)
        return 1
    except (BindingError, ValueError) as e:
        logger.error("%s", e)
        return 1
    except Exception:
        logger.exception("Sync failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
