"""Address checksumming for forge-bindings library."""

import logging
import re

from .exceptions import ToolchainError
from .toolchain import Toolchain

logger = logging.getLogger(__name__)

_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")


def canonicalize_address(address: str, toolchain: Toolchain) -> str:
    """
    Convert an address to EIP-55 checksum format.

    Checksumming is cosmetic, so a toolchain failure never stops the run:
    the raw address is returned and a warning is logged. Not cached; called
    once per contract.

    Args:
        address: Hex address as recorded in the broadcast file
        toolchain: Tool provider used for checksumming

    Returns:
        Checksummed address, or the input unchanged if checksumming failed
    """
    try:
        checksummed = toolchain.to_checksum_address(address)
    except ToolchainError as e:
        logger.warning("Could not checksum address %s: %s", address, e)
        return address

    if not _ADDRESS.match(checksummed):
        logger.warning(
            "Could not checksum address %s: unexpected output %r", address, checksummed
        )
        return address

    return checksummed
