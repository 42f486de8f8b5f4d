"""External Foundry tool invocation for forge-bindings library."""

import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Union

from .exceptions import ToolchainError


class Toolchain(Protocol):
    """External tools the sync pipeline depends on."""

    def to_checksum_address(self, address: str) -> str:
        """Return the EIP-55 checksummed form of an address."""
        ...

    def inspect_abi(self, contract_name: str) -> str:
        """Return the contract's ABI as a JSON string."""
        ...


class FoundryToolchain:
    """Toolchain backed by the cast and forge binaries."""

    def __init__(
        self,
        contract_root: Union[Path, str],
        cast_bin: str = "cast",
        forge_bin: str = "forge",
    ):
        """
        Initialize the toolchain.

        Args:
            contract_root: Foundry project root, used as cwd for forge
            cast_bin: cast executable name or path
            forge_bin: forge executable name or path
        """
        self.contract_root = Path(contract_root)
        self.cast_bin = cast_bin
        self.forge_bin = forge_bin

    def _run(self, args: List[str], cwd: Optional[Path] = None) -> str:
        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise ToolchainError(f"{args[0]} not found; is Foundry installed?") from e
        except OSError as e:
            raise ToolchainError(f"{args[0]} could not be run: {e}") from e
        except UnicodeDecodeError as e:
            raise ToolchainError(f"{' '.join(args)} produced undecodable output: {e}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise ToolchainError(
                f"{' '.join(args)} exited with status {e.returncode}: {stderr}"
            ) from e

        output = result.stdout.strip()
        if not output:
            raise ToolchainError(f"{' '.join(args)} produced no output")
        return output

    def to_checksum_address(self, address: str) -> str:
        """
        Checksum an address with `cast to-check-sum-address`.

        Raises:
            ToolchainError: If cast cannot be run, fails, or prints nothing
        """
        return self._run([self.cast_bin, "to-check-sum-address", address])

    def inspect_abi(self, contract_name: str) -> str:
        """
        Print a contract's ABI with `forge inspect <Name> abi`.

        Runs from the project root; stderr (compiler progress) is discarded.

        Raises:
            ToolchainError: If forge cannot be run, fails, or prints nothing
        """
        return self._run(
            [self.forge_bin, "inspect", contract_name, "abi"], cwd=self.contract_root
        )
