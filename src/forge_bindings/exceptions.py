"""Custom exception classes for forge-bindings library."""


class BindingError(Exception):
    """Base exception for binding generation errors."""

    pass


class DeploymentRecordNotFoundError(BindingError, FileNotFoundError):
    """Raised when the broadcast run file for a chain is not found."""

    pass


class MalformedRecordError(BindingError, ValueError):
    """Raised when the broadcast run file cannot be parsed or has the wrong shape."""

    pass


class ToolchainError(BindingError, RuntimeError):
    """Raised when an external Foundry tool is missing or fails."""

    pass


class AbiNotFoundError(BindingError, LookupError):
    """Raised when neither the build artifact nor forge inspect yields an ABI."""

    pass


class InvalidAbiError(BindingError, ValueError):
    """Raised when a resolved ABI is not a JSON array."""

    pass


class BindingWriteError(BindingError, OSError):
    """Raised when a binding file or its directory cannot be written."""

    pass


class ContractSyncError(BindingError):
    """Raised when a single contract fails; aborts the whole run."""

    def __init__(self, contract_name: str, message: str):
        super().__init__(f"{contract_name}: {message}")
        self.contract_name = contract_name
