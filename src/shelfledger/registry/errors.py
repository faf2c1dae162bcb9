# ABOUTME: Error taxonomy for registry operations.
# ABOUTME: Every error names the operation and key it failed on so hosts can log or display it.


class RegistryError(Exception):
    """Base class for failures raised by LibraryRegistry operations."""

    def __init__(self, operation: str, key: str | None, detail: str) -> None:
        self.operation = operation
        self.key = key
        self.detail = detail
        target = f" {key!r}" if key is not None else ""
        super().__init__(f"{operation}{target}: {detail}")


class AlreadyExistsError(RegistryError):
    """Raised by create when a record with the id is already stored."""


class NotFoundError(RegistryError):
    """Raised when an operation needs a record that is not stored."""


class SerializationError(RegistryError):
    """Raised when a record cannot be encoded for storage."""


class DeserializationError(RegistryError):
    """Raised when stored bytes cannot be decoded into a record."""


class StoreReadError(RegistryError):
    """Raised when the world state fails to read a key."""


class StoreWriteError(RegistryError):
    """Raised when the world state fails to write or delete a key."""


class StoreScanError(RegistryError):
    """Raised when the world state fails during a range scan."""
