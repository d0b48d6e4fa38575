"""Custom exceptions for SnapKV."""

from typing import Any, Dict, Optional


class SnapKVError(Exception):
    """Base exception for all SnapKV errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(SnapKVError):
    """Raised when there's a configuration issue."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ValidationError(SnapKVError):
    """Raised when a caller passes arguments the store cannot accept."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class StoreError(SnapKVError):
    """Raised when a key lookup cannot be satisfied."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        details = {"key": key} if key is not None else {}
        super().__init__(message, "STORE_ERROR", details)
        self.key = key


class KeyNotFoundError(StoreError):
    """Raised when a requested key is not present."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key not found: {key}", key)
        self.error_code = "KEY_NOT_FOUND"


class KeyExpiredError(StoreError):
    """Raised when a requested key was present but its TTL had elapsed.

    The key has already been evicted by the time this is raised, so a
    second lookup reports ``KeyNotFoundError``.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"Key expired: {key}", key)
        self.error_code = "KEY_EXPIRED"


class SnapshotNotFoundError(SnapKVError):
    """Raised when a snapshot id is unknown."""

    def __init__(self, snapshot_id: int) -> None:
        super().__init__(
            f"Snapshot not found: {snapshot_id}",
            "SNAPSHOT_NOT_FOUND",
            {"snapshot_id": snapshot_id},
        )
        self.snapshot_id = snapshot_id


class PersistenceError(SnapKVError):
    """Raised when saving or loading the store document fails."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: str = "PERSISTENCE_ERROR",
    ) -> None:
        details = {"path": path} if path else {}
        super().__init__(message, error_code, details)
        self.path = path


class PersistenceIOError(PersistenceError):
    """Raised when the document file cannot be opened, read or written."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message, path, "PERSISTENCE_IO_ERROR")


class SerializationError(PersistenceError):
    """Raised when the in-memory state cannot be encoded."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message, path, "SERIALIZATION_ERROR")


class DocumentFormatError(PersistenceError):
    """Raised when a stored document is not valid JSON or has the wrong shape."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message, path, "DOCUMENT_FORMAT_ERROR")
