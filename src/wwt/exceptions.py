"""wwt exceptions."""

from __future__ import annotations

from pathlib import Path


class WwtError(Exception):
    """Base exception for all wwt errors."""


class StorageError(WwtError):
    """Raised on backing-file failures."""

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class CorruptData(StorageError):
    """Raised when the store file exists but cannot be decoded into records."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.reason = reason
        message = "Store file is corrupt"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)


class IoFailure(StorageError):
    """Raised when the store file cannot be read or written."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.reason = reason
        message = "Cannot access store file"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)


class ConfigError(WwtError):
    """Raised on invalid configuration."""
