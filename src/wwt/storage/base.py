"""Record store protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from wwt.core.types import Record


@runtime_checkable
class RecordStore(Protocol):
    """Minimal interface the client needs from a store."""

    def insert(self, command: str, description: str) -> bool:
        """Add or replace a record. Return ``True`` if one was replaced."""
        ...

    def remove(self, command: str) -> bool:
        """Delete by exact command. Return ``True`` if found."""
        ...

    def get(self, command: str) -> Record | None:
        """Fetch a single record by command."""
        ...

    def records(self) -> tuple[Record, ...]:
        """Snapshot of all records in insertion order."""
        ...

    def save(self) -> None:
        """Persist the current record set."""
        ...
