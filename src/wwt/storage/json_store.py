"""JSON file storage backend."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter

from wwt.core.types import Record
from wwt.exceptions import CorruptData, IoFailure

log = logging.getLogger(__name__)

_FILE_SHAPE = TypeAdapter(dict[str, str])


# ------------------------------------------------------------------
# Codec
# ------------------------------------------------------------------

def encode_records(records: Iterable[Record]) -> str:
    """Serialize *records* as a JSON object of command -> description."""
    payload = {r.command: r.description for r in records}
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def decode_records(text: str) -> list[Record]:
    """Parse the output of :func:`encode_records`.

    Blank input decodes to no records. Raises ``ValueError`` (pydantic's
    ``ValidationError`` included) when *text* is not a JSON object of
    non-empty string keys and string values.
    """
    if not text.strip():
        return []
    mapping = _FILE_SHAPE.validate_json(text)
    return [Record(command=k, description=v) for k, v in mapping.items()]


# ------------------------------------------------------------------
# Store
# ------------------------------------------------------------------

class Store:
    """Ordered, in-memory record set backed by a single JSON file."""

    def __init__(self, path: Path | str, records: Iterable[Record] = ()):
        self.path = Path(path)
        self._records: dict[str, Record] = {}
        for record in records:
            self._records[record.command] = record
        self.dirty = False

    @classmethod
    def load(cls, path: Path | str) -> Store:
        """Read the store at *path*. A missing file is an empty store."""
        path = Path(path)
        if not path.exists():
            log.debug("No store at %s, starting empty", path)
            return cls(path)

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptData(path, "not valid UTF-8") from exc
        except OSError as exc:
            raise IoFailure(path, exc.strerror or str(exc)) from exc

        try:
            records = decode_records(text)
        except ValueError as exc:
            raise CorruptData(path, "expected a JSON object of command -> description") from exc

        log.debug("Loaded %d records from %s", len(records), path)
        return cls(path, records)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, command: str, description: str) -> bool:
        """Add a record, replacing any with the same command."""
        record = Record(command=command, description=description)
        replaced = command in self._records
        self._records[command] = record
        self.dirty = True
        return replaced

    def remove(self, command: str) -> bool:
        if command not in self._records:
            return False
        del self._records[command]
        self.dirty = True
        return True

    def save(self) -> None:
        """Write all records to disk via a temp file and an atomic rename."""
        data = encode_records(self._records.values())
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise IoFailure(self.path, exc.strerror or str(exc)) from exc

        self.dirty = False
        log.debug("Saved %d records to %s", len(self._records), self.path)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def get(self, command: str) -> Record | None:
        return self._records.get(command)

    def records(self) -> tuple[Record, ...]:
        return tuple(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, command: object) -> bool:
        return command in self._records

    def __repr__(self) -> str:
        return f"Store(path={str(self.path)!r}, records={len(self._records)})"
