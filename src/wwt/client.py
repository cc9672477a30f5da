"""User-facing client: remember, find, forget."""

from __future__ import annotations

import logging
from pathlib import Path

from wwt.config import WwtConfig
from wwt.core.search import rank
from wwt.core.types import Match, Record
from wwt.storage.base import RecordStore
from wwt.storage.json_store import Store

log = logging.getLogger(__name__)


class WhatWasThat:
    """Remember commands by what they do, and find them again later.

    Every call loads the store fresh and saves it only if it changed, so
    separate invocations never share in-process state.

    >>> wwt = WhatWasThat(store_path="/tmp/store.json")
    >>> wwt.remember("ls -l", "list contents of current directory")
    >>> results = wwt.find("list directory contents")
    >>> wwt.forget("ls -l")
    """

    def __init__(
        self,
        config: WwtConfig | None = None,
        *,
        store_path: str | Path | None = None,
    ):
        self._config = config or WwtConfig()
        if store_path:
            self._config = self._config.model_copy(update={"store_path": Path(store_path)})

    @property
    def config(self) -> WwtConfig:
        return self._config

    @property
    def store_path(self) -> Path:
        return self._config.store_path

    def load(self) -> RecordStore:
        return Store.load(self._config.store_path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def remember(self, command: str, description: str) -> bool:
        """Store *command* under *description*. Returns True if it replaced one."""
        store = self.load()
        replaced = store.insert(command, description)
        store.save()
        log.info("%s %r", "Updated" if replaced else "Remembered", command)
        return replaced

    def find(self, query: str, *, limit: int | None = None) -> list[Match]:
        """Rank remembered commands by how well their description matches *query*."""
        matches = rank(
            query,
            self.load().records(),
            min_score=self._config.min_score,
            min_substring_len=self._config.min_substring_len,
            limit=limit,
        )
        log.debug("Query %r matched %d records", query, len(matches))
        return matches

    def forget(self, command: str) -> bool:
        """Delete *command*. Returns False if it was never remembered."""
        store = self.load()
        if not store.remove(command):
            log.debug("Nothing to forget for %r", command)
            return False
        store.save()
        log.info("Forgot %r", command)
        return True

    def list(self) -> tuple[Record, ...]:
        """All remembered records in store order."""
        return self.load().records()
