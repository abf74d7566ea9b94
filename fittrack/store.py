# -*- coding: utf-8 -*-
"""Record store — the whole user collection as one JSON document.

``load()`` always re-reads and re-parses the full collection and ``save()``
always rewrites it. There is no index and no partial write.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from .errors import StorageCorrupt

logger = logging.getLogger(__name__)


class RecordStore:
    """Interface shared by the file-backed store and the in-memory fake."""

    def load(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def save(self, records: List[Dict[str, Any]]) -> None:
        raise NotImplementedError


class JsonFileStore(RecordStore):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            logger.error("Cannot read %s: %s", self.path, exc)
            raise StorageCorrupt(f"cannot read {self.path}") from exc

        # An empty file means "not initialized yet", same as a missing one.
        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Cannot parse %s: %s", self.path, exc)
            raise StorageCorrupt(f"invalid JSON in {self.path}") from exc

        if not isinstance(data, list):
            logger.error("Expected a JSON array in %s, got %s", self.path, type(data).__name__)
            raise StorageCorrupt(f"expected a JSON array in {self.path}")
        return data

    def save(self, records: List[Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d user record(s) to %s", len(records), self.path)


class MemoryStore(RecordStore):
    """In-memory store for tests; callers get copies, never the stored list."""

    def __init__(self, records: List[Dict[str, Any]] | None = None) -> None:
        self._records: List[Dict[str, Any]] = copy.deepcopy(records or [])

    def load(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._records)

    def save(self, records: List[Dict[str, Any]]) -> None:
        self._records = copy.deepcopy(records)
