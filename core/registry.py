"""
core/registry.py
────────────────────────────────────────────────────────────────────────
In-memory, insertion-ordered collection of Records.

Duplicate names are accepted; every lookup resolves to the first match.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from core.models.record import Record, normalize

if TYPE_CHECKING:  # pragma: no cover
    from core.codec import RecordCodec

_LOG = logging.getLogger(__name__)


class Registry:
    def __init__(self, records: list[Record] | None = None) -> None:
        self._records: list[Record] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    # --------------- add / find / delete ----------------------------
    def add(self, record: Record) -> None:
        self._records.append(record)

    def find(self, name: str) -> Record | None:
        if not self._records:
            _LOG.warning("no user in list")
            return None
        key = normalize(name)
        for record in self._records:
            if record.name == key:
                return record
        _LOG.warning("user not found: %s", key)
        return None

    def delete(self, name: str) -> None:
        key = normalize(name)
        for idx, record in enumerate(self._records):
            if record.name == key:
                del self._records[idx]
                return

    def enumerate(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def names(self) -> list[str]:
        return [r.name for r in self._records]

    # --------------- bulk load / persist ----------------------------
    def load(self, source: str | Path, codec: RecordCodec) -> int:
        """Append every record decoded from *source*; returns how many."""
        records = codec.read_source(source)
        self._records.extend(records)
        return len(records)

    def persist(self, target: str | Path, codec: RecordCodec) -> int:
        return codec.append_records(target, self)
