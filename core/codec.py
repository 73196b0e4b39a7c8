"""
core/codec.py
────────────────────────────────────────────────────────────────────────
Comma-delimited persistence, one record per line, no header, no quoting:

    name,gender,age,weight,waist,neck,hip,height,lifestyle

``hip`` is written only for female records. Derived values are never
persisted; they are recomputed after every reload.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from core.errors import ParseFailure, SourceEmpty, SourceNotFound
from core.models.record import Record

_LOG = logging.getLogger(__name__)

FIELDS = ("name", "gender", "age", "weight", "waist", "neck", "hip", "height", "lifestyle")
_REAL_FIELDS = ("weight", "waist", "neck", "height")


def _num(value: float) -> str:
    """repr() text with a bare ".0" dropped (70.0 -> "70", 1e16 -> "1e+16")."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


class RecordCodec:
    def __init__(self, hip_precision: int = 1) -> None:
        self.hip_precision = hip_precision

    # --------------- line level -------------------------------------
    def encode(self, record: Record) -> str:
        hip = f"{record.hip:.{self.hip_precision}f}" if record.is_female else ""
        return ",".join(
            [
                record.name,
                record.gender,
                str(record.age),
                _num(record.weight),
                _num(record.waist),
                _num(record.neck),
                hip,
                _num(record.height),
                record.lifestyle,
            ]
        )

    def decode(self, line: str) -> Record:
        tokens = line.rstrip("\r\n").split(",", len(FIELDS) - 1)
        if len(tokens) != len(FIELDS):
            raise ParseFailure(f"expected {len(FIELDS)} fields, got {len(tokens)}")
        raw = dict(zip(FIELDS, tokens))

        values: dict[str, object] = {
            "name": raw["name"],
            "gender": raw["gender"],
            "lifestyle": raw["lifestyle"],
        }
        try:
            values["age"] = int(raw["age"])
            for key in _REAL_FIELDS:
                values[key] = float(raw[key])
            values["hip"] = float(raw["hip"]) if raw["hip"].strip() else 0.0
        except ValueError as exc:
            raise ParseFailure(f"non-numeric token: {exc}") from exc

        try:
            return Record(**values)
        except ValidationError as exc:
            raise ParseFailure(f"invalid record {raw['name']!r}: {exc}") from exc

    # --------------- file level -------------------------------------
    def read_source(self, source: str | Path) -> list[Record]:
        path = Path(source)
        try:
            with path.open("r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as exc:
            raise SourceNotFound(
                f"Cannot open file as it may not exist or cannot be opened: {path}",
                path,
            ) from exc
        except UnicodeDecodeError as exc:
            raise ParseFailure(f"source is not valid UTF-8: {exc.reason}", path) from exc
        if not text:
            raise SourceEmpty(f"File is empty: {path}", path)

        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()

        records: list[Record] = []
        for line_no, line in enumerate(lines, start=1):
            try:
                records.append(self.decode(line))
            except ParseFailure as exc:
                raise ParseFailure(str(exc), path, line_no) from exc
        _LOG.info("decoded %d records from %s", len(records), path)
        return records

    def append_records(self, target: str | Path, records: Iterable[Record]) -> int:
        count = 0
        with Path(target).open("a", encoding="utf-8") as fh:
            for record in records:
                fh.write(self.encode(record) + "\n")
                count += 1
        _LOG.info("appended %d records to %s", count, target)
        return count
