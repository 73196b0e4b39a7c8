"""
services/assistant.py
────────────────────────────────────────────────────────────────────────
Name-based operations over one explicitly owned Registry, with a single
BFP strategy chosen at construction time.
"""
from __future__ import annotations

import logging
from pathlib import Path

from config import settings
from core.bfp import BfpStrategy
from core.calories import CalorieAdvisor
from core.codec import RecordCodec
from core.models.record import BfpResult, MacroSplit, Record, normalize
from core.registry import Registry
from services.display import format_all, format_profile

_LOG = logging.getLogger(__name__)


class HealthAssistant:
    def __init__(
        self,
        strategy: BfpStrategy,
        registry: Registry | None = None,
        advisor: CalorieAdvisor | None = None,
        codec: RecordCodec | None = None,
    ) -> None:
        self.strategy = strategy
        self.registry = registry if registry is not None else Registry()
        self._advisor = advisor or CalorieAdvisor()
        self._codec = codec or RecordCodec(settings.hip_precision)

    def add(self, record: Record) -> None:
        self.registry.add(record)

    # ───────── derived values by name ─────────
    def get_bfp(self, name: str) -> BfpResult | None:
        return self.strategy.compute_for(self.registry, name)

    def get_daily_calories(self, name: str) -> int | None:
        record = self.registry.find(name)
        if record is None:
            return None
        return self._advisor.apply_calories(record)

    def get_meal_prep(self, name: str) -> MacroSplit | None:
        record = self.registry.find(name)
        if record is None:
            return None
        return self._advisor.apply_macros(record)

    # ───────── display ─────────
    def display(self, name: str, width: int | None = None) -> str | None:
        width = width or settings.display_width
        if normalize(name) == "all":
            return format_all(self.registry.enumerate(), width)
        record = self.registry.find(name)
        if record is None:
            return None
        return format_profile(record, width)

    # ───────── persistence ─────────
    def serialize(self, target: str | Path) -> int:
        return self.registry.persist(target, self._codec)

    def read_from_file(self, source: str | Path) -> int:
        return self.registry.load(source, self._codec)

    def delete_user(self, name: str) -> None:
        _LOG.info("deleting user by the name: %s", name)
        self.registry.delete(name)

    def mass_load_and_compute(self, source: str | Path) -> int:
        records = self._codec.read_source(source)
        for record in records:
            self.strategy.compute(record)
            self._advisor.enrich(record)
            self.registry.add(record)
        return len(records)
