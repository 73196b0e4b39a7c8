"""
core/bfp.py
────────────────────────────────────────────────────────────────────────
Two interchangeable body-fat estimators:

1. CircumferenceMethod  (US Navy tape formula, age-banded categories)
2. RatioMethod          (weight / height², BMI bands)

Both expose ``compute(record)`` which stores and returns a BfpResult, and
``compute_for(registry, name)`` which resolves the record by name first.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from core.models.record import BfpResult, Gender, Record
from core.registry import Registry

_LOG = logging.getLogger(__name__)

LOW, NORMAL, HIGH, VERY_HIGH = "Low", "Normal", "High", "Very High"
BANDS = (LOW, NORMAL, HIGH)


def _classify(value: float, cutoffs: tuple[float, float, float]) -> str:
    for band, upper in zip(BANDS, cutoffs):
        if value < upper:
            return band
    return VERY_HIGH


class BfpStrategy(ABC):
    prefix: str = ""
    source_setting: str = ""   # name of the canonical-source setting

    def label(self, band: str) -> str:
        return f"{self.prefix}: {band}"

    @property
    def normal_label(self) -> str:
        return self.label(NORMAL)

    def compute(self, record: Record) -> BfpResult:
        result = self._estimate(record)
        record.attach_bfp(result)
        return result

    def compute_for(self, registry: Registry, name: str) -> BfpResult | None:
        record = registry.find(name)
        if record is None:
            return None
        return self.compute(record)

    @abstractmethod
    def _estimate(self, record: Record) -> BfpResult:
        ...


# ──────────────────────────────────────────────────────────────────────
#  US Navy
# ──────────────────────────────────────────────────────────────────────
class CircumferenceMethod(BfpStrategy):
    prefix = "USNavy"
    source_setting = "navy_source"

    # (min_age, max_age) -> (Low<, Normal<, High<)
    _CUTOFFS: dict[str, dict[tuple[int, int], tuple[float, float, float]]] = {
        Gender.female.value: {
            (20, 39): (21, 33, 39),
            (40, 59): (23, 34, 40),
            (60, 79): (24, 36, 42),
        },
        Gender.male.value: {
            (20, 39): (8, 20, 25),
            (40, 59): (11, 22, 28),
            (60, 79): (13, 25, 30),
        },
    }

    def raw_value(self, r: Record) -> float | None:
        if r.gender == Gender.female.value:
            span = r.waist + r.hip - r.neck
            if span <= 0:
                return None
            return 495 / (1.29579 - 0.35004 * math.log10(span)
                          + 0.22100 * math.log10(r.height)) - 450
        if r.gender == Gender.male.value:
            span = r.waist - r.neck
            if span <= 0:
                return None
            return 495 / (1.0324 - 0.19077 * math.log10(span)
                          + 0.15456 * math.log10(r.height)) - 450
        return None

    def _estimate(self, record: Record) -> BfpResult:
        if record.gender not in self._CUTOFFS:
            _LOG.warning("%s: body fat cannot be estimated for gender %r",
                         record.name, record.gender)
            return BfpResult()

        bfp = self.raw_value(record)
        if bfp is None:
            _LOG.warning("%s: circumferences outside the formula's domain", record.name)
            return BfpResult()

        for (lo, hi), cutoffs in self._CUTOFFS[record.gender].items():
            if lo <= record.age <= hi:
                return BfpResult(int(bfp), self.label(_classify(bfp, cutoffs)))

        _LOG.warning(
            "%s: body fat category cannot be determined, age %d outside permitted range",
            record.name, record.age,
        )
        return BfpResult(int(bfp), "")


# ──────────────────────────────────────────────────────────────────────
#  BMI
# ──────────────────────────────────────────────────────────────────────
class RatioMethod(BfpStrategy):
    prefix = "Bmi"
    source_setting = "bmi_source"

    _CUTOFFS = (18.5, 25, 30)

    def raw_value(self, r: Record) -> float:
        return r.weight * 100 * 100 / (r.height * r.height)

    def _estimate(self, record: Record) -> BfpResult:
        bmi = self.raw_value(record)
        return BfpResult(int(bmi), self.label(_classify(bmi, self._CUTOFFS)))


_METHODS: dict[str, type[BfpStrategy]] = {
    "bmi": RatioMethod,
    "usnavy": CircumferenceMethod,
    "navy": CircumferenceMethod,
    "usarmy": CircumferenceMethod,
}


def strategy_for(method: str) -> BfpStrategy:
    try:
        return _METHODS[method.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"unknown body fat method {method!r}; expected one of {sorted(_METHODS)}"
        ) from None
