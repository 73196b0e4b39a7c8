"""
core/stats.py
────────────────────────────────────────────────────────────────────────
Batch statistics over the persisted sources.

Every call re-reads its source(s) and recomputes BFP, calories and macros
from scratch; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
from pydantic import BaseModel

from config import settings
from core.bfp import BfpStrategy, CircumferenceMethod, RatioMethod, strategy_for
from core.calories import CalorieAdvisor
from core.codec import RecordCodec
from core.models.record import Gender, Record

_LOG = logging.getLogger(__name__)

ALL_METHODS = "all"


class FullStats(BaseModel):
    total_users: int = 0
    male_count: int = 0
    female_count: int = 0
    male_pct: float = 0.0
    female_pct: float = 0.0

    bmi_users: int = 0
    healthy_bmi_pct: float = 0.0
    healthy_bmi_male_pct: float = 0.0
    healthy_bmi_female_pct: float = 0.0

    navy_users: int = 0
    healthy_navy_pct: float = 0.0
    healthy_navy_male_pct: float = 0.0
    healthy_navy_female_pct: float = 0.0

    @property
    def has_data(self) -> bool:
        return self.total_users > 0


def _pct(count: int, total: int) -> float:
    """Percentage of *total*; 0.0 when there is nothing to divide by."""
    if total == 0:
        return 0.0
    return round(count * 100 / total, 1)


class StatsEngine:
    def __init__(
        self,
        data_dir: str | Path | None = None,
        codec: RecordCodec | None = None,
        advisor: CalorieAdvisor | None = None,
    ) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else settings.data_dir
        self._codec = codec or RecordCodec(settings.hip_precision)
        self._advisor = advisor or CalorieAdvisor()

    # --------------- reload pipeline --------------------------------
    def canonical_source(self, strategy: BfpStrategy) -> Path:
        return self.data_dir / getattr(settings, strategy.source_setting)

    def load_and_compute(self, source: str | Path, strategy: BfpStrategy) -> list[Record]:
        records = self._codec.read_source(source)
        for record in records:
            strategy.compute(record)
            self._advisor.enrich(record)
        return records

    def _frame(self, strategy: BfpStrategy, source: str | Path | None = None) -> pd.DataFrame:
        records = self.load_and_compute(source or self.canonical_source(strategy), strategy)
        df = pd.DataFrame(
            [{"name": r.name, "gender": r.gender, "category": r.bfp.category} for r in records],
            columns=["name", "gender", "category"],
        )
        df["healthy"] = df["category"] == strategy.normal_label
        return df

    # --------------- filters ----------------------------------------
    def filter_by_category(
        self,
        source: str | Path,
        strategy: BfpStrategy,
        match_label: str,
        gender: str | None = None,
        negate: bool = False,
    ) -> list[str]:
        df = self._frame(strategy, source)
        mask = df["category"] == match_label
        if negate:
            mask = ~mask
        if gender is not None:
            mask &= df["gender"] == gender.strip().lower()
        return df.loc[mask, "name"].tolist()

    def _by_method(self, method: str, gender: str | None, negate: bool) -> list[str]:
        if method.strip().lower() == ALL_METHODS:
            strategies: list[BfpStrategy] = [RatioMethod(), CircumferenceMethod()]
        else:
            strategies = [strategy_for(method)]
        names: list[str] = []
        for strategy in strategies:
            names += self.filter_by_category(
                self.canonical_source(strategy),
                strategy,
                strategy.normal_label,
                gender=gender,
                negate=negate,
            )
        return names

    def healthy_users(self, method: str, gender: str | None = None) -> list[str]:
        return self._by_method(method, gender, negate=False)

    def unfit_users(self, method: str, gender: str | None = None) -> list[str]:
        return self._by_method(method, gender, negate=True)

    # --------------- full stats -------------------------------------
    def full_stats(self) -> FullStats:
        bmi = self._frame(RatioMethod())
        navy = self._frame(CircumferenceMethod())

        both = pd.concat([bmi, navy], ignore_index=True)
        total = len(both)
        male = int((both["gender"] == Gender.male.value).sum())
        female = int((both["gender"] == Gender.female.value).sum())
        if total == 0:
            _LOG.warning("no records in either source; percentages reported as 0")

        def _healthy(df: pd.DataFrame) -> tuple[float, float, float]:
            n = len(df)
            by_gender = df[df["healthy"]].groupby("gender").size()
            return (
                _pct(int(df["healthy"].sum()), n),
                _pct(int(by_gender.get(Gender.male.value, 0)), n),
                _pct(int(by_gender.get(Gender.female.value, 0)), n),
            )

        bmi_all, bmi_m, bmi_f = _healthy(bmi)
        navy_all, navy_m, navy_f = _healthy(navy)

        return FullStats(
            total_users=total,
            male_count=male,
            female_count=female,
            male_pct=_pct(male, total),
            female_pct=_pct(female, total),
            bmi_users=len(bmi),
            healthy_bmi_pct=bmi_all,
            healthy_bmi_male_pct=bmi_m,
            healthy_bmi_female_pct=bmi_f,
            navy_users=len(navy),
            healthy_navy_pct=navy_all,
            healthy_navy_male_pct=navy_m,
            healthy_navy_female_pct=navy_f,
        )
