"""
core/calories.py
────────────────────────────────────────────────────────────────────────
Daily calorie target from a fixed age / gender / lifestyle table, and the
50 / 30 / 20 carbs / protein / fat split of that target.
"""

from __future__ import annotations

import logging

from core.models.record import MacroSplit, Record

_LOG = logging.getLogger(__name__)

# age band -> (sedentary, moderate, active)
_TABLE: dict[str, dict[tuple[int, int | None], tuple[int, int, int]]] = {
    "male": {
        (19, 30): (2400, 2800, 3000),
        (31, 50): (2200, 2600, 3000),
        (51, None): (2000, 2400, 2800),
    },
    "female": {
        (19, 30): (2000, 2200, 2400),
        (31, 50): (1800, 2000, 2200),
        (51, None): (1600, 1800, 2200),
    },
}
_LIFESTYLES = ("sedentary", "moderate", "active")


class CalorieAdvisor:
    """Source-of-truth for kcal + macro grams."""

    CARBS_PC, PROTEIN_PC, FAT_PC = 0.50, 0.30, 0.20
    KCAL_PER_G = {"carbs": 4.0, "protein": 4.0, "fat": 9.0}

    # --------------- Calories ---------------------------------------
    def daily_calories(self, gender: str, age: int, lifestyle: str) -> int:
        bands = _TABLE.get(gender)
        if bands is None:
            _LOG.warning("daily calories cannot be processed for gender %r", gender)
            return 0
        if lifestyle not in _LIFESTYLES:
            return 0
        for (lo, hi), row in bands.items():
            if age >= lo and (hi is None or age <= hi):
                return row[_LIFESTYLES.index(lifestyle)]
        return 0

    # --------------- Macros -----------------------------------------
    def macro_split(self, daily_calories: float) -> MacroSplit:
        return MacroSplit(
            carbs=daily_calories * self.CARBS_PC / self.KCAL_PER_G["carbs"],
            protein=daily_calories * self.PROTEIN_PC / self.KCAL_PER_G["protein"],
            fat=daily_calories * self.FAT_PC / self.KCAL_PER_G["fat"],
        )

    # --------------- Record enrichment ------------------------------
    def apply_calories(self, record: Record) -> int:
        kcal = self.daily_calories(record.gender, record.age, record.lifestyle)
        record.attach_calories(kcal)
        return kcal

    def apply_macros(self, record: Record) -> MacroSplit:
        split = self.macro_split(record.daily_calories)
        record.attach_macros(split)
        return split

    def enrich(self, record: Record) -> Record:
        self.apply_calories(record)
        self.apply_macros(record)
        return record
