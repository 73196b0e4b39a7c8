from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


class Gender(str, Enum):
    male = "male"
    female = "female"


class Lifestyle(str, Enum):
    sedentary = "sedentary"
    moderate = "moderate"
    active = "active"


LIFESTYLE_SYNONYMS = {"moderately": Lifestyle.moderate.value}


def normalize(text: str) -> str:
    return text.strip().lower()


def normalize_lifestyle(text: str) -> str:
    value = normalize(text)
    return LIFESTYLE_SYNONYMS.get(value, value)


@dataclass(frozen=True)
class BfpResult:
    value: int = 0
    category: str = ""     # "" until a strategy could classify the record


@dataclass(frozen=True)
class MacroSplit:
    carbs: float = 0.0
    protein: float = 0.0
    fat: float = 0.0

    @property
    def kcal(self) -> float:
        return self.carbs * 4 + self.protein * 4 + self.fat * 9


class Record(BaseModel):
    """One user's raw measurements plus the values derived from them."""

    name: str
    gender: str
    age: int
    weight: float = Field(..., gt=0, allow_inf_nan=False)   # kg
    waist: float = Field(..., gt=0, allow_inf_nan=False)    # cm
    neck: float = Field(..., gt=0, allow_inf_nan=False)     # cm
    height: float = Field(..., gt=0, allow_inf_nan=False)   # cm
    hip: float = Field(0.0, ge=0, allow_inf_nan=False)     # cm, female only
    lifestyle: str

    model_config = ConfigDict(validate_assignment=True)

    _bfp: BfpResult = PrivateAttr(default_factory=BfpResult)
    _daily_calories: int = PrivateAttr(0)
    _macros: MacroSplit = PrivateAttr(default_factory=MacroSplit)

    # -------------------------------- normalisation -----------------
    @field_validator("name", "gender")
    @classmethod
    def _lower_trim(cls, v: str) -> str:
        return normalize(v)

    @field_validator("lifestyle")
    @classmethod
    def _lifestyle(cls, v: str) -> str:
        return normalize_lifestyle(v)

    # -------------------------------- derived (read-only) -----------
    @property
    def is_female(self) -> bool:
        return self.gender == Gender.female.value

    @property
    def bfp(self) -> BfpResult:
        return self._bfp

    @property
    def daily_calories(self) -> int:
        return self._daily_calories

    @property
    def macros(self) -> MacroSplit:
        return self._macros

    @property
    def carbs(self) -> float:
        return self._macros.carbs

    @property
    def protein(self) -> float:
        return self._macros.protein

    @property
    def fat(self) -> float:
        return self._macros.fat

    # written only by BfpStrategy / CalorieAdvisor
    def attach_bfp(self, result: BfpResult) -> None:
        self._bfp = result

    def attach_calories(self, kcal: int) -> None:
        self._daily_calories = kcal

    def attach_macros(self, split: MacroSplit) -> None:
        self._macros = split
