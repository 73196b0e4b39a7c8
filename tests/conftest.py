"""Shared fixtures: the two canonical sources written into a tmp dir."""
from __future__ import annotations

import pytest

from config import settings

# 3 male + 2 female; BMI categories noted per row
BMI_ROWS = [
    "alice,female,25,60,70,32,95.0,165,active",        # 22.0  Normal
    "beth,female,40,90,95,35,110.0,160,sedentary",     # 35.2  Very High
    "carl,male,30,70,85,38,,175,moderate",             # 22.9  Normal
    "dave,male,50,95,100,40,,175,sedentary",           # 31.0  Very High
    "ed,male,60,55,75,36,,180,active",                 # 17.0  Low
]

NAVY_ROWS = [
    "carl,male,30,70,85,38,,180,moderate",             # 16.1  Normal
    "dave,male,45,95,100,38,,180,sedentary",           # 26.4  High
    "alice,female,25,60,91,36,97.0,165,active",        # 34.3  High
    "fran,female,45,62,75,33,95.0,168,moderate",       # 26.1  Normal
]


def write_rows(path, rows) -> None:
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")


@pytest.fixture()
def data_dir(tmp_path, monkeypatch):
    write_rows(tmp_path / settings.bmi_source, BMI_ROWS)
    write_rows(tmp_path / settings.navy_source, NAVY_ROWS)
    monkeypatch.setattr(settings, "data_dir", tmp_path)
    return tmp_path
