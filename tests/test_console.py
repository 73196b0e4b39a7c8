# tests/test_console.py
"""
Console collaborators: scripted prompts, profile formatting, CLI commands.
"""
from __future__ import annotations

from core.bfp import RatioMethod
from core.calories import CalorieAdvisor
from core.models.record import Record
from main import main
from services.display import center, format_profile
from services.prompts import collect_record


def _script(answers):
    it = iter(answers)
    return lambda _prompt: next(it)


# ── prompts ─────────────────────────────────────────────────────────
def test_collect_female_with_retries():
    warnings: list[str] = []
    answers = [
        "  Alice ", "robot", "Female", "abc", "95", "15", "25",
        "60", "70", "32", "165", "lazy", "Moderately",
    ]
    r = collect_record(ask=_script(answers), warn=warnings.append)
    assert (r.name, r.gender, r.hip, r.age) == ("alice", "female", 95.0, 25)
    assert (r.weight, r.waist, r.neck, r.height) == (60, 70, 32, 165)
    assert r.lifestyle == "moderate"
    assert len(warnings) == 4
    assert "older" in warnings[2]


def test_collect_male_skips_hip():
    answers = ["bob", "male", "90", "45", "80", "90", "40", "-1", "180", "active"]
    warnings: list[str] = []
    r = collect_record(ask=_script(answers), warn=warnings.append)
    assert r.hip == 0.0
    assert (r.age, r.weight, r.height) == (45, 80, 180)
    assert warnings == [
        "You need to be younger to use this tool",
        "The height measurement must be greater than zero.",
    ]


# ── display ─────────────────────────────────────────────────────────
def test_center():
    assert center("ab", 6) == "  ab  "
    assert center("abc", 6) == " abc  "
    assert center("too wide", 4) == "too wide"


def test_profile_hip_only_for_female():
    male = Record(name="bob", gender="male", age=30, weight=70, waist=85,
                  neck=38, hip=50, height=180, lifestyle="active")
    female = male.model_copy(update={"gender": "female"})
    assert "Hip (cm)" not in format_profile(male)
    assert "Hip (cm): 50.00" in format_profile(female)


def test_profile_shows_derived_values():
    r = Record(name="bob", gender="male", age=30, weight=70, waist=85,
               neck=38, height=175, lifestyle="active")
    RatioMethod().compute(r)
    CalorieAdvisor().enrich(r)
    out = format_profile(r)
    assert "Body Fat Percentage: 22.00% (Bmi: Normal)" in out
    assert "Daily Caloric Intake (calories): 3000.00" in out
    assert "Carbs: 375.00g" in out


# ── CLI ─────────────────────────────────────────────────────────────
def test_cli_healthy(data_dir, capsys):
    assert main(["healthy", "--method", "bmi", "--gender", "female"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Healthy Users (female, bmi method):", "alice"]


def test_cli_stats(data_dir, capsys):
    assert main(["stats"]) == 0
    out = capsys.readouterr().out
    assert "total users: 9" in out
    assert "healthy bmi: 40.0%" in out


def test_cli_missing_source(tmp_path, monkeypatch, capsys):
    from config import settings

    monkeypatch.setattr(settings, "data_dir", tmp_path)
    assert main(["unfit", "--method", "usnavy"]) == 1
    assert "Cannot open file" in capsys.readouterr().err


def test_cli_unknown_method(data_dir, capsys):
    assert main(["healthy", "--method", "calipers"]) == 1
    assert "unknown body fat method" in capsys.readouterr().err


def test_cli_compute(data_dir, capsys):
    assert main(["compute", "--method", "bmi", str(data_dir / "bmi_user_data.csv")]) == 0
    assert capsys.readouterr().out.count("USER PROFILE SUMMARY") == 5
