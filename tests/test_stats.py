# tests/test_stats.py
from __future__ import annotations

import pytest

from config import settings
from core.bfp import CircumferenceMethod, RatioMethod
from core.errors import SourceEmpty, SourceNotFound
from core.stats import StatsEngine


# ── reload pipeline ─────────────────────────────────────────────────
def test_load_and_compute_enriches(data_dir):
    engine = StatsEngine()
    records = engine.load_and_compute(data_dir / settings.bmi_source, RatioMethod())
    assert [r.name for r in records] == ["alice", "beth", "carl", "dave", "ed"]
    alice = records[0]
    assert alice.bfp.category == "Bmi: Normal"
    assert alice.daily_calories == 2400
    assert alice.carbs == 300


def test_reload_rereads_source(data_dir):
    engine = StatsEngine()
    path = data_dir / settings.bmi_source
    assert len(engine.load_and_compute(path, RatioMethod())) == 5
    with path.open("a", encoding="utf-8") as fh:
        fh.write("gil,male,33,72,84,38,,178,active\n")
    assert len(engine.load_and_compute(path, RatioMethod())) == 6


# ── filters ─────────────────────────────────────────────────────────
def test_filter_by_category_bmi(data_dir):
    engine = StatsEngine()
    src, m = data_dir / settings.bmi_source, RatioMethod()
    assert engine.filter_by_category(src, m, m.normal_label) == ["alice", "carl"]
    assert engine.filter_by_category(src, m, m.normal_label, gender="female") == ["alice"]
    assert engine.filter_by_category(src, m, m.normal_label, gender="male") == ["carl"]
    assert engine.filter_by_category(src, m, "Bmi: Very High") == ["beth", "dave"]


def test_healthy_and_unfit_by_method(data_dir):
    engine = StatsEngine()
    assert engine.healthy_users("bmi", "female") == ["alice"]
    assert engine.unfit_users("bmi") == ["beth", "dave", "ed"]
    assert engine.healthy_users("USArmy") == ["carl", "fran"]
    assert engine.unfit_users("usnavy", "male") == ["dave"]


def test_all_methods_concatenates_bmi_then_navy(data_dir):
    engine = StatsEngine()
    assert engine.healthy_users("all") == ["alice", "carl", "carl", "fran"]
    assert engine.unfit_users("all", "female") == ["beth", "alice"]


def test_missing_sources_are_terminal(tmp_path):
    engine = StatsEngine(data_dir=tmp_path)
    with pytest.raises(SourceNotFound):
        engine.healthy_users("bmi")
    (tmp_path / settings.navy_source).touch()
    with pytest.raises(SourceEmpty):
        engine.unfit_users("usnavy")


# ── full stats ──────────────────────────────────────────────────────
def test_full_stats(data_dir):
    s = StatsEngine().full_stats()
    assert s.has_data
    assert s.total_users == 9
    assert (s.male_count, s.female_count) == (5, 4)
    assert (s.male_pct, s.female_pct) == (55.6, 44.4)

    assert s.bmi_users == 5
    assert s.healthy_bmi_pct == 40.0
    assert (s.healthy_bmi_male_pct, s.healthy_bmi_female_pct) == (20.0, 20.0)

    assert s.navy_users == 4
    assert s.healthy_navy_pct == 50.0
    assert (s.healthy_navy_male_pct, s.healthy_navy_female_pct) == (25.0, 25.0)


def test_full_stats_zero_totals(tmp_path):
    for name in (settings.bmi_source, settings.navy_source):
        (tmp_path / name).write_text("\n", encoding="utf-8")
    s = StatsEngine(data_dir=tmp_path).full_stats()
    assert not s.has_data
    assert s.male_pct == s.healthy_bmi_pct == s.healthy_navy_female_pct == 0.0


def test_navy_source_uses_navy_strategy(data_dir):
    engine = StatsEngine()
    records = engine.load_and_compute(data_dir / settings.navy_source, CircumferenceMethod())
    assert {r.bfp.category for r in records} == {"USNavy: Normal", "USNavy: High"}
