"""
Console entry point.

    python main.py add --method bmi              # interactive entry, append to bmi source
    python main.py compute --method usnavy us_user_data.csv
    python main.py healthy --method bmi --gender female
    python main.py unfit --method all
    python main.py stats
"""
from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv

from config import settings
from core.bfp import strategy_for
from core.errors import RecordSourceError
from core.stats import StatsEngine
from services.assistant import HealthAssistant
from services.prompts import collect_record


def _cmd_add(args: Namespace) -> int:
    ha = HealthAssistant(strategy_for(args.method))
    while True:
        record = collect_record()
        ha.add(record)
        ha.get_bfp(record.name)
        ha.get_daily_calories(record.name)
        ha.get_meal_prep(record.name)
        if input("Enter 'exit' to quit, or press Enter to continue:").strip() == "exit":
            break
    print(ha.display("all"))
    target = args.out or StatsEngine().canonical_source(ha.strategy)
    ha.serialize(target)
    return 0


def _cmd_compute(args: Namespace) -> int:
    ha = HealthAssistant(strategy_for(args.method))
    ha.mass_load_and_compute(args.source)
    print(ha.display("all"))
    return 0


def _cmd_filter(args: Namespace) -> int:
    engine = StatsEngine()
    if args.command == "healthy":
        names = engine.healthy_users(args.method, args.gender)
        title = "Healthy Users"
    else:
        names = engine.unfit_users(args.method, args.gender)
        title = "Unfit Users"
    print(f"{title} ({args.gender or 'all'}, {args.method} method):")
    for name in names:
        print(name)
    return 0


def _cmd_stats(args: Namespace) -> int:
    s = StatsEngine().full_stats()
    if not s.has_data:
        print("no data")
        return 0
    print(f"total users: {s.total_users}")
    print(f"male/female percentage: {s.male_pct}% / {s.female_pct}%")
    print(f"healthy bmi: {s.healthy_bmi_pct}%")
    print(f"healthy bmi male/female: {s.healthy_bmi_male_pct}% / {s.healthy_bmi_female_pct}%")
    print(f"healthy us: {s.healthy_navy_pct}%")
    print(f"healthy us male/female: {s.healthy_navy_male_pct}% / {s.healthy_navy_female_pct}%")
    return 0


def build_parser() -> ArgumentParser:
    ap = ArgumentParser(prog="health-assistant", description="Body fat and calorie assistant")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("add", help="enter users interactively and append them to a file")
    p.add_argument("--method", default="usnavy")
    p.add_argument("--out", help="target file (default: the method's canonical source)")
    p.set_defaults(func=_cmd_add)

    p = sub.add_parser("compute", help="reload a file, compute every record and display it")
    p.add_argument("--method", default="usnavy")
    p.add_argument("source")
    p.set_defaults(func=_cmd_compute)

    for name in ("healthy", "unfit"):
        p = sub.add_parser(name, help=f"list {name} users from the canonical sources")
        p.add_argument("--method", default="all", help="bmi | usnavy | all")
        p.add_argument("--gender")
        p.set_defaults(func=_cmd_filter)

    p = sub.add_parser("stats", help="aggregate statistics over both canonical sources")
    p.set_defaults(func=_cmd_stats)
    return ap


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (RecordSourceError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
