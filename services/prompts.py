"""
services/prompts.py
────────────────────────────────────────────────────────────────────────
Interactive collection of one Record. Each field is asked until the
answer is valid; ``ask`` / ``warn`` are injectable so tests can script
the conversation.
"""
from __future__ import annotations

import math
import sys
from typing import Callable

from core.models.record import Gender, Lifestyle, Record, normalize, normalize_lifestyle

Ask = Callable[[str], str]
Warn = Callable[[str], None]

MIN_AGE, MAX_AGE = 20, 79


def _stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def _ask_float(ask: Ask, warn: Warn, prompt: str, what: str) -> float:
    while True:
        raw = ask(prompt)
        try:
            value = float(raw.strip())
        except ValueError:
            warn(
                f"Invalid input for {what}. Please specify your measurement "
                "as a whole number or a decimal."
            )
            continue
        if not math.isfinite(value) or value <= 0:
            warn(f"The {what} must be greater than zero.")
            continue
        return value


def _ask_choice(ask: Ask, warn: Warn, prompt: str, choices: tuple[str, ...],
                what: str, norm: Callable[[str], str] = normalize) -> str:
    while True:
        value = norm(ask(prompt))
        if value in choices:
            return value
        quoted = ", ".join(f'"{c}"' for c in choices)
        warn(f"The {what} you entered is not yet supported. Please specify one of {quoted}.")


def _ask_age(ask: Ask, warn: Warn) -> int:
    while True:
        raw = ask("Enter your age: ")
        try:
            age = int(float(raw.strip()))
        except (ValueError, OverflowError):
            warn("Invalid input for age. Please specify your age as a whole number.")
            continue
        if age < MIN_AGE:
            warn("You need to be older to use this tool")
        elif age > MAX_AGE:
            warn("You need to be younger to use this tool")
        else:
            return age


def collect_record(ask: Ask = input, warn: Warn = _stderr) -> Record:
    name = normalize(ask("What is your name: "))
    gender = _ask_choice(
        ask, warn, "Please specify your gender as either male or female: ",
        tuple(g.value for g in Gender), "gender",
    )
    hip = 0.0
    if gender == Gender.female.value:
        hip = _ask_float(ask, warn, "Enter your hip measurement in centimeters: ", "hip measurement")
    age = _ask_age(ask, warn)
    weight = _ask_float(ask, warn, "Enter your body weight in kilograms: ", "body weight")
    waist = _ask_float(ask, warn, "Input your waist measurement in centimeters: ", "waist measurement")
    neck = _ask_float(ask, warn, "Provide your neck measurement in centimeters: ", "neck measurement")
    height = _ask_float(ask, warn, "Provide your height measurement in centimeters: ", "height measurement")
    lifestyle = _ask_choice(
        ask, warn,
        "Provide information about your current lifestyle: "
        "sedentary, moderate (moderately active) or active: ",
        tuple(s.value for s in Lifestyle), "lifestyle", norm=normalize_lifestyle,
    )
    return Record(
        name=name, gender=gender, age=age, weight=weight, waist=waist,
        neck=neck, hip=hip, height=height, lifestyle=lifestyle,
    )
