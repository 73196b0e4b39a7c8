from __future__ import annotations

from typing import Iterable

from core.models.record import Record


def center(text: str, width: int) -> str:
    if width < len(text):
        return text
    pad = width - len(text)
    left = pad // 2
    return " " * left + text + " " * (pad - left)


def format_profile(r: Record, width: int = 60) -> str:
    """Centred USER PROFILE SUMMARY block for one record."""
    lines = [
        "--- USER PROFILE SUMMARY ---",
        "",
        "Personal Details:",
        f"Name: {r.name}",
        f"Gender: {r.gender}",
        f"Age (years): {r.age}",
        f"Height (cm): {r.height:.2f}",
    ]
    if r.is_female:
        lines.append(f"Hip (cm): {r.hip:.2f}")
    lines += [
        "",
        "Body Measurements:",
        f"Weight (kg): {r.weight:.2f}",
        f"Waist (cm): {r.waist:.2f}",
        f"Neck (cm): {r.neck:.2f}",
        "",
        "Lifestyle:",
        f"Activity Level: {r.lifestyle}",
        "",
        "Health Metrics:",
        f"Body Fat Percentage: {r.bfp.value:.2f}% ({r.bfp.category})",
        f"Daily Caloric Intake (calories): {r.daily_calories:.2f}",
        "",
        "Macronutrient Breakdown (grams):",
        f"Carbs: {r.carbs:.2f}g",
        f"Protein: {r.protein:.2f}g",
        f"Fat: {r.fat:.2f}g",
    ]
    return "\n".join(center(line, width) if line else "" for line in lines) + "\n"


def format_all(records: Iterable[Record], width: int = 60) -> str:
    parts = [center("--- BEGIN ALL USER ---", width), ""]
    parts += [format_profile(r, width) for r in records]
    parts += [center("--- END ALL USER ---", width), ""]
    return "\n".join(parts)
