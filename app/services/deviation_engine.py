"""
Hydration deviation engine.

Pure functions only: no I/O and no shared state. ``evaluate`` validates a
profile and intake, computes the ideal range, classifies the intake into one
of five deviation levels and builds the summary and tips shown to the user.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Optional, Union

from app.core.exceptions import InvalidIntake, InvalidWeight
from app.models.hydration import (
    LEVEL_LABELS,
    ActivityLevel,
    ClassificationResult,
    Climate,
    DeviationLevel,
    HydrationProfile,
    HydrationRange,
    IntakeReport,
    ThirstLevel,
)
from app.services.formulas import compute_range, water_range_ml

logger = logging.getLogger(__name__)

MIN_WEIGHT_KG = 30
MIN_INTAKE_ML = 200

# Intake below low * 0.7 or above high * 1.4 is "severe".
SEVERE_LOW_FACTOR = 0.7
SEVERE_HIGH_FACTOR = 1.4

UNDER_HYDRATED = {DeviationLevel.low, DeviationLevel.very_low}
OVER_HYDRATED = {DeviationLevel.high, DeviationLevel.very_high}

GENERIC_TIP = "Use thirst, urine color, and energy levels as real-time indicators."


# ── Validation ────────────────────────────────────────────────────────────────

def _to_number(value: Any) -> Optional[float]:
    """Return value as a finite float, or None when it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def validate_weight(value: Any) -> float:
    weight = _to_number(value)
    # Huge weights overflow the range to inf.
    if not weight or weight < MIN_WEIGHT_KG or not all(map(math.isfinite, water_range_ml(weight))):
        logger.info("Rejected weight: %r", value)
        raise InvalidWeight(details={"field": "weight_kg", "value": value})
    return weight


def validate_intake(value: Any) -> float:
    intake = _to_number(value)
    if not intake or intake < MIN_INTAKE_ML:
        logger.info("Rejected intake: %r", value)
        raise InvalidIntake(details={"field": "avg_intake_ml", "value": value})
    return intake


def coerce_inputs(
    weight_kg: Any,
    avg_intake_ml: Any,
    activity_level: Union[ActivityLevel, str] = ActivityLevel.low,
    climate: Union[Climate, str] = Climate.mild,
    thirst_level: Union[ThirstLevel, str] = ThirstLevel.normal,
) -> tuple[HydrationProfile, IntakeReport]:
    """
    Turn raw form values into engine inputs.

    Weight is checked before intake. Unknown enum strings raise ValueError.
    """
    weight = validate_weight(weight_kg)
    intake = validate_intake(avg_intake_ml)
    profile = HydrationProfile(
        weight_kg=weight,
        activity_level=ActivityLevel(activity_level),
        climate=Climate(climate),
        thirst_level=ThirstLevel(thirst_level),
    )
    return profile, IntakeReport(avg_intake_ml=intake)


# ── Classification ────────────────────────────────────────────────────────────

def classify(hydration_range: HydrationRange, actual_intake_ml: float) -> DeviationLevel:
    """First matching threshold wins; the range bounds themselves are normal."""
    if actual_intake_ml < hydration_range.low * SEVERE_LOW_FACTOR:
        return DeviationLevel.very_low
    if actual_intake_ml < hydration_range.low:
        return DeviationLevel.low
    if actual_intake_ml > hydration_range.high * SEVERE_HIGH_FACTOR:
        return DeviationLevel.very_high
    if actual_intake_ml > hydration_range.high:
        return DeviationLevel.high
    return DeviationLevel.normal


# ── Feedback text ─────────────────────────────────────────────────────────────

def format_ml(value: float) -> str:
    """2100.0 -> '2100', 2467.5 -> '2467.5'."""
    text = f"{value:.1f}"
    return text[:-2] if text.endswith(".0") else text


def build_summary(profile: HydrationProfile, hydration_range: HydrationRange) -> str:
    parts = [
        f"Your calculated optimal hydration range is "
        f"{format_ml(hydration_range.low)}–{format_ml(hydration_range.high)} ml/day."
    ]

    if profile.thirst_level == ThirstLevel.high:
        parts.append("You frequently feel thirsty, suggesting hydration gaps.")

    if profile.thirst_level == ThirstLevel.low:
        parts.append("You rarely feel thirsty — may be drinking too much or just well hydrated.")

    if profile.activity_level == ActivityLevel.high:
        parts.append("High activity increases sweat-related losses significantly.")

    if profile.climate != Climate.mild:
        parts.append("Your climate increases daily water needs.")

    return " ".join(parts)


def build_tips(profile: HydrationProfile, level: DeviationLevel) -> list[str]:
    tips: list[str] = []

    # Independent guards, not if/else: a level may one day sit in both sets.
    if level in UNDER_HYDRATED:
        tips.append("Increase water intake earlier in the day.")
        tips.append("Carry a bottle to avoid accidental under-hydration.")
        if profile.activity_level != ActivityLevel.low:
            tips.append("Add electrolytes during high activity or hot climate.")

    if level in OVER_HYDRATED:
        tips.append("Avoid forcing water if you're not thirsty.")
        tips.append("Spread hydration instead of large gulps.")
        tips.append("Monitor electrolytes if drinking very high volumes.")

    tips.append(GENERIC_TIP)
    return tips


# ── Entry point ───────────────────────────────────────────────────────────────

def evaluate(profile: HydrationProfile, intake: IntakeReport) -> ClassificationResult:
    """
    Validate -> compute range -> classify -> summary -> tips.
    Raises InvalidWeight / InvalidIntake before computing anything.
    """
    validate_weight(profile.weight_kg)
    actual = validate_intake(intake.avg_intake_ml)

    hydration_range = compute_range(profile)
    level = classify(hydration_range, actual)
    logger.debug(
        "Classified %.1f ml against %.1f–%.1f ml as %s",
        actual, hydration_range.low, hydration_range.high, level.value,
    )

    return ClassificationResult(
        level=level,
        label=LEVEL_LABELS[level],
        range=hydration_range,
        actual_intake_ml=actual,
        summary=build_summary(profile, hydration_range),
        tips=build_tips(profile, level),
    )
