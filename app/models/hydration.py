"""
Pydantic models for hydration profiles, intake reports and deviation results.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# ──────────────────────────────────────────────
# Enums
# ──────────────────────────────────────────────

class ActivityLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class Climate(str, Enum):
    mild = "mild"
    hot = "hot"
    very_hot = "veryHot"


class ThirstLevel(str, Enum):
    normal = "normal"
    low = "low"
    high = "high"


class DeviationLevel(str, Enum):
    very_low = "veryLow"
    low = "low"
    normal = "normal"
    high = "high"
    very_high = "veryHigh"


# ──────────────────────────────────────────────
# Level lookups (must cover every DeviationLevel)
# ──────────────────────────────────────────────

LEVEL_LABELS: dict[DeviationLevel, str] = {
    DeviationLevel.very_low:  "Severely Under-Hydrated",
    DeviationLevel.low:       "Under-Hydrated",
    DeviationLevel.normal:    "In a Healthy Range",
    DeviationLevel.high:      "Over-Hydrated",
    DeviationLevel.very_high: "Severely Over-Hydrated",
}

LEVEL_BADGES: dict[DeviationLevel, str] = {
    DeviationLevel.very_low:  "red",
    DeviationLevel.low:       "yellow",
    DeviationLevel.normal:    "emerald",
    DeviationLevel.high:      "blue",
    DeviationLevel.very_high: "purple",
}

for _lookup in (LEVEL_LABELS, LEVEL_BADGES):
    _missing = set(DeviationLevel) - set(_lookup)
    if _missing:
        raise RuntimeError(f"Deviation level lookup is missing: {sorted(m.value for m in _missing)}")

DISCLAIMER = (
    "Over- or under-hydration may be influenced by diet, climate, exercise, "
    "or medications. Consult a professional for persistent symptoms."
)


# ──────────────────────────────────────────────
# Engine inputs
# ──────────────────────────────────────────────

class HydrationProfile(BaseModel):
    weight_kg: float = Field(..., description="Body weight in kilograms (30+)")
    activity_level: ActivityLevel = ActivityLevel.low
    climate: Climate = Climate.mild
    thirst_level: ThirstLevel = ThirstLevel.normal

    model_config = {"frozen": True}


class IntakeReport(BaseModel):
    avg_intake_ml: float = Field(..., description="Average daily water intake in ml (200+)")

    model_config = {"frozen": True}


# ──────────────────────────────────────────────
# Engine outputs
# ──────────────────────────────────────────────

class HydrationRange(BaseModel):
    low: float
    high: float

    model_config = {"frozen": True}


class ClassificationResult(BaseModel):
    level: DeviationLevel
    label: str
    range: HydrationRange
    actual_intake_ml: float
    summary: str
    tips: list[str]

    model_config = {"frozen": True}


# ──────────────────────────────────────────────
# API request / response schemas
# ──────────────────────────────────────────────

class DeviationRequest(BaseModel):
    # Numbers stay loosely typed so the engine reports InvalidWeight /
    # InvalidIntake instead of a generic schema error.
    weight_kg: Optional[Union[float, str]] = Field(default=None, description="Body weight in kg")
    avg_intake_ml: Optional[Union[float, str]] = Field(default=None, description="Daily water intake in ml")
    activity_level: ActivityLevel = ActivityLevel.low
    climate: Climate = Climate.mild
    thirst_level: ThirstLevel = ThirstLevel.normal


class DeviationResponse(ClassificationResult):
    badge: str
    note: str = DISCLAIMER


class LevelInfo(BaseModel):
    level: DeviationLevel
    label: str
    badge: str
