# Ideal hydration range: 30-35 ml per kg plus fixed activity/climate offsets.
from app.models.hydration import ActivityLevel, Climate, HydrationProfile, HydrationRange

ML_PER_KG_LOW = 30
ML_PER_KG_HIGH = 35

# (low, high) offsets in ml/day
ACTIVITY_ADJUSTMENTS: dict[ActivityLevel, tuple[int, int]] = {
    ActivityLevel.low:      (0, 0),
    ActivityLevel.moderate: (200, 300),
    ActivityLevel.high:     (500, 700),
}

CLIMATE_ADJUSTMENTS: dict[Climate, tuple[int, int]] = {
    Climate.mild:     (0, 0),
    Climate.hot:      (300, 400),
    Climate.very_hot: (600, 700),
}


def water_range_ml(weight):
    return weight * ML_PER_KG_LOW, weight * ML_PER_KG_HIGH


def compute_range(profile: HydrationProfile) -> HydrationRange:
    """
    Baseline range from body weight, then activity and climate offsets.
    Both adjustments are additive and applied once each.
    """
    low, high = water_range_ml(profile.weight_kg)

    activity_low, activity_high = ACTIVITY_ADJUSTMENTS[profile.activity_level]
    low += activity_low
    high += activity_high

    climate_low, climate_high = CLIMATE_ADJUSTMENTS[profile.climate]
    low += climate_low
    high += climate_high

    return HydrationRange(low=low, high=high)
