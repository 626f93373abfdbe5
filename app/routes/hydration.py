# Hydration deviation routes: classify daily intake against the ideal range.
import logging

from fastapi import APIRouter, HTTPException

from app.core.exceptions import HydrationValidationError
from app.models.hydration import (
    LEVEL_BADGES,
    LEVEL_LABELS,
    DeviationLevel,
    DeviationRequest,
    DeviationResponse,
    LevelInfo,
)
from app.services.deviation_engine import coerce_inputs, evaluate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hydration", tags=["Hydration Deviation"])


@router.post(
    "/deviation",
    response_model=DeviationResponse,
    summary="Classify daily water intake against the ideal range",
)
def check_deviation(body: DeviationRequest) -> DeviationResponse:
    """
    Computes the ideal range from weight, activity and climate, then returns
    the deviation level, a summary of key patterns and actionable tips.
    """
    try:
        profile, intake = coerce_inputs(
            body.weight_kg,
            body.avg_intake_ml,
            activity_level=body.activity_level,
            climate=body.climate,
            thirst_level=body.thirst_level,
        )
        result = evaluate(profile, intake)
    except HydrationValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.to_dict(),
        )

    logger.info("Hydration deviation: %s (%s ml)", result.level.value, result.actual_intake_ml)
    return DeviationResponse(**result.model_dump(), badge=LEVEL_BADGES[result.level])


@router.get(
    "/levels",
    response_model=list[LevelInfo],
    summary="List deviation levels with their labels and badges",
)
def list_levels() -> list[LevelInfo]:
    """Levels in ordinal order, from most under- to most over-hydrated."""
    return [
        LevelInfo(level=level, label=LEVEL_LABELS[level], badge=LEVEL_BADGES[level])
        for level in DeviationLevel
    ]
