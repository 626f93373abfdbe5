from app.models.hydration import LEVEL_BADGES
from app.services.deviation_engine import coerce_inputs, evaluate


def hydration_agent(state: dict):
    """
    Classifies the logged water intake against the ideal hydration range.

    Range: 30-35 ml per kg of body weight, plus fixed offsets for activity
    and climate. Invalid weight or intake raises before anything is written
    to the state.
    """
    profile, intake = coerce_inputs(
        state.get("weight"),
        state.get("actual_water_intake"),
        activity_level=state.get("activity_level", "low"),
        climate=state.get("climate", "mild"),
        thirst_level=state.get("thirst_level", "normal"),
    )
    result = evaluate(profile, intake)

    state["weight"] = profile.weight_kg
    state["actual_water_intake"] = intake.avg_intake_ml
    state["ideal_low_ml"] = result.range.low
    state["ideal_high_ml"] = result.range.high
    state["hydration_level"] = result.level.value
    state["hydration_status"] = result.label
    state["hydration_badge"] = LEVEL_BADGES[result.level]
    state["hydration_summary"] = result.summary
    state["hydration_tips"] = result.tips

    return state
