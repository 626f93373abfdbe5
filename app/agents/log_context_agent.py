# Context agent to flatten the raw request payload.

def log_context_agent(state: dict):
    """
    Pulls profile and hydration log fields out of the request payload so the
    hydration agent reads a flat state. Non-dict sections count as missing;
    values are passed through unvalidated.
    """

    # Extract profile data
    profile = state.get("profile")
    profile = profile if isinstance(profile, dict) else {}
    state["weight"] = profile.get("weight_kg")
    state["activity_level"] = profile.get("activity_level", "low")
    state["climate"] = profile.get("climate", "mild")
    state["thirst_level"] = profile.get("thirst_level", "normal")

    # Extract hydration log data
    hydration_log = state.get("hydration_log")
    hydration_log = hydration_log if isinstance(hydration_log, dict) else {}
    state["actual_water_intake"] = hydration_log.get("avg_intake_ml")

    # Store original logs for reference
    state["original_logs"] = {
        "profile": profile,
        "hydration": hydration_log,
    }

    return state
