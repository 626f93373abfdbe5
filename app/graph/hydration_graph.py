from langgraph.graph import StateGraph
from app.agents.log_context_agent import log_context_agent
from app.agents.hydration_agent import hydration_agent


def build_graph():
    """
    Builds the hydration analysis graph with the following flow:
    1. log_context_agent - Flattens the profile and hydration log payload
    2. hydration_agent - Validates inputs and classifies the intake deviation
    """
    builder = StateGraph(dict)

    builder.add_node("log_context", log_context_agent)
    builder.add_node("hydration", hydration_agent)

    builder.set_entry_point("log_context")
    builder.add_edge("log_context", "hydration")
    builder.set_finish_point("hydration")

    return builder.compile()
