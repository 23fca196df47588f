"""Conditional edge functions for the plan graph."""

from app.models.state import PlanState


def route_after_planner(state: PlanState) -> str:
    """Skip storage when the planner node reported an error.

    Returns one of: 'store_plan', 'format_response'.
    """
    if state.get("error"):
        return "format_response"
    return "store_plan"
