"""Final response formatting tool node."""

from app.models.state import PlanState
from app.render.outline import render_outline


def format_response_node(state: PlanState) -> dict:
    """Render the planner (or the error) into the final text response.

    Populates: final_response.

    Parameters
    ----------
    state : PlanState

    Returns
    -------
    dict
        Partial state update with ``final_response``.
    """
    if state.get("error"):
        return {"final_response": f"Error: {state['error']}"}
    return {"final_response": render_outline(state.get("planner") or [])}
