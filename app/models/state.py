"""LangGraph shared state definition."""

import threading
from typing import Any
from typing_extensions import TypedDict


class PlanState(TypedDict, total=False):
    """State passed between the plan graph nodes.

    Fields
    ------
    user_input : str
        Raw request text the user typed.
    planner : list[dict[str, Any]]
        Task dicts (camelCase keys) produced by the planner node.
    error : str | None
        Set when the model output could not be turned into a planner.
    saved : bool
        Whether the planner was written to the latest-plan store.
    final_response : str
        Plain-text outline of the planner.
    cancelled : threading.Event
        Set by the caller once it stops waiting for the result (timeout).
    """

    user_input: str
    planner: list[dict[str, Any]]
    error: str | None
    saved: bool
    final_response: str
    cancelled: threading.Event
