"""Client-side loading/result state and its reducer."""

from __future__ import annotations

from typing import Any
from typing_extensions import NotRequired, TypedDict


class PlannerViewState(TypedDict):
    isLoading: bool
    planner: list[dict[str, Any]]
    error: str | None


class PlannerAction(TypedDict):
    type: str
    payload: NotRequired[list[dict[str, Any]]]
    error: NotRequired[str]


LOADING = "loading"
LOADED = "AI_response/loaded"
FAILED = "AI_response/failed"


def initial_view_state() -> PlannerViewState:
    return {"isLoading": False, "planner": [], "error": None}


def planner_reducer(state: PlannerViewState, action: PlannerAction) -> PlannerViewState:
    """Return the next view state for ``action``. ``state`` is not mutated.

    ``loading`` keeps the current planner on screen until the reply lands;
    a failure keeps it as well so the user does not lose the last good plan.
    """
    action_type = action.get("type")
    if action_type == LOADING:
        return {**state, "isLoading": True, "error": None}
    if action_type == LOADED:
        return {
            "isLoading": False,
            "planner": list(action.get("payload") or []),
            "error": None,
        }
    if action_type == FAILED:
        return {
            **state,
            "isLoading": False,
            "error": action.get("error") or "Unknown error",
        }
    raise ValueError(f"Unknown action: {action_type}")
