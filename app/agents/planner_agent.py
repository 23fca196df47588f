"""Planner agent node: turns a free-text request into a task plan."""

import logging

from app.llm.client import get_chat_model
from app.models.state import PlanState
from app.prompts.planner import (
    PLANNER_FIX_PROMPT,
    PLANNER_SYSTEM_PROMPT,
    PLANNER_USER_PROMPT,
)
from app.schemas.planner import PlannerOutput, Task
from app.utils.llm_helpers import invoke_llm
from app.utils.llm_parse import parse_with_retry

logger = logging.getLogger("uvicorn.error")


def _build_prompt(user_input: str) -> str:
    return PLANNER_SYSTEM_PROMPT + "\n\n" + PLANNER_USER_PROMPT.format(
        user_input=user_input,
    )


def generate_plan(user_input: str, llm=None) -> list[Task]:
    """Ask the model for a plan and return the validated tasks.

    Raises
    ------
    ValueError
        If the model output cannot be parsed or fails validation, even after
        one fix-up round trip.
    """
    if llm is None:
        llm = get_chat_model()
    logger.info("Planner LLM call started")
    content = invoke_llm(_build_prompt(user_input), llm)
    logger.info("Planner LLM call finished (%d chars)", len(content))

    def _retry(raw: str) -> str:
        logger.warning("Planner output invalid, asking model to fix it")
        return invoke_llm(PLANNER_FIX_PROMPT.format(raw=raw), llm)

    parsed = parse_with_retry(content, PlannerOutput, _retry)
    return parsed.tasks


def planner_node(state: PlanState) -> dict:
    """Generate the planner for the user's request.

    Populates: planner, error.

    Parameters
    ----------
    state : PlanState

    Returns
    -------
    dict
        Partial state update. ``error`` is set instead of raising when the
        model output is unusable; configuration and transport errors still
        propagate.
    """
    user_input = (state.get("user_input") or "").strip()
    llm = get_chat_model()
    try:
        tasks = generate_plan(user_input, llm)
    except ValueError as exc:
        logger.error("Planner parse failed: %s", exc)
        return {"planner": [], "error": "Model returned an invalid plan"}

    logger.info("Planner produced %d tasks", len(tasks))
    return {
        "planner": [task.model_dump(by_alias=True) for task in tasks],
        "error": None,
    }
