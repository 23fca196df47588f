"""Latest-plan persistence tool node."""

import logging

from app.config import settings
from app.db.plan_store import save_latest
from app.models.state import PlanState

logger = logging.getLogger("uvicorn.error")


def store_plan_node(state: PlanState) -> dict:
    """Persist the planner as the latest plan when storage is enabled.

    A request the caller already abandoned (``cancelled`` set) is not stored.

    Populates: saved.
    """
    if not settings.persist_latest_plan:
        return {"saved": False}
    cancelled = state.get("cancelled")
    if cancelled is not None and cancelled.is_set():
        logger.info("Plan request was abandoned, not storing it")
        return {"saved": False}
    try:
        save_latest(state.get("user_input", ""), state.get("planner") or [])
    except OSError as exc:
        logger.warning("Could not store latest plan: %s", exc)
        return {"saved": False}
    logger.info("Stored latest plan at %s", settings.plan_store_path)
    return {"saved": True}
