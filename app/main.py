"""FastAPI application serving POST /generate-plan and the latest-plan store."""

import logging
import threading
import concurrent.futures

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from app.schemas.generate_plan import (
    GeneratePlanRequest,
    GeneratePlanResponse,
    LatestPlanResponse,
)
from app.graph.builder import build_graph
from app.config import settings
from app.db.plan_store import clear_latest, load_latest
from app.llm.client import describe_model

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Task Planner", version="0.1.0")

# The browser client runs on a different port during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

graph = build_graph()


@app.post("/generate-plan", response_model=GeneratePlanResponse)
def generate_plan(request: GeneratePlanRequest):
    """Turn the user's request into a planner.

    Runs the plan graph in a worker thread bounded by ``plan_timeout_seconds``.
    """
    cancelled = threading.Event()
    state_input = {
        "user_input": request.prompt,
        "planner": [],
        "error": None,
        "saved": False,
        "final_response": "",
        "cancelled": cancelled,
    }

    logger.info("Plan graph invoke started")
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(graph.invoke, state_input)
        done, _ = concurrent.futures.wait(
            [future], timeout=settings.plan_timeout_seconds
        )
        if not done:
            cancelled.set()
            logger.error("Plan graph invoke timed out")
            raise HTTPException(status_code=504, detail="Plan generation timed out")
        try:
            result = future.result()
        except Exception as exc:
            logger.exception("Plan graph invoke failed")
            raise HTTPException(status_code=502, detail=str(exc) or "Plan generation failed") from exc
    finally:
        # Do not block the response on a model call that overran the timeout.
        executor.shutdown(wait=False)
    logger.info("Plan graph invoke finished")

    if result.get("error"):
        raise HTTPException(status_code=502, detail=result["error"])

    return GeneratePlanResponse(
        planner=result.get("planner") or [],
        saved=bool(result.get("saved")),
    )


@app.get("/plan/latest", response_model=LatestPlanResponse)
def get_latest_plan():
    """Return the last stored planner."""
    try:
        record = load_latest()
    except ValueError as exc:
        logger.error("Latest plan unreadable: %s", exc)
        raise HTTPException(status_code=500, detail="Stored plan is unreadable") from exc
    if record is None:
        raise HTTPException(status_code=404, detail="No plan stored yet")
    return LatestPlanResponse(**record)


@app.delete("/plan/latest", status_code=204)
def delete_latest_plan():
    clear_latest()
    return Response(status_code=204)


@app.get("/health")
def health():
    return {"ok": True, **describe_model()}


def main() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    main()
