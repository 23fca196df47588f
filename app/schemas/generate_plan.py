"""Request and response schemas for the plan endpoints."""

from pydantic import BaseModel, Field, field_validator

from app.schemas.planner import Task
from app.utils.constants import MAX_PROMPT_CHARS


class GeneratePlanRequest(BaseModel):
    """Free-text request typed by the user."""

    prompt: str = Field(min_length=1, max_length=MAX_PROMPT_CHARS)

    @field_validator("prompt", mode="before")
    @classmethod
    def _strip_prompt(cls, value):
        return value.strip() if isinstance(value, str) else value


class GeneratePlanResponse(BaseModel):
    """Planner returned to the client."""

    planner: list[Task]
    saved: bool = False


class LatestPlanResponse(BaseModel):
    prompt: str
    planner: list[Task]
    saved_at: str
