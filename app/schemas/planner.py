"""Schemas for planner output and the JSON schema handed to the model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.utils.constants import CLOCK_TIME_RE, DEFAULT_ICON, KNOWN_ICONS


class Task(BaseModel):
    """One planner entry. Serialised with camelCase keys for the client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    task_name: str = Field(min_length=1)
    start_time: str = ""
    end_time: str = ""
    icon: str = DEFAULT_ICON
    details: str = ""

    @field_validator("task_name", "details", mode="before")
    @classmethod
    def _strip_text(cls, value):
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value):
        if value is None:
            return ""
        text = str(value).strip()
        match = CLOCK_TIME_RE.match(text)
        if match:
            return f"{int(match.group(1)):02d}:{match.group(2)}"
        return text

    @field_validator("icon", mode="before")
    @classmethod
    def _normalize_icon(cls, value):
        name = str(value or "").strip().lower().replace(" ", "-")
        return name if name in KNOWN_ICONS else DEFAULT_ICON


class PlannerOutput(BaseModel):
    tasks: list[Task] = Field(default_factory=list)


# Passed verbatim as the structured-output constraint. Keys must stay in sync
# with Task's aliases.
PLANNER_RESPONSE_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "taskName": {
                "type": "string",
                "description": "Short imperative name of the task.",
            },
            "startTime": {
                "type": "string",
                "description": "Start time as 24-hour HH:MM.",
            },
            "endTime": {
                "type": "string",
                "description": "End time as 24-hour HH:MM.",
            },
            "icon": {
                "type": "string",
                "enum": sorted(KNOWN_ICONS),
                "description": "Icon that best represents the task.",
            },
            "details": {
                "type": "string",
                "description": "One or two sentences on what to do.",
            },
        },
        "required": ["taskName", "startTime", "endTime", "icon", "details"],
    },
}
