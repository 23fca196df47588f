"""Tests for JSON parsing and retry behavior."""

import pytest
from pydantic import ValidationError

from app.schemas.planner import PlannerOutput
from app.utils.llm_parse import parse_with_retry

GYM = (
    '{"taskName":"Gym","startTime":"07:00","endTime":"08:00",'
    '"icon":"dumbbell","details":"Leg day."}'
)


def _no_retry(_raw: str) -> str:
    raise AssertionError("retry should not be needed")


def test_parse_with_retry_accepts_bare_array():
    parsed = parse_with_retry(f"[{GYM}]", PlannerOutput, _no_retry)
    assert [task.task_name for task in parsed.tasks] == ["Gym"]


def test_parse_with_retry_unwraps_fenced_planner_object():
    raw = f'```json\n{{"planner": [{GYM}]}}\n```'
    parsed = parse_with_retry(raw, PlannerOutput, _no_retry)
    assert parsed.tasks[0].icon == "dumbbell"


def test_parse_with_retry_extracts_array_from_prose():
    raw = f"Sure! Here is your plan: [{GYM}] Have a great day."
    parsed = parse_with_retry(raw, PlannerOutput, _no_retry)
    assert parsed.tasks[0].start_time == "07:00"


def test_parse_with_retry_empty_array_is_a_valid_plan():
    parsed = parse_with_retry("[]", PlannerOutput, _no_retry)
    assert parsed.tasks == []


def test_parse_with_retry_recovers_from_malformed_json():
    raw = 'Here is output: [{"taskName":"Gym","startTime":"07:00"'
    calls = {"count": 0}

    def _retry_fn(_bad_raw: str) -> str:
        calls["count"] += 1
        return f"[{GYM}]"

    parsed = parse_with_retry(raw, PlannerOutput, _retry_fn)
    assert parsed.tasks[0].task_name == "Gym"
    assert calls["count"] == 1


def test_parse_with_retry_retries_on_empty_output():
    parsed = parse_with_retry("   ", PlannerOutput, lambda _raw: f"[{GYM}]")
    assert len(parsed.tasks) == 1


def test_parse_with_retry_rejects_invalid_schema_types():
    raw = '[{"taskName":"   ","startTime":"07:00","endTime":"08:00","icon":"bed","details":""}]'

    with pytest.raises(ValidationError):
        parse_with_retry(raw, PlannerOutput, lambda _raw: raw)


def test_parse_with_retry_raises_value_error_when_unrecoverable():
    with pytest.raises(ValueError, match="Unable to parse"):
        parse_with_retry("no json here", PlannerOutput, lambda _raw: "still nothing")


def test_parse_with_retry_raises_when_retry_is_empty():
    with pytest.raises(ValueError, match="Unable to parse"):
        parse_with_retry("nope", PlannerOutput, lambda _raw: "")


def test_parse_with_retry_repairs_invalid_escapes():
    raw = r'[{"taskName":"Leg\_day","startTime":"07:00","endTime":"08:00","icon":"dumbbell","details":""}]'
    parsed = parse_with_retry(raw, PlannerOutput, _no_retry)
    assert parsed.tasks[0].task_name == "Leg_day"


@pytest.mark.parametrize(
    "raw",
    [
        GYM,
        f'{{"tasks": [{GYM}]}}',
        f'{{"plan": [{GYM}]}}',
        f'{{"items": [{GYM}]}}',
    ],
)
def test_parse_with_retry_coerces_single_task_and_wrappers(raw):
    parsed = parse_with_retry(raw, PlannerOutput, _no_retry)
    assert [task.task_name for task in parsed.tasks] == ["Gym"]
