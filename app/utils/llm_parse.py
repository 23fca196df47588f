"""LLM JSON parsing helpers with schema validation and retry."""

from __future__ import annotations

import json
import re
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.utils.constants import PLANNER_WRAPPER_KEYS

T = TypeVar("T", bound=BaseModel)

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def _strip_code_fences(raw: str) -> str:
    text = raw.strip()
    match = _CODE_FENCE_RE.match(text)
    return match.group(1) if match else text


def _coerce_planner_shape(data):
    # The response schema asks for a bare array; models sometimes wrap it
    # or return a single task object.
    if isinstance(data, list):
        return {"tasks": data}
    if isinstance(data, dict) and "tasks" not in data:
        for key in PLANNER_WRAPPER_KEYS:
            if isinstance(data.get(key), list):
                return {"tasks": data[key]}
        if "taskName" in data or "task_name" in data:
            return {"tasks": [data]}
    return data


def parse_json_with_schema(raw: str, schema: Type[T]) -> T:
    data = json.loads(_strip_code_fences(raw))
    return schema.model_validate(_coerce_planner_shape(data))


def _sanitize_invalid_escapes(raw: str) -> str:
    return re.sub(r'\\([^"\\/bfnrtu])', r"\1", raw)


def _extract_json_block(raw: str) -> str | None:
    """Return the first balanced JSON array or object embedded in ``raw``."""
    if not raw:
        return None
    starts = [idx for idx in (raw.find("["), raw.find("{")) if idx != -1]
    if not starts:
        return None
    start = min(starts)
    opener = raw[start]
    closer = "]" if opener == "[" else "}"
    depth = 0
    in_string = False
    escaped = False
    for idx in range(start, len(raw)):
        char = raw[idx]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return raw[start : idx + 1]
    return None


def _parse_repaired(raw: str, schema: Type[T]) -> T:
    candidates = [_sanitize_invalid_escapes(raw)]
    extracted = _extract_json_block(raw)
    if extracted:
        candidates.append(_sanitize_invalid_escapes(extracted))

    last_error: Exception | None = None
    for candidate in candidates:
        try:
            return parse_json_with_schema(candidate, schema)
        except (json.JSONDecodeError, ValidationError) as exc:
            last_error = exc
    if isinstance(last_error, ValidationError):
        raise last_error
    raise ValueError("Unable to parse JSON from model output.") from last_error


def parse_with_retry(raw: str, schema: Type[T], retry_fn) -> T:
    """Parse JSON with schema; retry once using retry_fn if invalid.

    Raises
    ------
    pydantic.ValidationError
        If the fixed-up output is JSON but still violates ``schema``.
    ValueError
        If no JSON can be recovered even after the retry.
    """
    if raw and raw.strip():
        try:
            return parse_json_with_schema(raw, schema)
        except (json.JSONDecodeError, ValidationError):
            pass
        try:
            return _parse_repaired(raw, schema)
        except ValueError:
            pass

    corrected = retry_fn(raw)
    if not corrected or not corrected.strip():
        raise ValueError("Unable to parse JSON after retries.")
    try:
        return parse_json_with_schema(corrected, schema)
    except json.JSONDecodeError:
        return _parse_repaired(corrected, schema)
