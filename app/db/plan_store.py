"""Latest-plan storage: one JSON file holding the last successful planner."""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from app.config import settings


def _store_path() -> Path:
    return Path(settings.plan_store_path)


def save_latest(prompt: str, planner: list[dict[str, Any]]) -> dict[str, Any]:
    """Write the planner, replacing any previous one, and return the record."""
    record = {
        "prompt": prompt,
        "planner": planner,
        "saved_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
    path = _store_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".latest_plan.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(record, fh, ensure_ascii=False, indent=2)
        os.replace(tmp_name, path)
    except Exception:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return record


def load_latest() -> dict[str, Any] | None:
    """Return the stored record, or None if nothing has been saved.

    Raises
    ------
    ValueError
        If the file exists but does not hold a plan record.
    """
    path = _store_path()
    if not path.exists():
        return None
    try:
        record = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Corrupt plan store at {path}") from exc
    if (
        not isinstance(record, dict)
        or not isinstance(record.get("planner"), list)
        or not isinstance(record.get("prompt"), str)
        or not isinstance(record.get("saved_at"), str)
    ):
        raise ValueError(f"Corrupt plan store at {path}")
    return record


def clear_latest() -> None:
    _store_path().unlink(missing_ok=True)
