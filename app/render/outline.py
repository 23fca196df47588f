"""Plain-text rendering of a planner as a collapsible outline."""

from __future__ import annotations

from typing import Any

COLLAPSED_MARK = "▸"
EXPANDED_MARK = "▾"
EMPTY_PLAN_TEXT = "No tasks planned."


def _time_range(task: dict[str, Any]) -> str:
    start = task.get("startTime") or ""
    end = task.get("endTime") or ""
    if start and end:
        return f"{start} - {end}"
    return start or end


def render_task(index: int, task: dict[str, Any], *, expanded: bool = False, done: bool = False) -> str:
    """Render one task; ``index`` is the 1-based number shown to the user."""
    parts = [f"[{'x' if done else ' '}] {index}."]
    time_range = _time_range(task)
    if time_range:
        parts.append(time_range)
    if task.get("icon"):
        parts.append(f"({task['icon']})")
    parts.append(task.get("taskName") or "Untitled task")
    parts.append(EXPANDED_MARK if expanded else COLLAPSED_MARK)
    lines = ["  ".join(parts)]
    if expanded:
        details = task.get("details") or "No details."
        lines.extend(f"      {row}" for row in details.splitlines() or [details])
    return "\n".join(lines)


class OutlineView:
    """Per-item expand/collapse and checkbox state for one planner."""

    def __init__(self, size: int = 0):
        self.reset(size)

    def reset(self, size: int) -> None:
        self.size = size
        self.expanded: set[int] = set()
        self.done: set[int] = set()

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"No task number {index + 1}")

    def toggle(self, index: int) -> bool:
        """Flip the expanded flag of task ``index`` (0-based); return the new value."""
        self._check(index)
        self.expanded ^= {index}
        return index in self.expanded

    def toggle_done(self, index: int) -> bool:
        self._check(index)
        self.done ^= {index}
        return index in self.done

    def render(self, tasks: list[dict[str, Any]]) -> str:
        if not tasks:
            return EMPTY_PLAN_TEXT
        return "\n".join(
            render_task(
                idx + 1,
                task,
                expanded=idx in self.expanded,
                done=idx in self.done,
            )
            for idx, task in enumerate(tasks)
        )


def render_outline(tasks: list[dict[str, Any]]) -> str:
    """Render every task collapsed."""
    return OutlineView(len(tasks)).render(tasks)
