"""Shared regex patterns and magic values used across the planner."""

import re

# "9:00", "09:30", "23:59". Single-digit hours are zero padded on the way in.
CLOCK_TIME_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")

# Icon names the client knows how to draw (lucide names).
KNOWN_ICONS: frozenset[str] = frozenset(
    {
        "briefcase",
        "book-open",
        "coffee",
        "dumbbell",
        "utensils",
        "shopping-cart",
        "car",
        "phone",
        "mail",
        "laptop",
        "music",
        "bed",
        "heart",
        "home",
        "users",
        "list-todo",
    }
)

DEFAULT_ICON = "list-todo"

MAX_PROMPT_CHARS = 4000

# Top-level keys a model may wrap the task array in.
PLANNER_WRAPPER_KEYS = ("tasks", "planner", "plan", "items")
