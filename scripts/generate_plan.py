"""One-shot plan generation without the HTTP service.

Usage:
    python scripts/generate_plan.py "gym at 7, groceries, finish the report"
    python scripts/generate_plan.py "study for the exam" --json
"""

import argparse
import json
import sys

from app.agents.planner_agent import generate_plan
from app.llm.client import get_chat_model
from app.render.outline import OutlineView


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a task plan.")
    parser.add_argument("request", help="Free-text request to plan.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the planner as JSON instead of an outline.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    try:
        llm = get_chat_model()
    except (RuntimeError, ValueError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    try:
        tasks = generate_plan(args.request, llm)
    except ValueError as exc:
        print(f"Model returned an invalid plan: {exc}", file=sys.stderr)
        return 1

    planner = [task.model_dump(by_alias=True) for task in tasks]
    if args.json:
        print(json.dumps(planner, ensure_ascii=False, indent=2))
        return 0
    view = OutlineView(len(planner))
    for idx in range(len(planner)):
        view.toggle(idx)
    print(view.render(planner))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
