"""Interactive CLI client for the /generate-plan endpoint."""

from __future__ import annotations

import argparse
from urllib.parse import urljoin

import requests

from app.models.view_state import (
    FAILED,
    LOADED,
    LOADING,
    initial_view_state,
    planner_reducer,
)
from app.render.outline import OutlineView

HELP_TEXT = (
    "Type a request to plan it. '<n>' expands/collapses task n, "
    "'done <n>' ticks it, 'latest' reloads the last saved plan, 'exit' quits."
)


def _error_detail(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    return f"Error {resp.status_code}: {detail or resp.text}"


def _task_index(token: str) -> int | None:
    return int(token) - 1 if token.isdigit() else None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive task planner CLI")
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:5000/",
        help="Planner service base URL",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=60,
        help="Request timeout in seconds",
    )
    args = parser.parse_args(argv)
    base_url = args.url.rstrip("/") + "/"

    state = initial_view_state()
    view = OutlineView()
    print(HELP_TEXT)

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            print()
            break

        if not user_input:
            continue
        lowered = user_input.lower()
        if lowered in {"exit", "quit"}:
            break
        if lowered in {"help", "?"}:
            print(HELP_TEXT)
            continue

        words = lowered.split()
        index = None
        if len(words) == 1:
            index = _task_index(words[0])
        elif len(words) == 2 and words[0] == "done":
            index = _task_index(words[1])
        if index is not None:
            try:
                if len(words) == 2:
                    view.toggle_done(index)
                else:
                    view.toggle(index)
            except IndexError as exc:
                print(exc)
                continue
            print(view.render(state["planner"]))
            continue

        state = planner_reducer(state, {"type": LOADING})
        print("Loading...")
        try:
            if lowered == "latest":
                resp = requests.get(urljoin(base_url, "plan/latest"), timeout=args.timeout)
            else:
                resp = requests.post(
                    urljoin(base_url, "generate-plan"),
                    json={"prompt": user_input},
                    timeout=args.timeout,
                )
        except requests.RequestException as exc:
            state = planner_reducer(state, {"type": FAILED, "error": str(exc)})
            print(f"Request failed: {exc}")
            continue

        if resp.status_code != 200:
            state = planner_reducer(state, {"type": FAILED, "error": _error_detail(resp)})
            print(state["error"])
            continue

        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            state = planner_reducer(state, {"type": FAILED, "error": "Invalid response from planner service"})
            print(state["error"])
            continue
        planner = body.get("planner") or []
        state = planner_reducer(state, {"type": LOADED, "payload": planner})
        view.reset(len(state["planner"]))
        print(view.render(state["planner"]))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
