"""Integration-style tests for graph builder routing flow."""

from app.graph import builder

TASK = {
    "taskName": "Gym",
    "startTime": "07:00",
    "endTime": "08:00",
    "icon": "dumbbell",
    "details": "Leg day.",
}


def _base_state():
    return {
        "user_input": "gym at 7",
        "planner": [],
        "error": None,
        "saved": False,
        "final_response": "",
    }


def test_build_graph_ok_path_stores_and_formats(monkeypatch):
    stored = []
    monkeypatch.setattr(builder, "planner_node", lambda _state: {"planner": [TASK], "error": None})

    def _store(state):
        stored.append(state["planner"])
        return {"saved": True}

    monkeypatch.setattr(builder, "store_plan_node", _store)

    graph = builder.build_graph()
    result = graph.invoke(_base_state())

    assert stored == [[TASK]]
    assert result["saved"] is True
    assert "07:00 - 08:00" in result["final_response"]
    assert "Gym" in result["final_response"]


def test_build_graph_error_path_skips_store(monkeypatch):
    monkeypatch.setattr(
        builder,
        "planner_node",
        lambda _state: {"planner": [], "error": "Model returned an invalid plan"},
    )

    def _store(_state):
        raise AssertionError("store_plan must not run after a planner error")

    monkeypatch.setattr(builder, "store_plan_node", _store)

    graph = builder.build_graph()
    result = graph.invoke(_base_state())

    assert result["saved"] is False
    assert result["final_response"] == "Error: Model returned an invalid plan"
