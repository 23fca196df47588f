"""Tests for the planner agent node."""

from types import SimpleNamespace

import pytest

from app.agents import planner_agent
from app.llm import client

VALID = (
    '[{"taskName":"Groceries","startTime":"10:00","endTime":"10:45",'
    '"icon":"shopping-cart","details":"Milk, eggs, bread."}]'
)


def _stub_llm(monkeypatch, replies):
    prompts = []
    replies = list(replies)

    def _invoke(prompt, _llm=None):
        prompts.append(prompt)
        return replies.pop(0)

    monkeypatch.setattr(planner_agent, "get_chat_model", lambda: SimpleNamespace())
    monkeypatch.setattr(planner_agent, "invoke_llm", _invoke)
    return prompts


def test_planner_node_returns_camel_case_tasks(monkeypatch):
    prompts = _stub_llm(monkeypatch, [VALID])

    result = planner_agent.planner_node({"user_input": "  buy groceries at ten "})

    assert result["error"] is None
    assert result["planner"] == [
        {
            "taskName": "Groceries",
            "startTime": "10:00",
            "endTime": "10:45",
            "icon": "shopping-cart",
            "details": "Milk, eggs, bread.",
        }
    ]
    assert "Request: buy groceries at ten" in prompts[0]


def test_planner_node_asks_model_to_fix_invalid_output(monkeypatch):
    prompts = _stub_llm(monkeypatch, ["I think you should shop.", VALID])

    result = planner_agent.planner_node({"user_input": "shopping"})

    assert len(result["planner"]) == 1
    assert len(prompts) == 2
    assert "I think you should shop." in prompts[1]


def test_planner_node_reports_error_when_output_stays_invalid(monkeypatch):
    _stub_llm(monkeypatch, ["garbage", "more garbage"])

    result = planner_agent.planner_node({"user_input": "shopping"})

    assert result == {"planner": [], "error": "Model returned an invalid plan"}


def test_planner_node_propagates_transport_errors(monkeypatch):
    monkeypatch.setattr(planner_agent, "get_chat_model", lambda: SimpleNamespace())

    def _boom(*_args, **_kwargs):
        raise ConnectionError("network down")

    monkeypatch.setattr(planner_agent, "invoke_llm", _boom)

    with pytest.raises(ConnectionError):
        planner_agent.planner_node({"user_input": "shopping"})


def test_generate_plan_raises_on_invalid_output(monkeypatch):
    _stub_llm(monkeypatch, ["nope", ""])

    with pytest.raises(ValueError):
        planner_agent.generate_plan("shopping")


def test_planner_node_propagates_unknown_provider(monkeypatch):
    monkeypatch.setattr(client.settings, "llm_provider", "parrot")

    def _unexpected(*_args, **_kwargs):
        raise AssertionError("model must not be called")

    monkeypatch.setattr(planner_agent, "invoke_llm", _unexpected)

    with pytest.raises(ValueError, match="Unknown LLM provider: parrot"):
        planner_agent.planner_node({"user_input": "shopping"})
