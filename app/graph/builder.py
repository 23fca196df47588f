"""LangGraph graph builder: assembles the plan graph."""

from langgraph.graph import StateGraph, START, END

from app.models.state import PlanState
from app.agents.planner_agent import planner_node
from app.tools.store_plan import store_plan_node
from app.tools.format_response import format_response_node
from app.graph.routing import route_after_planner


def build_graph():
    """Construct and compile the plan graph.

    Graph topology::

        START → planner → (ok) store_plan → format_response → END
                        ↘ (error) ──────────↗

    Returns
    -------
    langgraph.graph.CompiledGraph
        The compiled, ready-to-invoke graph.
    """
    graph = StateGraph(PlanState)

    graph.add_node("planner", planner_node)
    graph.add_node("store_plan", store_plan_node)
    graph.add_node("format_response", format_response_node)

    graph.add_edge(START, "planner")
    graph.add_conditional_edges(
        "planner",
        route_after_planner,
        {"store_plan": "store_plan", "format_response": "format_response"},
    )
    graph.add_edge("store_plan", "format_response")
    graph.add_edge("format_response", END)

    return graph.compile()
