from typing import Mapping, Optional

from langchain_core.tools import BaseTool
from langgraph.graph import StateGraph, END

from travel_agent.models.state import AgentState
from travel_agent.agents.nodes import model_node, tool_node
from travel_agent.agents.routers import tool_call_router
from travel_agent.agents.tools import TOOL_REGISTRY
from travel_agent.services.llm_service import LLMService, llm_service


def create_agent(service: Optional[LLMService] = None, tools: Mapping[str, BaseTool] = TOOL_REGISTRY):
    tool_llm = (service or llm_service).get_tool_llm(tools.values())

    def model(state: AgentState):
        return model_node(state, tool_llm)

    def run_tools(state: AgentState):
        return tool_node(state, tools)

    graph = StateGraph(AgentState)

    graph.add_node("model", model)
    graph.add_node("tools", run_tools)

    graph.set_entry_point("model")

    graph.add_conditional_edges("model", tool_call_router, ["tools", END])
    graph.add_edge("tools", "model")

    return graph.compile()
