import logging
from typing import Mapping

from langchain_core.messages import AIMessage, ToolMessage
from langchain_core.runnables import Runnable
from langchain_core.tools import BaseTool

from travel_agent.models.state import AgentState


log = logging.getLogger("agent")


class UnknownToolError(LookupError):
    pass


def model_node(state: AgentState, llm: Runnable):
    response = llm.invoke(state.messages)
    if isinstance(response, AIMessage) and response.tool_calls:
        names = ", ".join(call["name"] for call in response.tool_calls)
        log.info(f"Model requested tools: {names}")
    return {"messages": [response]}


def tool_node(state: AgentState, tools: Mapping[str, BaseTool]):
    """Run every tool call on the last assistant message, in the order given."""
    last = state.messages[-1]
    results = []
    for call in last.tool_calls:
        tool = tools.get(call["name"])
        if tool is None:
            raise UnknownToolError(f"Model requested unknown tool: {call['name']}")
        output = tool.invoke(call["args"])
        results.append(
            ToolMessage(content=str(output), name=call["name"], tool_call_id=call["id"])
        )
    return {"messages": results}
