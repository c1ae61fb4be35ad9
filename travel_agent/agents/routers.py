from langchain_core.messages import AIMessage
from langgraph.graph import END

from travel_agent.models.state import AgentState


def tool_call_router(state: AgentState):
    if not state.messages:
        return END

    last = state.messages[-1]
    if isinstance(last, AIMessage) and last.tool_calls:
        return "tools"

    return END
