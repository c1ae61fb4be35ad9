import logging

from langchain_core.messages import AIMessage

from travel_agent.agents.graph import create_agent
from travel_agent.agents.prompts import build_messages
from travel_agent.config.settings import MAX_TOOL_ROUNDS
from travel_agent.models.errors import ModelInvocationError
from travel_agent.models.schemas import TravelQuery


log = logging.getLogger("agent")


def message_text(message) -> str:
    content = message.content
    if isinstance(content, str):
        return content

    # Multi-part content: keep the text blocks only
    texts = []
    for part in content:
        if isinstance(part, str):
            texts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            texts.append(part.get("text", ""))
    return "".join(texts)


class TravelAgentService:
    def __init__(self, agent=None):
        self._agent = agent

    @property
    def agent(self):
        # Compiled on first use so importing the API does not touch the model config
        if self._agent is None:
            self._agent = create_agent()
        return self._agent

    def run(self, query: TravelQuery) -> str:
        """Send the query through the model/tool loop and return the final answer text.

        Any failure from the model or a tool surfaces as ModelInvocationError.
        There is no retry.
        """
        state = {"messages": build_messages(query)}
        try:
            result = self.agent.invoke(state, {"recursion_limit": MAX_TOOL_ROUNDS})
        except Exception as e:
            log.error(f"Agent execution failed: {e}")
            raise ModelInvocationError(str(e)) from e

        answer = next(
            (m for m in reversed(result["messages"]) if isinstance(m, AIMessage)),
            None,
        )
        if answer is None:
            raise ModelInvocationError("Agent returned no response")

        return message_text(answer)


# Global instance
travel_service = TravelAgentService()
