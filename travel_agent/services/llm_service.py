from typing import Optional, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.tools import BaseTool
from langchain_ollama import ChatOllama

from travel_agent.config.settings import OLLAMA_MODEL, OLLAMA_BASE_URL, OLLAMA_TEMPERATURE


class LLMService:
    def __init__(self, llm: Optional[BaseChatModel] = None):
        if llm is None:
            llm = ChatOllama(
                model=OLLAMA_MODEL,
                base_url=OLLAMA_BASE_URL,
                temperature=OLLAMA_TEMPERATURE,
            )
        self.llm = llm

    def get_tool_llm(self, tools: Sequence[BaseTool]):
        return self.llm.bind_tools(list(tools))


# Global instance
llm_service = LLMService()
