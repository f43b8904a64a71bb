from typing import List

from langchain_community.adapters.openai import convert_openai_messages
from langchain_openai import ChatOpenAI

from ..api.ChatSchemas import ChatTurn
from ..settings.config import settings
from ..settings.logging import app_logger as logger
from .errors import CompletionError


class LLMService:
    def __init__(self):
        # No sampling parameters, the provider defaults apply
        self.model = ChatOpenAI(
            model=settings.LLM_MODEL,
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.LLM_TIMEOUT,
            max_retries=0,
        )


class ConversationAgent:

    def __init__(self, llm):
        self.llm = llm

    def build_messages(self, system_prompt: str, user_message: str) -> List[dict]:
        turns = [
            ChatTurn(role="system", content=system_prompt),
            ChatTurn(role="user", content=user_message),
        ]
        return [turn.model_dump() for turn in turns]

    def complete(self, system_prompt: str, user_message: str) -> str:
        lc_messages = convert_openai_messages(self.build_messages(system_prompt, user_message))
        try:
            response = self.llm.invoke(lc_messages)
        except Exception as e:
            logger.error("Chat completion failed: %s", e)
            raise CompletionError(f"No se pudo obtener respuesta del asistente: {e}") from e

        content = getattr(response, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.error("Chat completion returned no text: %r", response)
            raise CompletionError("El asistente no devolvió ninguna respuesta.")

        logger.info("Raw LLM response: %s", content)
        return content


llm_service = LLMService()
conversation_agent = ConversationAgent(llm=llm_service.model)
