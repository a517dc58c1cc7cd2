from __future__ import annotations

import logging

from saberbot.core.logging import preview
from saberbot.schemas.chat import ChatRequest, ChatResponse
from saberbot.services.knowledge_base import KnowledgeBase
from saberbot.services.llm_service import TextGenerator
from saberbot.services.prompt_service import build_prompt

logger = logging.getLogger(__name__)


class ChatServiceError(RuntimeError):
    pass


class ServiceNotConfiguredError(RuntimeError):
    pass


class ChatService:
    """Turns one validated chat request into one generated answer.

    Holds no per-request state: the knowledge base is immutable and the
    generator is shared, so a single instance serves concurrent requests.
    """

    def __init__(self, knowledge_base: KnowledgeBase, generator: TextGenerator | None) -> None:
        self.knowledge_base = knowledge_base
        self._generator = generator

    @property
    def configured(self) -> bool:
        return self._generator is not None

    async def handle(self, request: ChatRequest) -> ChatResponse:
        if self._generator is None:
            raise ServiceNotConfiguredError("GEMINI_API_KEY is not configured")

        message = request.message
        logger.info("Message received: %s", preview(message))

        prompt = build_prompt(self.knowledge_base, message)
        try:
            answer = await self._generator.generate(prompt)
        except Exception as exc:
            logger.exception("Chat generation failed")
            raise ChatServiceError("Text generation failed") from exc

        logger.info("Response sent: %s", preview(answer))
        return ChatResponse(response=answer)
