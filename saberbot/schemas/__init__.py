from saberbot.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from saberbot.schemas.health import (
    GeminiStatus,
    HealthResponse,
    KnowledgeBaseStatus,
    ServiceDescriptor,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "GeminiStatus",
    "HealthResponse",
    "KnowledgeBaseStatus",
    "ServiceDescriptor",
]
