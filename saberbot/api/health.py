from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from saberbot.api.dependencies import get_app_settings, get_chat_service
from saberbot.core.config import Settings
from saberbot.schemas.health import GeminiStatus, HealthResponse, KnowledgeBaseStatus
from saberbot.services.chat_service import ChatService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check(
    settings: Settings = Depends(get_app_settings),
    chat_service: ChatService = Depends(get_chat_service),
):
    knowledge_base = chat_service.knowledge_base
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        knowledge_base=KnowledgeBaseStatus(
            loaded=knowledge_base.loaded,
            characters=knowledge_base.characters,
            source=str(knowledge_base.source) if knowledge_base.source else None,
        ),
        gemini=GeminiStatus(
            configured=chat_service.configured,
            model=settings.gemini_model,
        ),
    )
