import json
import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from saberbot.api.dependencies import get_chat_service
from saberbot.core.errors import (
    FALLBACK_RESPONSE,
    INTERNAL_ERROR,
    INVALID_MESSAGE,
    NOT_CONFIGURED_ERROR,
    NOT_CONFIGURED_RESPONSE,
    error_response,
)
from saberbot.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from saberbot.services.chat_service import (
    ChatService,
    ChatServiceError,
    ServiceNotConfiguredError,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def _parse_chat_request(request: Request) -> ChatRequest | None:
    body = await request.body()
    if not body:
        return None
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if not isinstance(payload, dict):
        return None
    try:
        return ChatRequest.model_validate(payload)
    except ValidationError:
        return None


@router.post("/chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
@router.post("/api/chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
async def chat(
    request: Request,
    chat_service: ChatService = Depends(get_chat_service),
):
    chat_request = await _parse_chat_request(request)
    if chat_request is None:
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_MESSAGE)

    try:
        return await chat_service.handle(chat_request)
    except ServiceNotConfiguredError:
        logger.error("Chat request rejected: GEMINI_API_KEY is not configured")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            NOT_CONFIGURED_ERROR,
            NOT_CONFIGURED_RESPONSE,
        )
    except ChatServiceError:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR,
            FALLBACK_RESPONSE,
        )

