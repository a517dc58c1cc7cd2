from fastapi import Request

from saberbot.core.config import Settings
from saberbot.services.chat_service import ChatService


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
