from fastapi import APIRouter, Depends

from saberbot.api.dependencies import get_app_settings
from saberbot.core.config import Settings
from saberbot.schemas.health import ServiceDescriptor

router = APIRouter(tags=["root"])

ENDPOINTS = {
    "chat": "POST /api/chat",
    "chat_alias": "POST /chat",
    "health": "GET /health",
}


@router.get("/", response_model=ServiceDescriptor)
def root(settings: Settings = Depends(get_app_settings)):
    return ServiceDescriptor(
        service=settings.app_name,
        version=settings.app_version,
        endpoints=ENDPOINTS,
    )
