import logging
import sys
from contextlib import AsyncExitStack, asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from saberbot.api import chat, health, root
from saberbot.core.config import ConfigurationError, Settings, get_settings
from saberbot.core.errors import register_exception_handlers
from saberbot.core.logging import configure_logging
from saberbot.services.chat_service import ChatService
from saberbot.services.knowledge_base import load_knowledge_base
from saberbot.services.llm_service import GeminiClient, TextGenerator

configure_logging()

logger = logging.getLogger(__name__)


async def answer_options(request: Request, call_next) -> Response:
    """Bare OPTIONS succeeds with no body on every path."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK)
    return await call_next(request)


def _log_startup_banner(settings: Settings, chat_service: ChatService) -> None:
    logger.info("=" * 50)
    logger.info("%s v%s started", settings.app_name, settings.app_version)
    logger.info("API key: %s", settings.masked_api_key)
    logger.info("Model: %s", settings.gemini_model)
    logger.info("Knowledge base: %d characters", chat_service.knowledge_base.characters)
    logger.info("Endpoints: POST /chat, POST /api/chat, GET /health")
    logger.info("=" * 50)


def create_app(settings: Settings | None = None, generator: TextGenerator | None = None) -> FastAPI:
    """Build the API.

    ``generator`` replaces the Gemini client; when omitted, one is created at
    startup from ``settings`` and closed at shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if generator is None and not settings.api_key_configured:
            if settings.fail_fast_on_missing_key:
                settings.require_api_key()
            logger.error("GEMINI_API_KEY is not configured; chat requests will fail")

        knowledge_base = load_knowledge_base(settings.knowledge_base_candidates())

        async with AsyncExitStack() as stack:
            active_generator = generator
            if active_generator is None and settings.api_key_configured:
                http_client = await stack.enter_async_context(
                    httpx.AsyncClient(timeout=settings.gemini_timeout_seconds)
                )
                active_generator = GeminiClient(
                    http_client,
                    api_key=settings.gemini_api_key.strip(),
                    model=settings.gemini_model,
                    api_base=settings.gemini_api_base,
                    max_retries=settings.gemini_max_retries,
                    retry_backoff_seconds=settings.gemini_retry_backoff_seconds,
                )

            app.state.chat_service = ChatService(knowledge_base, active_generator)
            _log_startup_banner(settings, app.state.chat_service)
            yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Must sit inside CORSMiddleware, which answers browser preflights itself.
    app.middleware("http")(answer_options)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(chat.router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    try:
        settings.require_api_key()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        logger.error("Get a key at https://aistudio.google.com/app/apikey")
        sys.exit(1)

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
