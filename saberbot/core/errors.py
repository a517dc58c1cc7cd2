from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

INVALID_MESSAGE = "Messaggio vuoto o non valido"
METHOD_NOT_ALLOWED = "Metodo non consentito."
METHOD_NOT_ALLOWED_USE_POST = "Metodo non consentito. Usa POST."
INTERNAL_ERROR = "Errore interno del server"
FALLBACK_RESPONSE = "Mi dispiace, si è verificato un errore tecnico. Riprova tra qualche istante."
NOT_CONFIGURED_ERROR = "API Key non configurata"
NOT_CONFIGURED_RESPONSE = "Servizio non configurato."


def error_response(
    status_code: int,
    error: str,
    response: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, str] = {"error": error}
    if response is not None:
        content["response"] = response
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    headers = getattr(exc, "headers", None)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        allowed = (headers or {}).get("Allow", "")
        methods = {method.strip() for method in allowed.split(",")}
        message = METHOD_NOT_ALLOWED_USE_POST if "POST" in methods else METHOD_NOT_ALLOWED
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
