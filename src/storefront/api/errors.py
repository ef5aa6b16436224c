"""Exception → HTTP response mapping.

protean's handlers cover domain errors (ValidationError → 400,
ObjectNotFoundError → 404). Malformed requests rejected by FastAPI before any
command is built are answered with 400 too, in the same field → messages shape.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_LOCATIONS = ("body", "path", "query", "header")


def _field_messages(exc: RequestValidationError) -> dict[str, list[str]]:
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part not in _LOCATIONS) or "request"
        messages.setdefault(field, []).append(error["msg"])
    return messages


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = _field_messages(exc)
        logger.warning("request_rejected", path=request.url.path, errors=messages)
        return JSONResponse(status_code=400, content={"error": messages})
