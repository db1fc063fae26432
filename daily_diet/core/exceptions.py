import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP-ошибки со строковым detail отдаются в виде {"error": "..."}

    Это же касается 404/405 самого роутера. Нестроковый detail
    уходит в стандартный обработчик FastAPI ({"detail": ...}).
    """
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")

    if not isinstance(exc.detail, str):
        return await default_http_exception_handler(request, exc)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
