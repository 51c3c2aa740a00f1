"""Optional HTTP preview of the reqkit helpers.

The library itself never needs this module; it exists so editors and scripts
can try the formatters over HTTP: `uvicorn reqkit.main:app --port 8000`.
"""
from __future__ import annotations

import os
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from reqkit.api import router as api_router
from reqkit.domain.ids import generate_id
from reqkit.domain.results import FormatError
from reqkit.logging_conf import get_logger, setup_logging

setup_logging()
logger = get_logger("app")

REQUEST_ID_HEADER = "X-Request-ID"


async def tag_and_time(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Echo (or mint) a request id and log one line per request with its timing."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or generate_id()
    request.state.request_id = request_id
    start = time.perf_counter()

    response = await call_next(request)

    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        f"{request.method} {request.url.path} {response.status_code}",
        extra={
            "event": "request",
            "request_id": request_id,
            "status_code": response.status_code,
            "elapsed_ms": round((time.perf_counter() - start) * 1000.0, 2),
        },
    )
    return response


async def format_error_handler(request: Request, exc: FormatError) -> JSONResponse:
    """Strict formatter failures become 422 with the error's machine code."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"error_code": exc.code, "error_message": str(exc)}},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="reqkit formatting preview",
        version=os.getenv("APP_VERSION", "0.1.0"),
    )
    app.middleware("http")(tag_and_time)
    app.add_exception_handler(FormatError, format_error_handler)

    @app.get("/health", summary="Liveness check")
    async def health() -> dict:
        return {"ok": True}

    app.include_router(api_router)
    return app


app = create_app()
