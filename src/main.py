"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 7878
      or: python -m src
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.sf_common.errors import AppError
from src.sf_common.log_setup import configure_logging
from src.sf_common.response import error_response
from src.sf_gateway.middleware.request_log import RequestLogMiddleware
from src.sf_snowflake.api.router import plain_router
from src.sf_snowflake.api.router import router as snowflake_router
from src.sf_snowflake.application.context import build_context

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: build the ServiceContext (verifies Redis). Shutdown: close it."""
    configure_logging(settings.LOG_LEVEL)
    app.state.context = await build_context(settings)
    yield
    await app.state.context.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("Request failed: code=%d %s", exc.code, exc.message)
    resp = error_response(exc.code, exc.message, getattr(request.state, "request_id", None))
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(plain_router)
app.include_router(snowflake_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": VERSION}
