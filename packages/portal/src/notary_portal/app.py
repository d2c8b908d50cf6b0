"""FastAPI application factory."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notary_shared.config import settings
from notary_shared.constants import GENERIC_ERROR_MESSAGE
from notary_client.utils.logging import configure_logging

from notary_portal import __version__
from notary_portal.middleware.logging import LoggingMiddleware
from notary_portal.responses import error_response
from notary_portal.routers.health import router as health_router
from notary_portal.routers.v1 import v1_router

logger = structlog.get_logger()


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.status_code, str(exc.detail)),
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    message = ", ".join(e["message"] for e in errors) or GENERIC_ERROR_MESSAGE
    return JSONResponse(status_code=422, content=error_response(422, message, errors))


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, error=str(exc), exc_info=True)
    return JSONResponse(status_code=500, content=error_response(500))


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Notary Portal API",
        description="Fee quotes, assistant replies and booking slots for the notary portal",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Every response, errors included, uses the envelope
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    # Routers
    app.include_router(health_router)
    app.include_router(v1_router)

    logger.info("app_created", cors_origins=settings.cors_origins_list)
    return app


app = create_app()
