import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router
from app.core.config import get_settings
from app.services.discovery_call_errors import (
    DiscoveryCallError,
    DiscoveryCallValidationError,
    InvalidTimeSlotError,
    MethodNotAllowedError,
    MissingRequiredFieldsError,
)


logger = logging.getLogger(__name__)


def _configure_logging(log_level: str) -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger.info(
        "Starting %s version=%s environment=%s",
        settings.app_name,
        settings.app_version,
        settings.app_env,
    )
    yield


def create_application() -> FastAPI:
    settings = get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_url=f"{settings.api_prefix}/openapi.json",
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        lifespan=_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    app.add_exception_handler(DiscoveryCallError, _handle_discovery_call_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)

    return app


async def _handle_discovery_call_error(request: Request, exc: DiscoveryCallError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _handle_request_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    error = _classify_request_validation_error(exc)
    logger.warning(
        "Request rejected path=%s message=%s error_types=%s",
        str(request.url.path),
        error.message,
        [str(detail.get("type")) for detail in exc.errors()],
    )
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error = MethodNotAllowedError()
        return JSONResponse(status_code=error.status_code, content=error.to_payload())
    return await http_exception_handler(request, exc)


def _classify_request_validation_error(exc: RequestValidationError) -> DiscoveryCallValidationError:
    for detail in exc.errors():
        location = detail.get("loc") or ()
        if "selectedTimeSlot" in location:
            return InvalidTimeSlotError(str(detail.get("type")))
    return MissingRequiredFieldsError()


app = create_application()
