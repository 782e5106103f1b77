import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.config import Settings, get_settings
from catalog.core.exceptions import CatalogError, describe_errors
from catalog.core.logging import setup_logging
from catalog.database import create_schema
from catalog.routers import health_router, products_router

logger = logging.getLogger(__name__)


async def catalog_error_handler(_request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = describe_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def http_error_handler(_request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(status_code=500, content={"error": CatalogError.message})


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    extra = {"method": request.method, "path": request.url.path}
    try:
        response = await call_next(request)
    except Exception:
        extra.update(status_code=500, duration_ms=round((time.perf_counter() - started) * 1000, 2))
        logger.info("Request failed", extra=extra)
        raise
    extra.update(
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    logger.info("Request handled", extra=extra)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    create_schema()
    logger.info("Product catalog schema ready")
    yield


def create_app() -> FastAPI:
    settings: Settings = get_settings()
    application = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    register_exception_handlers(application)
    application.middleware("http")(log_requests)
    application.include_router(health_router)
    application.include_router(products_router)
    return application


setup_logging()
app = create_app()


__all__ = ["app", "create_app"]
