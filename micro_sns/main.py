"""Micro SNS API - FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from micro_sns.api.api import api_router
from micro_sns.core.config import settings
from micro_sns.core.errors import AppError, StoreError
from micro_sns.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from micro_sns.db.base import Base
    from micro_sns.db.session import engine
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.CREATE_TABLES_ON_STARTUP:
                await conn.run_sync(Base.metadata.create_all)
        logger.info("Database: OK")
    except Exception as e:
        logger.warning("Database connection failed: %s", e)
    logger.info("API: /api | Docs: /docs | Health: /api/health")
    yield
    await engine.dispose()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


def _validation_message(exc: RequestValidationError) -> str:
    """Summarize pydantic errors, e.g. "name, email required"."""
    missing: list[str] = []
    for err in exc.errors():
        field = str(err["loc"][-1]) if len(err["loc"]) > 1 else None
        if err["type"] in ("missing", "string_too_short"):
            if field is None:
                return "Request body required"
            missing.append(field)
    if missing:
        return f"{', '.join(missing)} required"
    err = exc.errors()[0]
    field = str(err["loc"][-1])
    return f"{field}: {err['msg']}"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(StoreError.status_code, StoreError.default_message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
