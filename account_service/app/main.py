"""
Main entrypoint for the Account Service API.

``create_app`` configures logging, builds the FastAPI application and
mounts the versioned routers.  The module creates ``app`` at import
time so it can be served directly::

    uvicorn account_service.app.main:app --reload

The database schema is brought up to date when the application starts.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.status import ReturnCode
from .schemas.account import AccountResponse

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
ACCOUNTS_PREFIX = f"{API_PREFIX}/accounts"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    version = init_db()
    logger.info("Database ready at schema version %s", version)
    yield


def describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten pydantic error entries into one readable message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "Invalid request: " + "; ".join(parts)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Requests to the account routes that fail body validation are
    answered with a ``BAD`` envelope and HTTP 200, like any other
    rejected account request.  Other routes keep FastAPI's default 422
    response.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        if not request.url.path.startswith(ACCOUNTS_PREFIX):
            return await request_validation_exception_handler(request, exc)
        message = describe_validation_error(exc)
        logger.info("Rejected account request: %s", message)
        response = AccountResponse.failure(ReturnCode.BAD, message)
        return JSONResponse(
            status_code=200,
            content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    app.include_router(v1_router, prefix=API_PREFIX)
    return app


app = create_app()
