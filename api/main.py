"""FastAPI application for the Worksite Registry API."""

import asyncio
import logging
import subprocess
import sys
from contextlib import asynccontextmanager
from http import HTTPStatus
from pathlib import Path

import fastapi
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import get_settings
from core.database import create_engine, create_session_maker, dispose_engine, init_db
from core.exceptions import AppError
from core.logger import configure_logging
from core.middleware import RequestContextMiddleware, SecurityHeadersMiddleware
from core.ratelimit import limiter, rate_limit_exceeded_handler
from core.responses import send_error
from core.uploads import ensure_upload_dir
from routes import (
    customers_router,
    health_router,
    location_types_router,
    locations_router,
    managers_router,
    project_statuses_router,
    projects_router,
    service_companies_router,
    timesheets_router,
)

configure_logging()
logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render domain errors raised outside a service (validators, auth)."""
    if not isinstance(exc, AppError):
        return await global_exception_handler(request, exc)

    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(
        level,
        "request.rejected",
        extra={
            "error_type": type(exc).__name__,
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )
    return send_error(exc, exc.message)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unknown routes, wrong methods and readiness failures."""
    status_code = getattr(exc, "status_code", 500)
    detail = getattr(exc, "detail", None) or HTTPStatus(status_code).phrase
    response = send_error(str(detail), HTTPStatus(status_code).phrase, status_code)
    headers = getattr(exc, "headers", None)
    if headers:
        response.headers.update(headers)
    return response


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handler for malformed path/query parameters."""
    if not isinstance(exc, RequestValidationError):
        return await global_exception_handler(request, exc)

    errors = exc.errors()
    logger.warning(
        "request.validation_error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
        },
    )
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    if field:
        message = f"{field}: {message}"
    return send_error(f"ValidationError: {message}", message, 400)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled.exception",
        extra={
            "exc_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return send_error(
        "Internal Server Error", "An unexpected error occurred", status_code=500
    )


async def _run_alembic_migrations() -> None:
    """Run Alembic migrations in a subprocess.

    psycopg2's connection pool cleanup deadlocks inside
    asyncio.to_thread when uvloop is the event loop.  Running
    migrations as a subprocess avoids the issue entirely.
    """
    cmd = [sys.executable, "-m", "cli", "migrate"]
    cwd = Path(__file__).parent

    result = await asyncio.to_thread(
        lambda: subprocess.run(
            cmd, cwd=cwd, capture_output=True, text=True, timeout=120
        )
    )

    if result.returncode != 0:
        stderr = result.stderr.strip()
        logger.error("migrations.failed", extra={"stderr": stderr})
        raise RuntimeError(f"Alembic migration failed:\n{stderr}")

    logger.info("migrations.complete")


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create DB engine at startup, dispose on shutdown."""
    settings = get_settings()
    app.state.engine = create_engine()
    app.state.session_maker = create_session_maker(app.state.engine)

    app.state.init_done = False
    app.state.init_error = None

    try:
        async with asyncio.timeout(60):
            await init_db(app.state.engine)

        if settings.run_migrations:
            async with asyncio.timeout(120):
                await _run_alembic_migrations()

        upload_path = ensure_upload_dir()
        logger.info("uploads.ready", extra={"path": str(upload_path)})

        app.state.init_done = True
        logger.info("init.complete")
    except TimeoutError:
        logger.error(
            "init.timeout",
            extra={
                "hint": "Startup hung - check DB connectivity and migration state",
            },
        )
        raise RuntimeError("Application startup timed out")
    except Exception as e:
        app.state.init_error = str(e)
        logger.error("init.failed", extra={"error": str(e)}, exc_info=True)
        raise

    try:
        yield
    finally:
        await dispose_engine(app.state.engine)


_settings = get_settings()

app = fastapi.FastAPI(
    title="Worksite Registry API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if _settings.enable_docs or _settings.debug else None,
    redoc_url="/redoc" if _settings.enable_docs or _settings.debug else None,
    openapi_url=("/openapi.json" if _settings.enable_docs or _settings.debug else None),
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

if _settings.debug:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        expose_headers=["X-Request-Id"],
        max_age=600,
    )

# Outermost so every log line, including CORS and rate-limit rejections,
# carries the request id.
app.add_middleware(RequestContextMiddleware)

# Directory is created during startup.
app.mount(
    "/uploads",
    StaticFiles(directory=_settings.upload_path, check_dir=False),
    name="uploads",
)

app.include_router(health_router)
app.include_router(customers_router)
app.include_router(managers_router)
app.include_router(service_companies_router)
app.include_router(timesheets_router)
app.include_router(project_statuses_router)
app.include_router(location_types_router)
app.include_router(locations_router)
app.include_router(projects_router)
