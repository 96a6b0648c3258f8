# app/main.py (async version)

import logging
from pathlib import Path
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import RedirectResponse
from fastapi.openapi.utils import get_openapi
from contextlib import asynccontextmanager

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import create_schema, get_db_context

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    Creates the schema and loads the fixture groups and permissions
    when the corresponding settings are enabled.
    """
    # Startup
    logger.info("Application starting up...")

    if settings.AUTO_CREATE_SCHEMA:
        await create_schema()

    if settings.SEED_ON_STARTUP:
        from app.adapters.outbound.persistence.seeds import run_all_seeds

        async with get_db_context() as db:
            await run_all_seeds(db)

    yield

    # Shutdown
    logger.info("Application shutting down...")


# Create FastAPI instance
app = FastAPI(
    title="User Management",
    description="Users, groups and permissions over FastAPI Hexagonal Async",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Mount static files
app.mount("/static", StaticFiles(directory=Path(__file__).parent / "static"), name="static")

# Middlewares
from app.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    AsyncSecurityHeadersMiddleware,
    request_validation_exception_handler,
)

app.add_middleware(AsyncSecurityHeadersMiddleware)
app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Routers
from app.adapters.inbound.api.v1.router import api_router
from app.adapters.inbound.web.pages import router as web_router

app.include_router(api_router, prefix=settings.API_PREFIX)
app.include_router(web_router, prefix="/web", include_in_schema=False)


@app.get("/", include_in_schema=False)
async def redirect_to_users_page():
    return RedirectResponse(url="/web/users")


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    # Validation failures are answered with 400, never 422
    for schema in ("HTTPValidationError", "ValidationError"):
        openapi_schema.get("components", {}).get("schemas", {}).pop(schema, None)

    for path in openapi_schema.get("paths", {}).values():
        for op in path.values():
            op.get("responses", {}).pop("422", None)

    app.openapi_schema = openapi_schema
    return openapi_schema


app.openapi = custom_openapi
