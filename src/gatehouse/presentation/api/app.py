"""Gatehouse ASGI application.

``create_app`` builds a fully wired FastAPI instance: one database engine
per app, the auth endpoints under ``/api/v1/auth`` and the unversioned
``/health`` and ``/`` endpoints. uvicorn loads it with ``factory=True``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatehouse.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_for_url,
    create_tables,
    ensure_sqlite_directory,
)
from gatehouse.presentation.api.exception_handlers import setup_exception_handlers
from gatehouse.presentation.api.routers import auth_router, system_router
from gatehouse.presentation.api.routers.system import API_V1_PREFIX, API_VERSION
from gatehouse_config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("httpx", "sqlalchemy.engine", "aiosqlite", "asyncpg")

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login and signup.

**Login:**
- Exchange email and password for an access token
- Unknown email and wrong password are indistinguishable (401)

**Signup:**
- Register with email, password and repeated password
- Passwords are hashed with bcrypt
""",
    },
    {"name": "Health", "description": "Liveness probe for load balancers."},
    {"name": "Info", "description": "Service name, version and endpoint map."},
]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Route all logging to stdout once per process.

    Gatehouse modules log at the configured level; the libraries in
    QUIET_LOGGERS only report warnings.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("gatehouse").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the schema on startup and release the pool on shutdown."""
    settings: Settings = app.state.settings
    engine = app.state.engine

    logger.info(
        "Starting %s API v%s (%s backend)",
        settings.app_name,
        API_VERSION,
        settings.database_backend,
    )
    ensure_sqlite_directory(settings.database_url)
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Database refused the connection; check POSTGRES_* settings")
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("%s API stopped, database pool disposed", settings.app_name)


def create_v1_router() -> APIRouter:
    """Collect the version 1 endpoints under one router."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the Gatehouse application.

    Parameters
    ----------
    settings
        Settings to run with. Tests pass their own; otherwise the cached
        environment settings are used.

    Returns
    -------
    The FastAPI app with state, middleware, handlers and routes in place.
    """
    settings = settings or get_settings()
    _configure_logging("DEBUG" if settings.debug else settings.log_level)

    # OpenAPI documents are only served in debug mode
    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Email/password **login** and **signup** service.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    # The engine opens no connection until the first query
    engine = create_engine_for_url(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    setup_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    return app
