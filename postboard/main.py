import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from postboard.core.config import Settings, load_settings
from postboard.core.database import Database
from postboard.core.middlewares.request_logging import RequestLoggingMiddleware
from postboard.core.observability import setup_logging
from postboard.core.response.handlers import register_exception_handlers

# Import routers from apps
from postboard.apps.blog import build_post_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    # Startup: Create database tables
    await database.create_all()
    logger.info("Database ready at %s", database.engine.url.render_as_string(hide_password=True))
    yield
    # Shutdown: Clean up resources
    logger.info("Shutting down...")
    await database.disconnect()


def build_api_router(settings: Settings, database: Database) -> APIRouter:
    """Everything served under /api."""
    api_router = APIRouter(prefix="/api")
    api_router.include_router(build_post_router(database, clock=settings.get_now))
    return api_router


def create_app(settings: Settings, database: Optional[Database] = None) -> FastAPI:
    """Build the application for the given settings."""
    if database is None:
        database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps everything else
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/", tags=["Health"])
    async def root():
        """Liveness check."""
        return {"status": "UP", "port": settings.PORT}

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Readiness check: the database answers."""
        if await request.app.state.database.ping():
            return {"status": "healthy", "database": "up"}
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "down"},
        )

    app.include_router(build_api_router(settings, database))
    return app


def serve(settings: Settings) -> None:
    """Configure logging and run the server until interrupted."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    app = create_app(settings)
    logger.info(
        "Starting %s in %s mode on port %s",
        settings.PROJECT_NAME, settings.ENVIRONMENT, settings.PORT,
    )
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    serve(load_settings())
