# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import auth_router, groups_router, notes_router, register_exception_handlers
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_tables, engine

# Setup logging first
settings = get_settings()
setup_logging(settings)
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Pocket Notes application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    if settings.auto_create_tables:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise
    else:
        logger.info("Skipping table creation (auto_create_tables disabled)")

    yield

    logger.info("Shutting down Pocket Notes application")
    await engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application from the process settings."""
    application = FastAPI(
        title=settings.app_name,
        description="Groups and notes API",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Add logging middleware
    application.add_middleware(LoggingMiddleware)

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Include routers
    application.include_router(auth_router, prefix="/api")
    application.include_router(groups_router, prefix="/api")
    application.include_router(notes_router, prefix="/api")

    @application.get("/")
    async def root():
        return {"message": "Pocket Notes API"}

    @application.get("/health")
    async def basic_health():
        return {"status": "ok"}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pocketnotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
