"""FastAPI application for the letter house service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from letterhouse import __version__
from letterhouse.api import router as api_router
from letterhouse.core.config import get_settings
from letterhouse.core.database import init_db
from letterhouse.core.log_config import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app."""
    configure_logging(settings)
    try:
        logger.info("Starting up letter house API server...")
        await init_db()
        logger.info("Letter house API server startup complete!")

        yield

    except Exception as e:
        logger.error(f"Failed to start letter house API server: {e}")
        raise
    finally:
        logger.info("Shutting down letter house API server...")


# Create FastAPI application
app = FastAPI(
    title="Letter House API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(api_router, prefix="/api")


def run():
    import uvicorn

    uvicorn.run(
        "letterhouse.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
