"""
FastAPI Application

HTTP interface for the password generator.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, init_settings
from core.passwords import PasswordBatchGenerator
from memory import InMemoryPasswordStore
from api.routes import passwords as password_routes

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None) -> FastAPI:
    """
    Application factory.
    Creates and configures the FastAPI app.
    """
    settings = settings or init_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        logger.info(
            f"Starting password generator "
            f"(workers={settings.concurrency.max_workers}, "
            f"persist={settings.storage.persist_generated})"
        )
        yield
        logger.info("Password generator stopped")

    app = FastAPI(
        title="Password Generator",
        description="Random password generation with bcrypt hashing",
        version="1.0.0",
        lifespan=lifespan
    )

    # Add CORS middleware for the browser client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Per-app wiring, read by the handlers through api.dependencies
    app.state.settings = settings
    app.state.batch_generator = PasswordBatchGenerator(
        limits=settings.limits,
        max_workers=settings.concurrency.max_workers,
    )
    app.state.password_store = (
        InMemoryPasswordStore() if settings.storage.persist_generated else None
    )

    _register_routes(app)

    return app


def _register_routes(app: FastAPI):
    """Register all API routes"""

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    app.include_router(password_routes.router)


app = create_app()
