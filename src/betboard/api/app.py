"""FastAPI application factory.

API layer:
- Validates inputs, reads DB through the aggregation layer
- Returns payloads for the leaderboard UI
- Forbidden: writes
"""

from __future__ import annotations

from typing import Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from betboard.config import get_settings
from betboard.db.repo import DbSession
from betboard.db.session import get_session
from betboard.models.types import HealthStatus


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.database_url)
    try:
        yield session
    finally:
        session.close()


def create_app(database_url: str | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        database_url: Optional SQLAlchemy URL. Defaults to settings.

    Returns:
        Configured FastAPI application.
    """
    settings = get_settings()

    app = FastAPI(
        title="Betboard API",
        description="Customer profit leaderboard",
        version="0.1.0",
    )
    app.state.database_url = database_url or settings.database_url

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include routes
    from betboard.api.routes import leaderboard

    app.include_router(leaderboard.router)

    @app.get("/health", response_model=HealthStatus)
    def health_check() -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(status="ok")

    return app


# Default app instance
app = create_app()
