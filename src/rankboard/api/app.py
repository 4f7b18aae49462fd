"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from rankboard.config import LeaderboardConfig, load_config


def get_config() -> LeaderboardConfig:
    """Dependency returning settings from the environment."""
    return load_config()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Rankboard API",
        description="Top players by mean score from CSV play logs",
        version="0.1.0",
    )

    # Include routes
    from rankboard.api.routes import leaderboard

    app.include_router(leaderboard.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
