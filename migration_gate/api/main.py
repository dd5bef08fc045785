"""FastAPI application entry point."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import GateSettings
from ..engine import AcknowledgingEngine, MigrationEngine
from .routes import migrations


def create_app(
    settings: Optional[GateSettings] = None,
    engine: Optional[MigrationEngine] = None,
) -> FastAPI:
    """Build the API with the given settings and migration engine."""
    settings = settings or GateSettings.from_env()

    app = FastAPI(
        title="Migration Gate API",
        description="Admission gate for cloud media migrations",
        version=__version__,
    )
    app.state.settings = settings
    app.state.migration_engine = engine or AcknowledgingEngine()

    # CORS middleware for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        migrations.router,
        prefix=f"{settings.api_prefix}/migrations",
        tags=["migrations"],
    )

    @app.get(f"{settings.api_prefix}/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
