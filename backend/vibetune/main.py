"""
VibeTune Backend API

Main FastAPI application entry point.

Usage:
    vibetune-server
    uvicorn --factory vibetune.main:create_app

Environment Variables:
    DATABASE_URL: Async SQLAlchemy URL (required)
    SECRET_KEY: Token signing secret, at least 32 characters (required)
    PORT: Listen port (default: 3000)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from vibetune.api import api_router, library_router
from vibetune.core.config import Settings, get_settings
from vibetune.core.database import Database
from vibetune.core.errors import NotFound, register_exception_handlers
from vibetune.core.library import resolve_safe_path
from vibetune.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Build the application around one settings object.

    Args:
        settings: Application settings; loaded from the environment if omitted
        database: Database to use; built from ``settings.database_url`` if omitted
    """
    if settings is None:
        settings = get_settings()
    if database is None:
        database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s", settings.app_name, settings.version)
        await database.create_all_tables()
        yield
        logger.info("Shutting down %s", settings.app_name)
        await database.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Music player accounts, favorites, playlists and song library",
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    register_exception_handlers(app)

    # CORS configuration (loaded from settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_router, prefix="/api")
    app.include_router(library_router, tags=["library"])

    @app.get("/health")
    async def health_check():
        """
        Health check endpoint for Docker/orchestration.

        Returns overall status and the database check result.
        """
        checks = {}
        healthy = True

        try:
            await database.ping()
            checks["database"] = {"status": "healthy"}
        except Exception as e:
            logger.error("Database health check failed: %s", e)
            checks["database"] = {"status": "unhealthy", "error": str(e)}
            healthy = False

        return {
            "status": "healthy" if healthy else "unhealthy",
            "checks": checks,
            "version": settings.version,
        }

    frontend_root = Path(settings.frontend_path).resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        """Serve frontend assets, falling back to index.html for client routes."""
        if full_path.startswith("api/") or full_path == "api":
            raise NotFound("Not found")

        if full_path:
            try:
                asset = resolve_safe_path(frontend_root, full_path)
            except ValueError:
                raise NotFound("Not found")
            if asset.is_file():
                return FileResponse(asset)

        index = frontend_root / "index.html"
        if index.is_file():
            return FileResponse(index)
        return {"name": settings.app_name, "version": settings.version, "docs": "/docs"}

    return app


def main() -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
