"""FastAPI application factory."""

from fastapi import FastAPI

from community_portal.api.access import router as access_router
from community_portal.api.socrates import router as socrates_router
from community_portal.app_logging import configure_logging
from community_portal.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    app = FastAPI()
    app.state.container = container

    app.include_router(access_router)
    app.include_router(socrates_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
