"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hero_snapshot.config import settings
from hero_snapshot.api.routes.profile import router as profile_router
from hero_snapshot.services.opendota_client import OpenDotaClient
from hero_snapshot.services.profile_service import ProfileService
from hero_snapshot.services.reference_cache import load_snapshot_context

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    client = None
    # Startup: load reference data once, unless a test already provided a service
    if not hasattr(app.state, "profile_service"):
        client = OpenDotaClient(
            base_url=settings.opendota_base_url,
            timeout=settings.request_timeout,
        )
    try:
        if client is not None:
            context = await load_snapshot_context(client)
            app.state.profile_service = ProfileService(
                context,
                client,
                strict_item_lists=settings.strict_item_lists,
            )
        yield
    finally:
        # Shutdown: close the shared HTTP client
        if client is not None:
            await client.close()


app = FastAPI(
    title="Hero Snapshot",
    description="Dota 2 hero meta snapshot - win rate and popular items",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "hero-snapshot"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Hero Snapshot API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(profile_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)
