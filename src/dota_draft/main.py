"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dota_draft.config import settings
from dota_draft.api.routes.heroes import router as heroes_router
from dota_draft.api.routes.suggestions import router as suggestions_router
from dota_draft.services.opendota_client import OpenDotaClient


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: data provider client; the hero roster is fetched on first use
    if not hasattr(app.state, "opendota_client"):
        app.state.opendota_client = OpenDotaClient(
            base_url=settings.opendota_api_base,
            api_key=settings.opendota_api_key,
            timeout=settings.opendota_timeout,
        )
    yield
    # Shutdown
    await app.state.opendota_client.close()


app = FastAPI(
    title="Dota Draft Advisor",
    description="Dota 2 Draft Assistant - hero suggestions with score breakdowns",
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
    return {"status": "healthy", "service": "dota-draft-advisor"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Dota Draft Advisor API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(suggestions_router)
app.include_router(heroes_router)
