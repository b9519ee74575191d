"""
Medialist API - FastAPI application.

Provides endpoints for:
- Browsing the media catalog, optionally filtered by media type
- Adding books, movies, TV shows, games and albums with automatically fetched cover art
- Editing and deleting your own entries
"""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import deps
from api.routers import media
from medialist.config import ProviderConfigurationError

logger = logging.getLogger(__name__)


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=https://medialist.example.com,https://app.medialist.example.com
    """
    origins_str = os.getenv("CORS_ALLOW_ORIGINS", "")
    if not origins_str:
        return []
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting up Medialist API...")
    try:
        deps.get_provider_config()
    except ProviderConfigurationError as exc:
        # Reads keep working; creates answer 502 until the setting is fixed.
        logger.error(f"Provider configuration is invalid: {exc}")
    yield
    logger.info("Shutting down Medialist API...")


app = FastAPI(
    title="Medialist API",
    description="Personal media catalog with cover art and release years from public catalogs",
    version="0.1.0",
    lifespan=lifespan,
)

# If no origins configured, allows all origins but disables credentials
cors_origins = get_cors_origins()
allow_credentials = len(cors_origins) > 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(media.router, prefix="/api/v1")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "medialist"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
