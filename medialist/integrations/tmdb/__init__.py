"""
TMDb integration clients.
"""

from __future__ import annotations

from medialist.integrations.tmdb.client import (
    TMDB_IMAGE_BASE_URL,
    TmdbMovieClient,
    TmdbTvClient,
    poster_url,
)

__all__ = [
    "TMDB_IMAGE_BASE_URL",
    "TmdbMovieClient",
    "TmdbTvClient",
    "poster_url",
]
