from __future__ import annotations

import logging
from typing import Mapping

import requests

from medialist.config import ProviderConfig
from medialist.integrations.base import ProviderClient
from medialist.integrations.google_books import GoogleBooksClient
from medialist.integrations.lastfm import LastfmAlbumClient
from medialist.integrations.rawg import RawgGameClient
from medialist.integrations.tmdb.client import TmdbMovieClient, TmdbTvClient
from medialist.models.lookup import LookupResult, MediaType

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: dict[MediaType, type[ProviderClient]] = {
    MediaType.BOOK: GoogleBooksClient,
    MediaType.MOVIE: TmdbMovieClient,
    MediaType.TV: TmdbTvClient,
    MediaType.GAME: RawgGameClient,
    MediaType.MUSIC: LastfmAlbumClient,
}

NOT_FOUND_MESSAGES: dict[MediaType, str] = {
    MediaType.BOOK: "Book not found. Try different search terms.",
    MediaType.MOVIE: "Movie not found. Try different search terms.",
    MediaType.TV: "TV show not found. Try different search terms.",
    MediaType.GAME: "Game not found. Try different search terms.",
    MediaType.MUSIC: "Album not found. Try different search terms.",
}


class MetadataNotFoundError(LookupError):
    """The provider answered, but with no usable cover image."""

    def __init__(self, media_type: MediaType, message: str) -> None:
        super().__init__(message)
        self.media_type = media_type
        self.message = message


def build_provider_clients(
    config: ProviderConfig,
    *,
    session: requests.Session | None = None,
) -> dict[MediaType, ProviderClient]:
    return {media_type: cls(config, session=session) for media_type, cls in PROVIDER_CLASSES.items()}


class MetadataResolver:
    """
    Dispatches a lookup to exactly one provider client and applies the not-found policy.

    No retries and no fallback to a second provider. Transport errors from the
    client propagate unchanged.
    """

    def __init__(self, clients: Mapping[MediaType, ProviderClient]) -> None:
        missing = [t.value for t in MediaType if t not in clients]
        if missing:
            raise ValueError(f"No provider client registered for: {', '.join(missing)}")
        self._clients = dict(clients)

    @classmethod
    def from_config(cls, config: ProviderConfig, *, session: requests.Session | None = None) -> MetadataResolver:
        return cls(build_provider_clients(config, session=session))

    def resolve(self, media_type: MediaType | str, title: str, creator: str | None = None) -> LookupResult:
        media_type = MediaType(media_type)
        title = (title or "").strip()
        if not title:
            raise ValueError("title must be non-empty.")
        creator = (creator or "").strip() or None

        client = self._clients[media_type]
        result = client.resolve(title, creator)
        if not result.found:
            logger.info(f"No {media_type.value} match from {client.name} for {title!r}")
            raise MetadataNotFoundError(media_type, NOT_FOUND_MESSAGES[media_type])
        return result
