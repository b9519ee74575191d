from __future__ import annotations

from dataclasses import dataclass

from medialist.utils.env import env_float, env_str

DEFAULT_TIMEOUT_SECONDS = 10.0


class ProviderConfigurationError(RuntimeError):
    """A provider key is missing or a provider setting in the environment is malformed."""


@dataclass(frozen=True)
class ProviderConfig:
    """
    Credentials and transport settings handed to each provider client at construction.

    Google Books is queried anonymously; `book_api_key` is recognized but not sent.
    The TV client shares the TMDb key with the movie client unless `tv_api_key` is set.
    """

    book_api_key: str | None = None
    movie_api_key: str | None = None
    tv_api_key: str | None = None
    game_api_key: str | None = None
    music_api_key: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Keys never show up in reprs or logs.
    def __repr__(self) -> str:
        configured = [
            name
            for name in ("book_api_key", "movie_api_key", "tv_api_key", "game_api_key", "music_api_key")
            if getattr(self, name)
        ]
        return f"ProviderConfig(configured={configured!r}, timeout_seconds={self.timeout_seconds!r})"

    @property
    def resolved_tv_api_key(self) -> str | None:
        return self.tv_api_key or self.movie_api_key

    @classmethod
    def from_env(cls) -> ProviderConfig:
        try:
            timeout_seconds = env_float("MEDIALIST_HTTP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
        except RuntimeError as exc:
            raise ProviderConfigurationError(str(exc)) from exc
        return cls(
            book_api_key=env_str("GOOGLE_BOOKS_API_KEY"),
            movie_api_key=env_str("TMDB_API_KEY"),
            tv_api_key=env_str("TMDB_TV_API_KEY"),
            game_api_key=env_str("RAWG_API_KEY"),
            music_api_key=env_str("LASTFM_API_KEY"),
            timeout_seconds=timeout_seconds,
        )
