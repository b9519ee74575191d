from __future__ import annotations

from medialist.integrations.base import ProviderClient, require_key
from medialist.integrations.extract import dig_str, first_item, year_from_date
from medialist.models.lookup import LookupResult

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"


def poster_url(poster_path: str) -> str:
    """
    Build a full poster URL from a TMDb `poster_path` ("/abc.jpg").

    Returns "" when TMDb has no poster.
    """

    if not poster_path:
        return ""
    return f"{TMDB_IMAGE_BASE_URL}{poster_path}"


class _TmdbSearchClient(ProviderClient):
    endpoint: str
    date_field: str

    def _api_key(self) -> str | None:
        return self.config.movie_api_key

    def resolve(self, title: str, creator: str | None = None) -> LookupResult:
        api_key = require_key(self.name, self._api_key(), "TMDB_API_KEY")
        payload = self._get_json(f"{TMDB_API_BASE_URL}/{self.endpoint}", {"api_key": api_key, "query": title})

        result = first_item(payload, "results")
        return LookupResult(
            image_url=poster_url(dig_str(result, "poster_path")),
            year=year_from_date(dig_str(result, self.date_field)),
        )


class TmdbMovieClient(_TmdbSearchClient):
    name = "tmdb_movie"
    endpoint = "search/movie"
    date_field = "release_date"


class TmdbTvClient(_TmdbSearchClient):
    name = "tmdb_tv"
    endpoint = "search/tv"
    date_field = "first_air_date"

    def _api_key(self) -> str | None:
        return self.config.resolved_tv_api_key
