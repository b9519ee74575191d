from __future__ import annotations

import pytest

from medialist.config import ProviderConfig
from medialist.integrations.base import ProviderConfigurationError
from medialist.integrations.tmdb.client import (
    TMDB_API_BASE_URL,
    TMDB_IMAGE_BASE_URL,
    TmdbMovieClient,
    TmdbTvClient,
    poster_url,
)
from medialist.models.lookup import LookupResult


def test_movie_resolve_builds_poster_url_and_year(provider_config, fake_session) -> None:  # noqa: ANN001
    session = fake_session(
        {
            "page": 1,
            "results": [
                {"id": 438631, "title": "Dune", "poster_path": "/abc.jpg", "release_date": "2021-09-15"},
                {"id": 841, "title": "Dune", "poster_path": "/old.jpg", "release_date": "1984-12-14"},
            ],
            "total_results": 2,
        }
    )

    result = TmdbMovieClient(provider_config, session=session).resolve("Dune")

    assert result == LookupResult(image_url=TMDB_IMAGE_BASE_URL + "/abc.jpg", year="2021")
    assert session.calls[0]["url"] == f"{TMDB_API_BASE_URL}/search/movie"
    assert session.calls[0]["params"] == {"api_key": "tmdb-key", "query": "Dune"}


def test_movie_null_poster_is_empty_image(provider_config, fake_session) -> None:  # noqa: ANN001
    session = fake_session({"results": [{"title": "Lost Film", "poster_path": None, "release_date": "1931-01-01"}]})

    result = TmdbMovieClient(provider_config, session=session).resolve("Lost Film")

    assert result.image_url == ""
    assert result.year == "1931"


def test_movie_missing_release_date_is_empty_year(provider_config, fake_session) -> None:  # noqa: ANN001
    session = fake_session({"results": [{"title": "Upcoming", "poster_path": "/up.jpg", "release_date": ""}]})

    result = TmdbMovieClient(provider_config, session=session).resolve("Upcoming")

    assert result == LookupResult(image_url=TMDB_IMAGE_BASE_URL + "/up.jpg", year="")


def test_tv_uses_search_tv_and_first_air_date(provider_config, fake_session) -> None:  # noqa: ANN001
    session = fake_session(
        {"results": [{"name": "The Wire", "poster_path": "/wire.jpg", "first_air_date": "2002-06-02", "release_date": "1990-01-01"}]}
    )

    result = TmdbTvClient(provider_config, session=session).resolve("The Wire")

    assert result == LookupResult(image_url=TMDB_IMAGE_BASE_URL + "/wire.jpg", year="2002")
    assert session.calls[0]["url"] == f"{TMDB_API_BASE_URL}/search/tv"
    assert session.calls[0]["params"]["api_key"] == "tmdb-key"


def test_tv_prefers_dedicated_key_when_configured(fake_session) -> None:  # noqa: ANN001
    config = ProviderConfig(movie_api_key="movie-key", tv_api_key="tv-key")
    session = fake_session({"results": []})

    TmdbTvClient(config, session=session).resolve("The Wire")

    assert session.calls[0]["params"]["api_key"] == "tv-key"


@pytest.mark.parametrize("client_cls", [TmdbMovieClient, TmdbTvClient])
def test_tmdb_zero_results_is_empty_sentinel(client_cls, provider_config, fake_session) -> None:  # noqa: ANN001
    client = client_cls(provider_config, session=fake_session({"page": 1, "results": [], "total_results": 0}))

    assert client.resolve("qwertyuiop") == LookupResult("", "")


@pytest.mark.parametrize("client_cls", [TmdbMovieClient, TmdbTvClient])
def test_tmdb_without_api_key_fails_before_any_request(client_cls, fake_session) -> None:  # noqa: ANN001
    session = fake_session()

    with pytest.raises(ProviderConfigurationError, match="TMDB_API_KEY"):
        client_cls(ProviderConfig(), session=session).resolve("Dune")

    assert session.calls == []


def test_poster_url() -> None:
    assert poster_url("/abc.jpg") == "https://image.tmdb.org/t/p/w500/abc.jpg"
    assert poster_url("") == ""
