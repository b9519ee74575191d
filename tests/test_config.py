from __future__ import annotations

import pytest

from medialist.config import DEFAULT_TIMEOUT_SECONDS, ProviderConfig, ProviderConfigurationError

_ENV_NAMES = (
    "GOOGLE_BOOKS_API_KEY",
    "TMDB_API_KEY",
    "TMDB_TV_API_KEY",
    "RAWG_API_KEY",
    "LASTFM_API_KEY",
    "MEDIALIST_HTTP_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_from_env_reads_provider_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", " tmdb ")
    monkeypatch.setenv("RAWG_API_KEY", "rawg")
    monkeypatch.setenv("LASTFM_API_KEY", "lastfm")
    monkeypatch.setenv("MEDIALIST_HTTP_TIMEOUT_SECONDS", "7.5")

    config = ProviderConfig.from_env()

    assert config.movie_api_key == "tmdb"
    assert config.tv_api_key is None
    assert config.resolved_tv_api_key == "tmdb"
    assert config.game_api_key == "rawg"
    assert config.music_api_key == "lastfm"
    assert config.book_api_key is None
    assert config.timeout_seconds == 7.5


def test_from_env_defaults() -> None:
    config = ProviderConfig.from_env()

    assert config.movie_api_key is None
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS


def test_tv_key_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "movie")
    monkeypatch.setenv("TMDB_TV_API_KEY", "tv")

    assert ProviderConfig.from_env().resolved_tv_api_key == "tv"


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_invalid_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("MEDIALIST_HTTP_TIMEOUT_SECONDS", raw)

    with pytest.raises(RuntimeError, match="MEDIALIST_HTTP_TIMEOUT_SECONDS"):
        ProviderConfig.from_env()


def test_repr_never_shows_keys() -> None:
    config = ProviderConfig(movie_api_key="tmdb-secret", music_api_key="lastfm-secret")

    text = repr(config)

    assert "tmdb-secret" not in text
    assert "lastfm-secret" not in text
    assert "movie_api_key" in text


def test_invalid_timeout_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEDIALIST_HTTP_TIMEOUT_SECONDS", "ten")

    with pytest.raises(ProviderConfigurationError, match="must be a number"):
        ProviderConfig.from_env()
