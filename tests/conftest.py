from __future__ import annotations

from typing import Any

import pytest

from medialist.config import ProviderConfig
from tests.fakes import FakeResponse, FakeSession


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(
        movie_api_key="tmdb-key",
        game_api_key="rawg-key",
        music_api_key="lastfm-key",
        timeout_seconds=5.0,
    )


@pytest.fixture
def fake_session():
    def _make(*payloads: Any) -> FakeSession:
        return FakeSession(*[p if isinstance(p, (FakeResponse, Exception)) else FakeResponse(p) for p in payloads])

    return _make
