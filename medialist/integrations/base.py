from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

import requests

from medialist.config import ProviderConfig, ProviderConfigurationError
from medialist.integrations.http import request_json
from medialist.models.lookup import LookupResult


class ProviderClient(ABC):
    """
    One external catalog reduced to `resolve(title, creator) -> LookupResult`.

    Implementations perform exactly one outbound query per call and never retry.
    Missing fields degrade to ""; transport failures propagate as
    `ProviderTransportError`.
    """

    name: str

    def __init__(self, config: ProviderConfig, *, session: requests.Session | None = None) -> None:
        self.config = config
        self.session = session

    @abstractmethod
    def resolve(self, title: str, creator: str | None = None) -> LookupResult:
        raise NotImplementedError

    def _get_json(self, url: str, params: Mapping[str, Any]) -> dict[str, Any]:
        if self.session is not None:
            return self._request(self.session, url, params)
        with requests.Session() as session:
            return self._request(session, url, params)

    def _request(self, session: requests.Session, url: str, params: Mapping[str, Any]) -> dict[str, Any]:
        return request_json(
            session,
            url,
            provider=self.name,
            params=params,
            timeout_seconds=self.config.timeout_seconds,
        )


def require_key(provider: str, key: str | None, env_name: str) -> str:
    if not key:
        raise ProviderConfigurationError(f"{env_name} is not set; {provider} lookups need an API key.")
    return key
