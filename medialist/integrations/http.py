from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": "medialist/0.1",
}


class ProviderTransportError(RuntimeError):
    """
    The provider could not be reached or answered with something other than a JSON object.

    Raised for network failures, timeouts, non-2xx responses and malformed bodies.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        status_code: int | None = None,
        body_snippet: str | None = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.body_snippet = body_snippet


def request_json(
    session: requests.Session,
    url: str,
    *,
    provider: str,
    params: Mapping[str, Any] | None = None,
    timeout_seconds: float,
) -> dict[str, Any]:
    """
    Perform exactly one GET and return the decoded JSON object.

    Query params (including API keys) are URL-encoded by `requests` and never logged.
    """

    logger.debug(f"{provider}: GET {url}")
    try:
        resp = session.get(url, params=params, headers=DEFAULT_HEADERS, timeout=timeout_seconds)
    except requests.Timeout as exc:
        logger.warning(f"{provider}: request to {url} timed out after {timeout_seconds}s")
        raise ProviderTransportError(f"{provider} request timed out.", provider=provider) from exc
    except requests.RequestException as exc:
        logger.warning(f"{provider}: request to {url} failed: {type(exc).__name__}")
        raise ProviderTransportError(f"{provider} request failed: {type(exc).__name__}", provider=provider) from exc

    if not 200 <= resp.status_code < 300:
        logger.warning(f"{provider}: {url} answered HTTP {resp.status_code}")
        raise ProviderTransportError(
            f"{provider} request failed with HTTP {resp.status_code}.",
            provider=provider,
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        logger.warning(f"{provider}: {url} returned a non-JSON body")
        raise ProviderTransportError(
            f"{provider} returned non-JSON response.",
            provider=provider,
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        logger.warning(f"{provider}: {url} returned {type(payload).__name__} instead of a JSON object")
        raise ProviderTransportError(
            f"{provider} returned unexpected JSON shape (not an object).",
            provider=provider,
            status_code=resp.status_code,
        )
    return payload
