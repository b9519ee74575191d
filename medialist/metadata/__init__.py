"""
Metadata resolution: media type -> provider client -> canonical `LookupResult`.
"""

from __future__ import annotations

from medialist.config import ProviderConfigurationError
from medialist.integrations.http import ProviderTransportError
from medialist.metadata.resolver import (
    NOT_FOUND_MESSAGES,
    MetadataNotFoundError,
    MetadataResolver,
    build_provider_clients,
)

__all__ = [
    "NOT_FOUND_MESSAGES",
    "MetadataNotFoundError",
    "MetadataResolver",
    "ProviderConfigurationError",
    "ProviderTransportError",
    "build_provider_clients",
]
