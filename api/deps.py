"""
Dependency injection for Supabase clients, the metadata resolver and other shared resources.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException
from supabase import Client

from medialist.config import ProviderConfig, ProviderConfigurationError
from medialist.db.supabase import create_supabase_client
from medialist.metadata.resolver import MetadataResolver
from medialist.utils.env import load_env

load_env()

logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAIL = "Something went wrong. Please try again."


def get_supabase_client() -> Client:
    """
    Returns a Supabase client using the anon key (for public read operations).
    """
    return create_supabase_client()


@lru_cache
def get_provider_config() -> ProviderConfig:
    config = ProviderConfig.from_env()
    logger.info(f"Loaded provider configuration: {config!r}")
    return config


def get_metadata_resolver() -> MetadataResolver:
    """
    Returns a resolver wired to the five catalog providers.

    Clients hold only configuration, so each request gets its own resolver and
    its own HTTP session. A malformed provider setting answers 502 here, before
    the endpoint runs.
    """
    try:
        config = get_provider_config()
    except ProviderConfigurationError as exc:
        logger.error(f"Provider configuration is invalid: {exc}")
        raise HTTPException(status_code=502, detail=GENERIC_ERROR_DETAIL)
    return MetadataResolver.from_config(config)


# Type aliases for dependency injection
SupabaseClient = Annotated[Client, Depends(get_supabase_client)]
Resolver = Annotated[MetadataResolver, Depends(get_metadata_resolver)]
