from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client

from medialist.utils.env import env_str


@lru_cache
def get_supabase_url() -> str:
    url = env_str("SUPABASE_URL")
    if not url:
        raise RuntimeError("SUPABASE_URL environment variable is not set")
    return url


@lru_cache
def get_supabase_anon_key() -> str:
    key = env_str("SUPABASE_ANON_KEY")
    if not key:
        raise RuntimeError("SUPABASE_ANON_KEY environment variable is not set")
    return key


def create_supabase_client() -> Client:
    """Anon-key client for public reads (RLS applies)."""

    return create_client(get_supabase_url(), get_supabase_anon_key())
