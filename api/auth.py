"""
Bearer-token authentication against Supabase Auth.

Token validation is a blocking network call, so every dependency here is a
plain `def` and runs in FastAPI's worker threadpool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from supabase import Client

from medialist.db.supabase import create_supabase_client

logger = logging.getLogger(__name__)

UNAUTHENTICATED_DETAIL = "Authentication required. Please provide a valid access token."


@dataclass(frozen=True)
class AuthenticatedUser:
    """Supabase user id (the `media.user_id` owner stamp) plus the token it was read from."""

    id: str
    token: str


def bearer_token(request: Request) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        return None
    return token


def authenticate(token: str) -> AuthenticatedUser | None:
    """Ask Supabase Auth who owns `token`; None when it is expired, revoked or unreachable."""
    try:
        response = create_supabase_client().auth.get_user(token)
    except Exception as exc:
        logger.warning(f"Failed to validate token: {type(exc).__name__}")
        return None
    user = getattr(response, "user", None)
    if user is None or not getattr(user, "id", None):
        return None
    return AuthenticatedUser(id=str(user.id), token=token)


def require_user(request: Request) -> AuthenticatedUser:
    token = bearer_token(request)
    user = authenticate(token) if token else None
    if user is None:
        raise HTTPException(
            status_code=401,
            detail=UNAUTHENTICATED_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


CurrentUser = Annotated[AuthenticatedUser, Depends(require_user)]


def get_user_db(user: CurrentUser) -> Client:
    """Supabase client acting as `user`, so row-level security applies to its writes."""
    client = create_supabase_client()
    client.postgrest.auth(user.token)
    return client


UserSupabaseClient = Annotated[Client, Depends(get_user_db)]
