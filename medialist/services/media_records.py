"""
Media record service: resolve metadata, persist, and guard edits by owner.

Ownership is attributed at creation time from the caller's identity and
compared by exact string equality on every edit and delete.
"""

from __future__ import annotations

import logging
from typing import Any

from supabase import Client

from medialist.metadata.resolver import MetadataResolver
from medialist.models.lookup import MediaType
from medialist.models.media import MediaCreate, MediaUpdate, build_insert_payload
from medialist.repositories.media import (
    delete_media,
    find_media_by_id,
    insert_media,
    list_media,
    update_media,
)

logger = logging.getLogger(__name__)

ALL_MEDIA_FILTER = "all"


class MediaNotFoundError(LookupError):
    pass


class MediaOwnershipError(PermissionError):
    pass


def parse_media_filter(value: str | None) -> MediaType | None:
    """`None`, "" and "all" mean no filter; anything else must be a MediaType value."""

    if value is None or not value.strip() or value.strip().lower() == ALL_MEDIA_FILTER:
        return None
    return MediaType(value.strip().lower())


def create_media_record(
    db: Client,
    resolver: MetadataResolver,
    *,
    owner_id: str,
    payload: MediaCreate,
) -> dict[str, Any]:
    # Resolver errors propagate before anything is written.
    lookup = resolver.resolve(payload.media_type, payload.title, payload.creator)
    row = insert_media(db, build_insert_payload(owner_id, payload, lookup))
    logger.info(f"Created {payload.media_type.value} record {row.get('id')} for user {owner_id}")
    return row


def list_media_records(db: Client, *, media_type: MediaType | None = None) -> list[dict[str, Any]]:
    return list_media(db, media_type=media_type)


def get_media_record(db: Client, media_id: str) -> dict[str, Any]:
    row = find_media_by_id(db, media_id)
    if row is None:
        raise MediaNotFoundError(f"Media {media_id} not found.")
    return row


def _require_owner(db: Client, media_id: str, owner_id: str) -> dict[str, Any]:
    row = get_media_record(db, media_id)
    if str(row.get("user_id")) != owner_id:
        logger.warning(f"User {owner_id} attempted to modify media {media_id} owned by another user")
        raise MediaOwnershipError(f"Media {media_id} belongs to another user.")
    return row


def update_media_record(
    db: Client,
    media_id: str,
    *,
    owner_id: str,
    patch: MediaUpdate,
) -> dict[str, Any]:
    _require_owner(db, media_id, owner_id)
    return update_media(db, media_id, owner_id, patch.to_patch())


def delete_media_record(db: Client, media_id: str, *, owner_id: str) -> None:
    _require_owner(db, media_id, owner_id)
    delete_media(db, media_id, owner_id)
    logger.info(f"Deleted media {media_id} for user {owner_id}")
