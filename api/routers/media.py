"""
Media catalog endpoints.

Creating a record resolves cover art and release year from the catalog provider
matching its media type. Reads are public; writes require authentication and
edits/deletes are limited to the record's owner.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Response
from pydantic import BaseModel, Field, field_validator

from api.auth import CurrentUser, UserSupabaseClient
from api.deps import GENERIC_ERROR_DETAIL, Resolver, SupabaseClient
from medialist.config import ProviderConfigurationError
from medialist.integrations.http import ProviderTransportError
from medialist.metadata.resolver import MetadataNotFoundError
from medialist.models.lookup import MediaType
from medialist.models.media import MediaCreate, MediaUpdate
from medialist.repositories.media import MediaRepositoryError
from medialist.services.media_records import (
    MediaNotFoundError,
    MediaOwnershipError,
    create_media_record,
    delete_media_record,
    get_media_record,
    list_media_records,
    parse_media_filter,
    update_media_record,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/media", tags=["media"])


# --- Pydantic models ---


class MediaFields(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    creator: str | None = Field(default=None, max_length=500)
    review: str | None = Field(default=None, max_length=10_000)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("creator", "review")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class MediaCreateBody(MediaFields):
    """Media creation payload. Cover art, year and owner are server-derived."""

    media_type: MediaType


class MediaUpdateBody(MediaFields):
    """Editable fields. Media type, cover art and year are fixed at creation."""


class Media(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    creator: str | None
    year: str | None
    image_url: str
    review: str | None
    media_type: MediaType
    created_at: str


# --- Helpers ---


def _repository_failure(exc: MediaRepositoryError, context: str) -> HTTPException:
    logger.error(f"Supabase error during {context}: {exc}")
    # Don't leak internal error details to client
    return HTTPException(status_code=502, detail=f"Database error during {context}")


# --- Endpoints ---


@router.get("", response_model=list[Media])
def list_media(
    db: SupabaseClient,
    media_filter: str | None = Query(default=None, alias="filter", description="Media type to show, or 'all'."),
) -> list[dict]:
    """
    List media records, most recent first.
    """
    try:
        media_type = parse_media_filter(media_filter)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown media filter: {media_filter}")

    try:
        return list_media_records(db, media_type=media_type)
    except MediaRepositoryError as exc:
        raise _repository_failure(exc, "listing media")


@router.post("", response_model=Media, status_code=201)
def create_media(
    payload: MediaCreateBody,
    user: CurrentUser,
    user_db: UserSupabaseClient,
    resolver: Resolver,
) -> dict:
    """
    Create a media record after resolving its cover art and year.

    Returns 422 with a media-type specific message when the provider has no match,
    and 502 when the provider could not be reached. Nothing is saved in either case.

    Requires authentication.
    """
    media = MediaCreate(
        title=payload.title,
        media_type=payload.media_type,
        creator=payload.creator,
        review=payload.review,
    )
    try:
        return create_media_record(user_db, resolver, owner_id=user.id, payload=media)
    except MetadataNotFoundError as exc:
        raise HTTPException(status_code=422, detail=exc.message)
    except (ProviderTransportError, ProviderConfigurationError) as exc:
        logger.error(f"Metadata lookup failed for {payload.media_type.value} {payload.title!r}: {exc}")
        raise HTTPException(status_code=502, detail=GENERIC_ERROR_DETAIL)
    except MediaRepositoryError as exc:
        raise _repository_failure(exc, "creating media")


@router.get("/{media_id}", response_model=Media)
def get_media(media_id: UUID, db: SupabaseClient) -> dict:
    """
    Get a single media record.
    """
    try:
        return get_media_record(db, str(media_id))
    except MediaNotFoundError:
        raise HTTPException(status_code=404, detail="Media not found")
    except MediaRepositoryError as exc:
        raise _repository_failure(exc, "fetching media")


@router.put("/{media_id}", response_model=Media)
def edit_media(
    media_id: UUID,
    payload: MediaUpdateBody,
    user: CurrentUser,
    user_db: UserSupabaseClient,
) -> dict:
    """
    Edit title, creator and review of a media record.

    Requires authentication. Only the owner can edit.
    """
    patch = MediaUpdate(title=payload.title, creator=payload.creator, review=payload.review)
    try:
        return update_media_record(user_db, str(media_id), owner_id=user.id, patch=patch)
    except MediaNotFoundError:
        raise HTTPException(status_code=404, detail="Media not found")
    except MediaOwnershipError:
        raise HTTPException(status_code=403, detail="You can only edit your own media")
    except MediaRepositoryError as exc:
        raise _repository_failure(exc, "updating media")


@router.delete("/{media_id}", status_code=204)
def remove_media(
    media_id: UUID,
    user: CurrentUser,
    user_db: UserSupabaseClient,
) -> Response:
    """
    Delete a media record.

    Requires authentication. Only the owner can delete.
    """
    try:
        delete_media_record(user_db, str(media_id), owner_id=user.id)
    except MediaNotFoundError:
        raise HTTPException(status_code=404, detail="Media not found")
    except MediaOwnershipError:
        raise HTTPException(status_code=403, detail="You can only delete your own media")
    except MediaRepositoryError as exc:
        raise _repository_failure(exc, "deleting media")
    return Response(status_code=204)
