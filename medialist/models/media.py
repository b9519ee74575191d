from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from medialist.models.lookup import LookupResult, MediaType


@dataclass(frozen=True)
class MediaCreate:
    """User input for a new media record; cover art and year come from the resolver."""

    title: str
    media_type: MediaType
    creator: str | None = None
    review: str | None = None


@dataclass(frozen=True)
class MediaUpdate:
    """Editable fields. Editing never re-runs metadata resolution."""

    title: str
    creator: str | None = None
    review: str | None = None

    def to_patch(self) -> dict[str, Any]:
        return {"title": self.title, "creator": self.creator, "review": self.review}


def build_insert_payload(owner_id: str, media: MediaCreate, lookup: LookupResult) -> dict[str, Any]:
    return {
        "user_id": owner_id,
        "title": media.title,
        "creator": media.creator,
        "year": lookup.year or None,
        "image_url": lookup.image_url,
        "review": media.review,
        "media_type": media.media_type.value,
    }
