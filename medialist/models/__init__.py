"""Domain models shared by integrations, repositories and the API."""

from medialist.models.lookup import LookupResult, MediaType
from medialist.models.media import MediaCreate, MediaUpdate

__all__ = [
    "LookupResult",
    "MediaCreate",
    "MediaType",
    "MediaUpdate",
]
