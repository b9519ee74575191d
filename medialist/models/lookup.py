from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MediaType(str, Enum):
    BOOK = "book"
    MOVIE = "movie"
    TV = "tv"
    GAME = "game"
    MUSIC = "music"


@dataclass(frozen=True)
class LookupResult:
    """
    Canonical `{image_url, year}` shape every provider is reduced to.

    An empty `image_url` means "no usable result", whatever `year` holds.
    `year` stays text: a 4-digit string or "" when unknown.
    """

    image_url: str = ""
    year: str = ""

    @property
    def found(self) -> bool:
        return bool(self.image_url)


NOT_FOUND = LookupResult()
