from __future__ import annotations

from medialist.integrations.base import ProviderClient
from medialist.integrations.extract import dig_str, first_item, join_query, year_from_date
from medialist.models.lookup import LookupResult

GOOGLE_BOOKS_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


def upgrade_cover_zoom(url: str) -> str:
    """Ask Google Books for its largest cover rendition (zoom=3 instead of zoom=1)."""

    return url.replace("zoom=1", "zoom=3", 1)


class GoogleBooksClient(ProviderClient):
    name = "google_books"

    def resolve(self, title: str, creator: str | None = None) -> LookupResult:
        payload = self._get_json(GOOGLE_BOOKS_VOLUMES_URL, {"q": join_query([title, creator])})

        volume = first_item(payload, "items")
        thumbnail = dig_str(volume, "volumeInfo", "imageLinks", "thumbnail")
        return LookupResult(
            image_url=upgrade_cover_zoom(thumbnail),
            year=year_from_date(dig_str(volume, "volumeInfo", "publishedDate")),
        )
