from __future__ import annotations

from medialist.integrations.base import ProviderClient, require_key
from medialist.integrations.extract import dig, dig_str, find_first, first_item
from medialist.models.lookup import NOT_FOUND, LookupResult

LASTFM_API_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_COVER_SIZE = "extralarge"


class LastfmAlbumClient(ProviderClient):
    """
    Album cover lookup via Last.fm `album.search`.

    The artist is accepted but not sent: the search matches on album title only.
    The search response carries no release date, so `year` is always "".
    """

    name = "lastfm"

    def resolve(self, title: str, creator: str | None = None) -> LookupResult:
        api_key = require_key(self.name, self.config.music_api_key, "LASTFM_API_KEY")
        payload = self._get_json(
            LASTFM_API_URL,
            {
                "method": "album.search",
                "album": title,
                "api_key": api_key,
                "format": "json",
            },
        )

        album = first_item(payload, "results", "albummatches", "album")
        if album is None:
            return NOT_FOUND

        cover = find_first(dig(album, "image"), size=LASTFM_COVER_SIZE)
        return LookupResult(image_url=dig_str(cover, "#text"), year="")
