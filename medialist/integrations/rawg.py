from __future__ import annotations

from medialist.integrations.base import ProviderClient, require_key
from medialist.integrations.extract import dig_str, first_item, year_from_date
from medialist.models.lookup import NOT_FOUND, LookupResult

RAWG_GAMES_URL = "https://api.rawg.io/api/games"


class RawgGameClient(ProviderClient):
    name = "rawg"

    def resolve(self, title: str, creator: str | None = None) -> LookupResult:
        api_key = require_key(self.name, self.config.game_api_key, "RAWG_API_KEY")
        payload = self._get_json(RAWG_GAMES_URL, {"key": api_key, "search": title})

        game = first_item(payload, "results")
        if game is None:
            return NOT_FOUND

        # background_image is already a full-size URL.
        return LookupResult(
            image_url=dig_str(game, "background_image"),
            year=year_from_date(dig_str(game, "released")),
        )
