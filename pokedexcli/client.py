"""HTTP client for the Pokémon web API with a response cache."""

from __future__ import annotations

import json
from typing import Any

import requests

from pokedexcli.cache import Cache
from pokedexcli.models import Location, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"


class Client:
    """Fetches API resources, keeping raw response bodies in a cache."""

    def __init__(self, timeout: float, cache_interval: float) -> None:
        self.timeout = timeout
        self.cache = Cache(cache_interval)
        self._session = requests.Session()

    def _fetch(self, url: str) -> bytes:
        data = self.cache.get(url)
        if data is None:
            response = self._session.get(url, timeout=self.timeout)
            data = response.content
            self.cache.add(url, data)
        return data

    def _fetch_json(self, url: str) -> Any:
        return json.loads(self._fetch(url))

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page if ``page_url`` is None."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return LocationPage.from_dict(self._fetch_json(url))

    def get_location(self, location_name: str) -> Location:
        """Return the location area with the given name."""
        return Location.from_dict(
            self._fetch_json(f"{BASE_URL}/location-area/{location_name}")
        )

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the Pokémon with the given name."""
        return Pokemon.from_dict(self._fetch_json(f"{BASE_URL}/pokemon/{pokemon_name}"))

    def close(self) -> None:
        """Release the HTTP session and stop the cache reaper."""
        self._session.close()
        self.cache.close()