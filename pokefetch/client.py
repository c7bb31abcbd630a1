"""HTTP client for the location-area endpoints of the Pokémon API."""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

import requests

from pokefetch.cache import Cache
from pokefetch.types import MapArea, MapAreaPage

LIMIT = "20"
BASE_URL = "https://pokeapi.co/api"
API_VERSION = "/v2"
MAP_AREA_ENDPOINT = BASE_URL + API_VERSION + "/location-area"
FIRST_PAGE_URL = MAP_AREA_ENDPOINT + "?offset=0&limit=" + LIMIT

T = TypeVar("T")


class ClientError(Exception):
    """Raised when data cannot be fetched or decoded."""


class Client:
    """Fetches location areas, keeping raw responses in a cache."""

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 60.0,
        cache: Cache | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self._owns_cache = cache is None
        self._cache = Cache(cache_interval) if cache is None else cache
        self._owns_session = session is None
        self._session = requests.Session() if session is None else session

    @property
    def cache(self) -> Cache:
        return self._cache

    def get_map_areas(self, page_url: str | None = None) -> MapAreaPage:
        """Return a page of location areas; the first page if ``page_url`` is None."""
        url = FIRST_PAGE_URL if page_url is None else page_url
        return self._fetch(url, MapAreaPage.from_dict, check_status=False)

    def get_map_area(self, map_area_name: str | None) -> MapArea:
        """Return the location area called ``map_area_name``."""
        if map_area_name is None:
            raise ClientError("empty map area name not allowed")
        url = f"{MAP_AREA_ENDPOINT}/{map_area_name}"
        return self._fetch(url, MapArea.from_dict, check_status=True)

    def close(self) -> None:
        """Release the cache reaper and HTTP session this client created."""
        if self._owns_cache:
            self._cache.close()
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(
        self, url: str, build: Callable[[Any], T], *, check_status: bool
    ) -> T:
        cached = self._cache.get(url)
        if cached is not None:
            minutes = int(self._cache.interval // 60)
            print("Providing cached result from past", minutes, "minutes")
            return _decode(cached, build)

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ClientError(str(exc)) from exc
        with response:
            if check_status and response.status_code != 200:
                raise ClientError(
                    f"received the response with {response.status_code} status"
                )
            data = response.content

        result = _decode(data, build)
        self._cache.add(url, data)
        return result


def _decode(data: bytes, build: Callable[[Any], T]) -> T:
    try:
        return build(json.loads(data))
    except (ValueError, TypeError) as exc:
        raise ClientError(f"invalid response body: {exc}") from exc