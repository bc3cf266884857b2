"""HTTP client for the Pokemon API with response caching."""

from __future__ import annotations

import json
from typing import Callable, TypeVar

import requests

from pokedexcli.cache import CACHE_TIME, Cache
from pokedexcli.models import LocationArea, LocationPage, PokemonData

BASE_URL = "https://pokeapi.co/api/v2"
TIMEOUT = 3.0
"""Default request timeout, in seconds."""

_Model = TypeVar("_Model")


class ApiError(Exception):
    """Raised when data cannot be fetched from or decoded from the API."""


def fetch_data(url: str, session: requests.Session, timeout: float = TIMEOUT) -> bytes:
    """GET ``url`` and return the response body."""
    try:
        response = session.get(url, timeout=timeout)
    except (
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidURL,
        requests.exceptions.URLRequired,
    ) as err:
        raise ApiError(f"Cannot create the http request: {err}") from err
    except requests.RequestException as err:
        raise ApiError(f"Cannot create the response element: {err}") from err

    with response:
        if response.status_code > 299:
            raise ApiError("Cannot find the searched item")
        try:
            return response.content
        except requests.RequestException as err:
            raise ApiError(f"Cannot create the data element: {err}") from err


def _decode(data: bytes, parse: Callable[[object], _Model]) -> _Model:
    try:
        return parse(json.loads(data))
    except ValueError as err:
        raise ApiError(f"Cannot unmarshal the data: {err}") from err


class Client:
    """Fetches locations and Pokemon, caching raw responses by URL."""

    def __init__(self, timeout: float = TIMEOUT, cache_interval: float = CACHE_TIME) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        self._cache = Cache(cache_interval)

    def _load(self, url: str) -> bytes:
        data = self._cache.get(url)
        if data is None:
            data = fetch_data(url, self._session, self.timeout)
            self._cache.add(url, data)
        return data

    def get_locations(self, page_url: str | None = None) -> LocationPage:
        """Return the page of location areas at ``page_url``, or the first page."""
        url = BASE_URL + "/location-area" if page_url is None else page_url
        return _decode(self._load(url), LocationPage.from_dict)

    def explore_location(self, location_name: str) -> LocationArea:
        """Return the named location area with its Pokemon encounters."""
        url = f"{BASE_URL}/location-area/{location_name}"
        try:
            data = self._load(url)
        except ApiError as err:
            raise ApiError(
                f"Unable to fetch the data for location '{location_name}': {err}"
            ) from err
        return _decode(data, LocationArea.from_dict)

    def get_pokemon_data(self, pokemon_name: str) -> PokemonData:
        """Return the details of the named Pokemon."""
        url = f"{BASE_URL}/pokemon/{pokemon_name}"
        try:
            data = self._load(url)
        except ApiError as err:
            raise ApiError(
                f"Unable to fetch the data for the Pokemon '{pokemon_name}': {err}"
            ) from err
        return _decode(data, PokemonData.from_dict)

    def close(self) -> None:
        """Release the HTTP session and stop the cache reaper."""
        self._session.close()
        self._cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()