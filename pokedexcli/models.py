"""Typed views of the JSON documents served by the Pokemon API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _require_object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _items(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    return [_require_object(item, f"item of {key!r}") for item in value]


def _nested_name(item: Mapping[str, Any], key: str) -> str:
    inner = item.get(key)
    if inner is None:
        return ""
    return _string(_require_object(inner, f"field {key!r}"), "name")


@dataclass(frozen=True)
class LocationPage:
    """One page of location-area names, with links to its neighbours.

    ``next`` and ``previous`` are empty strings when there is no such page.
    """

    count: int = 0
    next: str = ""
    previous: str = ""
    results: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        page = _require_object(data, "location page")
        return cls(
            count=_integer(page, "count"),
            next=_string(page, "next"),
            previous=_string(page, "previous"),
            results=[_string(item, "name") for item in _items(page, "results")],
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the names of the Pokemon that can be met there."""

    name: str = ""
    pokemon: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        area = _require_object(data, "location area")
        return cls(
            name=_string(area, "name"),
            pokemon=[
                _nested_name(item, "pokemon") for item in _items(area, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A named base statistic."""

    name: str
    base_stat: int


@dataclass(frozen=True)
class PokemonData:
    """The details of a single Pokemon."""

    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    abilities: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonData:
        pokemon = _require_object(data, "pokemon")
        return cls(
            name=_string(pokemon, "name"),
            base_experience=_integer(pokemon, "base_experience"),
            height=_integer(pokemon, "height"),
            weight=_integer(pokemon, "weight"),
            stats=[
                PokemonStat(name=_nested_name(item, "stat"), base_stat=_integer(item, "base_stat"))
                for item in _items(pokemon, "stats")
            ],
            abilities=[_nested_name(item, "ability") for item in _items(pokemon, "abilities")],
            types=[_nested_name(item, "type") for item in _items(pokemon, "types")],
        )