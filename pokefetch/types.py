"""Records decoded from the location-area endpoints of the Pokémon API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_KINDS = {Mapping: "an object", list: "an array", str: "a string", int: "an integer"}


def _check(value: Any, kind: type, default: Any, what: str) -> Any:
    """Return ``value`` if it is of ``kind``, ``default`` if it is None."""
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TypeError(f"{what} must be {_KINDS[kind]}, not {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        obj = _check(data, Mapping, {}, "named resource")
        return cls(
            name=_check(obj.get("name"), str, "", "name"),
            url=_check(obj.get("url"), str, "", "url"),
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokémon that can be met in an area, with per-version details."""

    pokemon: NamedResource = field(default_factory=NamedResource)
    version_details: tuple[Any, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        obj = _check(data, Mapping, {}, "pokemon encounter")
        details = _check(obj.get("version_details"), list, [], "version_details")
        return cls(
            pokemon=NamedResource.from_dict(obj.get("pokemon")),
            version_details=tuple(details),
        )


@dataclass(frozen=True)
class MapAreaPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> MapAreaPage:
        obj = _check(data, Mapping, {}, "map area page")
        results = _check(obj.get("results"), list, [], "results")
        return cls(
            count=_check(obj.get("count"), int, 0, "count"),
            next=_check(obj.get("next"), str, None, "next"),
            previous=_check(obj.get("previous"), str, None, "previous"),
            results=tuple(NamedResource.from_dict(item) for item in results),
        )


@dataclass(frozen=True)
class MapArea:
    """A single location area and the Pokémon found in it."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: tuple[Any, ...] = ()
    encounter_method_rates: tuple[Any, ...] = ()
    pokemon_encounters: tuple[PokemonEncounter, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> MapArea:
        obj = _check(data, Mapping, {}, "map area")
        rates = _check(obj.get("encounter_method_rates"), list, [], "encounter_method_rates")
        encounters = _check(obj.get("pokemon_encounters"), list, [], "pokemon_encounters")
        return cls(
            id=_check(obj.get("id"), int, 0, "id"),
            name=_check(obj.get("name"), str, "", "name"),
            game_index=_check(obj.get("game_index"), int, 0, "game_index"),
            location=NamedResource.from_dict(obj.get("location")),
            names=tuple(_check(obj.get("names"), list, [], "names")),
            encounter_method_rates=tuple(rates),
            pokemon_encounters=tuple(PokemonEncounter.from_dict(e) for e in encounters),
        )