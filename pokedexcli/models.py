"""Data models for responses from the Pokémon web API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _obj(value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"expected a JSON object, got {type(value).__name__}")
    return value


def _int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _bool(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _str(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _opt_str(value: Any) -> str | None:
    return None if value is None else _str(value)


def _list(value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected a JSON array, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name paired with the API URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _obj(data)
        return cls(name=_str(data.get("name")), url=_str(data.get("url")))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _obj(data)
        return cls(
            count=_int(data.get("count")),
            next=_opt_str(data.get("next")),
            previous=_opt_str(data.get("previous")),
            results=[NamedResource.from_dict(r) for r in _list(data.get("results"))],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokémon that can be encountered in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)
    versions: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        data = _obj(data)
        return cls(
            pokemon=NamedResource.from_dict(data.get("pokemon")),
            versions=[
                NamedResource.from_dict(_obj(d).get("version"))
                for d in _list(data.get("version_details"))
            ],
        )


@dataclass(frozen=True)
class Location:
    """A location area and the Pokémon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        data = _obj(data)
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            game_index=_int(data.get("game_index")),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=[
                PokemonEncounter.from_dict(e)
                for e in _list(data.get("pokemon_encounters"))
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokémon and the effort value it yields."""

    stat: NamedResource = field(default_factory=NamedResource)
    base_stat: int = 0
    effort: int = 0

    @property
    def name(self) -> str:
        return self.stat.name

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _obj(data)
        return cls(
            stat=NamedResource.from_dict(data.get("stat")),
            base_stat=_int(data.get("base_stat")),
            effort=_int(data.get("effort")),
        )


@dataclass(frozen=True)
class PokemonType:
    """A type slot of a Pokémon."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @property
    def name(self) -> str:
        return self.type.name

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        data = _obj(data)
        return cls(
            slot=_int(data.get("slot")),
            type=NamedResource.from_dict(data.get("type")),
        )


@dataclass(frozen=True)
class Pokemon:
    """A Pokémon as returned by the ``/pokemon/{name}`` endpoint."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _obj(data)
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            base_experience=_int(data.get("base_experience")),
            height=_int(data.get("height")),
            weight=_int(data.get("weight")),
            order=_int(data.get("order")),
            is_default=_bool(data.get("is_default")),
            species=NamedResource.from_dict(data.get("species")),
            abilities=[
                NamedResource.from_dict(_obj(a).get("ability"))
                for a in _list(data.get("abilities"))
            ],
            stats=[PokemonStat.from_dict(s) for s in _list(data.get("stats"))],
            types=[PokemonType.from_dict(t) for t in _list(data.get("types"))],
        )