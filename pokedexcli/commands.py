"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from pokedexcli.client import Client
from pokedexcli.models import Pokemon


class CommandError(Exception):
    """A command was used wrongly or cannot be carried out."""


@dataclass
class Config:
    """State shared between commands for one session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command, its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def get_commands() -> dict[str, Command]:
    """Return the available commands keyed by the word that invokes them."""
    return {
        "exit": Command("exit", "Exit the Pokedex", command_exit),
        "help": Command("help", "Displays a help message", command_help),
        "map": Command(
            "map", "Displays the names of the next location areas", command_map
        ),
        "mapb": Command(
            "mapb", "Displays the names of the previous location areas", command_mapb
        ),
        "explore": Command(
            "explore <area_name>",
            "Displays pokemon's at the specified location",
            command_explore,
        ),
        "catch": Command(
            "catch <pokemon_name>", "Attempt to catch a pokemon", command_catch
        ),
        "inspect": Command(
            "inspect <pokemon_name>", "Inspect a caught pokemon", command_inspect
        ),
    }


def command_exit(config: Config, *args: str) -> None:
    print("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def command_help(config: Config, *args: str) -> None:
    lines = ["Welcome to the Pokedex!", "Usage:", ""]
    lines.extend(f"{c.name}: {c.description}" for c in get_commands().values())
    print("\n".join(lines))


def _show_page(config: Config, page_url: str | None) -> None:
    page = config.client.list_locations(page_url)
    config.next_locations_url = page.next
    config.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(config: Config, *args: str) -> None:
    _show_page(config, config.next_locations_url)


def command_mapb(config: Config, *args: str) -> None:
    if config.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(config, config.prev_locations_url)


def command_explore(config: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    location = config.client.get_location(args[0])
    print(f"Exploring {location.location.name}...")
    print("Found Pokemon:")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def command_catch(config: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    name = args[0]
    pokemon = config.client.get_pokemon(name)
    odds = pokemon.base_experience // 20
    if odds <= 0:
        raise CommandError(f"{name} cannot be caught")
    print(f"Throwing a Pokeball at {name}...")
    if config.rng.randrange(odds) == 1:
        print(f"{name} caught!")
        config.pokedex[name] = pokemon
        return
    print("missed")


def command_inspect(config: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    name = args[0]
    pokemon = config.pokedex.get(name)
    if pokemon is None:
        print(f"{name} was not caught")
        return
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.name}: {stat.effort}")
    print("Types:")
    for ptype in pokemon.types:
        print(f"  - {ptype.name}")