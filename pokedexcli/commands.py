"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass, field
from typing import Any, Callable

from pokedexcli.api import ApiError
from pokedexcli.models import PokemonData

MIN_XP = 36
"""Lowest base experience listed by the API."""
MAX_XP = 608
"""Highest base experience listed by the API."""

AMPLITUDE = 0.85
"""Share of the probability that fades between MIN_XP and MAX_XP."""
BASE = 0.05
"""Lowest probability of catching a Pokemon."""
FADE_RATE = 4.5
"""Steepness of the probability curve."""


class CommandError(Exception):
    """Raised when a command is given unusable arguments or cannot finish."""


@dataclass
class Config:
    """State shared by the commands across one session."""

    client: Any
    pokedex: dict[str, PokemonData] = field(default_factory=dict)
    next_url: str | None = None
    prev_url: str | None = None


@dataclass(frozen=True)
class CliCommand:
    """A command name as shown in help, what it does, and its handler."""

    name: str
    description: str
    callback: Callable[..., None]


def catch_probability(base_experience: int) -> float:
    """Return the chance of catching a Pokemon with the given base experience."""
    normalized = (base_experience - MIN_XP) / (MAX_XP - MIN_XP)
    return AMPLITUDE * math.exp(-FADE_RATE * normalized) + BASE


def catch_try_value() -> float:
    """Return a uniformly random value in [0, 1) for a catch attempt."""
    return random.random()


def command_catch(config: Config, *args: str) -> None:
    """Try to catch the named Pokemon and add it to the pokedex."""
    if not args:
        raise CommandError("Must provide a Pokemon name")

    pokemon = config.client.get_pokemon_data(args[0])

    if pokemon.name in config.pokedex:
        print(f"{pokemon.name} is already in your pokedex!")
        return

    print(f"Throwing a Pokeball at {pokemon.name}...")
    if catch_try_value() < catch_probability(pokemon.base_experience):
        print(f"{pokemon.name} was caught!")
        config.pokedex[pokemon.name] = pokemon
    else:
        print(f"{pokemon.name} escaped!")


def command_exit(config: Config, *args: str) -> None:
    """Say goodbye and leave the program."""
    print("Closing the Pokedex... Goodbye!")
    sys.exit(0)


def command_explore(config: Config, *args: str) -> None:
    """List the Pokemon that can be met in the named location area."""
    if not args:
        raise CommandError("Must provide a location name")

    area = config.client.explore_location(args[0])

    print(f"Exploring {area.name}...")
    print("Found Pokemon:")
    for name in area.pokemon:
        print(" -", name)


def command_help(config: Config, *args: str) -> None:
    """Print the usage of every command."""
    print()
    print("=======================")
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name} -> {command.description}")
    print("=======================")
    print()


def command_inspect(config: Config, *args: str) -> None:
    """Print the details of a Pokemon already in the pokedex."""
    if not args:
        raise CommandError("Must provide a Pokemon name")

    pokemon = config.pokedex.get(args[0])
    if pokemon is None:
        print(f"You don't have '{args[0]}' in your pokedex")
        return

    print("Name:", pokemon.name)
    print("Height:", pokemon.height)
    print("Weight:", pokemon.weight)

    if pokemon.stats:
        print("Stats:")
        for stat in pokemon.stats:
            print(f"\t- {stat.name}: {stat.base_stat}")

        print("Abilities:")
        for ability in pokemon.abilities:
            print("\t-", ability)

    if pokemon.types:
        print("Types:")
        for type_name in pokemon.types:
            print("\t-", type_name)


def _show_locations(config: Config, page_url: str | None) -> None:
    try:
        page = config.client.get_locations(page_url)
    except ApiError as err:
        raise CommandError(f"cannot get the locations: {err}") from err

    for name in page.results:
        print(name)

    config.next_url = page.next
    config.prev_url = page.previous


def command_map(config: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_locations(config, config.next_url)


def command_map_back(config: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    _show_locations(config, config.prev_url)


def command_pokedex(config: Config, *args: str) -> None:
    """List the Pokemon caught so far."""
    if not config.pokedex:
        print("You havent caught any Pokemon :(")

    print("Your pokedex has:")
    for name in config.pokedex:
        print(" -", name)


def get_commands() -> dict[str, CliCommand]:
    """Return the available commands keyed by the word that starts them."""
    return {
        "pokedex": CliCommand(
            "pokedex", "Show the list of the Pokemons in the Pokedex", command_pokedex
        ),
        "inspect": CliCommand(
            "inspect <Pokemon_name>",
            "show the data of the specified Pokemon if it is in the Pokedex ",
            command_inspect,
        ),
        "catch": CliCommand(
            "catch <Pokemon_name>", "Try to catch the specified Pokemon", command_catch
        ),
        "explore": CliCommand(
            "explore <location_name>", "Shows the pokemons in the location name", command_explore
        ),
        "map": CliCommand("map", "Shows the next page of locations", command_map),
        "mapb": CliCommand("mapb", "Shows the previous page of locations", command_map_back),
        "exit": CliCommand("exit", "Exit the Pokedex", command_exit),
        "help": CliCommand("help", "Displays a help message", command_help),
    }