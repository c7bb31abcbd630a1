"""The commands understood by the interactive prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TextIO

from pokefetch.client import Client


class CommandError(Exception):
    """Raised when a command cannot be carried out as asked."""


class ExitRequested(Exception):
    """Raised by the exit command to end the interactive session."""


@dataclass
class Config:
    """State shared between commands during one session.

    Commands write their output to ``out``; when it is None they write to
    whatever ``sys.stdout`` is at the time.
    """

    client: Client
    next_map_area_url: str | None = None
    prev_map_area_url: str | None = None
    out: TextIO | None = None


@dataclass(frozen=True)
class Command:
    """A named command with a one-line description and its handler."""

    name: str
    description: str
    callback: Callable[[Config, "str | None"], None]


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by the name typed at the prompt."""
    commands = (
        Command("help", "Displays a help message", command_help),
        Command("mapf", "Get the next page of locations", command_mapf),
        Command("mapb", "Get the previous page of locations", command_mapb),
        Command("exit", "Exit the Pokedex", command_exit),
        Command(
            "explore",
            'Explore a map, like "explore <map-area-name>"',
            command_explore,
        ),
    )
    return {command.name: command for command in commands}


def command_exit(cfg: Config, param: str | None) -> None:
    """Say goodbye and ask the session to end."""
    print("Closing the PokeFetch... Goodbye!", file=cfg.out)
    raise ExitRequested()


def command_help(cfg: Config, param: str | None) -> None:
    """List every command with its description."""
    print("\nWelcome to the PokeFetch!", file=cfg.out)
    print("Usage:", file=cfg.out)
    print(file=cfg.out)
    for command in get_commands().values():
        print(f"{command.name}: {command.description}", file=cfg.out)


def _show_page(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.get_map_areas(page_url)
    cfg.next_map_area_url = page.next
    cfg.prev_map_area_url = page.previous
    for area in page.results:
        print(area.name, file=cfg.out)


def command_mapf(cfg: Config, param: str | None) -> None:
    """Show the next page of location areas."""
    _show_page(cfg, cfg.next_map_area_url)


def command_mapb(cfg: Config, param: str | None) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_map_area_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.prev_map_area_url)


def command_explore(cfg: Config, param: str | None) -> None:
    """List the Pokémon that can be found in the named area."""
    if param is None:
        raise CommandError(
            "can't explore empty map name, please provide a valid map name"
        )
    area = cfg.client.get_map_area(param)
    print("\nFound Pokemon:", file=cfg.out)
    for encounter in area.pokemon_encounters:
        print("-", encounter.pokemon.name, file=cfg.out)