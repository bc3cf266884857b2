"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from pokedexcli.api import TIMEOUT, ApiError, Client
from pokedexcli.cache import CACHE_TIME
from pokedexcli.commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def run_repl(config: Config, stream: Iterable[str]) -> None:
    """Read commands from ``stream`` and run them until it is exhausted."""
    commands = get_commands()
    lines = iter(stream)
    while True:
        print(PROMPT, end="", flush=True)
        line = next(lines, None)
        if line is None:
            print()
            return

        words = clean_input(line)
        if not words:
            continue

        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command")
            continue

        try:
            command.callback(config, *args)
        except (CommandError, ApiError) as err:
            print(err)


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive Pokedex session on standard input."""
    parser = argparse.ArgumentParser(description="An interactive Pokedex.")
    parser.parse_args(argv)

    with Client(TIMEOUT, CACHE_TIME) as client:
        run_repl(Config(client=client), sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())