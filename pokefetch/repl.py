"""The read-eval-print loop and the program's entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from pokefetch.client import Client, ClientError
from pokefetch.commands import CommandError, Config, ExitRequested, get_commands
from pokefetch.utils import clean_input

PROMPT = "PokeFetch > "


def repl_start(
    cfg: Config,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Read commands line by line and run them until end of input or exit."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    commands = get_commands()

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            line = stdin.readline()
        except OSError as exc:
            print("reading standard input:", exc, file=stderr)
            return
        if not line:
            return

        words = clean_input(line)
        if not words:
            continue
        name, *rest = words
        params = " ".join(rest) if rest else None

        command = commands.get(name)
        if command is None:
            print("Unknown command:", name, file=stdout)
            continue
        try:
            command.callback(cfg, params)
        except ExitRequested:
            return
        except (CommandError, ClientError) as exc:
            print("Error executing command:", exc, file=stderr)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session against the Pokémon API."""
    parser = argparse.ArgumentParser(
        prog="pokefetch",
        description="Browse Pokémon location areas interactively.",
    )
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=60.0) as client:
        repl_start(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())