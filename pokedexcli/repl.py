"""The interactive Pokedex prompt and its command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

import requests

from pokedexcli.client import Client
from pokedexcli.commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Split ``text`` on spaces into lower-case words, dropping empty ones."""
    return [word.lower().strip() for word in text.split(" ") if word]


def start_repl(config: Config, stream: TextIO) -> None:
    """Read commands from ``stream`` and run them until it is exhausted."""
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            return
        words = clean_input(line.rstrip("\r\n"))
        if not words:
            continue
        command = commands.get(words[0])
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(config, *words[1:])
        except (CommandError, requests.RequestException, ValueError) as err:
            print(err)


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive Pokedex session on standard input."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="An interactive Pokedex."
    )
    parser.parse_args(argv)
    client = Client(timeout=5.0, cache_interval=300.0)
    try:
        start_repl(Config(client), sys.stdin)
    finally:
        client.close()
    return 0