import io

import pytest

from pokedexcli.client import Client
from pokedexcli.commands import Config
from pokedexcli.repl import clean_input, main, start_repl


@pytest.fixture
def config():
    client = Client(5, 300)
    yield Config(client)
    client.close()


@pytest.mark.parametrize(
    "text, expected",
    [
        (" hello world ", ["hello", "world"]),
        ("Yo  soNN thisisanother ", ["yo", "sonn", "thisisanother"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_clean_input_empty():
    assert clean_input("   ") == []


def test_repl_runs_help_and_stops_at_eof(config, capsys):
    start_repl(config, io.StringIO("HELP\n"))
    out = capsys.readouterr().out
    assert "Welcome to the Pokedex!" in out
    assert out.count("Pokedex > ") == 2


def test_repl_unknown_command(config, capsys):
    start_repl(config, io.StringIO("fly away\n\n"))
    out = capsys.readouterr().out
    assert out.count("Unknown command") == 1
    assert out.count("Pokedex > ") == 3


def test_repl_prints_command_errors(config, capsys):
    start_repl(config, io.StringIO("mapb\ninspect\n"))
    out = capsys.readouterr().out
    assert "you're on the first page\n" in out
    assert "you must provide a pokemon name\n" in out


def test_repl_passes_arguments(config, capsys):
    start_repl(config, io.StringIO("inspect Pikachu\n"))
    assert "pikachu was not caught\n" in capsys.readouterr().out


def test_repl_exit(config, capsys):
    with pytest.raises(SystemExit) as info:
        start_repl(config, io.StringIO("exit\nhelp\n"))
    assert info.value.code == 0
    assert "Welcome" not in capsys.readouterr().out


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 0
    assert "Closing the Pokedex... Goodbye!" in capsys.readouterr().out


def test_main_returns_at_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out == "Pokedex > "