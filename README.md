# pokedexcli

An interactive Pokedex for the terminal. It pages through location areas,
lists the Pokemon found in them and lets you try to catch Pokemon, using data
from the public PokeAPI. Raw responses are kept in an in-memory cache for five
minutes, so asking for the same page again does not go back to the network.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedexcli
```

The command takes no options other than `--help`. It shows a `Pokedex > `
prompt and reads commands from standard input. Each line is split on spaces
and lower-cased, so `EXPLORE Pastoria-City-Area` works just like
`explore pastoria-city-area`. Empty lines are ignored and an unrecognised
first word prints `Unknown command`.

Available commands:

| Command                  | What it does                                        |
|--------------------------|-----------------------------------------------------|
| `help`                   | Displays a help message                             |
| `map`                    | Displays the names of the next location areas       |
| `mapb`                   | Displays the names of the previous location areas   |
| `explore <area_name>`    | Displays pokemon's at the specified location        |
| `catch <pokemon_name>`   | Attempt to catch a pokemon                          |
| `inspect <pokemon_name>` | Inspect a caught pokemon                            |
| `exit`                   | Exit the Pokedex                                    |

The session ends on `exit` or at the end of input.

An example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city...
Found Pokemon:
 - tentacool
 - magikarp
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp caught!
Pokedex > inspect magikarp
Name: magikarp
Height: 9
Weight: 100
Stats:
  -hp: 0
  ...
Types:
  - water
```

Some details of the commands:

- `map` shows the first page of location areas, then the next page on each
  later call. `mapb` goes back one page; on the first page (or before any
  `map`) it prints `you're on the first page`.
- `explore`, `catch` and `inspect` need exactly one name and otherwise print
  an error saying so.
- `catch` throws one Pokeball per attempt. With `n` being the Pokemon's base
  experience divided by 20 (rounded down), the throw succeeds when a random
  number below `n` equals 1, so the higher the base experience the harder
  the catch. A Pokemon with base experience below 20 cannot be caught and an
  error is printed; one with base experience from 20 to 39 is always missed.
- `inspect` works only for Pokemon caught in the current session. Under
  `Stats` it lists each stat with its effort value.
- Errors from a command, from the network or from an unreadable response
  are printed and the prompt carries on.

## What it does not do

Caught Pokemon are kept in memory only; nothing is saved, so the Pokedex is
empty each time the program starts. The cache is in memory too and is not
shared between sessions.

## Using the library

The pieces behind the prompt can also be used directly.

`pokedexcli.client.Client(timeout, cache_interval)` fetches from the API,
with both arguments in seconds:

```python
from pokedexcli.client import Client

client = Client(timeout=5, cache_interval=300)
page = client.list_locations()          # a LocationPage
for area in page.results:
    print(area.name)
area = client.get_location("pastoria-city-area")   # a Location
pokemon = client.get_pokemon("magikarp")           # a Pokemon
print(pokemon.base_experience, [t.name for t in pokemon.types])
client.close()
```

`list_locations(page_url)` takes the `next` or `previous` URL of an earlier
`LocationPage`, or `None` for the first page. The response models live in
`pokedexcli.models`: `NamedResource`, `LocationPage`, `Location`,
`PokemonEncounter`, `Pokemon`, `PokemonStat` and `PokemonType`, each with a
`from_dict` constructor that raises `ValueError` on values of the wrong type.

`pokedexcli.cache.Cache(interval)` is a thread-safe byte-value cache. A
background thread drops entries older than `interval` seconds; `interval`
must be positive.

```python
from pokedexcli.cache import Cache

with Cache(interval=60) as cache:
    cache.add("key", b"value")
    assert cache.get("key") == b"value"
    assert cache.get("missing") is None
```

It also supports `len()` and `in`, and `reap(now, last)` removes entries
created before `now - last`, measured on `time.monotonic()`.

`pokedexcli.commands` holds `Config` (the session state), `Command`,
`get_commands()` and the `command_*` functions; `pokedexcli.repl` holds
`clean_input`, `start_repl(config, stream)` and `main`.

## Running the tests

```
pip install .[test]
pytest
```