# pokefetch

pokefetch is a small interactive shell for browsing Pokemon location areas.
It gets its data from the public PokeAPI. Raw responses are kept in an
in-memory cache, so paging back and forth does not fetch the same page twice.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

Start the shell:

```
pokefetch
```

`python -m pokefetch.repl` does the same thing. The command takes no options
besides `--help`.

A prompt appears:

```
PokeFetch > 
```

Each line is split on whitespace and lowercased. The first word is the
command and the remaining words are its argument.

| Command                    | What it does                                        |
|----------------------------|-----------------------------------------------------|
| `help`                     | Lists every command with its description            |
| `mapf`                     | Shows the next page of location areas (20 per page) |
| `mapb`                     | Shows the previous page of location areas           |
| `explore <map-area-name>`  | Lists the Pokemon that can be found in an area      |
| `exit`                     | Says goodbye and ends the session                   |

The session also ends at end of input, for example after Ctrl-D.

Notes on behaviour:

- The first `mapf` shows the first page. After the last page, `mapf` starts
  again from the first page.
- `mapb` on the first page reports `you're on the first page`.
- `explore` with no area name, or with an area the API does not know (any
  status other than 200), reports an error.
- An unknown command prints `Unknown command: <name>`.
- Errors are written to standard error as `Error executing command: <message>`.
  The shell keeps running after an error.

Example session:

```
PokeFetch > mapf
canalave-city-area
eterna-city-area
...
PokeFetch > explore canalave-city-area

Found Pokemon:
- tentacool
- tentacruel
...
PokeFetch > exit
Closing the PokeFetch... Goodbye!
```

Each HTTP request times out after five seconds. When the shell answers from
the cache, it first prints `Providing cached result from past 1 minutes`. A
background thread checks the cache once a minute and drops entries that are
at least a minute old.

## Using it as a library

```python
from pokefetch.client import Client, ClientError

with Client(timeout=5.0, cache_interval=60.0) as client:
    page = client.get_map_areas(None)        # first page
    for area in page.results:
        print(area.name)

    try:
        area = client.get_map_area("canalave-city-area")
    except ClientError as exc:
        print("failed:", exc)
    else:
        for encounter in area.pokemon_encounters:
            print(encounter.pokemon.name)
```

- `pokefetch.client.Client` fetches pages with `get_map_areas(page_url)` and
  single areas with `get_map_area(name)`. It can also take a ready-made
  `Cache` and `requests.Session`. `close()` releases only the cache and the
  session that the client created itself. `ClientError` is raised for network
  failures, bodies that cannot be decoded, and non-200 answers for a single
  area.
- `pokefetch.types` holds the frozen records that come back from the client.
  These are `MapAreaPage` (`count`, `next`, `previous`, `results`), `MapArea`
  (`id`, `name`, `game_index`, `location`, `names`,
  `encounter_method_rates`, `pokemon_encounters`), `PokemonEncounter` and
  `NamedResource`. Each one has a `from_dict` class method.
- `pokefetch.cache.Cache(interval, start_reaper=True)` is a thread-safe store
  of bytes keyed by strings. It provides `add`, `get` (which returns `None` on
  a miss), `remove_expired`, `close`, `len()` and `in`.
- `pokefetch.commands` exposes `get_commands()`, the `Config` that holds the
  session state, and the `CommandError` and `ExitRequested` exceptions.
  `pokefetch.repl.repl_start(cfg, stdin, stdout, stderr)` runs the loop over
  any text streams.
- `pokefetch.utils.clean_input` splits a line on whitespace and lowercases
  every word.

## What it does not do

pokefetch only reads location areas. It does not look up individual Pokemon.
It keeps no Pokedex and saves nothing to disk: the cache lives in memory and
is gone when the shell exits.

## Running the tests

```
pytest
```