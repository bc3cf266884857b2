# pokedexcli

An interactive Pokedex for the terminal. Browse location areas, explore them
to see which Pokemon live there, try to catch Pokemon and inspect the ones
you have caught. Data comes from the public PokeAPI; raw responses are kept
in an in-memory cache for about five seconds, so repeated lookups within that
time do not hit the network again. Requests time out after three seconds.

## Installation

```
pip install .
```

## Usage

Start the interactive prompt:

```
pokedexcli
```

The same prompt can be started with `python -m pokedexcli.repl`. The command
takes no options besides `--help`.

You will see the prompt `Pokedex > `. Input is lower-cased and split on
whitespace, so case and extra spaces do not matter. Blank lines are ignored,
and an unrecognised first word prints `Unknown command`. The session ends on
`exit` or at the end of input.

| Command                    | What it does                                              |
|----------------------------|-----------------------------------------------------------|
| `help`                     | Prints a usage message listing every command              |
| `map`                      | Shows the next page of location areas                     |
| `mapb`                     | Shows the previous page of location areas                 |
| `explore <location_name>`  | Lists the Pokemon found in a location area                |
| `catch <pokemon_name>`     | Throws a Pokeball; on success the Pokemon joins your Pokedex |
| `inspect <pokemon_name>`   | Shows name, height, weight, stats, abilities and types of a caught Pokemon |
| `pokedex`                  | Lists every Pokemon you have caught                       |
| `exit`                     | Closes the Pokedex                                        |

Notes on the commands:

- `map` and `mapb` both start from the first page when no page has been
  shown yet. Once you reach an end of the list, moving further in that
  direction prints a `cannot get the locations: ...` error.
- `catch` on a Pokemon already in your Pokedex only says so; no Pokeball is
  thrown.
- `inspect` only works for Pokemon you have caught; it makes no request.
- `catch`, `explore` and `inspect` without a name print an error such as
  `Must provide a Pokemon name`. Failed lookups (an unknown name, a network
  problem) are printed too, and the prompt carries on.

### Catching

The chance of a catch depends on the Pokemon's base experience, following
`catch_probability` in `pokedexcli.commands`: 0.85 · e^(−4.5·x) + 0.05, where
x scales base experience 36 to 0 and 608 to 1. A Pokemon with base experience
36 is caught 90% of the time; one with 608 only about 6% of the time.

### Example session

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 - tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
Pokedex > pokedex
Your pokedex has:
 - tentacool
Pokedex > exit
Closing the Pokedex... Goodbye!
```

## Using it as a library

- `pokedexcli.api.Client(timeout=3.0, cache_interval=5.0)` offers
  `get_locations(page_url=None)`, `explore_location(location_name)` and
  `get_pokemon_data(pokemon_name)`, returning `LocationPage`, `LocationArea`
  and `PokemonData` from `pokedexcli.models`. Failures raise
  `pokedexcli.api.ApiError`. Call `close()` or use it as a context manager.
- `pokedexcli.cache.Cache(interval)` is a thread-safe mapping of keys to bytes
  with `add`, `get` (returns `None` when missing), `reap`, `close`, `len()`
  and `in`. A background thread drops entries older than `interval` seconds.
- `pokedexcli.repl.run_repl(config, stream)` runs the prompt over any
  iterable of lines, with a `pokedexcli.commands.Config` holding the client
  and the Pokedex.

## What it does not do

Your Pokedex lives only in memory: nothing is saved, and every session starts
with an empty Pokedex. The response cache is in memory as well.

## Development

Install the test dependencies and run the suite:

```
pip install .[test]
pytest
```