# cchesstools

Utilities for working with chess engines:

- drive an external engine over UCI (`cchesstools.uci_engine`)
- load opponent definitions from a JSON file (`cchesstools.opponents`)
- parse Strategic Test Suite (STS) EPD files and record benchmark results (`cchesstools.sts`)
- build Markdown reports for engine-versus-engine games (`cchesstools.match_report`)
- small string helpers (`cchesstools.strutils`) and an error hierarchy (`cchesstools.errors`)

The package has no runtime dependencies.

## Installation

```
pip install .
```

To install with the test tools:

```
pip install .[test]
```

## Driving a UCI engine

`UciEngine(path)` starts the engine executable as a child process, with its standard error merged into its output. Use it as a context manager: on leaving the block, `close()` sends `quit`, closes the pipes and waits up to three seconds for the process before killing it.

```python
from cchesstools.uci_engine import UciEngine

with UciEngine("/path/to/engine") as engine:
    engine.init_uci()                  # sends "uci", waits for "uciok"
    engine.set_option("Hash", "64")    # "setoption name Hash value 64"
    engine.new_game()                  # "ucinewgame", then "isready" / "readyok"
    engine.send("position startpos moves e2e4")
    best = engine.go("wtime 60000 btime 60000 winc 1000 binc 1000")
    print(best)  # e.g. "e7e5"
```

- `send(command)` writes one line to the engine.
- `read_line()` returns the next line without its line ending.
- `read_until(token)` reads lines until one starts with `token` and returns that line.
- `go(params)` sends `go <params>` and returns the move after `bestmove`, or `""` if the line holds no move.

A `ChessError` is raised if the engine cannot be started, if it closes its output, or if it is used after `close()`.

## Opponent lists

An opponents file is a JSON array. Each entry has a `name`, an `engine` path and an optional `options` object:

```json
[
  {"name": "Example", "engine": "engines/example", "options": {"Threads": 1, "Skill Level": "5"}}
]
```

```python
from cchesstools.opponents import load_opponents

for opp in load_opponents("config/opponents.json"):
    print(opp.name, opp.engine_path, opp.options)
```

Each entry becomes an `Opponent` dataclass. The `engine` path is prefixed with the directory part of the JSON file's path. Option values that are strings are kept as they are; other values are stored as their compact JSON text. A `ChessError` is raised if the file cannot be opened, if the top level is not an array, or if `name` or `engine` is not a string.

## STS benchmark files

```python
from cchesstools.sts import parse_epd, best_expected

entry = parse_epd('1kr5/3n4/q3p2p/p2n2p1/PppB1P2/5BP1/1P2Q2P/3R2K1 w - - bm f5; c0 "f5=10, Be5+=2, Bf2=3, Bg4=2";')
print(entry.fen)                    # the first four fields plus "0 1"
print(entry.scores["Be5"])          # 2 (check suffixes are stripped)
print(best_expected(entry.scores))  # "f5"
```

- `parse_epd(line)` returns an `EpdEntry`, or `None` for an empty or malformed line or one without scored moves.
- `parse_c0(text)` turns `"f5=10, Be5+=2"` into a dict of move scores.
- `strip_check_suffix(san)` removes trailing `+` and `#`.
- `find_sts_files(directory)` returns the existing `STS1.epd` to `STS15.epd` files in a directory.
- `append_results(path, results, search_time_ms, positions_per_file, timestamp=None)` appends one row of `FileResult` scores and the total percentage to a Markdown table, writing the header first if the file is new. The timestamp defaults to the current local time as `YYYY-MM-DD_HH-MM-SS`.

## Engine match reports

`cchesstools.match_report` holds `Side`, `MoveRecord` and `GameSummary` (`GameSummary.from_log(moves)` totals the moves that carry search metrics). `render_game_report(...)` turns a game's move log, result, transposition-table figures, a date string and the mate score into Markdown text; writing it to a file is up to the caller.

Formatting helpers:

- `format_score(score, mate_score)`: centipawns as `+0.35`, or scores within 200 of the mate score as `M3` / `-M2`.
- `compact_number(n)`: `1.5k`, `12k`, `2.3M`.
- `comma_number(n)`: `1,234,567`; raises `ValueError` for negative numbers.
- `allocate_time(remaining_ms, inc_ms)`: thinking time for one move, a thirtieth of the remaining time plus the increment, capped at a third of the remaining time and never below 50 ms.

## String helpers

`cchesstools.strutils` provides `split(text, delimiter)`, `trim(text)`, `is_integer(text)` and `to_integer(text)` (the leading integer, or 0 when there is none or it does not fit in 32 bits).

## Errors

`cchesstools.errors` defines `ChessError` (a `RuntimeError`) and its subclasses `FenParseError` and `FenValidationError`, whose messages are prefixed with `FEN Parse Error: ` and `FEN Validation Error: `.

## What this package does not do

It has no board representation, move generator or search of its own, and no command-line program. It therefore cannot play a game against an opponent engine, run the STS positions through a search, or score moves itself: it provides the engine driver, file parsing, formatting and reporting pieces that such tools use.