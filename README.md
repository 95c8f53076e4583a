# magpie

Core pieces of a crossword board game engine, in plain Python with no
third-party dependencies.

## What is inside

- `magpie.constants`: board size (`BOARD_DIM`), rack size (`RACK_SIZE`),
  `BINGO_BONUS`, the standard bonus-square layout `CROSSWORD_GAME_BOARD`,
  the `MoveType` enum (`PLAY`, `EXCHANGE`, `PASS`) and the helpers `blank`,
  `unblank` and `is_blanked` for machine letters.
- `magpie.xoshiro`: the `SplitMix64` seeder and the `Xoshiro`
  (xoshiro256++) generator, with `seed`, `next`, `jump`, `long_jump` and
  `copy` for independent streams across workers.
- `magpie.thread_control`: `ThreadControl`, which keeps a halt status
  (`HaltStatus`; only the first reason given to `halt` is kept), a search
  mode (`Mode`) with `set_mode_searching`, `set_mode_stopped` and
  `wait_for_mode_stopped`, a check-stop flag, and a `write` method that
  writes and flushes output under a lock. Output goes to standard output
  unless another stream is given.
- `magpie.winpct`: `WinPct`, a win-probability table indexed by spread and
  unseen tiles whose `win_pct` clamps both arguments to the table; build one
  with `parse_winpct` from CSV lines or `load_winpct` from a file. The header
  line and the first column are skipped.
- `magpie.util`: `contains_all_whitespace` and `rack_to_string`, which
  renders per-letter counts through a function mapping machine letters to
  text.
- `magpie.formats`: the `Move` record and `format_move`, which renders a
  move in UCGI notation (`8h.WORD` across, `h8.WORD` down, `ex.ABC`,
  `pass`), filling played-through squares from the board.
- `magpie.words`: `words_played`, listing each `FormedWord` a placement
  makes: the cross words formed by fresh tiles first, the main word last.
- `magpie.go_params`: `parse_go_command`, which turns the arguments of a
  UCGI `go` command into `GoParams` (with `SearchType` and `StopCondition`),
  raising `GoParseError` when they are inconsistent.

## Installing

```
pip install .
```

## Examples

```python
from magpie.xoshiro import Xoshiro

rng = Xoshiro(42)
values = [rng.next() for _ in range(3)]
```

```python
from magpie.go_params import parse_go_command, GoParseError

params = parse_go_command(" sim depth 2 plays 10 i 1000 stopcondition 99 threads 4")
print(params.depth, params.num_plays, params.max_iterations)

try:
    parse_go_command(" sim threads 4")
except GoParseError as err:
    print("rejected:", err)
```

```python
from magpie.constants import MoveType
from magpie.formats import Move, format_move

board = [[0] * 15 for _ in range(15)]
move = Move(MoveType.PLAY, tiles=(1, 2), row_start=7, col_start=7)
print(format_move(move, board, lambda ml: "?ABCDEFGHIJKLMNOPQRSTUVWXYZ"[ml]))  # 8h.AB
```

```python
from magpie.winpct import load_winpct

table = load_winpct("winpct.csv")
print(table.win_pct(25, 40))
```

## What it does not do

This package has no game state, board or bag handling, move generator,
lexicon loading or word-validity checking, simulation or inference. There
is no UCGI command loop and no command-line program: `parse_go_command`
only parses settings, and `ThreadControl` only coordinates a search that
some other code runs.

## Running the tests

```
pip install .[test]
pytest
```