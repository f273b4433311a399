# norcina

A 3x3x3 Rubik's cube toolkit:

- a compact cube model built from corner and edge pieces. It supports face
  turns, sticker lookup and a coloured terminal rendering;
- move sequences (`Alg`). They can be inverted, printed and generated at random;
- solvers: breadth-first search, IDA* with a Manhattan-style heuristic, and a
  two-phase Kociemba solver backed by prune tables;
- WCA event metadata and scramble generation;
- solve records with penalties, events and sessions;
- a press/release speedcubing timer state machine.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install norcina
```

Python 3.10 or newer is required.

## Command line

```
norcina
```

By default, the command builds a random cube from seed 123. It prints the cube
as a coloured net and solves it with the Kociemba solver. It then prints
`Solution is ...`, followed by `Therefore, scramble is ...`, which is the
solution inverted.

Options:

- `--scramble "R U D F2 R L D2"` applies these moves to a solved cube instead of
  generating a random one. Move names are a face letter (`R U F L D B`) with an
  optional `2`, `P` or `'` suffix.
- `--seed N` sets the seed for the random cube. It is used when no scramble is
  given.
- `--method {kociemba,manhattan}` chooses the solver. The default is `kociemba`.

## Library use

### Cubes and moves

```python
import random

from norcina.cube import Cube
from norcina.moves import parse_alg

cube = Cube.random(random.Random(123))
print(cube)                # coloured net of the cube
print(cube.is_solved())

scrambled = Cube.SOLVED.mov(parse_alg("R U R' U'"))
for mov, neighbour in scrambled.neighbors():
    print(mov, neighbour.is_solved())
```

- `Move.all()` lists all 18 face turns.
- `Move.inverse()` gives the turn that undoes a move.
- `Cube.describe()` lists which piece sits at every position.
- Named algorithms live in `norcina.algs`: `SLEDGEHAMMER`, `CHECKER` and the
  PLLs `PLL_T`, `PLL_J`, `PLL_U_A` and `PLL_U_B`.

### Solving

```python
from norcina import kociemba
from norcina.search import solve_manhattan

solution = kociemba.solve(cube)
alg = solution.alg()
print("Solution:", alg)
print("Scramble:", alg.reversed())

# Optimal but slow; only practical for short scrambles.
short = solve_manhattan(Cube.SOLVED.mov(parse_alg("R U")))
```

`kociemba.solve` builds the prune tables on first use and keeps them for later
calls. You can also build the tables yourself with
`kociemba.PruneTable.generate()` and pass them to
`kociemba.solve_with_table(cube, table)`. `norcina.search` also offers
`search_bfs`, `solve_bfs` and `search_idastar`, which take your own goal and
heuristic functions.

### Events and scrambles

```python
import random

from norcina.event import Event
from norcina.scramble import gen_scramble

event = Event.default()
print(event.full_name(), event.str_id(), event.short_name())
print(gen_scramble(event, random.Random()))
```

For the 3x3x3 cube, `gen_scramble` currently returns a T permutation. For
every other event it returns an empty scramble.

### Solves, events and sessions

```python
from datetime import timedelta

from norcina.sessions import CustomEvent, MaybeCustomEvent, Session
from norcina.solve import Penalty, Solve

event = MaybeCustomEvent.default()
session = Session.main()

solve = Solve.new(timedelta(seconds=12.345), event.gen_scramble())
print(solve)                  # "12.345"
solve.penalty = Penalty.PLUS2
print(solve)                  # "12.345 (+2)"

custom = MaybeCustomEvent(CustomEvent(id=17, name="Relay", scramble_type=None))
print(custom.short_name(), custom.gen_scramble())   # "Relay None"
```

### Timer

`norcina.timer.Timer` follows the usual speedcubing flow:

1. Hold the key down (`press`).
2. Release it after the minimum hold time to start the timer (`release`).
3. Press again to stop the timer and get the elapsed time.

`reading` gives the time to show and the colour to draw it in. The colour is
`"white"`, `"yellow"`, `"green"` or `"blue"`. The clock is
`time.monotonic` unless you pass another one.

## What it does not do

The package does not store solves. There is no database or file format for
solve records, so a `Solve` lives only as long as your program keeps it. There
is also no interactive timer screen: `Timer` is the state machine only, and
reading keys and drawing the time are up to the caller.