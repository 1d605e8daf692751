# micromouse

Maze-solving mice for a micromouse simulator. Each mouse is a small
program that talks to the simulator over standard input and output: it
prints one command per line (`wallFront`, `moveForward`, `setColor 0 0 G`,
...) and reads the simulator's whitespace-separated reply. Diagnostics go
to standard error.

Two mice are included:

- **Flood-fill solver** (`micromouse.floodfill`) – keeps a map of the walls
  it has sensed on a 16×16 maze, floods distances towards the 2×2 block of
  centre cells starting at (7, 7), drives back and forth between the start
  cell (0, 0) and the goal several times to refine the map, and finally
  marks the shortest path it knows in green.
- **Randomised wall follower** (`micromouse.wall_follower`) – repeatedly
  draws a burst length from 1 to 10; odd bursts follow the left-hand wall,
  even bursts the right-hand wall. It runs until the simulator stops
  answering.

## Installation

```
pip install .
```

## Running in a simulator

Configure the simulator to start the mouse with one of these commands:

```
micromouse-floodfill
micromouse-wall-follower
```

Both read replies from standard input and write commands to standard
output, so the simulator must be attached to both streams. Either command
exits quietly when the simulator closes its output.

## Using the library

`micromouse.api.MazeApi` wraps any pair of text streams (standard input and
output by default):

```python
import sys
from micromouse.api import MazeApi

api = MazeApi(sys.stdin, sys.stdout)
if not api.wall_front():
    api.move_forward(1)
api.set_color(0, 0, "G")
api.set_text(0, 0, "start")
```

It offers the sensor queries `wall_front`, `wall_left`, `wall_right`,
`maze_width`, `maze_height` and `was_reset`; the moves `move_forward`,
`turn_left`, `turn_right` and `ack_reset`; and the display commands
`set_wall`, `clear_wall`, `set_color`, `clear_color`, `clear_all_color`,
`set_text`, `clear_text` and `clear_all_text`.

A failed move (any reply other than `ack`) raises `micromouse.api.MoveError`,
whose `response` attribute holds the simulator's reply. A closed input
stream raises `EOFError`.

The mice take a `MazeApi`:

```python
import random
from micromouse.floodfill import FloodSolver
from micromouse.wall_follower import run

path = FloodSolver(api).run(3)   # three round trips, then mark the path
run(api, random.Random(), 10)    # ten random wall-following bursts
```

`FloodSolver.run` returns the marked path as a list of `Direction` values.
The solver's `distances`, `cells` and `angle` attributes hold its distance
grid, its wall map and the mouse's heading in degrees (90 is north).

## Limitations

- The flood-fill solver assumes a 16×16 maze with the goal at the centre;
  it does not ask the simulator for the maze size.
- Neither mouse handles the simulator's reset request: `was_reset` and
  `ack_reset` are available in `MazeApi` but are not used by the mice.
- The flood-fill solver only marks the shortest path in the simulator; it
  does not make a fast run along it.

## Tests

```
pip install .[test]
pytest
```