"""Flood-fill maze solver that explores to the centre and back."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace
from enum import IntEnum

from micromouse.api import MazeApi

ROWS = 16
COLS = 16
GOAL = (7, 7)
UNREACHED = -1
DEAD = 255
_WALL_LETTERS = "nswe"


class Direction(IntEnum):
    """Wall and move index; UP is north (+col), RIGHT is east (+row)."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def step(self) -> tuple[int, int]:
        """The (row, col) offset of the neighbouring cell in this direction."""
        return _STEPS[self]


_STEPS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class Coord:
    row: int
    col: int
    value: int = 0


@dataclass
class Cell:
    """What is known about one maze cell."""

    walls: list[bool] = field(default_factory=lambda: [False] * 4)
    visited: bool = False
    angle: int = 90
    dead: bool = False


def _log(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


def is_valid(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def _neighbours(row: int, col: int) -> Iterator[tuple[Direction, int, int]]:
    for direction in Direction:
        drow, dcol = direction.step
        yield direction, row + drow, col + dcol


def rotate_direction(angle: int, direction: int) -> int:
    """Map a direction between the absolute and heading-relative frames.

    ``angle`` is the heading in degrees (90 = north). Unknown angles leave
    the direction unchanged.
    """
    if angle == 270:
        return direction ^ 1
    if angle == 0:
        return (2, 3, 1, 0)[direction]
    if angle == 180:
        return (3, 2, 0, 1)[direction]
    return direction


def adjust_cell(cell: Cell) -> Cell:
    """Turn walls sensed relative to the heading into absolute walls."""
    walls = [cell.walls[rotate_direction(cell.angle, d)] for d in Direction]
    return replace(cell, walls=walls)


class FloodSolver:
    """Explores a 16x16 maze, refining flood distances on every run."""

    def __init__(self, api: MazeApi) -> None:
        self.api = api
        self.distances = [[UNREACHED] * COLS for _ in range(ROWS)]
        self.cells = [[Cell() for _ in range(COLS)] for _ in range(ROWS)]
        self.angle = 90

    def _fill(self, queue: deque[Coord], row: int, col: int, value: int) -> None:
        if not is_valid(row, col) or self.distances[row][col] != UNREACHED:
            return
        self.distances[row][col] = value + 1
        queue.append(Coord(row, col, value + 1))

    def init_flood(self, row: int, col: int) -> None:
        """Wall-free distances to the 2x2 block whose lower-left is (row, col)."""
        queue: deque[Coord] = deque()
        for r, c in ((row, col), (row + 1, col), (row, col + 1), (row + 1, col + 1)):
            self.distances[r][c] = 0
            queue.append(Coord(r, c, 0))
        while queue:
            cur = queue.popleft()
            for _, r, c in _neighbours(cur.row, cur.col):
                self._fill(queue, r, c, cur.value)
            for x in range(ROWS):
                for y in range(COLS):
                    self.api.set_text(x, y, "0")

    def init_flood_start(self, row: int, col: int, back: int = 0) -> None:
        """Recompute distances towards (row, col) through the known walls.

        With ``back`` 1 only the single cell is a target; otherwise the 2x2
        block is. With ``back`` 2 unvisited cells are sealed off as dead.
        """
        for r in range(ROWS):
            for c in range(COLS):
                self.distances[r][c] = UNREACHED
                if back == 2 and not self.cells[r][c].visited:
                    self.distances[r][c] = DEAD
                    self.cells[r][c].dead = True

        queue: deque[Coord] = deque()
        targets = [(row, col)]
        if back != 1:
            targets = [(row + 1, col), (row, col + 1), (row + 1, col + 1), (row, col)]
        for r, c in targets:
            self.distances[r][c] = 0
            queue.append(Coord(r, c, 0))

        while queue:
            cur = queue.popleft()
            walls = self.cells[cur.row][cur.col].walls
            for direction, r, c in _neighbours(cur.row, cur.col):
                if not walls[direction]:
                    self._fill(queue, r, c, cur.value)

    def update_wall_debug(self) -> None:
        """Paint every known wall, visit mark and distance in the simulator."""
        for r in range(ROWS):
            for c in range(COLS):
                cell = self.cells[r][c]
                for direction in Direction:
                    letter = _WALL_LETTERS[direction]
                    if cell.walls[direction]:
                        self.api.set_wall(r, c, letter)
                    else:
                        self.api.clear_wall(r, c, letter)
                if cell.visited:
                    self.api.set_color(r, c, "g")
                else:
                    self.api.clear_color(r, c)
                if cell.dead:
                    self.api.set_text(r, c, "Dead")
                    self.api.set_color(r, c, "r")
                else:
                    self.api.set_text(r, c, str(self.distances[r][c]))

    def update_walls(self, row: int, col: int) -> Cell:
        """Sense the walls around the mouse and record them.

        Returns the cell as sensed, relative to the current heading.
        """
        front = self.api.wall_front()
        left = self.api.wall_left()
        right = self.api.wall_right()
        sensed = Cell(walls=[front, False, left, right], visited=True, angle=self.angle)
        cell = adjust_cell(sensed)
        self.cells[row][col] = cell
        if front and left and right and row != 0 and col != 0:
            _log("dead")
            cell.dead = True

        for direction, r, c in _neighbours(row, col):
            if not is_valid(r, c):
                continue
            neighbour = self.cells[r][c]
            if direction == Direction.UP:
                neighbour.walls[Direction.DOWN] = cell.walls[Direction.UP]
            elif direction == Direction.LEFT:
                neighbour.walls[Direction.RIGHT] = cell.walls[Direction.LEFT]
            elif direction == Direction.RIGHT:
                neighbour.walls[Direction.LEFT] = cell.walls[Direction.RIGHT]
        return sensed

    def min_neighbour(self, cell: Cell, cur: Coord, rotate: bool = False) -> Coord:
        """The open neighbour with the lowest distance; ties go to the later direction.

        The result's ``value`` is the direction to move, relative to the
        cell's heading when ``rotate`` is set. With no open neighbour the
        current position is returned with value -1.
        """
        best = DEAD
        step = Coord(cur.row, cur.col, -1)
        for direction, r, c in _neighbours(cur.row, cur.col):
            index = rotate_direction(cell.angle, direction) if rotate else int(direction)
            if not is_valid(r, c) or cell.walls[index]:
                continue
            if self.distances[r][c] <= best:
                best = self.distances[r][c]
                step = Coord(r, c, index)
        return step

    def flood(self, stack: list[Coord]) -> None:
        """Repair distances until every cell on the stack is consistent."""
        while stack:
            cur = stack.pop()
            cell = self.cells[cur.row][cur.col]
            nearest = self.min_neighbour(cell, cur)
            lowest = self.distances[nearest.row][nearest.col]
            here = self.distances[cur.row][cur.col]
            if here - 1 == lowest:
                continue
            for direction, r, c in _neighbours(cur.row, cur.col):
                if is_valid(r, c) and self.distances[r][c] != 0 and not cell.walls[direction]:
                    stack.append(Coord(r, c))
            if here != 0:
                self.distances[cur.row][cur.col] = lowest + 1

    def go_to_cell(self, direction: int) -> None:
        """Turn towards a heading-relative direction and move one cell."""
        if direction == -1:
            _log("not dir")
        elif direction == Direction.UP:
            self.api.move_forward()
        elif direction == Direction.DOWN:
            self.angle -= 180
            self.api.turn_right()
            self.api.turn_right()
            self.api.move_forward()
        elif direction == Direction.LEFT:
            self.angle += 90
            self.api.turn_left()
            self.api.move_forward()
        elif direction == Direction.RIGHT:
            self.angle -= 90
            self.api.turn_right()
            self.api.move_forward()
        self.angle %= 360

    def go_to_cell_shortest(self, direction: int) -> None:
        """Move one cell in an absolute direction."""
        self.go_to_cell(rotate_direction(self.angle, direction))

    def floodfill(self, start: Coord, dest: Coord) -> Coord:
        """Drive from ``start`` until a cell as close as ``dest`` is reached."""
        path: deque[Coord] = deque([start])
        stack = [start]
        cost = 0
        cur = start
        while True:
            cur = path[0]
            sensed = self.update_walls(cur.row, cur.col)
            if self.distances[cur.row][cur.col] == self.distances[dest.row][dest.col]:
                break
            self.flood(stack)
            path.popleft()
            step = self.min_neighbour(sensed, cur, rotate=True)
            path.append(step)
            stack.append(step)
            self.go_to_cell(step.value)
            cost += 1
        _log(f"total_cost:{cost}")
        return Coord(cur.row, cur.col, 0)

    def shortest_path_go(self, start: Coord, dest: Coord) -> list[Direction]:
        """Mark the descending path from ``start`` and return its directions."""
        cur = Coord(start.row, start.col)
        path: list[Direction] = []
        for _ in range(self.distances[start.row][start.col]):
            chosen: tuple[Direction, int, int] | None = None
            walls = self.cells[cur.row][cur.col].walls
            for direction, r, c in _neighbours(cur.row, cur.col):
                if (
                    is_valid(r, c)
                    and not walls[direction]
                    and self.distances[r][c] < self.distances[cur.row][cur.col]
                ):
                    chosen = (direction, r, c)
            if chosen is None:
                break
            direction, r, c = chosen
            cur = Coord(r, c)
            path.append(direction)
            self.api.set_color(r, c, "g")
            self.api.set_text(r, c, str(self.distances[r][c]))
        return path

    def run(self, iterations: int = 3) -> list[Direction]:
        """Explore to the goal and back ``iterations`` times, then mark the shortest path."""
        self.init_flood(*GOAL)
        start = Coord(0, 0, self.distances[0][0])
        dest = Coord(GOAL[0], GOAL[1], self.distances[GOAL[0]][GOAL[1]])
        self.api.set_color(0, 0, "r")
        self.api.set_color(GOAL[0], GOAL[1], "r")
        self.api.set_text(0, 0, "Start")
        self.api.set_text(GOAL[0], GOAL[1], "Goal")
        self.angle = 90

        reached = start
        for _ in range(iterations):
            reached = self.floodfill(start, dest)
            self.init_flood_start(0, 0, 1)
            _log("done2")
            reached = self.floodfill(reached, start)
            self.init_flood_start(GOAL[0], GOAL[1], 2)
        return self.shortest_path_go(reached, dest)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the maze served by the simulator over stdin/stdout."""
    solver = FloodSolver(MazeApi())
    try:
        solver.run()
    except EOFError:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())