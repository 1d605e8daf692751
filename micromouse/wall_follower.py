"""Randomised left/right wall follower."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from typing import Protocol

from micromouse.api import MazeApi


class _Random(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _log(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


def follow_left(api: MazeApi, steps: int) -> None:
    """Take ``steps`` moves keeping the wall on the left."""
    for _ in range(steps):
        if not api.wall_left():
            api.turn_left()
        while api.wall_front():
            api.turn_right()
        api.move_forward()


def follow_right(api: MazeApi, steps: int) -> None:
    """Take ``steps`` moves keeping the wall on the right."""
    for _ in range(steps):
        if not api.wall_right():
            api.turn_right()
        while api.wall_front():
            api.turn_left()
        api.move_forward()


def run(api: MazeApi, rng: _Random, bursts: int | None = None) -> None:
    """Alternate randomly between left and right following.

    Each burst draws a length from 1 to 10: odd lengths follow the left wall,
    even ones the right. With ``bursts`` of None the mouse runs forever.
    """
    _log("Running...")
    api.set_color(0, 0, "G")
    api.set_text(0, 0, "abc")

    done = 0
    while bursts is None or done < bursts:
        steps = rng.randint(1, 10)
        if steps % 2 == 1:
            follow_left(api, steps)
        else:
            follow_right(api, steps)
        done += 1


def main(argv: Sequence[str] | None = None) -> int:
    """Drive the simulator over stdin/stdout until it stops answering."""
    try:
        run(MazeApi(), random.Random())
    except EOFError:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())