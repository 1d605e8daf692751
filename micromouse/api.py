"""Line-based client for the micromouse simulator protocol."""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import TextIO

_LEADING_INT = re.compile(r"[+-]?\d+")


class MoveError(RuntimeError):
    """Raised when the simulator refuses a forward move (e.g. a crash into a wall)."""

    def __init__(self, response: str) -> None:
        super().__init__(f"move rejected by simulator: {response}")
        self.response = response


def _leading_int(token: str) -> int:
    """Parse the integer prefix of ``token``; 0 when there is none."""
    match = _LEADING_INT.match(token.lstrip())
    return int(match.group()) if match else 0


class MazeApi:
    """Sends commands to the simulator and reads its whitespace-separated replies."""

    def __init__(self, instream: TextIO | None = None, outstream: TextIO | None = None) -> None:
        self._in = instream if instream is not None else sys.stdin
        self._out = outstream if outstream is not None else sys.stdout
        self._pending: deque[str] = deque()

    def _send(self, command: str) -> None:
        self._out.write(command + "\n")
        self._out.flush()

    def _receive(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError("simulator closed its output")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _ask_bool(self, command: str) -> bool:
        self._send(command)
        return self._receive() == "true"

    def _ask_int(self, command: str) -> int:
        self._send(command)
        return _leading_int(self._receive())

    def _acknowledged(self, command: str) -> None:
        self._send(command)
        self._receive()

    def maze_width(self) -> int:
        return self._ask_int("mazeWidth")

    def maze_height(self) -> int:
        return self._ask_int("mazeHeight")

    def wall_front(self) -> bool:
        return self._ask_bool("wallFront")

    def wall_right(self) -> bool:
        return self._ask_bool("wallRight")

    def wall_left(self) -> bool:
        return self._ask_bool("wallLeft")

    def move_forward(self, distance: int = 1) -> None:
        """Move ahead; the distance is only sent when it differs from 1."""
        suffix = "" if distance == 1 else str(distance)
        self._send(f"moveForward {suffix}")
        response = self._receive()
        if response != "ack":
            raise MoveError(response)

    def turn_right(self) -> None:
        self._acknowledged("turnRight")

    def turn_left(self) -> None:
        self._acknowledged("turnLeft")

    def set_wall(self, x: int, y: int, direction: str) -> None:
        self._send(f"setWall {x} {y} {direction}")

    def clear_wall(self, x: int, y: int, direction: str) -> None:
        self._send(f"clearWall {x} {y} {direction}")

    def set_color(self, x: int, y: int, color: str) -> None:
        self._send(f"setColor {x} {y} {color}")

    def clear_color(self, x: int, y: int) -> None:
        self._send(f"clearColor {x} {y}")

    def clear_all_color(self) -> None:
        self._send("clearAllColor")

    def set_text(self, x: int, y: int, text: str) -> None:
        self._send(f"setText {x} {y} {text}")

    def clear_text(self, x: int, y: int) -> None:
        self._send(f"clearText {x} {y}")

    def clear_all_text(self) -> None:
        self._send("clearAllText")

    def was_reset(self) -> bool:
        return self._ask_bool("wasReset")

    def ack_reset(self) -> None:
        self._acknowledged("ackReset")