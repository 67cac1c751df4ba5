"""A maze grid and monsters that walk a fixed path through it."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "MAZE",
    "DEFAULT_PATH",
    "START",
    "Direction",
    "Monster",
    "render_maze",
    "simulate_monsters",
    "main",
]

# 0 is open floor, 1 is a wall. Indexed as MAZE[y][x].
MAZE: tuple[tuple[int, ...], ...] = (
    (1, 0, 1, 0, 0, 0, 0, 1, 0, 0),
    (1, 0, 1, 0, 0, 1, 0, 1, 0, 0),
    (1, 0, 1, 0, 0, 1, 0, 1, 1, 0),
    (1, 0, 1, 1, 1, 1, 0, 0, 0, 0),
    (1, 0, 0, 1, 0, 0, 0, 0, 0, 0),
    (1, 0, 0, 1, 0, 1, 0, 1, 1, 0),
    (1, 0, 1, 1, 0, 1, 0, 0, 1, 0),
    (1, 0, 0, 0, 0, 1, 0, 0, 1, 0),
    (1, 0, 1, 1, 1, 0, 0, 0, 1, 0),
    (1, 0, 1, 0, 0, 0, 0, 0, 1, 0),
)

START: tuple[int, int] = (1, 0)


class Direction(IntEnum):
    """A step on the grid; y grows downwards."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def dx(self) -> int:
        return (0, 0, -1, 1)[self]

    @property
    def dy(self) -> int:
        return (-1, 1, 0, 0)[self]


DEFAULT_PATH: tuple[Direction, ...] = tuple(
    Direction(d) for d in (1, 1, 1, 1, 1, 1, 1, 3, 3, 3, 0, 0, 0, 3, 3, 3, 3)
)


@dataclass
class Monster:
    """A monster at (x, y) that follows ``path`` one step at a time."""

    x: int
    y: int
    path: tuple[Direction, ...] = field(default=())
    step: int = 0

    def __post_init__(self) -> None:
        self.path = tuple(Direction(d) for d in self.path)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def finished(self) -> bool:
        """Return True once every step of the path has been taken."""
        return self.step >= len(self.path)

    def advance(self) -> tuple[int, int]:
        """Take the next step of the path and return the new position."""
        if self.finished():
            raise RuntimeError("monster has already walked its whole path")
        direction = self.path[self.step]
        self.x += direction.dx
        self.y += direction.dy
        self.step += 1
        return self.position


def render_maze(grid: Sequence[Sequence[int]]) -> str:
    """Draw the grid as text: open cells as spaces and walls as '#'."""
    symbols = {0: " ", 1: "#"}
    return "\n".join(
        "".join(symbols.get(cell, "") for cell in row) for row in grid
    )


def simulate_monsters(
    path: Sequence[int],
    start: tuple[int, int] = START,
    monster_count: int = 5,
    interval: int = 2,
) -> Iterator[tuple[tuple[int, int], ...]]:
    """Yield every spawned monster's position after each tick.

    A new monster appears at ``start`` every ``interval`` ticks until
    ``monster_count`` exist; each tick, every monster with steps left takes
    one. The run lasts ``len(path) + monster_count`` ticks.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    if monster_count < 0:
        raise ValueError("monster_count must not be negative")
    steps = tuple(Direction(d) for d in path)
    monsters: list[Monster] = []
    for tick in range(len(steps) + monster_count):
        if tick % interval == 0 and len(monsters) < monster_count:
            monsters.append(Monster(start[0], start[1], steps))
        for monster in monsters:
            if not monster.finished():
                monster.advance()
        yield tuple(m.position for m in monsters)


def _move_to(x: int, y: int) -> str:
    return f"\x1b[{y + 1};{x + 1}H"


def main(argv: list[str] | None = None) -> int:
    """Draw the maze and animate monsters walking the default path."""
    parser = argparse.ArgumentParser(description="Monsters walking through a maze.")
    parser.add_argument("--monsters", type=int, default=5, help="number of monsters")
    parser.add_argument("--interval", type=int, default=2, help="ticks between spawns")
    parser.add_argument("--delay", type=float, default=0.5, help="seconds between moves")
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write("\x1b[2J\x1b[H")
    out.write(render_maze(MAZE) + "\n")
    out.flush()

    previous: tuple[tuple[int, int], ...] = ()
    for frame in simulate_monsters(DEFAULT_PATH, START, args.monsters, args.interval):
        for index, position in enumerate(frame):
            old = previous[index] if index < len(previous) else START
            if old == position and index < len(previous):
                continue
            out.write(_move_to(*old) + " ")
            out.write(_move_to(*position) + "M")
            out.flush()
            if args.delay > 0:
                time.sleep(args.delay)
        previous = frame

    out.write(_move_to(0, len(MAZE)) + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())