"""
Snake — ordered body, heading and the one-shot growth flag.

The snake knows nothing about the board: it moves one cell per call and
reports whether its head overlaps its own body. Walls are the Board's job.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .types import OPPOSITE_DIRECTION, Position


class Snake:
    """Body cells with the head at index 0."""

    def __init__(self, body: Iterable[Position], direction: str = "right") -> None:
        self._body: deque[Position] = deque(body)
        if not self._body:
            raise ValueError("Snake needs at least one body cell")
        if direction not in OPPOSITE_DIRECTION:
            raise ValueError(f"Unknown direction: {direction!r}")
        self._direction = direction
        self.growing = False

    @classmethod
    def line(cls, head: Position, length: int = 3, direction: str = "right") -> Snake:
        """A straight snake whose body trails behind *head*, away from *direction*."""
        tail_dir = OPPOSITE_DIRECTION[direction]
        cells = [head]
        for _ in range(length - 1):
            cells.append(cells[-1].moved(tail_dir))
        return cls(cells, direction)

    # ─── Accessors ───────────────────────────────────────────────────────────

    @property
    def head(self) -> Position:
        return self._body[0]

    @property
    def tail(self) -> Position:
        return self._body[-1]

    @property
    def body(self) -> tuple[Position, ...]:
        return tuple(self._body)

    @property
    def direction(self) -> str:
        return self._direction

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._body)

    def occupies(self, position: Position) -> bool:
        return position in self._body

    # ─── Motion ──────────────────────────────────────────────────────────────

    def set_direction(self, direction: str) -> bool:
        """Change heading unless *direction* reverses straight into the neck."""
        if direction not in OPPOSITE_DIRECTION:
            return False
        if direction == OPPOSITE_DIRECTION[self._direction]:
            return False
        self._direction = direction
        return True

    def grow(self) -> None:
        """Keep the tail on the next move."""
        self.growing = True

    def move(self) -> Position:
        new_head = self.next_head()
        self._body.appendleft(new_head)
        if self.growing:
            self.growing = False
        else:
            self._body.pop()
        return new_head

    def next_head(self) -> Position:
        """Where the head lands on the next move()."""
        return self.head.moved(self._direction)

    def wrap(self, rows: int, cols: int) -> None:
        """Fold a head that left the interior back in from the opposite edge."""
        self._body[0] = self.head.wrapped(rows, cols)

    def check_self_collision(self) -> bool:
        head = self.head
        for i, cell in enumerate(self._body):
            if i > 0 and cell == head:
                return True
        return False
