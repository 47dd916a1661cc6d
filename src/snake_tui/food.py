"""
Food — the single food item on the board.
"""
from __future__ import annotations

import random
from typing import Collection

from .types import Position


class Food:
    def __init__(self, symbol: str = "O", position: Position | None = None) -> None:
        self.symbol = symbol
        self.position = position

    @property
    def placed(self) -> bool:
        return self.position is not None

    def spawn(
        self,
        rows: int,
        cols: int,
        occupied: Collection[Position],
        rng: random.Random | None = None,
    ) -> bool:
        """
        Move the food to a uniformly random free interior cell.

        *rows* and *cols* are full grid dimensions; the outer ring is the wall.
        When every interior cell is taken the food is removed and False is
        returned so the caller can retry on a later tick.
        """
        taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
        free = [
            Position(r, c)
            for r in range(1, rows - 1)
            for c in range(1, cols - 1)
            if Position(r, c) not in taken
        ]
        if not free:
            self.position = None
            return False
        self.position = (rng or random).choice(free)
        return True
