"""
Core type definitions shared by the game state and the renderer.

Provides:
- Position: immutable grid coordinate (row, col)
- Direction / DIRECTION_OFFSETS / OPPOSITE_DIRECTION
- GameKey: decoded key commands the game loop understands
- CellChange: one changed cell reported by the frame diff
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# ─── Directions ──────────────────────────────────────────────────────────────

Direction = Literal["up", "down", "left", "right"]

DIRECTION_OFFSETS: dict[str, tuple[int, int]] = {
    "up":    (-1, 0),
    "down":  (1, 0),
    "left":  (0, -1),
    "right": (0, 1),
}

OPPOSITE_DIRECTION: dict[str, str] = {
    "up": "down",
    "down": "up",
    "left": "right",
    "right": "left",
}

# ─── Keys ────────────────────────────────────────────────────────────────────

GameKey = Literal["up", "down", "left", "right", "quit", "restart", "start"]

DIRECTION_KEYS: frozenset[str] = frozenset(DIRECTION_OFFSETS)

# ─── Board state ─────────────────────────────────────────────────────────────

BoardState = Literal["playing", "game_over"]
UpdateResult = Literal["moved", "ate", "collided", "idle"]


# ─── Position ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def moved(self, direction: str) -> Position:
        """Return the neighbouring position one step towards *direction*."""
        drow, dcol = DIRECTION_OFFSETS[direction]
        return Position(self.row + drow, self.col + dcol)

    def wrapped(self, rows: int, cols: int) -> Position:
        """Fold into the interior of a rows x cols grid whose outer ring is the wall."""
        row = (self.row - 1) % (rows - 2) + 1
        col = (self.col - 1) % (cols - 2) + 1
        if row == self.row and col == self.col:
            return self
        return Position(row, col)


@dataclass(frozen=True)
class CellChange:
    """A cell whose symbol differs from the previously rendered frame."""
    position: Position
    symbol: str
