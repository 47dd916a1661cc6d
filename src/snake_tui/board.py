"""
Board — game state for one round of Snake.

Owns the Snake and the Food, applies one simulation tick per update(),
tracks score and high score, and keeps the last rendered frame so the
renderer only ever receives the cells that changed.

State machine: "playing" -> "game_over". Nothing leaves "game_over";
build a new Board (passing the high score along) to play again.
"""
from __future__ import annotations

import logging
import random

from .config import ASCII_GLYPHS, DEFAULT_COLS, DEFAULT_ROWS, GameOptions, Glyphs
from .food import Food
from .snake import Snake
from .types import BoardState, CellChange, Position, UpdateResult

logger = logging.getLogger(__name__)

FOOD_REWARD = 10
START_LENGTH = 3

Frame = list[list[str]]


class Board:
    """
    *rows* and *cols* are the full grid size, boundary frame included, so the
    playable interior is rows 1..rows-2 and cols 1..cols-2.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS + 2,
        cols: int = DEFAULT_COLS + 2,
        *,
        wall_mode: str = "bounded",
        glyphs: Glyphs = ASCII_GLYPHS,
        rng: random.Random | None = None,
        high_score: int = 0,
        snake: Snake | None = None,
        food: Position | None = None,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.wall_mode = wall_mode
        self.glyphs = glyphs
        self._rng = rng or random.Random()

        self.snake = snake or Snake.line(Position(rows // 2, cols // 2), START_LENGTH)
        self.food = Food(glyphs.food)
        self.score = 0
        self.high_score = high_score
        self.game_over = False

        self._previous_frame: Frame = self._blank_frame()

        if food is not None:
            self.food.position = food
        else:
            self._spawn_food()

    @classmethod
    def from_options(
        cls,
        options: GameOptions,
        *,
        rng: random.Random | None = None,
        high_score: int = 0,
    ) -> Board:
        return cls(
            options.grid_rows,
            options.grid_cols,
            wall_mode=options.wall_mode,
            glyphs=options.glyphs,
            rng=rng,
            high_score=high_score,
        )

    # ─── State ───────────────────────────────────────────────────────────────

    @property
    def state(self) -> BoardState:
        return "game_over" if self.game_over else "playing"

    @property
    def is_playing(self) -> bool:
        return not self.game_over

    @property
    def length(self) -> int:
        return len(self.snake)

    def is_interior(self, position: Position) -> bool:
        return 0 < position.row < self.rows - 1 and 0 < position.col < self.cols - 1

    # ─── Tick ────────────────────────────────────────────────────────────────

    def update(self) -> UpdateResult:
        """Advance the game by one tick."""
        if self.game_over:
            return "idle"

        # Arm growth before moving so the eating move itself keeps the tail.
        eating = self.food.position is not None and self._next_head() == self.food.position
        if eating:
            self.snake.grow()

        self.snake.move()
        if self.wall_mode == "wrap":
            self.snake.wrap(self.rows, self.cols)

        if self._check_collision():
            self.game_over = True
            self.high_score = max(self.high_score, self.score)
            logger.info("Game over: score=%d high_score=%d length=%d",
                        self.score, self.high_score, self.length)
            return "collided"

        if eating:
            self.score += FOOD_REWARD
            logger.debug("Food eaten at %s, score=%d", self.food.position, self.score)
            self._spawn_food()
            return "ate"

        if self.food.position is None:
            self._spawn_food()
        return "moved"

    def _next_head(self) -> Position:
        head = self.snake.next_head()
        if self.wall_mode == "wrap":
            return head.wrapped(self.rows, self.cols)
        return head

    def _check_collision(self) -> bool:
        # Walls first, then the body.
        if not self.is_interior(self.snake.head):
            return True
        return self.snake.check_self_collision()

    def _spawn_food(self) -> None:
        if not self.food.spawn(self.rows, self.cols, set(self.snake), self._rng):
            logger.debug("No free cell for food; retrying next tick")

    # ─── Frames ──────────────────────────────────────────────────────────────

    def _blank_frame(self) -> Frame:
        return [[self.glyphs.empty] * self.cols for _ in range(self.rows)]

    def boundary_symbol(self, row: int, col: int) -> str | None:
        """Frame glyph at (row, col), or None for interior cells."""
        on_top_bottom = row in (0, self.rows - 1)
        on_sides = col in (0, self.cols - 1)
        if on_top_bottom and on_sides:
            return self.glyphs.corner
        if on_top_bottom:
            return self.glyphs.horizontal
        if on_sides:
            return self.glyphs.vertical
        return None

    def boundary_cells(self) -> list[CellChange]:
        """Every frame cell; drawn once per round, never diffed."""
        cells: list[CellChange] = []
        for r in range(self.rows):
            for c in range(self.cols):
                symbol = self.boundary_symbol(r, c)
                if symbol is not None:
                    cells.append(CellChange(Position(r, c), symbol))
        return cells

    def snapshot(self) -> Frame:
        """Full grid of symbols for the current state."""
        frame = self._blank_frame()
        for r in range(self.rows):
            for c in range(self.cols):
                symbol = self.boundary_symbol(r, c)
                if symbol is not None:
                    frame[r][c] = symbol

        food = self.food.position
        if food is not None and self.is_interior(food):
            frame[food.row][food.col] = self.food.symbol

        for i, cell in enumerate(self.snake):
            if i > 0 and self.is_interior(cell):
                frame[cell.row][cell.col] = self.glyphs.body
        head = self.snake.head
        if self.is_interior(head):
            frame[head.row][head.col] = self.glyphs.head
        return frame

    def diff(self) -> list[CellChange]:
        """
        Interior cells whose symbol changed since the previous diff(), in
        row-major order. The new snapshot becomes the previous frame.
        """
        frame = self.snapshot()
        previous = self._previous_frame
        changes: list[CellChange] = []
        for r in range(1, self.rows - 1):
            new_row = frame[r]
            old_row = previous[r]
            for c in range(1, self.cols - 1):
                if new_row[c] != old_row[c]:
                    changes.append(CellChange(Position(r, c), new_row[c]))
        self._previous_frame = frame
        return changes
