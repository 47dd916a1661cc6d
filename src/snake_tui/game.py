"""
Game — the session loop: menu, rounds, game-over screen, restart.

Each tick is a strict sequence: poll input (never blocks) -> apply at most
one direction change -> Board.update() -> render the diff -> sleep for the
fixed tick interval. Quitting only clears the running flag, so the tick in
progress still updates and renders before the loop sees it.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Callable

from .board import Board
from .config import GameOptions
from .renderer import Renderer
from .terminal import Terminal
from .types import DIRECTION_KEYS, UpdateResult

logger = logging.getLogger(__name__)

# Poll interval while a menu screen waits for a key
MENU_POLL_SECONDS = 0.05


class Game:
    def __init__(
        self,
        terminal: Terminal,
        options: GameOptions | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.options = (options or GameOptions()).validate()
        self.terminal = terminal
        self.renderer = Renderer(terminal, self.options.glyphs, self.options.color)
        self._sleep = sleep
        self._rng = rng or random.Random(self.options.seed)

        self.board: Board | None = None
        self.high_score = 0
        self.games_played = 0
        self.running = False

    # ─── Session ─────────────────────────────────────────────────────────────

    def run(self, show_menu: bool = True) -> int:
        """Play until the user quits. Returns the session high score."""
        self.running = True
        if show_menu and not self.show_menu():
            self.running = False

        while self.running:
            board = self.new_board()
            self.play(board)
            if not self.running:
                break
            self.running = self.show_game_over(board)

        self.renderer.draw_goodbye()
        logger.info("Session over after %d game(s), high score %d", self.games_played, self.high_score)
        return self.high_score

    def new_board(self) -> Board:
        """Fresh board that inherits the session high score."""
        self.board = Board.from_options(self.options, rng=self._rng, high_score=self.high_score)
        self.games_played += 1
        logger.info(
            "Starting game %d: %dx%d interior, walls=%s, tick=%dms",
            self.games_played, self.options.rows, self.options.cols,
            self.options.wall_mode, self.options.tick_ms,
        )
        return self.board

    def play(self, board: Board) -> None:
        self.renderer.draw_initial(board)
        while self.running and board.is_playing:
            self.tick(board)
            self._sleep(self.options.tick_seconds)

    def tick(self, board: Board) -> UpdateResult:
        self.handle_input(board)
        result = board.update()
        try:
            self.renderer.render(board)
        except Exception:
            logger.exception("Rendering tick failed")
            raise
        self.high_score = max(self.high_score, board.high_score)
        return result

    def handle_input(self, board: Board) -> None:
        """
        Drain keys until one direction change is accepted. Keys after that
        stay queued for the next tick, so two quick turns cannot fold the
        head back into the neck within one move.
        """
        while (key := self.terminal.poll_key()) is not None:
            if key == "quit":
                self.running = False
                return
            if key in DIRECTION_KEYS and board.snake.set_direction(key):
                return

    # ─── Screens ─────────────────────────────────────────────────────────────

    def _wait_for(self, accepted: tuple[str, ...]) -> str:
        while True:
            key = self.terminal.poll_key()
            if key in accepted:
                return key
            self._sleep(MENU_POLL_SECONDS)

    def show_menu(self) -> bool:
        """True to start playing, False when the user quit from the menu."""
        self.renderer.draw_menu()
        return self._wait_for(("start", "quit")) == "start"

    def show_game_over(self, board: Board) -> bool:
        """True to restart, False to quit."""
        self.renderer.draw_game_over(board)
        return self._wait_for(("restart", "quit")) == "restart"
