"""
Renderer — draws the board with incremental (diff-based) redraws.

The frame is drawn once per round. After that each tick only touches the
interior cells Board.diff() reports plus the status line, so the cost of a
tick is bounded by what changed, not by the board area. All output for a
tick goes to the terminal in a single write wrapped in synchronized-output
markers, so terminals that support them never show a half-drawn frame.
"""
from __future__ import annotations

import logging

from .board import Board
from .config import ASCII_GLYPHS, Glyphs
from .terminal import Terminal
from .types import CellChange
from .utils import colorize, cursor_to, pad_to_width, visible_width

logger = logging.getLogger(__name__)

SYNC_START = "\x1b[?2026h"
SYNC_END = "\x1b[?2026l"
CLEAR_LINE = "\x1b[K"

CONTROLS_LINE = "Controls: W/A/S/D or Arrow Keys  |  Q: Quit"

MENU_LINES = [
    "+=======================================+",
    "|              SNAKE GAME               |",
    "+=======================================+",
    "",
    "  Controls:",
    "    W or UP    : Move Up",
    "    A or LEFT  : Move Left",
    "    S or DOWN  : Move Down",
    "    D or RIGHT : Move Right",
    "    Q          : Quit Game",
    "",
    "  Objective:",
    "    * Eat food to grow and score points",
    "    * Avoid hitting walls and yourself",
    "    * Try to beat your high score!",
    "",
    "-----------------------------------------",
    "",
    "  Press ENTER to start...",
]


class Renderer:
    def __init__(self, terminal: Terminal, glyphs: Glyphs = ASCII_GLYPHS, color: bool = True) -> None:
        self.terminal = terminal
        self.glyphs = glyphs
        self.color = color
        self.cell_width = max(
            1,
            *(visible_width(g) for g in (glyphs.head, glyphs.body, glyphs.food,
                                         glyphs.corner, glyphs.horizontal, glyphs.vertical)),
        )
        self._colors: dict[str, str] = {
            glyphs.corner: "cyan",
            glyphs.horizontal: "cyan",
            glyphs.vertical: "cyan",
            glyphs.body: "yellow",
            glyphs.food: "red",
            glyphs.head: "green",
        }
        self._cells_written = 0

    @property
    def cells_written(self) -> int:
        """Total board cells written since creation."""
        return self._cells_written

    # ─── Cells ───────────────────────────────────────────────────────────────

    def _paint(self, symbol: str) -> str:
        text = pad_to_width(symbol, self.cell_width)
        if self.color and symbol != self.glyphs.empty:
            return colorize(text, self._colors.get(symbol))
        return text

    def _cell(self, change: CellChange) -> str:
        pos = change.position
        return cursor_to(pos.row, pos.col * self.cell_width) + self._paint(change.symbol)

    def _cells(self, changes: list[CellChange]) -> str:
        self._cells_written += len(changes)
        return "".join(self._cell(change) for change in changes)

    # ─── Status ──────────────────────────────────────────────────────────────

    @staticmethod
    def status_text(board: Board) -> str:
        return f"Score: {board.score}  |  High Score: {board.high_score}  |  Length: {board.length}"

    def _status(self, board: Board) -> str:
        text = self.status_text(board)
        if self.color:
            text = colorize(text, "white")
        return cursor_to(board.rows, 0) + text + CLEAR_LINE

    # ─── Board ───────────────────────────────────────────────────────────────

    def draw_initial(self, board: Board) -> int:
        """Clear the screen, draw the frame once, then the first diff."""
        changes = board.diff()
        buf = SYNC_START + "\x1b[2J\x1b[H\x1b[?25l"
        buf += self._cells(board.boundary_cells())
        buf += self._cells(changes)
        buf += self._status(board)
        controls = colorize(CONTROLS_LINE, "white") if self.color else CONTROLS_LINE
        buf += cursor_to(board.rows + 1, 0) + controls + CLEAR_LINE
        buf += SYNC_END
        self.terminal.write(buf)
        logger.debug("Initial draw: %dx%d grid, %d cells, cell width %d",
                     board.rows, board.cols, len(changes), self.cell_width)
        return len(changes)

    def render(self, board: Board) -> int:
        """Redraw only the cells that changed plus the status line."""
        changes = board.diff()
        buf = SYNC_START + self._cells(changes) + self._status(board) + SYNC_END
        self.terminal.write(buf)
        return len(changes)

    # ─── Screens ─────────────────────────────────────────────────────────────

    def _screen(self, lines: list[str], color: str | None = None) -> None:
        body = "\r\n".join(lines)
        if self.color and color:
            body = colorize(body, color)
        self.terminal.write("\x1b[2J\x1b[H" + body + "\r\n")

    def draw_menu(self) -> None:
        self._screen(MENU_LINES, "white")

    def draw_game_over(self, board: Board) -> None:
        title = "|              GAME OVER!               |"
        if self.color:
            title = colorize(title, "red")
        self._screen([
            "",
            "+=======================================+",
            title,
            "+=======================================+",
            "",
            f"  Final Score:  {board.score}",
            f"  High Score:   {board.high_score}",
            f"  Snake Length: {board.length}",
            "",
            "-----------------------------------------",
            "",
            "  Options:",
            "    R : Restart Game",
            "    Q : Quit to Exit",
        ])

    def draw_goodbye(self) -> None:
        self._screen(["Thanks for playing! Goodbye!"], "green")
