"""
snake_tui — terminal Snake with diff-based rendering.
"""
from .board import FOOD_REWARD, Board
from .config import (
    ASCII_GLYPHS,
    EMOJI_GLYPHS,
    GameOptions,
    Glyphs,
    get_glyphs,
)
from .food import Food
from .game import Game
from .keys import decode_key, parse_key
from .renderer import Renderer
from .snake import Snake
from .stdin_buffer import StdinBuffer
from .terminal import (
    InputSource,
    ProcessTerminal,
    Terminal,
    TerminalError,
    WindowsTerminal,
    create_terminal,
)
from .types import (
    DIRECTION_OFFSETS,
    OPPOSITE_DIRECTION,
    CellChange,
    Direction,
    GameKey,
    Position,
)
from .utils import visible_width

__all__ = [
    # board
    "Board",
    "FOOD_REWARD",
    # config
    "ASCII_GLYPHS",
    "EMOJI_GLYPHS",
    "GameOptions",
    "Glyphs",
    "get_glyphs",
    # food
    "Food",
    # game
    "Game",
    # keys
    "decode_key",
    "parse_key",
    # renderer
    "Renderer",
    # snake
    "Snake",
    # stdin buffer
    "StdinBuffer",
    # terminal
    "InputSource",
    "ProcessTerminal",
    "Terminal",
    "TerminalError",
    "WindowsTerminal",
    "create_terminal",
    # types
    "CellChange",
    "DIRECTION_OFFSETS",
    "Direction",
    "GameKey",
    "OPPOSITE_DIRECTION",
    "Position",
    # utils
    "visible_width",
]
