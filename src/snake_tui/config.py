"""
Game options and glyph sets.

Board size and tick speed are built-in defaults; the cosmetic variants
(wall mode, glyph set, colour) are options. Environment variables override
the defaults, CLI flags override the environment. There is no config file.

Environment:
    SNAKE_TUI_ROWS        Interior rows (default 20)
    SNAKE_TUI_COLS        Interior columns (default 40)
    SNAKE_TUI_TICK_MS     Milliseconds per tick (default 100)
    SNAKE_TUI_WALL_MODE   "bounded" or "wrap" (default bounded)
    SNAKE_TUI_GLYPHS      "ascii" or "emoji" (default ascii)
    SNAKE_TUI_COLOR       "0" disables colour
    SNAKE_TUI_LOG         Log file path (no logging when unset)
    SNAKE_TUI_WRITE_LOG   Append every terminal write to this file
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Literal, Mapping

APP_NAME: str = "snake-tui"
VERSION: str = "0.1.0"

DEFAULT_ROWS: int = 20
DEFAULT_COLS: int = 40
DEFAULT_TICK_MS: int = 100
MIN_INTERIOR: int = 4

WallMode = Literal["bounded", "wrap"]
GlyphSetName = Literal["ascii", "emoji"]

WALL_MODES: tuple[str, ...] = ("bounded", "wrap")
GLYPH_SETS: tuple[str, ...] = ("ascii", "emoji")

ENV_PREFIX: str = "SNAKE_TUI_"


# ─── Glyphs ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Glyphs:
    head: str
    body: str
    food: str
    empty: str
    corner: str
    horizontal: str
    vertical: str


ASCII_GLYPHS = Glyphs(
    head="#",
    body="o",
    food="O",
    empty=" ",
    corner="+",
    horizontal="=",
    vertical="|",
)

EMOJI_GLYPHS = Glyphs(
    head="🐍",
    body="🟩",
    food="🍎",
    empty=" ",
    corner="🧱",
    horizontal="🧱",
    vertical="🧱",
)


def get_glyphs(name: str) -> Glyphs:
    if name == "emoji":
        return EMOJI_GLYPHS
    if name == "ascii":
        return ASCII_GLYPHS
    raise ValueError(f"Unknown glyph set: {name!r} (expected one of {', '.join(GLYPH_SETS)})")


# ─── Options ─────────────────────────────────────────────────────────────────

@dataclass
class GameOptions:
    rows: int = DEFAULT_ROWS          # interior rows, frame excluded
    cols: int = DEFAULT_COLS          # interior columns, frame excluded
    tick_ms: int = DEFAULT_TICK_MS
    wall_mode: str = "bounded"        # "bounded" | "wrap"
    glyph_set: str = "ascii"          # "ascii" | "emoji"
    color: bool = True
    seed: int | None = None

    @property
    def grid_rows(self) -> int:
        """Total rows including the boundary frame."""
        return self.rows + 2

    @property
    def grid_cols(self) -> int:
        """Total columns including the boundary frame."""
        return self.cols + 2

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def glyphs(self) -> Glyphs:
        return get_glyphs(self.glyph_set)

    def validate(self) -> GameOptions:
        if self.rows < MIN_INTERIOR or self.cols < MIN_INTERIOR:
            raise ValueError(
                f"Board interior must be at least {MIN_INTERIOR}x{MIN_INTERIOR}, "
                f"got {self.rows}x{self.cols}"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_ms}ms")
        if self.wall_mode not in WALL_MODES:
            raise ValueError(
                f"Unknown wall mode: {self.wall_mode!r} (expected one of {', '.join(WALL_MODES)})"
            )
        get_glyphs(self.glyph_set)
        return self

    def with_overrides(self, **overrides: object) -> GameOptions:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameOptions:
        env = os.environ if environ is None else environ
        opts = cls()
        opts.rows = _env_int(env, "ROWS", opts.rows)
        opts.cols = _env_int(env, "COLS", opts.cols)
        opts.tick_ms = _env_int(env, "TICK_MS", opts.tick_ms)
        opts.wall_mode = env.get(ENV_PREFIX + "WALL_MODE", opts.wall_mode).strip().lower()
        opts.glyph_set = env.get(ENV_PREFIX + "GLYPHS", opts.glyph_set).strip().lower()
        color = env.get(ENV_PREFIX + "COLOR")
        if color is not None:
            opts.color = color.strip().lower() not in ("0", "false", "no", "off")
        return opts


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def get_log_path() -> str:
    """Log file from SNAKE_TUI_LOG, empty when logging is off."""
    return os.environ.get(ENV_PREFIX + "LOG", "")


def get_write_log_path() -> str:
    """Raw terminal output log from SNAKE_TUI_WRITE_LOG, empty when off."""
    return os.environ.get(ENV_PREFIX + "WRITE_LOG", "")
