"""
Keyboard input handling.

Turns raw terminal input sequences into key identifiers and then into the
handful of commands the game understands.

API:
- parse_key(data) — parse one input sequence and return its key identifier
- decode_key(data) — map input to a GameKey ("up", "quit", ...) or None
"""
from __future__ import annotations

from .types import GameKey

# ─────────────────────────────────────────────────────────────────────────────
# KeyId type alias: key identifiers are plain strings
# ─────────────────────────────────────────────────────────────────────────────

KeyId = str

# ─────────────────────────────────────────────────────────────────────────────
# Legacy sequences (CSI and SS3 cursor keys)
# ─────────────────────────────────────────────────────────────────────────────

_LEGACY_KEY_SEQS: dict[str, list[str]] = {
    "up":    ["\x1b[A", "\x1bOA"],
    "down":  ["\x1b[B", "\x1bOB"],
    "right": ["\x1b[C", "\x1bOC"],
    "left":  ["\x1b[D", "\x1bOD"],
}

_LEGACY_SEQ_KEY_IDS: dict[str, str] = {
    seq: key_id
    for key_id, seqs in _LEGACY_KEY_SEQS.items()
    for seq in seqs
}

# Arrow keys reported with modifiers, e.g. shift+up = ESC [ 1 ; 2 A
_MODIFIED_ARROW_FINALS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}

# ─────────────────────────────────────────────────────────────────────────────
# Game bindings
# ─────────────────────────────────────────────────────────────────────────────

GAME_KEY_BINDINGS: dict[str, GameKey] = {
    "up": "up",
    "w": "up",
    "down": "down",
    "s": "down",
    "left": "left",
    "a": "left",
    "right": "right",
    "d": "right",
    "q": "quit",
    "ctrl+c": "quit",
    "r": "restart",
    "enter": "start",
    "space": "start",
}


# ─────────────────────────────────────────────────────────────────────────────
# parse_key
# ─────────────────────────────────────────────────────────────────────────────

def parse_key(data: str) -> KeyId | None:
    """
    Parse one raw input sequence and return a key identifier, or None.
    Letters are reported lower-case; Shift+letter still yields the letter.
    """
    if not data:
        return None

    seq_id = _LEGACY_SEQ_KEY_IDS.get(data)
    if seq_id:
        return seq_id

    if data.startswith("\x1b[1;") and len(data) >= 6:
        final = data[-1]
        if final in _MODIFIED_ARROW_FINALS:
            return _MODIFIED_ARROW_FINALS[final]

    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n", "\x1bOM"):
        return "enter"
    if data == " ":
        return "space"

    if len(data) == 1:
        code = ord(data)
        if 1 <= code <= 26:
            return f"ctrl+{chr(code + 96)}"
        if 65 <= code <= 90:
            return data.lower()
        if 32 <= code <= 126:
            return data

    return None


def decode_key(data: str) -> GameKey | None:
    """Map raw input to a game command; everything unbound is None."""
    key_id = parse_key(data)
    if key_id is None:
        return None
    return GAME_KEY_BINDINGS.get(key_id)
