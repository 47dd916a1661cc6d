"""
StdinBuffer — splits raw terminal input into complete key sequences.

A single read can carry several keypresses ("wd", or two arrow keys), and an
escape sequence can be split across reads. The buffer keeps the incomplete
tail until the rest arrives, or until flush() gives up on it and hands it
over as-is (a lone ESC press).
"""
from __future__ import annotations

import codecs
from collections import deque

ESC = "\x1b"


# ─────────────────────────────────────────────────────────────────────────────
# Sequence completeness detection
# ─────────────────────────────────────────────────────────────────────────────

def _is_complete_csi(data: str) -> str:
    """Returns 'complete' or 'incomplete' for an ESC [ ... sequence."""
    if len(data) < 3:
        return "incomplete"
    code = ord(data[-1])
    if 0x40 <= code <= 0x7e:
        return "complete"
    return "incomplete"


def _is_complete_sequence(data: str) -> str:
    """Returns 'complete', 'incomplete', or 'not-escape'."""
    if not data.startswith(ESC):
        return "not-escape"
    if len(data) == 1:
        return "incomplete"
    after = data[1:]

    if after.startswith("["):
        return _is_complete_csi(data)

    if after.startswith("O"):
        return "complete" if len(after) >= 2 else "incomplete"

    # ESC + one character (alt+key)
    return "complete"


def _extract_complete_sequences(buffer: str) -> tuple[list[str], str]:
    """
    Split buffer into complete sequences.
    Returns (sequences, remainder).
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if remaining.startswith(ESC + ESC):
            # Lone ESC pressed just before another escape sequence
            sequences.append(ESC)
            pos += 1
        elif remaining.startswith(ESC):
            seq_end = 1
            while seq_end <= len(remaining):
                candidate = remaining[:seq_end]
                status = _is_complete_sequence(candidate)
                if status == "complete":
                    sequences.append(candidate)
                    pos += seq_end
                    break
                seq_end += 1
            else:
                # Ran off end: incomplete sequence
                return sequences, remaining
        else:
            sequences.append(remaining[0])
            pos += 1

    return sequences, ""


# ─────────────────────────────────────────────────────────────────────────────
# StdinBuffer
# ─────────────────────────────────────────────────────────────────────────────

class StdinBuffer:
    """Queue of complete input sequences fed from raw reads."""

    def __init__(self) -> None:
        self._buffer = ""
        self._ready: deque[str] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def process(self, data: str | bytes) -> list[str]:
        """Feed input; returns the sequences it completed (also queued)."""
        if isinstance(data, bytes):
            s = self._decoder.decode(data)
        else:
            s = data

        self._buffer += s
        seqs, remainder = _extract_complete_sequences(self._buffer)
        self._buffer = remainder
        self._ready.extend(seqs)
        return seqs

    def flush(self) -> list[str]:
        """Give up waiting on a partial sequence and queue it as-is."""
        if not self._buffer:
            return []
        seqs = [self._buffer]
        self._buffer = ""
        self._ready.extend(seqs)
        return seqs

    def pop(self) -> str | None:
        """Next complete sequence, or None when nothing is queued."""
        if self._ready:
            return self._ready.popleft()
        return None

    def has_pending(self) -> bool:
        """True while a partial escape sequence is waiting for more bytes."""
        return bool(self._buffer)

    def clear(self) -> None:
        self._buffer = ""
        self._ready.clear()
        self._decoder.reset()
