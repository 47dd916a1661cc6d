"""
Terminal abstraction.

Provides:
- InputSource: the one capability the game loop needs from input (poll_key)
- Terminal: abstract base class (output + raw-mode lifecycle + input)
- ProcessTerminal: POSIX terminal using termios/tty raw mode and select
- WindowsTerminal: Windows console using msvcrt
- create_terminal(): pick the implementation for this platform, once
"""
from __future__ import annotations

import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import Protocol, TextIO, runtime_checkable

from .config import get_write_log_path
from .keys import decode_key
from .stdin_buffer import StdinBuffer
from .types import GameKey

logger = logging.getLogger(__name__)

# Seconds to wait for the rest of a split escape sequence
ESCAPE_TIMEOUT = 0.01


class TerminalError(RuntimeError):
    """The terminal cannot be switched into the mode the game needs."""


@runtime_checkable
class InputSource(Protocol):
    def poll_key(self) -> GameKey | None:
        """Next decoded key press, or None. Never blocks."""
        ...


# ─────────────────────────────────────────────────────────────────────────────
# Terminal ABC
# ─────────────────────────────────────────────────────────────────────────────

class Terminal(ABC):
    """
    Minimal terminal interface for the game.
    Use as a context manager so the original mode is always restored.
    """

    @abstractmethod
    def start(self) -> None:
        """Enter raw mode. Raises TerminalError when that is impossible."""

    @abstractmethod
    def stop(self) -> None:
        """Restore the original terminal state. Safe to call twice."""

    @abstractmethod
    def poll_key(self) -> GameKey | None:
        """Next decoded key press, or None when no key is waiting."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Write output to the terminal."""

    def __enter__(self) -> Terminal:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


class _StreamTerminal(Terminal):
    """Shared output handling: stdout plus the optional write log."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output or sys.stdout
        self._write_log_path = get_write_log_path()
        self._started = False

    def write(self, data: str) -> None:
        self._output.write(data)
        self._output.flush()
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                logger.warning("Could not append to write log %s", self._write_log_path)

    def _restore_screen(self) -> None:
        try:
            self.write("\x1b[0m\x1b[?25h")
        except (OSError, ValueError):
            logger.warning("Could not restore cursor visibility", exc_info=True)


# ─────────────────────────────────────────────────────────────────────────────
# ProcessTerminal (POSIX)
# ─────────────────────────────────────────────────────────────────────────────

class ProcessTerminal(_StreamTerminal):
    """
    Real terminal using stdin/stdout.
    Enables raw mode (no echo, no line buffering) and reads without blocking.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        super().__init__(output)
        self._fd: int | None = None
        self._old_termios: list | None = None
        self._stdin_buffer = StdinBuffer()

    def start(self) -> None:
        if self._started:
            return
        try:
            import termios
            import tty
        except ImportError as e:
            raise TerminalError("termios is not available on this platform") from e

        try:
            fd = sys.stdin.fileno()
        except (AttributeError, OSError, ValueError) as e:
            raise TerminalError("stdin has no file descriptor") from e
        if not os.isatty(fd):
            raise TerminalError("stdin is not a terminal; run the game in an interactive shell")

        try:
            self._old_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            self._old_termios = None
            raise TerminalError(f"could not enter raw mode: {e}") from e

        self._fd = fd
        self._started = True
        logger.debug("Raw mode enabled on fd %d", fd)

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        self._restore_screen()
        self._stdin_buffer.clear()
        if self._old_termios is not None and self._fd is not None:
            import termios

            try:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_termios)
                logger.debug("Terminal mode restored on fd %d", self._fd)
            except (termios.error, OSError) as e:
                logger.warning("Failed to restore terminal mode: %s", e)
        self._old_termios = None
        self._fd = None

    def _read_available(self, timeout: float = 0.0) -> bool:
        import select

        if self._fd is None:
            return False
        readable, _, _ = select.select([self._fd], [], [], timeout)
        if not readable:
            return False
        data = os.read(self._fd, 1024)
        if not data:
            return False
        self._stdin_buffer.process(data)
        return True

    def poll_key(self) -> GameKey | None:
        if self._fd is None:
            return None
        try:
            while self._read_available():
                pass
            if self._stdin_buffer.has_pending() and not self._read_available(ESCAPE_TIMEOUT):
                self._stdin_buffer.flush()
        except OSError as e:
            logger.warning("Reading stdin failed: %s", e)
            return None

        while (seq := self._stdin_buffer.pop()) is not None:
            key = decode_key(seq)
            if key is not None:
                return key
        return None


# ─────────────────────────────────────────────────────────────────────────────
# WindowsTerminal (msvcrt console)
# ─────────────────────────────────────────────────────────────────────────────

# Scan codes that follow the 0x00 / 0xE0 prefix for arrow keys
_WINDOWS_ARROWS: dict[str, str] = {
    "H": "\x1b[A",
    "P": "\x1b[B",
    "M": "\x1b[C",
    "K": "\x1b[D",
}

_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
_STD_OUTPUT_HANDLE = -11


class WindowsTerminal(_StreamTerminal):
    """Windows console: msvcrt for keys, VT processing for ANSI output."""

    def __init__(self, output: TextIO | None = None) -> None:
        super().__init__(output)
        self._msvcrt = None
        self._old_console_mode: int | None = None

    def start(self) -> None:
        if self._started:
            return
        try:
            import msvcrt
        except ImportError as e:
            raise TerminalError("msvcrt is not available; not a Windows console") from e
        if not sys.stdin.isatty():
            raise TerminalError("stdin is not a console; run the game in an interactive shell")
        self._msvcrt = msvcrt
        self._enable_vt_output()
        self._started = True

    def _enable_vt_output(self) -> None:
        try:
            import ctypes

            kernel32 = ctypes.windll.kernel32
            handle = kernel32.GetStdHandle(_STD_OUTPUT_HANDLE)
            mode = ctypes.c_uint32()
            if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
                raise TerminalError("could not read console mode")
            if not kernel32.SetConsoleMode(handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING):
                raise TerminalError("console rejected ANSI output mode")
            self._old_console_mode = mode.value
        except (AttributeError, OSError) as e:
            raise TerminalError(f"could not enable ANSI output: {e}") from e

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        self._restore_screen()
        if self._old_console_mode is not None:
            try:
                import ctypes

                kernel32 = ctypes.windll.kernel32
                kernel32.SetConsoleMode(kernel32.GetStdHandle(_STD_OUTPUT_HANDLE), self._old_console_mode)
            except (AttributeError, OSError) as e:
                logger.warning("Failed to restore console mode: %s", e)
            self._old_console_mode = None
        self._msvcrt = None

    def poll_key(self) -> GameKey | None:
        msvcrt = self._msvcrt
        if msvcrt is None:
            return None
        while msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                seq = _WINDOWS_ARROWS.get(msvcrt.getwch())
                if seq is None:
                    continue
                ch = seq
            key = decode_key(ch)
            if key is not None:
                return key
        return None


def create_terminal(output: TextIO | None = None) -> Terminal:
    """The terminal implementation for the running platform."""
    if sys.platform == "win32":
        return WindowsTerminal(output)
    return ProcessTerminal(output)
