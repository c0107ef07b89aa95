"""Terminal helpers: cursor movement, colours and arrow-key input."""

from __future__ import annotations

import os
import select
import sys
from enum import IntEnum
from typing import BinaryIO, TextIO

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None

try:
    import msvcrt
except ImportError:  # POSIX
    msvcrt = None


class Color(IntEnum):
    """Console colour attributes (4-bit, intensity in bit 3)."""

    BLACK = 0
    SKY_BLUE = 3
    RED = 4
    YELLOW = 6
    DEFAULT = 7
    RIGHT_BLUE = 9
    RIGHT_GREEN = 10
    WHITE = 15


class MoveDir(IntEnum):
    """Direction read from the arrow keys; NONE when no arrow was pressed."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    NONE = 4


def color_code(color: int, bg: int = Color.BLACK) -> int:
    """Combine a foreground and a background colour into one attribute byte."""
    return (int(bg) << 4) | int(color)


def _sgr(attribute: int, *, background: bool) -> int:
    # Console attributes order the bits blue/green/red; ANSI orders them red/green/blue.
    base = ((attribute & 4) >> 2) | (attribute & 2) | ((attribute & 1) << 2)
    bright = attribute & 8
    if background:
        return (100 if bright else 40) + base
    return (90 if bright else 30) + base


class Screen:
    """A text screen driven with ANSI escape sequences."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def move_cursor(self, x: int, y: int) -> None:
        """Move the cursor to column x, row y, both counted from zero."""
        self.write(f"\x1b[{y + 1};{x + 1}H")

    def set_cursor_visible(self, visible: bool) -> None:
        self.write("\x1b[?25h" if visible else "\x1b[?25l")

    def set_color(self, color: int, bg: int = Color.BLACK) -> None:
        code = color_code(color, bg)
        fg_sgr = _sgr(code & 0x0F, background=False)
        bg_sgr = _sgr((code >> 4) & 0x0F, background=True)
        self.write(f"\x1b[{fg_sgr};{bg_sgr}m")

    def clear(self) -> None:
        self.write("\x1b[2J\x1b[H")


_SEQUENCES: dict[MoveDir, tuple[bytes, ...]] = {
    MoveDir.LEFT: (b"\x1b[D", b"\x1bOD", b"\xe0K", b"\x00K"),
    MoveDir.RIGHT: (b"\x1b[C", b"\x1bOC", b"\xe0M", b"\x00M"),
    MoveDir.UP: (b"\x1b[A", b"\x1bOA", b"\xe0H", b"\x00H"),
    MoveDir.DOWN: (b"\x1b[B", b"\x1bOB", b"\xe0P", b"\x00P"),
}


def decode_key(data: bytes) -> MoveDir:
    """Return the arrow found in raw key bytes, checking left, right, up, down in turn."""
    for direction, sequences in _SEQUENCES.items():
        if any(sequence in data for sequence in sequences):
            return direction
    return MoveDir.NONE


class KeyboardInput:
    """Non-blocking arrow-key reader; use as a context manager for raw terminal mode."""

    def __init__(self, stream: BinaryIO | TextIO | int | None = None) -> None:
        source = stream if stream is not None else sys.stdin
        self._fd = source if isinstance(source, int) else source.fileno()
        self._saved = None

    def __enter__(self) -> "KeyboardInput":
        if termios is not None and os.isatty(self._fd):
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, *args) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def _read_available(self) -> bytes:
        if msvcrt is not None and os.isatty(self._fd):
            chunks = []
            while msvcrt.kbhit():
                chunks.append(msvcrt.getch())
            return b"".join(chunks)
        data = bytearray()
        while True:
            ready, _, _ = select.select([self._fd], [], [], 0)
            if not ready:
                break
            chunk = os.read(self._fd, 1024)
            if not chunk:
                break
            data += chunk
        return bytes(data)

    def poll(self) -> MoveDir:
        """Return the arrow pressed since the last poll, or MoveDir.NONE."""
        return decode_key(self._read_available())