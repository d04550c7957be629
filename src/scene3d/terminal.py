"""Small helper for controlling ANSI terminal output."""

from __future__ import annotations

import os
import select
import shutil
import sys
import termios
import tty
from typing import List, Optional, Tuple

TermiosAttr = List[int | List[bytes | int]]

QUIT_KEYS = frozenset({"q", "Q", "ESC"})


class TerminalController:
    """Context manager that prepares the terminal for the animation loop."""

    def __init__(self, *, clear: bool = True) -> None:
        self._clear = clear
        self._cursor_hidden = False
        self._stdin_fd: Optional[int] = None
        self._termios_before: Optional[TermiosAttr] = None
        self._input_enabled = False

    def __enter__(self) -> "TerminalController":
        if self._clear:
            sys.stdout.write("\033[2J")
        sys.stdout.write("\033[H")
        sys.stdout.write("\033[?25l")
        sys.stdout.flush()
        self._cursor_hidden = True

        self._stdin_fd = None
        self._termios_before = None
        self._input_enabled = False
        if sys.stdin.isatty():
            fd = sys.stdin.fileno()
            try:
                self._termios_before = termios.tcgetattr(fd)
                tty.setcbreak(fd)
            except termios.error:
                self._termios_before = None
            else:
                self._stdin_fd = fd
                self._input_enabled = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._cursor_hidden:
            sys.stdout.write("\033[0m")
            sys.stdout.write("\033[?25h")
            sys.stdout.flush()
            self._cursor_hidden = False

        if self._input_enabled and self._stdin_fd is not None and self._termios_before is not None:
            try:
                termios.tcsetattr(self._stdin_fd, termios.TCSADRAIN, self._termios_before)
            except termios.error:
                sys.stderr.write("[scene3d] could not restore terminal attributes\n")
        self._input_enabled = False
        self._stdin_fd = None
        self._termios_before = None

    def draw(self, frame: str) -> None:
        sys.stdout.write("\033[H")
        sys.stdout.write(frame)
        sys.stdout.write("\033[0m")
        sys.stdout.flush()

    def size_tuple(self) -> Tuple[int, int]:
        size = shutil.get_terminal_size(fallback=(80, 40))
        return size.columns, size.lines

    def poll_keys(self) -> List[str]:
        """Return the keys pressed since the last call without blocking."""
        if not self._input_enabled or self._stdin_fd is None:
            return []

        keys: List[str] = []
        try:
            while True:
                char = self._read_char()
                if char is None:
                    break
                if not char:
                    continue
                if char == "\x03":
                    raise KeyboardInterrupt
                if char == "\x1b":
                    keys.append(self._read_escape_key())
                    continue
                keys.append(char)
        except OSError:
            return keys

        return keys

    def quit_requested(self) -> bool:
        return any(key in QUIT_KEYS for key in self.poll_keys())

    def _read_char(self) -> Optional[str]:
        readable, _, _ = select.select([sys.stdin], [], [], 0)
        if not readable or self._stdin_fd is None:
            return None
        data = os.read(self._stdin_fd, 1)
        if not data:
            return None
        return data.decode("utf-8", errors="ignore")

    def _read_escape_key(self) -> str:
        # Lone Escape is a quit request, arrow keys arrive as CSI sequences.
        sequence = "\x1b"
        while True:
            char = self._read_char()
            if not char:
                break
            sequence += char
            if char.isalpha() or char == "~":
                break
        if sequence == "\x1b":
            return "ESC"
        return sequence
