"""Raw, non-blocking keyboard input from a terminal."""

from __future__ import annotations

import fcntl
import os
import sys
import termios
from types import TracebackType

_LFLAG = 3
_READ_SIZE = 256


class RawTerminal:
    """Puts a terminal into unbuffered, silent, non-blocking mode while entered."""

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved_attrs: list | None = None
        self._saved_flags: int | None = None

    def __enter__(self) -> RawTerminal:
        attrs = termios.tcgetattr(self.fd)
        raw = list(attrs)
        raw[_LFLAG] = attrs[_LFLAG] & ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(self.fd, termios.TCSANOW, raw)
        flags = fcntl.fcntl(self.fd, fcntl.F_GETFL)
        fcntl.fcntl(self.fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
        self._saved_attrs, self._saved_flags = attrs, flags
        sys.stdout.flush()
        return self

    def __exit__(self, exc_type: type[BaseException] | None,
                 exc: BaseException | None, tb: TracebackType | None) -> None:
        if self._saved_attrs is None:
            return
        termios.tcsetattr(self.fd, termios.TCSANOW, self._saved_attrs)
        fcntl.fcntl(self.fd, fcntl.F_SETFL, self._saved_flags)
        self._saved_attrs = self._saved_flags = None

    def read_keys(self) -> frozenset[str]:
        """Return every key waiting on the terminal, without blocking."""
        if self._saved_attrs is None:
            raise RuntimeError("the terminal must be entered before reading keys")
        pressed: set[str] = set()
        while True:
            try:
                chunk = os.read(self.fd, _READ_SIZE)
            except BlockingIOError:
                break
            if not chunk:
                break
            pressed.update(chr(byte) for byte in chunk)
        return frozenset(pressed)