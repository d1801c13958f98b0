"""Line- and token-oriented console input that tolerates bad entries."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_TOKEN_RE = re.compile(r"\S+")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class Console:
    """Reads tokens, lines and numbers from a text stream and writes prompts."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        """Write text as is, without adding a newline."""
        self._out.write(text)
        self._out.flush()

    def _next_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def read_token(self) -> str:
        """Return the next whitespace-delimited word, reading more lines if needed."""
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            self._pending = self._next_line()
        match = _TOKEN_RE.match(stripped)
        self._pending = stripped[match.end():]
        return match.group()

    def read_line(self) -> str:
        """Return the rest of the current line, or the next line if none is left."""
        if self._pending:
            line, self._pending = self._pending, ""
        else:
            line = self._next_line()
        return line.rstrip("\r\n")

    def _read_number(self, pattern: re.Pattern) -> str:
        token = self.read_token()
        self._pending = ""
        match = pattern.match(token)
        if match is None:
            raise ValueError(f"not a number: {token!r}")
        return match.group()

    def read_int(self) -> int:
        """Read an integer; the rest of the line is discarded.

        Raises ValueError when the input does not start with an integer.
        """
        value = int(self._read_number(_INT_RE))
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"integer out of range: {value}")
        return value

    def read_float(self) -> float:
        """Read a real number; the rest of the line is discarded.

        Raises ValueError when the input does not start with a number.
        """
        return float(self._read_number(_FLOAT_RE))