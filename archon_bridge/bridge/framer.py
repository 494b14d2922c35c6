"""
Line Framer

Splits arriving text chunks into newline-terminated request lines.
"""

from typing import Callable


class LineFramer:
    """
    Buffer text chunks and hand each complete line to a callback.

    Framing splits strictly on "\\n", so a pretty-printed multi-line JSON
    value arrives as several (invalid) lines. Blank lines are dropped.

    Usage:
        framer = LineFramer(dispatcher.submit)
        framer.feed('{"id":1}\\n{"id"')
        framer.feed(':2}\\n')
        framer.close()
    """

    def __init__(self, on_line: Callable[[str], None]):
        self._on_line = on_line
        self._buffer = ""

    @property
    def buffered(self) -> str:
        return self._buffer

    def feed(self, chunk: str) -> None:
        self._buffer += chunk
        *lines, self._buffer = self._buffer.split("\n")
        for line in lines:
            self._emit(line)

    def close(self) -> None:
        """Flush a trailing line that was not newline-terminated."""
        remainder, self._buffer = self._buffer, ""
        self._emit(remainder)

    def _emit(self, line: str) -> None:
        if line.strip():
            self._on_line(line)
