"""
Output Writer

Serializes decoded events to the client as one JSON document per line.
"""

import json
from typing import Any, Iterable, TextIO


class OutputWriter:
    """Write events to a text stream (stdout in production)."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.lines_written = 0

    def write_events(self, events: Iterable[Any]) -> int:
        """
        Write each non-null event followed by a newline.

        One response's events are written in a single call so they stay
        contiguous; the stream is flushed once per block.

        Returns:
            Number of lines written
        """
        count = 0
        for event in events:
            if event is None:
                continue
            self._stream.write(json.dumps(event, allow_nan=False) + "\n")
            count += 1
        if count:
            self._stream.flush()
            self.lines_written += count
        return count
