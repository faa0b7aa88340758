"""Console streams used by the interpreter for `,` and `.`."""

import sys
from typing import Optional, TextIO

from bfi.errors import InputReadError, OutputWriteError


class Console:
    """Line-based input and character output over a pair of text streams.

    Streams default to the process stdin/stdout at call time, so tests can
    hand in ``io.StringIO`` objects instead.
    """

    def __init__(self, instream: Optional[TextIO] = None, outstream: Optional[TextIO] = None,
                 encoding: str = "utf-8"):
        self._instream = instream
        self._outstream = outstream
        self.encoding = encoding

    @property
    def instream(self) -> TextIO:
        return self._instream if self._instream is not None else sys.stdin

    @property
    def outstream(self) -> TextIO:
        return self._outstream if self._outstream is not None else sys.stdout

    def read_line(self) -> bytes:
        """Read one line (newline included) and return its raw bytes.

        Returns ``b""`` at end of input.
        """
        # Pending output must be visible before blocking on input.
        self._flush()
        try:
            line = self.instream.readline()
            return line.encode(self.encoding)
        except (OSError, UnicodeError) as e:
            raise InputReadError(e) from e

    def write_char(self, value: int) -> None:
        self._write(chr(value))

    def newline(self) -> None:
        self._write("\n")

    def _write(self, text: str) -> None:
        try:
            self.outstream.write(text)
        except (OSError, UnicodeError) as e:
            raise OutputWriteError(e) from e
        self._flush()

    def _flush(self) -> None:
        try:
            self.outstream.flush()
        except (OSError, UnicodeError) as e:
            raise OutputWriteError(e) from e
