#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/writer.py
"""Indentation-aware text sink with a stack of capture buffers.

``IndentWriter`` is the only mutable output of a render. Text goes to the
active buffer; ``push_new_buffer`` temporarily redirects output to a fresh
buffer so a fragment (a table cell, the output of an override) can be captured
as a string, and ``pop_buffer`` restores the previous one.

"""

from __future__ import annotations

from notion2html.constants import INDENT_UNIT
from notion2html.exceptions import RenderInvariantError


class TextBuffer:
    """Append-only string accumulator that knows its length and last character."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._length = 0
        self._last_char = ""

    def write(self, text: str) -> None:
        if not text:
            return
        self._chunks.append(text)
        self._length += len(text)
        self._last_char = text[-1]

    def ends_with(self, char: str) -> bool:
        return self._last_char == char

    def getvalue(self) -> str:
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def __len__(self) -> int:
        return self._length


class IndentWriter:
    """Stateful text sink tracking nesting depth and capture buffers.

    Parameters
    ----------
    indent_unit : str, default two spaces
        Text written once per nesting level by ``write_indent``

    Attributes
    ----------
    level : int
        Current nesting depth. Renderers adjust it directly; it must never be
        negative when indentation is written.

    """

    def __init__(self, indent_unit: str = INDENT_UNIT):
        self.indent_unit = indent_unit
        self.level = 0
        self.buf = TextBuffer()
        self._saved: list[TextBuffer] = []

    @property
    def depth(self) -> int:
        """Number of buffers saved by ``push_new_buffer`` and not yet restored."""
        return len(self._saved)

    def write_string(self, s: str) -> None:
        """Append ``s`` verbatim to the active buffer."""
        self.buf.write(s)

    def newline(self) -> None:
        """Append a newline unless the buffer is empty or already ends with one."""
        if len(self.buf) > 0 and not self.buf.ends_with("\n"):
            self.buf.write("\n")

    def write_indent(self) -> None:
        """Write indentation for the current level.

        Raises
        ------
        RenderInvariantError
            If the level is negative

        """
        if self.level < 0:
            raise RenderInvariantError(f"Indentation level is {self.level}, must not be negative")
        self.buf.write(self.indent_unit * self.level)

    def write_indent_plus(self, add: int) -> None:
        """Write indentation for ``level + add``."""
        n = self.level + add
        if n < 0:
            raise RenderInvariantError(f"Indentation level is {n}, must not be negative")
        self.buf.write(self.indent_unit * n)

    def push_new_buffer(self) -> None:
        """Save the active buffer and make a fresh, empty one active."""
        self._saved.append(self.buf)
        self.buf = TextBuffer()

    def pop_buffer(self) -> TextBuffer:
        """Restore the previously active buffer and return the replaced one.

        Raises
        ------
        RenderInvariantError
            If there is no saved buffer to restore

        """
        if not self._saved:
            raise RenderInvariantError("pop_buffer() called without a matching push_new_buffer()")
        result = self.buf
        self.buf = self._saved.pop()
        return result

    def capture(self) -> "_Capture":
        """Context manager form of push/pop; the captured text is in ``.text`` afterwards.

        Examples
        --------
            >>> writer = IndentWriter()
            >>> with writer.capture() as captured:
            ...     writer.write_string("<td>1</td>")
            >>> captured.text
            '<td>1</td>'

        """
        return _Capture(self)

    def reset(self) -> None:
        """Discard all output, saved buffers and nesting."""
        self.level = 0
        self.buf = TextBuffer()
        self._saved.clear()


class _Capture:
    def __init__(self, writer: IndentWriter):
        self._writer = writer
        self.text = ""

    def __enter__(self) -> _Capture:
        self._writer.push_new_buffer()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.text = self._writer.pop_buffer().getvalue()
