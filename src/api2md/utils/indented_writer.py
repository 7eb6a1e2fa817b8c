#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/utils/indented_writer.py
"""Line-aware text accumulator with indentation support.

The IndentedWriter collects emitted text in memory and keeps enough state
about the tail of the buffer to answer the questions an emitter asks while
walking a document tree: "am I at the start of a line?", "is there already a
blank line above me?", "what was the last character I wrote?".

Indentation is a stack of prefix strings. Every line started while the stack
is non-empty is prefixed with the concatenation of the active prefixes. Blank
lines only receive the right-trimmed prefix, so a quote prefix such as
``"> "`` keeps a Markdown block quote contiguous while whitespace-only
indentation never produces trailing spaces.

"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from api2md.constants import DEFAULT_INDENT_PREFIX


class IndentedWriter:
    """Accumulate text while tracking line, blank-line and indentation state.

    Parameters
    ----------
    default_indent_prefix : str, default = two spaces
        Prefix pushed by ``increase_indent()`` when no explicit prefix is given

    Examples
    --------
        >>> writer = IndentedWriter()
        >>> writer.write_line("a")
        >>> writer.increase_indent()
        >>> writer.write_line("b")
        >>> writer.decrease_indent()
        >>> writer.get_text()
        'a\\n  b\\n'

    """

    def __init__(self, default_indent_prefix: str = DEFAULT_INDENT_PREFIX):
        self.default_indent_prefix = default_indent_prefix
        self._chunks: list[str] = []
        self._indent_stack: list[str] = []
        self._at_line_start: bool = True
        # Whether anything besides indentation and whitespace is on the current line
        self._line_has_content: bool = False
        self._length: int = 0
        # Character lengths of the consecutive blank lines at the end of the buffer
        self._trailing_blank_lines: list[int] = []

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Append text, applying the current indentation to each new line.

        Parameters
        ----------
        text : str
            Text to append; may contain newlines

        """
        if not text:
            return

        segments = text.split("\n")
        for i, segment in enumerate(segments):
            if segment:
                self._write_segment(segment)
            if i < len(segments) - 1:
                self._write_newline()

    def write_line(self, text: str = "") -> None:
        """Append text followed by a newline.

        Calling this with no text while at the start of a line produces a
        blank line.

        Parameters
        ----------
        text : str, default = ""
            Text to write before the newline

        """
        self.write(text)
        self._write_newline()

    def ensure_new_line(self) -> None:
        """Move to a fresh line unless already at column 0.

        Nothing is written into an empty buffer, and calling this twice in a
        row produces a single newline.

        """
        if not self._at_line_start:
            self._write_newline()

    def ensure_skipped_line(self) -> None:
        """Guarantee exactly one blank line between prior content and what follows.

        Missing blank lines are added and two or more trailing blank lines are
        collapsed to one. An empty buffer is left untouched.

        """
        if not self._chunks:
            return

        self.ensure_new_line()
        if not self._trailing_blank_lines:
            self._write_newline()
        elif len(self._trailing_blank_lines) > 1:
            self._truncate(sum(self._trailing_blank_lines[1:]))
            del self._trailing_blank_lines[1:]

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    def increase_indent(self, prefix: str | None = None) -> None:
        """Push one indentation level.

        Parameters
        ----------
        prefix : str or None, default = None
            Prefix for lines at this level; ``default_indent_prefix`` if None

        """
        self._indent_stack.append(self.default_indent_prefix if prefix is None else prefix)

    def decrease_indent(self) -> None:
        """Pop one indentation level; does nothing when no level is active."""
        if self._indent_stack:
            self._indent_stack.pop()

    @contextmanager
    def indent(self, prefix: str | None = None) -> Iterator[IndentedWriter]:
        """Context manager pairing ``increase_indent`` with ``decrease_indent``."""
        self.increase_indent(prefix)
        try:
            yield self
        finally:
            self.decrease_indent()

    @property
    def indent_level(self) -> int:
        return len(self._indent_stack)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def peek_last_character(self) -> str:
        """Return the last character written, or an empty string."""
        return self._tail(1)

    def peek_second_last_character(self) -> str:
        """Return the second-to-last character written, or an empty string."""
        tail = self._tail(2)
        return tail[0] if len(tail) == 2 else ""

    @property
    def at_line_start(self) -> bool:
        """True while the current line holds nothing but indentation and whitespace."""
        return not self._line_has_content

    def get_text(self) -> str:
        """Return everything written so far."""
        return "".join(self._chunks)

    def __str__(self) -> str:
        return self.get_text()

    def __len__(self) -> int:
        return self._length

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _write_segment(self, segment: str) -> None:
        if self._at_line_start:
            prefix = "".join(self._indent_stack)
            if prefix:
                self._chunks.append(prefix)
                self._length += len(prefix)
            self._at_line_start = False
        self._chunks.append(segment)
        self._length += len(segment)
        if not segment.isspace():
            self._line_has_content = True
        self._trailing_blank_lines.clear()

    def _write_newline(self) -> None:
        if self._at_line_start:
            prefix = "".join(self._indent_stack).rstrip()
            self._chunks.append(prefix + "\n")
            self._trailing_blank_lines.append(len(prefix) + 1)
            self._length += len(prefix) + 1
        else:
            self._chunks.append("\n")
            self._length += 1
            self._at_line_start = True
        self._line_has_content = False

    def _tail(self, count: int) -> str:
        collected = ""
        for chunk in reversed(self._chunks):
            collected = chunk + collected
            if len(collected) >= count:
                break
        return collected[-count:]

    def _truncate(self, count: int) -> None:
        self._length -= min(count, self._length)
        while count > 0 and self._chunks:
            last = self._chunks[-1]
            if len(last) <= count:
                self._chunks.pop()
                count -= len(last)
            else:
                self._chunks[-1] = last[:-count]
                count = 0
