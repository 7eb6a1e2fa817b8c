#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/emitters/base.py
"""Base classes for document node emitters.

An emitter turns a document node tree into text. Each call to ``emit``
creates a fresh :class:`EmitterContext` holding the output writer and the
transient formatting flags, so emitter instances only carry configuration
and can be reused for any number of sequential renders.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from api2md.ast.nodes import DocNode
from api2md.exceptions import InvalidOptionsError
from api2md.options.base import BaseEmitterOptions
from api2md.utils.indented_writer import IndentedWriter

OptionsT = TypeVar("OptionsT", bound=BaseEmitterOptions)


@dataclass
class EmitterContext(Generic[OptionsT]):
    """Mutable state threaded through one render pass.

    Parameters
    ----------
    writer : IndentedWriter
        Output buffer, owned by the render pass
    options : BaseEmitterOptions
        Options for this render pass
    bold_requested : bool, default = False
        Text written now should be bold
    italic_requested : bool, default = False
        Text written now should be italic
    inside_table : bool, default = False
        The walker is inside a table cell
    emphasis_closed_at : int, default = -1
        Writer length just after the most recent closing emphasis marker

    """

    writer: IndentedWriter
    options: OptionsT
    bold_requested: bool = False
    italic_requested: bool = False
    inside_table: bool = False
    emphasis_closed_at: int = -1

    @contextmanager
    def emphasis(self, bold: bool, italic: bool) -> Iterator[None]:
        """Replace the emphasis flags for the duration of the block."""
        saved = (self.bold_requested, self.italic_requested)
        self.bold_requested = bold
        self.italic_requested = italic
        try:
            yield
        finally:
            self.bold_requested, self.italic_requested = saved

    @contextmanager
    def table(self) -> Iterator[None]:
        """Mark the walker as inside a table for the duration of the block."""
        saved = self.inside_table
        self.inside_table = True
        try:
            yield
        finally:
            self.inside_table = saved


class BaseEmitter(ABC, Generic[OptionsT]):
    """Abstract base class for emitters.

    Subclasses name their options class in ``options_class``; ``emit``
    rejects any other options type.

    """

    options_class: type[BaseEmitterOptions] = BaseEmitterOptions

    @abstractmethod
    def emit(self, node: DocNode, options: OptionsT | None = None) -> str:
        """Render ``node`` and return the text."""
        ...

    def _create_context(self, options: OptionsT | None) -> EmitterContext[OptionsT]:
        self._validate_options_type(options, self.options_class, type(self).__name__)
        if options is None:
            options = self.options_class()  # type: ignore[assignment]
        assert options is not None
        writer = IndentedWriter(default_indent_prefix=options.indent_prefix)
        return EmitterContext(writer=writer, options=options)

    @staticmethod
    def _validate_options_type(options: BaseEmitterOptions | None, expected_type: type, emitter_name: str) -> None:
        """Validate that options are of the correct type for this emitter.

        Parameters
        ----------
        options : BaseEmitterOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        emitter_name : str
            Name of the emitter (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                emitter_name=emitter_name,
                expected_type=expected_type,
                received_type=type(options),
            )
