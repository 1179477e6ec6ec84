#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from and the
mixin that captures nested output into a temporary buffer.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2deck.ast import Document
from md2deck.ast.nodes import Node
from md2deck.exceptions import InvalidOptionsError, OutputWriteError
from md2deck.options.base import BaseRendererOptions
from md2deck.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to the specified output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination: a file path or a file-like object

        Raises
        ------
        OutputWriteError
            If output cannot be written

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to UTF-8 encoded bytes."""
        return self.render_to_string(doc).encode("utf-8")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the destination cannot be written
        TypeError
            If output type is not supported

        """
        try:
            write_content(text, output)
        except OSError as e:
            raise OutputWriteError(file_path=str(output), original_error=e) from e


class InlineContentMixin:
    """Mixin capturing the output of nested nodes into a string.

    The implementing class must have an ``_output`` attribute (list[str]) that
    its visitor methods append to. ``_render_inline_content`` swaps in a fresh
    buffer, renders the given nodes into it and restores the outer buffer, so
    the caller can inspect the nested output before committing anything.

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of nodes to text without touching the outer buffer.

        Parameters
        ----------
        content : list of Node
            Nodes to render

        Returns
        -------
        str
            Rendered content as a string

        """
        saved_output = self._output
        self._output = []
        try:
            for node in content:
                node.accept(self)
            return "".join(self._output)
        finally:
            self._output = saved_output
