#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/api.py
"""High-level conversion API.

``markdown_to_deck`` returns deck XML for a Markdown source; ``convert``
does the same and optionally writes the result to a file or stream.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from md2deck.ast import Document
from md2deck.options.deck import DeckRendererOptions
from md2deck.options.markdown import MarkdownParserOptions
from md2deck.parsers.markdown import MarkdownToAstConverter
from md2deck.renderers.deck import DeckRenderer

logger = logging.getLogger(__name__)


def to_ast(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> Document:
    """Parse a Markdown source into an AST document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, a path to a Markdown file, or a file-like object
    parser_options : MarkdownParserOptions, optional
        Options for parsing Markdown

    Returns
    -------
    Document
        AST document node

    """
    return MarkdownToAstConverter(parser_options).parse(source)


def from_ast(
    doc: Document,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    renderer_options: Optional[DeckRendererOptions] = None,
) -> Optional[str]:
    """Render an AST document to deck XML.

    Parameters
    ----------
    doc : Document
        AST document to render
    output : str, Path, IO[bytes], IO[str] or None, optional
        Output destination. If None, the deck XML is returned.
    renderer_options : DeckRendererOptions, optional
        Deck layout options

    Returns
    -------
    str or None
        Deck XML if output is None, otherwise None

    """
    renderer = DeckRenderer(renderer_options)
    if output is None:
        return renderer.render_to_string(doc)

    renderer.render(doc, output)
    logger.debug("Wrote deck to %s", output if isinstance(output, (str, Path)) else type(output).__name__)
    return None


def markdown_to_deck(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[DeckRendererOptions] = None,
) -> str:
    r"""Convert Markdown to deck XML.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, a path to a Markdown file, or a file-like object
    parser_options : MarkdownParserOptions, optional
        Options for parsing Markdown
    renderer_options : DeckRendererOptions, optional
        Deck layout options

    Returns
    -------
    str
        Deck XML

    Examples
    --------
        >>> print(markdown_to_deck("# Title\\n\\nBody\\n"), end="")
        <deck>
        <slide>
        <text xp="10.00" yp="90.00" sp="4.00" type="">Title</text>
        <text xp="10.00" yp="80.00" sp="2.00" type="block">Body</text>
        </slide>
        </deck>

    """
    doc = to_ast(source, parser_options=parser_options)
    return DeckRenderer(renderer_options).render_to_string(doc)


def convert(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[DeckRendererOptions] = None,
) -> Optional[str]:
    """Convert a Markdown source to deck XML.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown source
    output : str, Path, IO[bytes], IO[str] or None, optional
        Output destination. If None, returns the deck XML.
    parser_options : MarkdownParserOptions, optional
        Options for parsing Markdown
    renderer_options : DeckRendererOptions, optional
        Deck layout options

    Returns
    -------
    str or None
        Deck XML if output is None, otherwise None (content written to output)

    Examples
    --------
    Convert a file:
        >>> convert("talk.md", "talk.xml")

    Into a buffer:
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> convert("# Title", output=buffer)
        >>> buffer.getvalue().startswith("<deck>")
        True

    """
    doc = to_ast(source, parser_options=parser_options)
    return from_ast(doc, output, renderer_options=renderer_options)
