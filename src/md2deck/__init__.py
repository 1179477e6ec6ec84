"""md2deck - Markdown to deck XML slide renderer.

md2deck lays out a Markdown document as a deck of slides. Thematic breaks
(``---``) start a new slide; headings, paragraphs, lists, block quotes, code
blocks and images are placed at explicit cursor positions on a percentage
canvas.

Examples
--------
    >>> from md2deck import markdown_to_deck
    >>> deck = markdown_to_deck("# Title\\n\\nBody\\n\\n---\\n\\n## Next\\n")
    >>> deck.count("<slide>")
    2

Image placement comes from the alt text:

    >>> markdown_to_deck("![10,20,30,40](chart.png)")  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2deck requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2deck.api import convert, from_ast, markdown_to_deck, to_ast  # noqa: E402
from md2deck.exceptions import (  # noqa: E402
    DependencyError,
    Md2DeckError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2deck.options import DeckRendererOptions, MarkdownParserOptions  # noqa: E402
from md2deck.renderers.deck import DeckRenderer  # noqa: E402

__all__ = [
    "__version__",
    "markdown_to_deck",
    "convert",
    "to_ast",
    "from_ast",
    "DeckRenderer",
    "DeckRendererOptions",
    "MarkdownParserOptions",
    "Md2DeckError",
    "DependencyError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
