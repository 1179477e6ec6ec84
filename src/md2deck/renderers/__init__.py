#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2deck/renderers/__init__.py
"""AST renderers for md2deck.

Available renderers:
- DeckRenderer: Render to deck XML (slides with positioned text, lists,
  code and images)

Examples
--------
Convert AST to deck XML:

    >>> from md2deck.ast import Document, Heading, Text
    >>> from md2deck.renderers import DeckRenderer
    >>> from md2deck.options import DeckRendererOptions
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> renderer = DeckRenderer(DeckRendererOptions(include_canvas=True))
    >>> deck = renderer.render_to_string(doc)

"""

from md2deck.renderers.base import BaseRenderer, InlineContentMixin
from md2deck.renderers.deck import IGNORED_NODE_TYPES, DeckRenderer

__all__ = [
    "BaseRenderer",
    "DeckRenderer",
    "IGNORED_NODE_TYPES",
    "InlineContentMixin",
]
