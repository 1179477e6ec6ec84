#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2deck parsing and rendering.

Options are frozen dataclasses; use ``create_updated()`` to derive a modified
copy.
"""

from __future__ import annotations

from md2deck.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2deck.options.deck import DeckRendererOptions
from md2deck.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DeckRendererOptions",
    "MarkdownParserOptions",
]
