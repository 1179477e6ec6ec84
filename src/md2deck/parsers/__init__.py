#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/parsers/__init__.py
"""Parsers producing the md2deck AST.

Only Markdown is supported; the parser is backed by mistune.
"""

from md2deck.parsers.base import BaseParser
from md2deck.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = [
    "BaseParser",
    "MarkdownToAstConverter",
    "markdown_to_ast",
]
