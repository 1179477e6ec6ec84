#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The AST decouples Markdown parsing from deck rendering: parsers build a
``Document`` tree and renderers walk it through the visitor pattern.

Examples
--------
Basic usage:

    >>> from md2deck.ast import Document, Heading, Paragraph, Text
    >>> from md2deck.renderers.deck import DeckRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> deck_xml = DeckRenderer().render_to_string(doc)

"""

from __future__ import annotations

from md2deck.ast.nodes import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Comment,
    Document,
    Emphasis,
    Entity,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2deck.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Comment",
    "Document",
    "Emphasis",
    "Entity",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
]
