#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown documents to the md2deck AST
using the mistune parser. The resulting tree is what DeckRenderer lays out
into slides.

Deck-specific details of the mapping:

- Unordered lists whose bullet character is listed in
  ``MarkdownParserOptions.plain_list_markers`` are flagged as plain.
- Character references in text (``&amp;``, ``&#169;``) become Entity nodes so
  they reach the output unchanged.
- Soft line breaks are kept as newline text; hard breaks become LineBreak.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

from md2deck.ast import (
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
from md2deck.constants import DEPS_MARKDOWN
from md2deck.exceptions import ParsingError
from md2deck.options.markdown import MarkdownParserOptions
from md2deck.parsers.base import BaseParser
from md2deck.utils.decorators import debug_timer, requires_dependencies
from md2deck.utils.escape import split_character_references

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\n+ one\\n+ two\\n")
        >>> doc.children[1].plain
        True

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._footnote_definitions: dict[str, list[Node]] = {}

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)

        # Reset parser state to prevent leakage across parse calls
        self._footnote_definitions = {}

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        logger.debug("mistune plugins: %s", plugins)

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Markdown parsing"):
            try:
                tokens, _state = markdown.parse(markdown_content)
            except Exception as e:
                raise ParsingError(
                    f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e
                ) from e

            children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        for identifier, content in self._footnote_definitions.items():
            children.append(FootnoteDefinition(identifier=identifier, content=content))

        logger.debug("Parsed %d top-level block(s)", len(children))
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens without a node
            (blank lines, footnote definitions collected for the end)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return self._process_html_block(token)
        elif token_type == "footnotes":
            # Rendered footnote section from the plugin; definitions are
            # collected from footnote_item children.
            for item in token.get("children", []):
                self._process_footnote_item(item)
            return None
        elif token_type == "footnote_item":
            self._process_footnote_item(token)
            return None

        if token_type not in ("blank_line", ""):
            logger.debug("Skipping unsupported Markdown token %r", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []

        return Heading(level=level, content=content)

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The language is the first word of the fence info string.
        """
        code_content = token.get("raw", "")
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        language = None
        if info_string:
            parts = info_string.strip().split(maxsplit=1)
            if parts:
                language = parts[0]

        return CodeBlock(content=code_content, language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'bullet', 'tight' and 'attrs'
            (ordered, start)

        Returns
        -------
        List
            List AST node; ``plain`` is set for unordered lists whose bullet
            is one of the configured plain list markers

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))
        bullet = token.get("bullet", "") or ""

        plain = not ordered and bool(bullet) and bullet in self.options.plain_list_markers

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in children
            if isinstance(child, dict)
        ]

        return List(ordered=ordered, items=items, plain=plain, start=start, tight=tight)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token into header, rows and alignments."""
        header = None
        rows = []
        alignments = []

        for row_token in token.get("children", []):
            row_type = row_token.get("type", "")
            if row_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_row_cells(row_token)
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif row_type == "table_body":
                for body_row_token in row_token.get("children", []):
                    rows.append(TableRow(cells=self._process_table_row_cells(body_row_token)))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_row_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        cells = []

        for cell_token in row_token.get("children", []):
            content = self._process_inline_tokens(cell_token.get("children", []))
            attrs = cell_token.get("attrs", {})
            cells.append(TableCell(content=content, alignment=attrs.get("align")))

        return cells

    def _process_html_block(self, token: dict[str, Any]) -> HTMLBlock | Comment:
        content = token.get("raw", "")

        stripped = content.strip()
        if stripped.startswith("<!--") and stripped.endswith("-->"):
            return Comment(content=stripped[4:-3].strip())

        return HTMLBlock(content=content)

    def _process_footnote_item(self, token: dict[str, Any]) -> None:
        """Store a footnote definition for the end of the document."""
        attrs = token.get("attrs", {})
        identifier = attrs.get("key") or attrs.get("label", "")
        self._footnote_definitions[identifier] = self._process_tokens(token.get("children", []))

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                if isinstance(node, list):
                    nodes.extend(node)
                else:
                    nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> list[Node]:
        """Handle text token, splitting out character references."""
        nodes: list[Node] = []
        for is_reference, fragment in split_character_references(token.get("raw", "")):
            nodes.append(Entity(content=fragment) if is_reference else Text(content=fragment))
        return nodes

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        return Link(url=attrs.get("url", ""), content=self._process_inline_tokens(children), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token.

        Alt text is the concatenated raw text of the children. For deck
        output it usually carries the placement, e.g. ``![10,20,30,40](a.png)``.
        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        alt_text = ""
        if isinstance(children, list) and children:
            alt_text = "".join(
                child.get("raw", "") for child in children if isinstance(child, dict) and child.get("type") == "text"
            )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        return Text(content="\n")

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return FootnoteReference(identifier=attrs.get("key") or attrs.get("label") or token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node, list of Node, or None
            Inline AST node(s)

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Skipping unsupported inline Markdown token %r", token_type)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2deck.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
