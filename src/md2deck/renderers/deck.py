#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/renderers/deck.py
"""Deck rendering from AST.

This module provides the DeckRenderer class which converts AST nodes to deck
XML: a ``<deck>`` of ``<slide>`` elements whose children are placed at
explicit coordinates. Thematic breaks separate slides.

Layout is driven by a cursor (see :mod:`md2deck.layout`). Headers, paragraphs,
lists and block quotes are container elements: the cursor is moved, the
opening tag is built from the moved cursor, the children are rendered into a
temporary buffer and the element is written only when that buffer is not
empty. A discarded element leaves no markup behind, but the cursor move made
before opening it stays in effect.

Only block structure, headers, paragraphs, lists, block quotes, code blocks,
images and plain text take part in the layout. Inline decoration and the
remaining block kinds are accepted and dropped (``IGNORED_NODE_TYPES``).

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Generator, Union

from md2deck.ast.nodes import (
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
from md2deck.constants import (
    DECK_CLOSE,
    DECK_OPEN,
    IMAGE_PLACEMENT_FIELDS,
    LIST_CLOSE,
    SLIDE_CLOSE,
    SLIDE_OPEN,
    TEXT_CLOSE,
    TEXT_TYPE_BLOCK,
    TEXT_TYPE_CODE,
    TEXT_TYPE_HEADING,
    ListType,
    TextType,
)
from md2deck.layout import (
    ListFlags,
    RenderState,
    break_slide,
    enter_block_quote,
    enter_code_block,
    enter_heading,
    enter_list,
    enter_paragraph,
    initial_state,
    leave_heading,
    leave_paragraph,
    list_type,
)
from md2deck.options.deck import DeckRendererOptions
from md2deck.renderers.base import BaseRenderer, InlineContentMixin
from md2deck.utils.decorators import debug_timer
from md2deck.utils.escape import escape_xml_attribute

logger = logging.getLogger(__name__)

# Node kinds with no deck representation. They produce no output and do not
# move the cursor; their text content is dropped along with them.
IGNORED_NODE_TYPES: tuple[type[Node], ...] = (
    Emphasis,
    Strong,
    Strikethrough,
    Code,
    Link,
    LineBreak,
    HTMLInline,
    HTMLBlock,
    Comment,
    Table,
    TableRow,
    TableCell,
    FootnoteReference,
    FootnoteDefinition,
)

# Headings at these levels carry position attributes; others open a bare <text>.
POSITIONED_HEADING_LEVELS = (1, 2)


class DeckRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to deck XML.

    Parameters
    ----------
    options : DeckRendererOptions or None, default = None
        Deck layout options

    Examples
    --------
        >>> from md2deck.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> print(DeckRenderer().render_to_string(doc), end="")
        <deck>
        <slide>
        <text xp="10.00" yp="90.00" sp="4.00" type="">Title</text>
        </slide>
        </deck>

    """

    def __init__(self, options: DeckRendererOptions | None = None):
        """Initialize the deck renderer with options."""
        BaseRenderer._validate_options_type(options, DeckRendererOptions, "deck")
        options = options or DeckRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: DeckRendererOptions = options
        self._output: list[str] = []
        self._state: RenderState = initial_state(options)
        self._escape_text: bool = True

    @property
    def state(self) -> RenderState:
        """Layout state after the most recent render (or the initial state)."""
        return self._state

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a deck XML string.

        Each call starts from a fresh layout state.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Deck XML

        """
        self._output = []
        self._state = initial_state(self.options)
        self._escape_text = True

        with debug_timer(logger, "Rendering (deck)"):
            doc.accept(self)

        logger.debug("Rendered %d slide(s)", self._state.slide_count + 1)
        return "".join(self._output)

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to a deck file or stream.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        """
        self.write_text_output(self.render_to_string(doc), output)

    # ------------------------------------------------------------------
    # Markup helpers
    # ------------------------------------------------------------------

    def _text_open(self, text_type: TextType) -> str:
        state = self._state
        return f'<text xp="{state.x:.2f}" yp="{state.y:.2f}" sp="{state.spacing:.2f}" type="{text_type}">'

    def _list_open(self, ltype: ListType) -> str:
        state = self._state
        return f'<list xp="{state.x:.2f}" yp="{state.y:.2f}" sp="{state.spacing:.2f}" type="{ltype}">\n'

    def _emit_container(self, open_tag: str, content: str, close_tag: str) -> bool:
        """Write ``open_tag + content + close_tag`` unless content is empty.

        Returns
        -------
        bool
            True if the element was written

        """
        if not content:
            logger.debug("Discarding empty element %s", open_tag.strip())
            return False

        self._output.append(open_tag)
        self._output.append(content)
        self._output.append(close_tag)
        return True

    def _render_flow_content(self, children: list[Node]) -> str:
        """Render block children as the body of a single element.

        Every child is flattened to text without markup of its own and
        without moving the cursor: paragraphs and headings give their inline
        content, lists one line per item, code blocks their escaped code and
        nested quotes their own flattened text. Non-empty parts are joined
        with newlines.
        """
        parts = (self._flow_text(child) for child in children)
        return "\n".join(part for part in parts if part)

    def _flow_text(self, node: Node) -> str:
        if isinstance(node, (Paragraph, Heading)):
            return self._render_inline_content(node.content)
        if isinstance(node, CodeBlock):
            return escape_xml_attribute(node.content.rstrip("\n"))
        if isinstance(node, List):
            return self._render_flow_content(list(node.items))
        if isinstance(node, ListItem):
            parts = (self._flow_text(child) for child in node.children)
            return " ".join(part for part in parts if part)
        if isinstance(node, BlockQuote):
            return self._render_flow_content(node.children)

        logger.debug("Dropping %s inside block quote", type(node).__name__)
        return ""

    @contextmanager
    def _unescaped_text(self) -> Generator[None, None, None]:
        saved = self._escape_text
        self._escape_text = False
        try:
            yield
        finally:
            self._escape_text = saved

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render the deck wrapper and the first slide around the children."""
        self._output.append(DECK_OPEN)
        if self.options.include_canvas:
            self._output.append(
                f'<canvas width="{self._state.canvas_width:g}" height="{self._state.canvas_height:g}"/>\n'
            )
        self._output.append(SLIDE_OPEN)

        for child in node.children:
            child.accept(self)

        self._output.append(SLIDE_CLOSE)
        self._output.append(DECK_CLOSE)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Close the current slide and open the next one."""
        self._state = break_slide(self._state, self.options)
        logger.debug("Slide break, starting slide %d", self._state.slide_count + 1)
        self._output.append(SLIDE_CLOSE)
        self._output.append(SLIDE_OPEN)

    def visit_heading(self, node: Heading) -> None:
        """Render a heading as a positioned text element.

        Level 1 is the slide title and level 2 the subtitle; every other
        level opens a bare ``<text>`` element at the current cursor. A rendered
        heading moves the cursor down by ``heading_step``.
        """
        self._state = enter_heading(self._state, node.level, self.options)
        if node.level in POSITIONED_HEADING_LEVELS:
            open_tag = self._text_open(TEXT_TYPE_HEADING)
        else:
            open_tag = "<text>"

        content = self._render_inline_content(node.content)
        if self._emit_container(open_tag, content, TEXT_CLOSE):
            self._state = leave_heading(self._state, self.options)

    def visit_paragraph(self, node: Paragraph) -> None:
        self._state = enter_paragraph(self._state, self.options)
        open_tag = self._text_open(TEXT_TYPE_BLOCK)

        content = self._render_inline_content(node.content)
        if self._emit_container(open_tag, content, TEXT_CLOSE):
            self._state = leave_paragraph(self._state, self.options)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a block quote as one indented block text element."""
        self._state = enter_block_quote(self._state, self.options)
        open_tag = self._text_open(TEXT_TYPE_BLOCK)

        content = self._render_flow_content(node.children)
        self._emit_container(open_tag, content, TEXT_CLOSE)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a code block; it is written even when empty."""
        self._state = enter_code_block(self._state, self.options)
        self._output.append(self._text_open(TEXT_TYPE_CODE))
        self._output.append(escape_xml_attribute(node.content))
        self._output.append(TEXT_CLOSE)

    def visit_list(self, node: List) -> None:
        flags = ListFlags.NONE
        if node.ordered:
            flags |= ListFlags.ORDERED
        if node.plain:
            flags |= ListFlags.PLAIN_ITEM

        self._state = enter_list(self._state, self.options)
        open_tag = self._list_open(list_type(flags))

        content = self._render_inline_content(list(node.items))
        self._emit_container(open_tag, content, LIST_CLOSE)

    def visit_list_item(self, node: ListItem) -> None:
        """Render a list item as ``<li>`` with its text written unescaped.

        Nested lists follow the item inside the enclosing list element.
        """
        nested_lists = []
        parts = []
        with self._unescaped_text():
            for child in node.children:
                if isinstance(child, List):
                    nested_lists.append(child)
                    continue
                if isinstance(child, Paragraph):
                    part = self._render_inline_content(child.content)
                else:
                    part = self._render_inline_content([child])
                if part:
                    parts.append(part)

        self._output.append("<li>")
        self._output.append(" ".join(parts))
        self._output.append("</li>\n")

        for nested in nested_lists:
            nested.accept(self)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        if self._escape_text:
            self._output.append(escape_xml_attribute(node.content))
        else:
            self._output.append(node.content)

    def visit_entity(self, node: Entity) -> None:
        self._output.append(node.content)

    def visit_image(self, node: Image) -> None:
        """Render an image element.

        Alt text of the form ``x,y,width,height`` places the image; each of the
        four fields is attribute-escaped and otherwise written as given, so
        numeric fields appear unchanged. Any other alt text uses the configured
        default placement. The title, when present, becomes the caption.
        """
        placement = node.alt_text.split(",")
        if len(placement) != IMAGE_PLACEMENT_FIELDS:
            if node.alt_text:
                logger.debug("Image %s: alt text %r is not x,y,width,height; using defaults", node.url, node.alt_text)
            placement = list(self.options.image_defaults)
        xp, yp, width, height = (escape_xml_attribute(value) for value in placement)

        self._output.append(f'<image name="{escape_xml_attribute(node.url)}"')
        self._output.append(f' xp="{xp}" yp="{yp}" width="{width}" height="{height}"')
        if node.title:
            self._output.append(f' caption="{escape_xml_attribute(node.title)}"')
        self._output.append(" />\n")

    def generic_visit(self, node: Node) -> None:
        """Drop node kinds that have no deck markup."""
        if isinstance(node, IGNORED_NODE_TYPES):
            logger.debug("Ignoring %s node", type(node).__name__)
        else:
            logger.debug("No deck markup for %s node, skipping", type(node).__name__)
        return None
