#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Every node's ``accept`` calls the matching ``visit_*`` method on the visitor.
The base implementations here all delegate to :meth:`NodeVisitor.generic_visit`,
so a subclass overrides only the node kinds it handles and routes every other
kind through one fallback.

"""

from __future__ import annotations

from typing import Any

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


class NodeVisitor:
    """Base class for AST node visitors.

    Examples
    --------
    Visitor that counts headings and ignores everything else:

        >>> class HeadingCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...
        ...     def visit_heading(self, node):
        ...         self.count += 1
        ...
        >>> counter = HeadingCounter()
        >>> document.accept(counter)

    """

    # Block nodes

    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        return self.generic_visit(node)

    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        return self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        return self.generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        return self.generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        return self.generic_visit(node)

    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        return self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        return self.generic_visit(node)

    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        return self.generic_visit(node)

    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        return self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        return self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        return self.generic_visit(node)

    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit an HTMLBlock node."""
        return self.generic_visit(node)

    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        return self.generic_visit(node)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition node."""
        return self.generic_visit(node)

    # Inline nodes

    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        return self.generic_visit(node)

    def visit_entity(self, node: Entity) -> Any:
        """Visit an Entity node."""
        return self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        return self.generic_visit(node)

    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        return self.generic_visit(node)

    def visit_code(self, node: Code) -> Any:
        """Visit an inline Code node."""
        return self.generic_visit(node)

    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        return self.generic_visit(node)

    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        return self.generic_visit(node)

    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        return self.generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        return self.generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit an HTMLInline node."""
        return self.generic_visit(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        """Visit a FootnoteReference node."""
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for node kinds without a dedicated handler.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
