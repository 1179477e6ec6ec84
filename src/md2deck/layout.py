#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/layout.py
"""Cursor state and layout transitions for deck rendering.

A deck is laid out by a small state machine. :class:`RenderState` holds the
cursor (``x``, ``y``, ``spacing``), the number of slide breaks seen so far and
the canvas size. Each node kind that affects layout has a transition function
here taking the current state and the renderer options and returning the next
state. The functions are pure; the renderer decides *when* to apply them and
captures the state in the markup it emits.

Transition order per node kind::

    heading      enter_heading  -> open tag -> children -> leave_heading (only if not empty)
    paragraph    enter_paragraph -> open tag -> children -> leave_paragraph (only if not empty)
    block quote  enter_block_quote -> open tag -> children
    code block   enter_code_block -> open tag -> text
    list         enter_list -> open tag -> items
    rule         break_slide

"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from md2deck.constants import LIST_TYPE_BULLET, LIST_TYPE_NUMBER, LIST_TYPE_PLAIN, ListType
from md2deck.options.deck import DeckRendererOptions


class ListFlags(enum.IntFlag):
    """List type bits reported by the traversal for a list node."""

    NONE = 0
    ORDERED = 1
    PLAIN_ITEM = 2


@dataclass(frozen=True)
class RenderState:
    """Layout state of one deck render.

    Parameters
    ----------
    x : float
        Horizontal cursor position
    y : float
        Vertical cursor position
    spacing : float
        Text size applied to the next text-bearing element
    canvas_width : float
        Logical canvas width, fixed for the document
    canvas_height : float
        Logical canvas height, fixed for the document
    slide_count : int, default 0
        Number of slide breaks emitted so far

    """

    x: float
    y: float
    spacing: float
    canvas_width: float
    canvas_height: float
    slide_count: int = 0

    @property
    def cursor(self) -> tuple[float, float, float]:
        """The (x, y, spacing) triple."""
        return (self.x, self.y, self.spacing)


def initial_state(options: DeckRendererOptions) -> RenderState:
    """Return the state at the top of the first slide."""
    return RenderState(
        x=options.left_margin,
        y=options.top,
        spacing=options.default_spacing,
        canvas_width=options.canvas_width,
        canvas_height=options.canvas_height,
    )


def break_slide(state: RenderState, options: DeckRendererOptions) -> RenderState:
    """Start a new slide: count it and move the cursor back to the top left."""
    return replace(
        state,
        slide_count=state.slide_count + 1,
        x=options.left_margin,
        y=options.top,
        spacing=options.default_spacing,
    )


def enter_heading(state: RenderState, level: int, options: DeckRendererOptions) -> RenderState:
    """Position the cursor for a heading.

    Every heading returns to the left margin. Level 1 moves to the top with the
    title size and level 2 to the subtitle line with the subtitle size; other
    levels keep the current vertical position and size.
    """
    state = replace(state, x=options.left_margin)
    if level == 1:
        return replace(state, y=options.top, spacing=options.title_spacing)
    if level == 2:
        return replace(state, y=options.subtitle_top, spacing=options.subtitle_spacing)
    return state


def leave_heading(state: RenderState, options: DeckRendererOptions) -> RenderState:
    """Reserve the vertical space taken by a rendered heading."""
    return replace(state, y=state.y - options.heading_step)


def enter_paragraph(state: RenderState, options: DeckRendererOptions) -> RenderState:
    return replace(state, spacing=options.default_spacing)


def leave_paragraph(state: RenderState, options: DeckRendererOptions) -> RenderState:
    """Reserve the vertical space taken by a rendered paragraph."""
    return replace(state, y=state.y - options.paragraph_step)


def enter_block_quote(state: RenderState, options: DeckRendererOptions) -> RenderState:
    """Indent the cursor for a block quote. Nested quotes indent further."""
    return replace(state, x=state.x + options.quote_indent)


def enter_code_block(state: RenderState, options: DeckRendererOptions) -> RenderState:
    return replace(state, spacing=options.code_spacing)


def enter_list(state: RenderState, options: DeckRendererOptions) -> RenderState:
    return replace(state, spacing=options.default_spacing)


def list_type(flags: ListFlags) -> ListType:
    """Pick the deck list type; ordered wins over plain, bullet is the default."""
    if flags & ListFlags.ORDERED:
        return LIST_TYPE_NUMBER
    if flags & ListFlags.PLAIN_ITEM:
        return LIST_TYPE_PLAIN
    return LIST_TYPE_BULLET


__all__ = [
    "ListFlags",
    "RenderState",
    "break_slide",
    "enter_block_quote",
    "enter_code_block",
    "enter_heading",
    "enter_list",
    "enter_paragraph",
    "initial_state",
    "leave_heading",
    "leave_paragraph",
    "list_type",
]
