#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2deck.

This module centralizes the layout constants, markup vocabulary and file
discovery names used across md2deck. Layout constants are the defaults of
``DeckRendererOptions`` and can be overridden per render.

Constants are organized by category:
1. Type Definitions
2. Deck Layout Defaults
3. Deck Markup Vocabulary
4. Markdown Parsing
5. Configuration Discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ListType = Literal["number", "plain", "bullet"]
TextType = Literal["", "block", "code"]

# =============================================================================
# Deck Layout Defaults
# =============================================================================

# Cursor positions are percentages of the canvas; (0, 0) is the bottom left.
DEFAULT_LEFT_MARGIN = 10.0
DEFAULT_TOP = 90.0
DEFAULT_SUBTITLE_TOP = 40.0

DEFAULT_SPACING = 2.0
DEFAULT_TITLE_SPACING = 4.0
DEFAULT_SUBTITLE_SPACING = 3.0
DEFAULT_CODE_SPACING = 1.6

DEFAULT_HEADING_STEP = 10.0
DEFAULT_PARAGRAPH_STEP = 20.0
DEFAULT_QUOTE_INDENT = 5.0

DEFAULT_CANVAS_WIDTH = 1024.0
DEFAULT_CANVAS_HEIGHT = 768.0

# xp, yp, width, height used when the image alt text is not "x,y,w,h"
DEFAULT_IMAGE_PLACEMENT: tuple[str, str, str, str] = ("50", "50", "100", "100")
IMAGE_PLACEMENT_FIELDS = 4

DEFAULT_INCLUDE_CANVAS = False

# =============================================================================
# Deck Markup Vocabulary
# =============================================================================

DECK_OPEN = "<deck>\n"
DECK_CLOSE = "</deck>\n"
SLIDE_OPEN = "<slide>\n"
SLIDE_CLOSE = "</slide>\n"
TEXT_CLOSE = "</text>\n"
LIST_CLOSE = "</list>\n"

TEXT_TYPE_HEADING: TextType = ""
TEXT_TYPE_BLOCK: TextType = "block"
TEXT_TYPE_CODE: TextType = "code"

LIST_TYPE_NUMBER: ListType = "number"
LIST_TYPE_PLAIN: ListType = "plain"
LIST_TYPE_BULLET: ListType = "bullet"

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PLAIN_LIST_MARKERS = "+"
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_FOOTNOTES = True

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_FILENAMES = [".md2deck.toml", ".md2deck.yaml", ".md2deck.yml", ".md2deck.json"]
PYPROJECT_TOOL_SECTION = "md2deck"
