#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2deck/options/deck.py
"""Configuration options for deck rendering.

All layout constants of the deck renderer live here so a deck can be tuned
without touching the layout code. Positions are percentages of the canvas
with the origin in the bottom left corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2deck.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_CODE_SPACING,
    DEFAULT_HEADING_STEP,
    DEFAULT_IMAGE_PLACEMENT,
    DEFAULT_INCLUDE_CANVAS,
    DEFAULT_LEFT_MARGIN,
    DEFAULT_PARAGRAPH_STEP,
    DEFAULT_QUOTE_INDENT,
    DEFAULT_SPACING,
    DEFAULT_SUBTITLE_SPACING,
    DEFAULT_SUBTITLE_TOP,
    DEFAULT_TITLE_SPACING,
    DEFAULT_TOP,
    IMAGE_PLACEMENT_FIELDS,
)
from md2deck.options.base import BaseRendererOptions


@dataclass(frozen=True)
class DeckRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-deck rendering.

    Parameters
    ----------
    left_margin : float, default 10.0
        Horizontal cursor position restored by headers and slide breaks.
    top : float, default 90.0
        Vertical position of level-1 headers and of the cursor on a new slide.
    subtitle_top : float, default 40.0
        Vertical position of level-2 headers.
    default_spacing : float, default 2.0
        Text size for paragraphs, lists and the start of each slide.
    title_spacing : float, default 4.0
        Text size for level-1 headers.
    subtitle_spacing : float, default 3.0
        Text size for level-2 headers.
    code_spacing : float, default 1.6
        Text size for code blocks.
    heading_step : float, default 10.0
        Downward cursor move after a rendered header.
    paragraph_step : float, default 20.0
        Downward cursor move after a rendered paragraph.
    quote_indent : float, default 5.0
        Rightward cursor move applied by each block quote.
    canvas_width : float, default 1024.0
        Logical canvas width.
    canvas_height : float, default 768.0
        Logical canvas height.
    image_defaults : tuple of 4 str, default ("50", "50", "100", "100")
        xp, yp, width and height used when an image's alt text is not
        a four-field ``x,y,width,height`` list.
    include_canvas : bool, default False
        Emit a ``<canvas width=".." height=".."/>`` element after ``<deck>``.

    Examples
    --------
    Wider decks with smaller paragraphs:
        >>> options = DeckRendererOptions(canvas_width=1920, canvas_height=1080, paragraph_step=12)
        >>> renderer = DeckRenderer(options)

    """

    left_margin: float = field(
        default=DEFAULT_LEFT_MARGIN,
        metadata={"help": "Horizontal position restored by headers and slide breaks", "type": float},
    )
    top: float = field(
        default=DEFAULT_TOP,
        metadata={"help": "Vertical position of level-1 headers and new slides", "type": float},
    )
    subtitle_top: float = field(
        default=DEFAULT_SUBTITLE_TOP,
        metadata={"help": "Vertical position of level-2 headers", "type": float},
    )
    default_spacing: float = field(
        default=DEFAULT_SPACING,
        metadata={"help": "Text size for paragraphs, lists and new slides", "type": float},
    )
    title_spacing: float = field(
        default=DEFAULT_TITLE_SPACING,
        metadata={"help": "Text size for level-1 headers", "type": float},
    )
    subtitle_spacing: float = field(
        default=DEFAULT_SUBTITLE_SPACING,
        metadata={"help": "Text size for level-2 headers", "type": float},
    )
    code_spacing: float = field(
        default=DEFAULT_CODE_SPACING,
        metadata={"help": "Text size for code blocks", "type": float},
    )
    heading_step: float = field(
        default=DEFAULT_HEADING_STEP,
        metadata={"help": "Downward move after a rendered header", "type": float},
    )
    paragraph_step: float = field(
        default=DEFAULT_PARAGRAPH_STEP,
        metadata={"help": "Downward move after a rendered paragraph", "type": float},
    )
    quote_indent: float = field(
        default=DEFAULT_QUOTE_INDENT,
        metadata={"help": "Rightward move applied by each block quote", "type": float},
    )
    canvas_width: float = field(
        default=DEFAULT_CANVAS_WIDTH,
        metadata={"help": "Logical canvas width", "type": float},
    )
    canvas_height: float = field(
        default=DEFAULT_CANVAS_HEIGHT,
        metadata={"help": "Logical canvas height", "type": float},
    )
    image_defaults: tuple[str, str, str, str] = field(
        default=DEFAULT_IMAGE_PLACEMENT,
        metadata={"help": "Fallback xp, yp, width, height for images"},
    )
    include_canvas: bool = field(
        default=DEFAULT_INCLUDE_CANVAS,
        metadata={"help": "Emit a canvas element with the canvas size"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for the layout options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        for name in (
            "default_spacing",
            "title_spacing",
            "subtitle_spacing",
            "code_spacing",
            "heading_step",
            "paragraph_step",
            "quote_indent",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.canvas_width}x{self.canvas_height}")

        if len(self.image_defaults) != IMAGE_PLACEMENT_FIELDS:
            raise ValueError(
                f"image_defaults needs {IMAGE_PLACEMENT_FIELDS} values (xp, yp, width, height), "
                f"got {len(self.image_defaults)}"
            )
        # Config files deliver lists; keep the field hashable.
        object.__setattr__(self, "image_defaults", tuple(str(v) for v in self.image_defaults))
