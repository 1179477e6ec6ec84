#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/md2deck/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from md2deck.constants import (
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PLAIN_LIST_MARKERS,
)
from md2deck.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    plain_list_markers : str, default "+"
        Bullet characters that mark an unordered list as a plain (marker-less)
        deck list. An empty string disables plain lists.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnote references and definitions"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)"},
    )
    plain_list_markers: str = field(
        default=DEFAULT_PLAIN_LIST_MARKERS,
        metadata={"help": "Bullet characters that produce plain deck lists"},
    )

    def __post_init__(self) -> None:
        """Validate the plain list markers.

        Raises
        ------
        ValueError
            If a marker is not one of the Markdown bullet characters.

        """
        super().__post_init__()
        invalid = set(self.plain_list_markers) - set("-*+")
        if invalid:
            raise ValueError(f"plain_list_markers may only contain '-', '*' or '+', got {sorted(invalid)}")
