#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for md2deck options classes."""

from dataclasses import FrozenInstanceError

import pytest

from md2deck.options import DeckRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestDeckRendererOptions:
    """Tests for DeckRendererOptions."""

    def test_defaults(self) -> None:
        """Test the default layout constants."""
        options = DeckRendererOptions()

        assert (options.left_margin, options.top, options.subtitle_top) == (10.0, 90.0, 40.0)
        assert (options.default_spacing, options.title_spacing, options.subtitle_spacing) == (2.0, 4.0, 3.0)
        assert options.code_spacing == 1.6
        assert (options.heading_step, options.paragraph_step, options.quote_indent) == (10.0, 20.0, 5.0)
        assert (options.canvas_width, options.canvas_height) == (1024.0, 768.0)
        assert options.image_defaults == ("50", "50", "100", "100")
        assert options.include_canvas is False

    def test_frozen(self) -> None:
        """Test that options cannot be mutated."""
        options = DeckRendererOptions()

        with pytest.raises(FrozenInstanceError):
            options.top = 50.0  # type: ignore[misc]

    def test_create_updated(self) -> None:
        """Test deriving a modified copy."""
        options = DeckRendererOptions()
        updated = options.create_updated(top=80.0, include_canvas=True)

        assert updated.top == 80.0
        assert updated.include_canvas is True
        assert options.top == 90.0

    @pytest.mark.parametrize("name", ["default_spacing", "code_spacing", "heading_step", "paragraph_step", "quote_indent"])
    def test_negative_values_rejected(self, name: str) -> None:
        """Test validation of non-negative fields."""
        with pytest.raises(ValueError, match=name):
            DeckRendererOptions(**{name: -1.0})

    @pytest.mark.parametrize("size", [{"canvas_width": 0}, {"canvas_height": -10}])
    def test_canvas_must_be_positive(self, size: dict) -> None:
        """Test canvas size validation."""
        with pytest.raises(ValueError, match="canvas"):
            DeckRendererOptions(**size)

    def test_image_defaults_need_four_values(self) -> None:
        """Test image placement validation."""
        with pytest.raises(ValueError, match="image_defaults"):
            DeckRendererOptions(image_defaults=("1", "2"))  # type: ignore[arg-type]

    def test_image_defaults_coerced_to_strings(self) -> None:
        """Test that lists of numbers from config files are normalized."""
        options = DeckRendererOptions(image_defaults=[0, 0, 100, 50])  # type: ignore[arg-type]

        assert options.image_defaults == ("0", "0", "100", "50")

    def test_field_names(self) -> None:
        """Test listing option field names."""
        assert "left_margin" in DeckRendererOptions.field_names()
        assert "include_canvas" in DeckRendererOptions.field_names()


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self) -> None:
        """Test default parser options."""
        options = MarkdownParserOptions()

        assert options.plain_list_markers == "+"
        assert options.parse_tables is True
        assert options.parse_footnotes is True
        assert options.parse_strikethrough is True

    def test_plain_markers_accept_bullets(self) -> None:
        """Test all bullet characters and the empty string."""
        assert MarkdownParserOptions(plain_list_markers="-*+").plain_list_markers == "-*+"
        assert MarkdownParserOptions(plain_list_markers="").plain_list_markers == ""

    def test_plain_markers_reject_other_characters(self) -> None:
        """Test that non-bullet characters are rejected."""
        with pytest.raises(ValueError, match="plain_list_markers"):
            MarkdownParserOptions(plain_list_markers="+x")
