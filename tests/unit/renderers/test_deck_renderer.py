#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the deck renderer.

Tests cover:
- Document and slide structure
- Headings and the cursor
- Paragraphs and empty-content discard
- Lists (bullet, number, plain, nested)
- Block quotes
- Code blocks
- Images and placement from alt text
- Text escaping and entities
- Ignored node kinds
- Options and output destinations

"""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

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
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2deck.exceptions import InvalidOptionsError
from md2deck.options import DeckRendererOptions, MarkdownParserOptions
from md2deck.renderers.deck import IGNORED_NODE_TYPES, DeckRenderer

EMPTY_DECK = "<deck>\n<slide>\n</slide>\n</deck>\n"


def deck(*body: str) -> str:
    """Wrap body markup in a single-slide deck."""
    return "<deck>\n<slide>\n" + "".join(body) + "</slide>\n</deck>\n"


def item(*children) -> ListItem:
    return ListItem(children=[Paragraph(content=list(children))])


@pytest.mark.unit
class TestDeckDocument:
    """Tests for deck and slide structure."""

    def test_empty_document(self) -> None:
        """Test rendering empty document."""
        renderer = DeckRenderer()
        result = renderer.render_to_string(Document())

        assert result == EMPTY_DECK
        assert renderer.state.slide_count == 0

    def test_two_slides(self, two_slide_document: Document) -> None:
        """Test title, body, break and subtitle."""
        renderer = DeckRenderer()
        result = renderer.render_to_string(two_slide_document)

        assert result == (
            "<deck>\n<slide>\n"
            '<text xp="10.00" yp="90.00" sp="4.00" type="">Title</text>\n'
            '<text xp="10.00" yp="80.00" sp="2.00" type="block">Body</text>\n'
            "</slide>\n<slide>\n"
            '<text xp="10.00" yp="40.00" sp="3.00" type="">Next</text>\n'
            "</slide>\n</deck>\n"
        )
        assert renderer.state.slide_count == 1

    def test_slide_count_per_break(self) -> None:
        """Test that each thematic break adds exactly one slide."""
        doc = Document(children=[ThematicBreak(), Paragraph(content=[Text(content="x")]), ThematicBreak()])
        renderer = DeckRenderer()
        result = renderer.render_to_string(doc)

        assert renderer.state.slide_count == 2
        assert result.count("<slide>\n") == 3
        assert result.count("</slide>\n") == 3

    def test_break_resets_cursor(self) -> None:
        """Test the cursor returns to the top left on a new slide."""
        doc = Document(
            children=[
                BlockQuote(children=[Paragraph(content=[Text(content="q")])]),
                Paragraph(content=[Text(content="a")]),
                ThematicBreak(),
                Paragraph(content=[Text(content="b")]),
            ]
        )
        result = DeckRenderer().render_to_string(doc)

        assert '<text xp="15.00" yp="90.00" sp="2.00" type="block">a</text>\n' in result
        assert result.endswith(
            '</slide>\n<slide>\n<text xp="10.00" yp="90.00" sp="2.00" type="block">b</text>\n</slide>\n</deck>\n'
        )

    def test_include_canvas(self) -> None:
        """Test the optional canvas element."""
        renderer = DeckRenderer(DeckRendererOptions(include_canvas=True, canvas_width=1920, canvas_height=1080))
        result = renderer.render_to_string(Document())

        assert result == '<deck>\n<canvas width="1920" height="1080"/>\n<slide>\n</slide>\n</deck>\n'

    def test_state_fresh_for_each_render(self, two_slide_document: Document) -> None:
        """Test that renders do not share layout state."""
        renderer = DeckRenderer()
        first = renderer.render_to_string(two_slide_document)
        second = renderer.render_to_string(two_slide_document)

        assert first == second
        assert renderer.state.slide_count == 1


@pytest.mark.unit
class TestDeckHeadings:
    """Tests for heading rendering."""

    def test_heading_advances_cursor(self) -> None:
        """Test the step after a rendered heading."""
        renderer = DeckRenderer()
        renderer.render_to_string(Document(children=[Heading(level=1, content=[Text(content="T")])]))

        assert renderer.state.cursor == (10.0, 80.0, 4.0)

    def test_empty_heading_discarded(self) -> None:
        """Test that an empty heading leaves no markup."""
        renderer = DeckRenderer()
        result = renderer.render_to_string(Document(children=[Heading(level=1, content=[])]))

        assert result == EMPTY_DECK
        # Entry placement stays, the step does not happen
        assert renderer.state.cursor == (10.0, 90.0, 4.0)

    def test_heading_with_only_ignored_content_discarded(self) -> None:
        """Test that ignored inline content counts as empty."""
        doc = Document(children=[Heading(level=2, content=[Emphasis(content=[Text(content="x")])])])
        renderer = DeckRenderer()

        assert renderer.render_to_string(doc) == EMPTY_DECK
        assert renderer.state.cursor == (10.0, 40.0, 3.0)

    @pytest.mark.parametrize("level", [0, 3, 6, 7, 12])
    def test_other_levels_bare_text(self, level: int) -> None:
        """Test headings without positional attributes."""
        doc = Document(
            children=[
                Paragraph(content=[Text(content="p")]),
                Heading(level=level, content=[Text(content="Sub")]),
                Paragraph(content=[Text(content="after")]),
            ]
        )
        renderer = DeckRenderer()
        result = renderer.render_to_string(doc)

        assert "<text>Sub</text>\n" in result
        assert '<text xp="10.00" yp="60.00" sp="2.00" type="block">after</text>\n' in result

    def test_heading_resets_indent(self) -> None:
        """Test that headings return to the left margin."""
        doc = Document(
            children=[
                BlockQuote(children=[Paragraph(content=[Text(content="q")])]),
                Heading(level=1, content=[Text(content="T")]),
            ]
        )
        result = DeckRenderer().render_to_string(doc)

        assert '<text xp="10.00" yp="90.00" sp="4.00" type="">T</text>\n' in result

    def test_heading_text_escaped(self) -> None:
        """Test escaping in headings."""
        doc = Document(children=[Heading(level=1, content=[Text(content="A & B")])])

        assert "A &amp; B</text>" in DeckRenderer().render_to_string(doc)

    def test_negative_level_rejected(self) -> None:
        """Test heading level validation."""
        with pytest.raises(ValueError, match="non-negative"):
            Heading(level=-1, content=[Text(content="x")])


@pytest.mark.unit
class TestDeckParagraphs:
    """Tests for paragraph rendering."""

    def test_paragraph_steps_down(self) -> None:
        """Test consecutive paragraphs."""
        doc = Document(children=[Paragraph(content=[Text(content="one")]), Paragraph(content=[Text(content="two")])])

        assert DeckRenderer().render_to_string(doc) == deck(
            '<text xp="10.00" yp="90.00" sp="2.00" type="block">one</text>\n',
            '<text xp="10.00" yp="70.00" sp="2.00" type="block">two</text>\n',
        )

    def test_empty_paragraph_discarded(self) -> None:
        """Test that an empty paragraph leaves no markup and no step."""
        renderer = DeckRenderer()
        result = renderer.render_to_string(Document(children=[Paragraph(content=[])]))

        assert result == EMPTY_DECK
        assert renderer.state.y == 90.0

    def test_paragraph_escapes_text(self) -> None:
        """Test that paragraph text is escaped."""
        doc = Document(children=[Paragraph(content=[Text(content='a < b > "c"')])])

        assert 'a &lt; b &gt; &quot;c&quot;</text>' in DeckRenderer().render_to_string(doc)

    def test_paragraph_drops_inline_formatting(self) -> None:
        """Test that formatted runs are not rendered."""
        doc = Document(
            children=[
                Paragraph(
                    content=[
                        Text(content="keep "),
                        Strong(content=[Text(content="bold")]),
                        Link(url="http://x", content=[Text(content="link")]),
                        Text(content="end"),
                    ]
                )
            ]
        )

        assert ">keep end</text>" in DeckRenderer().render_to_string(doc)

    def test_paragraph_spacing_after_code(self) -> None:
        """Test that paragraphs restore the default size."""
        doc = Document(children=[CodeBlock(content="x"), Paragraph(content=[Text(content="p")])])

        assert '<text xp="10.00" yp="90.00" sp="2.00" type="block">p</text>\n' in DeckRenderer().render_to_string(doc)


@pytest.mark.unit
class TestDeckLists:
    """Tests for list rendering."""

    def test_bullet_list(self) -> None:
        """Test an unordered list."""
        doc = Document(children=[List(ordered=False, items=[item(Text(content="one")), item(Text(content="two"))])])

        assert DeckRenderer().render_to_string(doc) == deck(
            '<list xp="10.00" yp="90.00" sp="2.00" type="bullet">\n',
            "<li>one</li>\n",
            "<li>two</li>\n",
            "</list>\n",
        )

    def test_ordered_list(self) -> None:
        """Test list type for ordered lists."""
        doc = Document(children=[List(ordered=True, items=[item(Text(content="one"))])])

        assert 'type="number">\n' in DeckRenderer().render_to_string(doc)

    def test_plain_list(self) -> None:
        """Test list type for plain lists."""
        doc = Document(children=[List(ordered=False, plain=True, items=[item(Text(content="one"))])])

        assert 'type="plain">\n' in DeckRenderer().render_to_string(doc)

    def test_ordered_beats_plain(self) -> None:
        """Test list type precedence."""
        doc = Document(children=[List(ordered=True, plain=True, items=[item(Text(content="one"))])])

        assert 'type="number">\n' in DeckRenderer().render_to_string(doc)

    def test_empty_list_discarded(self) -> None:
        """Test that a list without items leaves no markup."""
        doc = Document(children=[List(ordered=False, items=[])])

        assert DeckRenderer().render_to_string(doc) == EMPTY_DECK

    def test_list_item_text_not_escaped(self) -> None:
        """Test that list item text is written as is."""
        doc = Document(
            children=[
                List(ordered=False, items=[item(Text(content="a < b"))]),
                Paragraph(content=[Text(content="a < b")]),
            ]
        )
        result = DeckRenderer().render_to_string(doc)

        assert "<li>a < b</li>\n" in result
        assert ">a &lt; b</text>" in result

    def test_list_does_not_move_cursor(self) -> None:
        """Test that lists keep the vertical position."""
        doc = Document(
            children=[
                List(ordered=False, items=[item(Text(content="one"))]),
                Paragraph(content=[Text(content="p")]),
            ]
        )

        assert '<text xp="10.00" yp="90.00" sp="2.00" type="block">p</text>\n' in DeckRenderer().render_to_string(doc)

    def test_nested_list(self) -> None:
        """Test a nested list inside the enclosing list."""
        nested = List(ordered=True, items=[item(Text(content="inner"))])
        doc = Document(
            children=[
                List(
                    ordered=False,
                    items=[ListItem(children=[Paragraph(content=[Text(content="outer")]), nested])],
                )
            ]
        )

        assert DeckRenderer().render_to_string(doc) == deck(
            '<list xp="10.00" yp="90.00" sp="2.00" type="bullet">\n',
            "<li>outer</li>\n",
            '<list xp="10.00" yp="90.00" sp="2.00" type="number">\n',
            "<li>inner</li>\n",
            "</list>\n",
            "</list>\n",
        )

    def test_item_paragraphs_joined(self) -> None:
        """Test loose items with several paragraphs."""
        doc = Document(
            children=[
                List(
                    ordered=False,
                    items=[
                        ListItem(
                            children=[
                                Paragraph(content=[Text(content="first")]),
                                Paragraph(content=[Text(content="second")]),
                            ]
                        )
                    ],
                )
            ]
        )

        assert "<li>first second</li>\n" in DeckRenderer().render_to_string(doc)

    def test_escaping_restored_after_list(self) -> None:
        """Test that escaping resumes after a list item."""
        doc = Document(
            children=[
                List(ordered=False, items=[item(Text(content="&"))]),
                Heading(level=1, content=[Text(content="&")]),
            ]
        )

        assert ">&amp;</text>" in DeckRenderer().render_to_string(doc)


@pytest.mark.unit
class TestDeckBlockQuotes:
    """Tests for block quote rendering."""

    def test_block_quote(self) -> None:
        """Test an indented block text element."""
        doc = Document(children=[BlockQuote(children=[Paragraph(content=[Text(content="quoted")])])])
        renderer = DeckRenderer()

        assert renderer.render_to_string(doc) == deck(
            '<text xp="15.00" yp="90.00" sp="2.00" type="block">quoted</text>\n'
        )
        assert renderer.state.cursor == (15.0, 90.0, 2.0)

    def test_block_quote_escapes(self) -> None:
        """Test escaping inside block quotes."""
        doc = Document(children=[BlockQuote(children=[Paragraph(content=[Text(content="<q>")])])])

        assert ">&lt;q&gt;</text>" in DeckRenderer().render_to_string(doc)

    def test_empty_block_quote_discarded_indent_kept(self) -> None:
        """Test that an empty quote emits nothing but still indents."""
        renderer = DeckRenderer()
        result = renderer.render_to_string(Document(children=[BlockQuote(children=[])]))

        assert result == EMPTY_DECK
        assert renderer.state.x == 15.0

    def test_multi_paragraph_quote(self) -> None:
        """Test paragraphs joined inside one element."""
        doc = Document(
            children=[
                BlockQuote(
                    children=[Paragraph(content=[Text(content="one")]), Paragraph(content=[Text(content="two")])]
                )
            ]
        )

        assert ">one\ntwo</text>\n" in DeckRenderer().render_to_string(doc)

    def test_heading_and_list_flattened_to_text(self) -> None:
        """Test that block children inside a quote become text and keep the cursor."""
        doc = Document(
            children=[
                BlockQuote(
                    children=[
                        Heading(level=1, content=[Text(content="Quoted head")]),
                        List(ordered=False, items=[item(Text(content="a")), item(Text(content="b"))]),
                    ]
                ),
                Paragraph(content=[Text(content="after")]),
            ]
        )
        renderer = DeckRenderer()

        assert renderer.render_to_string(doc) == deck(
            '<text xp="15.00" yp="90.00" sp="2.00" type="block">Quoted head\na\nb</text>\n',
            '<text xp="15.00" yp="90.00" sp="2.00" type="block">after</text>\n',
        )
        assert renderer.state.cursor == (15.0, 70.0, 2.0)

    def test_code_and_nested_quote_flattened(self) -> None:
        """Test code text and nested quotes inside a quote."""
        doc = Document(
            children=[
                BlockQuote(
                    children=[
                        CodeBlock(content="x < 1\n"),
                        BlockQuote(children=[Paragraph(content=[Text(content="inner")])]),
                        ThematicBreak(),
                    ]
                )
            ]
        )
        renderer = DeckRenderer()

        assert renderer.render_to_string(doc) == deck(
            '<text xp="15.00" yp="90.00" sp="2.00" type="block">x &lt; 1\ninner</text>\n'
        )
        assert renderer.state.slide_count == 0


@pytest.mark.unit
class TestDeckCodeBlocks:
    """Tests for code block rendering."""

    def test_code_block(self) -> None:
        """Test code placement, size and escaping."""
        doc = Document(children=[CodeBlock(content="if a < b:\n    pass\n", language="python")])

        assert DeckRenderer().render_to_string(doc) == deck(
            '<text xp="10.00" yp="90.00" sp="1.60" type="code">if a &lt; b:\n    pass\n</text>\n'
        )

    def test_empty_code_block_still_written(self) -> None:
        """Test that code blocks are not discarded."""
        doc = Document(children=[CodeBlock(content="")])

        assert DeckRenderer().render_to_string(doc) == deck('<text xp="10.00" yp="90.00" sp="1.60" type="code"></text>\n')

    def test_code_block_inside_list_item_escaped(self) -> None:
        """Test that code stays escaped where text is not."""
        doc = Document(children=[List(ordered=False, items=[ListItem(children=[CodeBlock(content="<x>")])])])

        assert "&lt;x&gt;" in DeckRenderer().render_to_string(doc)


@pytest.mark.unit
class TestDeckImages:
    """Tests for image rendering."""

    def test_placement_from_alt_text(self) -> None:
        """Test four alt text fields."""
        doc = Document(children=[Image(url="chart.png", alt_text="10,20,30,40")])

        assert DeckRenderer().render_to_string(doc) == deck(
            '<image name="chart.png" xp="10" yp="20" width="30" height="40" />\n'
        )

    @pytest.mark.parametrize("alt_text", ["", "1,2", "logo", "1,2,3,4,5"])
    def test_default_placement(self, alt_text: str) -> None:
        """Test the fallback placement."""
        doc = Document(children=[Image(url="a.png", alt_text=alt_text)])

        assert '<image name="a.png" xp="50" yp="50" width="100" height="100" />\n' in DeckRenderer().render_to_string(
            doc
        )

    def test_custom_default_placement(self) -> None:
        """Test configured fallback placement."""
        renderer = DeckRenderer(DeckRendererOptions(image_defaults=("0", "0", "25", "25")))
        result = renderer.render_to_string(Document(children=[Image(url="a.png")]))

        assert 'xp="0" yp="0" width="25" height="25"' in result

    def test_caption_from_title(self) -> None:
        """Test the caption attribute."""
        doc = Document(children=[Image(url="a.png", alt_text="1,2,3,4", title='Q1 & "Q2"')])

        assert 'height="4" caption="Q1 &amp; &quot;Q2&quot;" />\n' in DeckRenderer().render_to_string(doc)

    @pytest.mark.parametrize("title", [None, ""])
    def test_no_caption_without_title(self, title) -> None:
        """Test that empty titles add no caption."""
        doc = Document(children=[Image(url="a.png", title=title)])

        assert "caption" not in DeckRenderer().render_to_string(doc)

    def test_url_and_fields_escaped(self) -> None:
        """Test escaping of name and placement values."""
        doc = Document(children=[Image(url='a"b&c.png', alt_text="<1,2,3,4")])
        result = DeckRenderer().render_to_string(doc)

        assert 'name="a&quot;b&amp;c.png"' in result
        assert 'xp="&lt;1"' in result

    def test_image_does_not_move_cursor(self) -> None:
        """Test that images leave the layout state alone."""
        renderer = DeckRenderer()
        renderer.render_to_string(Document(children=[Image(url="a.png", alt_text="1,2,3,4")]))

        assert renderer.state.cursor == (10.0, 90.0, 2.0)

    def test_image_inside_paragraph(self) -> None:
        """Test an image as paragraph content."""
        doc = Document(children=[Paragraph(content=[Image(url="a.png", alt_text="1,2,3,4")])])

        assert DeckRenderer().render_to_string(doc) == deck(
            '<text xp="10.00" yp="90.00" sp="2.00" type="block">'
            '<image name="a.png" xp="1" yp="2" width="3" height="4" />\n'
            "</text>\n"
        )


@pytest.mark.unit
class TestDeckInline:
    """Tests for text and entity rendering."""

    def test_entity_verbatim(self) -> None:
        """Test that entities are not escaped."""
        doc = Document(children=[Paragraph(content=[Text(content="(c) "), Entity(content="&copy;")])])

        assert ">(c) &copy;</text>" in DeckRenderer().render_to_string(doc)

    def test_entity_alone_is_content(self) -> None:
        """Test that an entity keeps its paragraph."""
        doc = Document(children=[Paragraph(content=[Entity(content="&amp;")])])

        assert ">&amp;</text>" in DeckRenderer().render_to_string(doc)


@pytest.mark.unit
class TestDeckIgnoredNodes:
    """Tests for node kinds without deck markup."""

    @pytest.mark.parametrize(
        "node",
        [
            Table(header=TableRow(cells=[TableCell(content=[Text(content="h")])], is_header=True)),
            HTMLBlock(content="<div>x</div>"),
            Comment(content="note"),
            FootnoteDefinition(identifier="1", content=[Paragraph(content=[Text(content="f")])]),
        ],
    )
    def test_ignored_blocks(self, node) -> None:
        """Test ignored block nodes."""
        renderer = DeckRenderer()

        assert renderer.render_to_string(Document(children=[node])) == EMPTY_DECK
        assert renderer.state.cursor == (10.0, 90.0, 2.0)

    @pytest.mark.parametrize(
        "node",
        [
            Emphasis(content=[Text(content="x")]),
            Strong(content=[Text(content="x")]),
            Strikethrough(content=[Text(content="x")]),
            Code(content="x"),
            Link(url="u", content=[Text(content="x")]),
            LineBreak(),
            HTMLInline(content="<b>"),
            FootnoteReference(identifier="1"),
        ],
    )
    def test_ignored_inlines(self, node) -> None:
        """Test ignored inline nodes."""
        doc = Document(children=[Paragraph(content=[node])])

        assert DeckRenderer().render_to_string(doc) == EMPTY_DECK

    def test_ignored_types_declared(self) -> None:
        """Test the ignored kinds tuple."""
        assert Table in IGNORED_NODE_TYPES
        assert Paragraph not in IGNORED_NODE_TYPES
        assert Image not in IGNORED_NODE_TYPES


@pytest.mark.unit
class TestDeckRendererApi:
    """Tests for construction and output destinations."""

    def test_wrong_options_type(self) -> None:
        """Test that other options classes are rejected."""
        with pytest.raises(InvalidOptionsError):
            DeckRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_custom_layout(self) -> None:
        """Test layout options flowing into markup."""
        options = DeckRendererOptions(left_margin=5, top=95, title_spacing=5)
        doc = Document(children=[Heading(level=1, content=[Text(content="T")])])

        assert '<text xp="5.00" yp="95.00" sp="5.00" type="">T</text>\n' in DeckRenderer(options).render_to_string(doc)

    def test_render_to_file(self, tmp_path: Path, two_slide_document: Document) -> None:
        """Test writing to a path."""
        out = tmp_path / "deck.xml"
        renderer = DeckRenderer()
        renderer.render(two_slide_document, out)

        assert out.read_text(encoding="utf-8") == renderer.render_to_string(two_slide_document)

    def test_render_to_text_stream(self, two_slide_document: Document) -> None:
        """Test writing to a text stream."""
        buffer = StringIO()
        DeckRenderer().render(two_slide_document, buffer)

        assert buffer.getvalue().startswith("<deck>\n<slide>\n")

    def test_render_to_binary_stream(self, two_slide_document: Document) -> None:
        """Test writing to a binary stream."""
        buffer = BytesIO()
        DeckRenderer().render(two_slide_document, buffer)

        assert buffer.getvalue() == DeckRenderer().render_to_bytes(two_slide_document)

    def test_render_to_bytes(self) -> None:
        """Test UTF-8 output."""
        doc = Document(children=[Paragraph(content=[Text(content="café")])])

        assert "café".encode("utf-8") in DeckRenderer().render_to_bytes(doc)
