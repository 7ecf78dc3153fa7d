"""Tests for building the document tree from markdown text."""

import pytest

from mdtree.document import (
    Blockquote,
    Break,
    CodeBlock,
    Delete,
    Emphasis,
    Heading,
    Image,
    InlineCode,
    Link,
    List,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
    build_sample_document,
    markdown_to_document,
    parse_markdown,
    render,
    transform_to_document,
)
from mdtree.exceptions import UnsupportedNodeError


def blocks(markdown: str, **kwargs):
    return markdown_to_document(markdown, **kwargs).children


def inlines(markdown: str):
    paragraph = blocks(markdown)[0]
    assert isinstance(paragraph, Paragraph)
    return paragraph.children


class TestParseMarkdown:
    def test_parse_simple_text(self):
        ast = parse_markdown("Hello world")
        assert ast.type == "root"
        assert ast.children[0].type == "paragraph"

    def test_strikethrough_enabled(self):
        ast = parse_markdown("~~gone~~")
        inline = ast.children[0].children[0]
        assert inline.children[0].type == "s"


class TestBlocks:
    def test_heading(self):
        heading = blocks("### Title")[0]
        assert isinstance(heading, Heading)
        assert heading.depth == 3
        assert heading.children == [Text(value="Title")]

    def test_paragraphs(self):
        result = blocks("one\n\ntwo")
        assert [type(b) for b in result] == [Paragraph, Paragraph]

    def test_fenced_code_with_info(self):
        code = blocks("```python title=x.py\nprint(1)\n```")[0]
        assert code == CodeBlock(lang="python", meta="title=x.py", value="print(1)")

    def test_fenced_code_without_info(self):
        assert blocks("```\nx\n```")[0] == CodeBlock(value="x")

    def test_indented_code(self):
        assert blocks("    indented\n")[0] == CodeBlock(value="indented")

    def test_thematic_break(self):
        result = blocks("a\n\n---\n\nb")
        assert isinstance(result[1], ThematicBreak)

    def test_blockquote(self):
        quote = blocks("> quoted\n>\n> more")[0]
        assert isinstance(quote, Blockquote)
        assert len(quote.children) == 2


class TestLists:
    def test_bullet_list(self):
        lst = blocks("- a\n- b")[0]
        assert isinstance(lst, List)
        assert lst.ordered is False
        assert lst.start is None
        assert lst.spread is False
        assert len(lst.children) == 2

    def test_ordered_start(self):
        lst = blocks("3. a\n4. b")[0]
        assert lst.ordered is True
        assert lst.start == 3

    def test_ordered_default_start_left_unset(self):
        assert blocks("1. a")[0].start is None

    def test_loose_list_is_spread(self):
        assert blocks("- a\n\n- b")[0].spread is True

    def test_task_items(self):
        lst = blocks("- [x] done\n- [ ] todo\n- [X] shouted\n- plain")[0]
        assert [item.checked for item in lst.children] == [True, False, True, None]
        assert lst.children[0].children[0].children == [Text(value="done")]

    def test_task_marker_before_formatting(self):
        item = blocks("- [ ] **bold** task")[0].children[0]
        assert item.checked is False
        assert isinstance(item.children[0].children[0], Strong)

    def test_brackets_without_space_are_text(self):
        item = blocks("- [x]done")[0].children[0]
        assert item.checked is None

    def test_nested_list(self):
        lst = blocks("- parent\n    - child")[0]
        nested = lst.children[0].children[1]
        assert isinstance(nested, List)
        assert nested.children[0].children[0].children == [Text(value="child")]


class TestInlines:
    def test_emphasis_and_strong(self):
        result = inlines("Some *soft* and **loud** text")
        assert result == [
            Text(value="Some "),
            Emphasis(children=[Text(value="soft")]),
            Text(value=" and "),
            Strong(children=[Text(value="loud")]),
            Text(value=" text"),
        ]

    def test_delete(self):
        assert inlines("~~gone~~") == [Delete(children=[Text(value="gone")])]

    def test_inline_code(self):
        assert inlines("`x = 1`") == [InlineCode(value="x = 1")]

    def test_link_with_title(self):
        assert inlines('[site](https://example.com "Home")') == [
            Link(url="https://example.com", title="Home", children=[Text(value="site")])
        ]

    def test_image(self):
        assert inlines("![a cat](cat.png)") == [Image(url="cat.png", alt="a cat")]

    def test_softbreak_merged_into_text(self):
        assert inlines("line one\nline two") == [Text(value="line one\nline two")]

    def test_hardbreak(self):
        assert inlines("one  \ntwo") == [Text(value="one"), Break(), Text(value="two")]

    def test_escaped_characters_become_literal(self):
        assert inlines("a \\*literal\\* star") == [Text(value="a *literal* star")]

    @pytest.mark.parametrize("source", ["&lt;div&gt;", "fish &amp; chips", "&#42;not emphasis&#42;"])
    def test_entities_keep_source_form(self, source):
        assert inlines(source) == [Text(value=source)]

    def test_inline_html_kept_as_text(self):
        assert inlines("a <b>bold</b> word") == [Text(value="a <b>bold</b> word")]


class TestUnsupported:
    def test_html_block_skipped(self):
        result = blocks("<div>\nhi\n</div>\n\nafter")
        assert result == [Paragraph(children=[Text(value="after")])]

    def test_strict_raises(self):
        with pytest.raises(UnsupportedNodeError) as exc_info:
            blocks("<div>\nhi\n</div>", strict=True)
        assert exc_info.value.node_type == "html_block"

    def test_lenient_regardless_of_environment(self, monkeypatch):
        monkeypatch.setenv("MDTREE_STRICT_PARSING", "true")
        assert transform_to_document(parse_markdown("<div>\nhi\n</div>")).children == []

    def test_tables_stay_text(self):
        result = blocks("| a | b |\n|---|---|\n| 1 | 2 |")
        assert isinstance(result[0], Paragraph)


class TestCanonicalRendering:
    def test_normalizes_blank_lines(self):
        assert render(markdown_to_document("# Title\n\n\n\nBody\n")) == "# Title\n\nBody\n"

    def test_alternate_syntax_canonicalized(self):
        source = "Title\n=====\n\n* one\n* two\n\n___\n\n__strong__ _em_"
        assert render(markdown_to_document(source)) == "# Title\n\n- one\n- two\n\n---\n\n**strong** *em*\n"

    def test_sample_document_survives_reparse(self):
        canonical = render(build_sample_document())
        assert render(markdown_to_document(canonical)) == canonical

    def test_canonical_text_is_a_fixed_point(self):
        source = "1. [ ] task\n2. item\n    > quote\n\n```\ncode\n```\n"
        once = render(markdown_to_document(source))
        assert render(markdown_to_document(once)) == once

    @pytest.mark.parametrize("source", ["&lt;div&gt;\n", "a &lt;span&gt; b &amp; c\n", "<i>x</i> y\n"])
    def test_encoded_html_is_a_fixed_point(self, source):
        once = render(markdown_to_document(source))
        assert once == source
        assert render(markdown_to_document(once)) == once
