"""Tests for Markdown → XHTML conversion."""

import xml.etree.ElementTree as ET

import pytest

from md2epub.markdown_converter import convert_markdown_to_html


def _convert(text: str) -> str:
    return convert_markdown_to_html(text.encode("utf-8"))


def _assert_well_formed(html: str) -> ET.Element:
    # Raises ParseError on unclosed elements or bare entities
    return ET.fromstring(f"<div>{html}</div>")


class TestGfmFeatures:
    def test_table(self):
        html = _convert("| Name | Qty |\n|------|-----|\n| Tea | 2 |\n")

        root = _assert_well_formed(html)
        table = root.find("table")
        assert table is not None
        assert [th.text for th in table.iter("th")] == ["Name", "Qty"]
        assert [td.text for td in table.iter("td")] == ["Tea", "2"]

    def test_strikethrough(self):
        html = _convert("This is ~~gone~~ now.")
        assert "<del>gone</del>" in html

    def test_single_tilde_strikethrough(self):
        html = _convert("~gone~ text")
        assert "<del>gone</del> text" in html
        assert "<sub>" not in html

    def test_lone_tilde_is_literal(self):
        html = _convert("about ~5 minutes")
        assert "<del>" not in html
        assert "~5" in html

    def test_task_list(self):
        html = _convert("- [ ] todo\n- [x] done\n")

        root = _assert_well_formed(html)
        boxes = root.findall(".//input")
        assert [box.get("type") for box in boxes] == ["checkbox", "checkbox"]
        assert boxes[0].get("checked") is None
        assert boxes[1].get("checked") == "checked"
        assert "[x]" not in html

    def test_autolink_bare_url(self):
        html = _convert("See https://example.com for details.")
        assert 'href="https://example.com"' in html

    def test_fenced_code(self):
        html = _convert("```\nprint('hi')\n```\n")
        assert "<pre><code>" in html


class TestHeadingsAndBreaks:
    def test_heading_gets_id(self):
        html = _convert("# My Book\n\n## First Part\n")
        assert '<h1 id="my-book">My Book</h1>' in html
        assert '<h2 id="first-part">First Part</h2>' in html

    def test_single_newline_is_hard_break(self):
        html = _convert("line one\nline two")
        assert "line one<br />" in html
        assert "line two" in html


class TestXhtmlOutput:
    def test_mixed_document_is_well_formed(self):
        text = (
            "# Title\n\n"
            "Fish & chips < 5 pounds\nsecond line\n\n"
            "| a | b |\n|---|---|\n| ~~x~~ | y |\n\n"
            "---\n\n"
            "![cover](img/cover.png)\n\n"
            "- one\n- two\n"
        )
        html = _convert(text)

        root = _assert_well_formed(html)
        assert root.find(".//del").text == "x"
        assert root.find(".//img").get("src") == "img/cover.png"
        assert "<hr />" in html
        assert "&amp;" in html

    def test_void_elements_self_closed(self):
        html = _convert("a\nb\n\n***\n")
        assert "<br />" in html
        assert "<hr />" in html
        assert "<br>" not in html


class TestEncoding:
    def test_utf8_bom_is_ignored(self):
        html = convert_markdown_to_html(b"\xef\xbb\xbf# Title\n")
        assert html.startswith("<h1")

    def test_non_ascii_text(self):
        html = _convert("# Café\n\n日本語の文章")
        assert "Café" in html
        assert "日本語の文章" in html

    def test_invalid_utf8_raises(self):
        with pytest.raises(UnicodeDecodeError):
            convert_markdown_to_html(b"\xff\xfe broken")

    def test_empty_input(self):
        assert convert_markdown_to_html(b"") == ""


class TestRawHtml:
    def test_inline_tag_is_escaped(self):
        html = _convert("a<br>b")

        _assert_well_formed(html)
        assert "&lt;br&gt;" in html

    def test_block_tag_is_escaped(self):
        html = _convert('<div>\n<img src="x">\n</div>\n')

        root = _assert_well_formed(html)
        assert root.find(".//img") is None
        assert "&lt;img" in html

    def test_angle_bracket_autolink_still_works(self):
        html = _convert("<https://example.com>")
        assert 'href="https://example.com"' in html
