"""Tests for heading line detection and parsing."""

import pytest

from heading_numberer.numbering.heading_parser import (
    ParsedHeading,
    is_heading_line,
    parse_heading,
    split_decorations,
)


class TestIsHeadingLine:
    @pytest.mark.parametrize("line", ["# Title", "###### Six", "#\tTabbed", "## ", "##  Two spaces"])
    def test_headings(self, line: str) -> None:
        assert is_heading_line(line)

    @pytest.mark.parametrize(
        "line", ["####### Seven", "#Title", "Text # not", "  # Indented", "", "#"]
    )
    def test_not_headings(self, line: str) -> None:
        assert not is_heading_line(line)


class TestSplitDecorations:
    def test_plain(self) -> None:
        assert split_decorations("Title") == ("", "Title", "")

    def test_bold(self) -> None:
        assert split_decorations("**Title**") == ("**", "Title", "**")

    def test_underscore_bold(self) -> None:
        assert split_decorations("__Title__") == ("__", "Title", "__")

    def test_code(self) -> None:
        assert split_decorations("`code`") == ("`", "code", "`")

    def test_html_tags(self) -> None:
        assert split_decorations('<span class="x">Title</span>') == (
            '<span class="x">',
            "Title",
            "</span>",
        )

    def test_nested_decorations(self) -> None:
        assert split_decorations("<b>**`x`**</b>") == ("<b>**`", "x", "`**</b>")

    def test_single_emphasis_is_text(self) -> None:
        assert split_decorations("*Title*") == ("", "*Title*", "")

    def test_title_is_trimmed(self) -> None:
        assert split_decorations("**  Title  **") == ("**", "Title", "**")

    def test_decoration_only(self) -> None:
        """Prefix and suffix scanning stop where they would cross."""
        assert split_decorations("****") == ("****", "", "")
        assert split_decorations("``") == ("``", "", "")

    def test_malformed_tag_is_text(self) -> None:
        assert split_decorations("<b Title") == ("", "<b Title", "")
        assert split_decorations("Title</b") == ("", "Title</b", "")

    def test_decoration_in_the_middle_is_text(self) -> None:
        assert split_decorations("**`code`** Title") == ("**`", "code`** Title", "")


class TestParseHeading:
    def test_plain(self) -> None:
        assert parse_heading("## Intro") == ParsedHeading(
            depth=2, prefix="", text="Intro", suffix="", original_number=None
        )

    def test_typed_number(self) -> None:
        assert parse_heading("## 1. Intro") == ParsedHeading(
            depth=2, prefix="", text="Intro", suffix="", original_number="1. "
        )

    def test_number_inside_decoration(self) -> None:
        assert parse_heading("### **2. Setup**") == ParsedHeading(
            depth=3, prefix="**", text="Setup", suffix="**", original_number="2. "
        )

    def test_chinese_legal_number(self) -> None:
        heading = parse_heading("# <u>第三章 总则</u>")
        assert heading == ParsedHeading(
            depth=1, prefix="<u>", text="总则", suffix="</u>", original_number="第三章 "
        )

    def test_depth(self) -> None:
        heading = parse_heading("###### Deepest")
        assert heading is not None
        assert heading.depth == 6

    def test_empty_heading(self) -> None:
        assert parse_heading("# ") == ParsedHeading(
            depth=1, prefix="", text="", suffix="", original_number=None
        )

    def test_not_a_heading(self) -> None:
        assert parse_heading("Just text") is None
        assert parse_heading("####### Seven") is None

    def test_parts_reassemble(self) -> None:
        content = "**`1.2 Scope`**"
        heading = parse_heading("## " + content)
        assert heading is not None
        assert heading.original_number is not None
        assert heading.prefix + heading.original_number + heading.text + heading.suffix == content
