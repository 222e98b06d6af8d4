"""Tests for heading counters and number formatting."""

from heading_numberer.numbering.counters import HeadingCounters, format_number
from heading_numberer.numbering.numerals import NumeralStyle
from heading_numberer.settings import LevelFormat, NumberingSettings


def _settings(*styles: NumeralStyle, only_last_level: bool = False) -> NumberingSettings:
    levels = [LevelFormat(style) for style in styles]
    levels += [LevelFormat() for _ in range(6 - len(levels))]
    return NumberingSettings(levels=levels, only_last_level=only_last_level)


def _counters(*depths: int) -> HeadingCounters:
    counters = HeadingCounters()
    for depth in depths:
        counters.update(depth)
    return counters


class TestHeadingCounters:
    def test_starts_at_zero(self) -> None:
        assert HeadingCounters().values == [0, 0, 0, 0, 0, 0]

    def test_sequential_top_level(self) -> None:
        counters = HeadingCounters()
        for n in range(1, 11):
            counters.update(1)
            assert counters[1] == n

    def test_deeper_levels_reset(self) -> None:
        assert _counters(1, 2, 2, 3, 1).values == [2, 0, 0, 0, 0, 0]

    def test_ancestors_untouched(self) -> None:
        assert _counters(1, 1, 2, 3, 3).values == [2, 1, 2, 0, 0, 0]

    def test_deeper_heading_does_not_reset_shallower(self) -> None:
        """An H3 in between doesn't restart the H2 count."""
        counters = HeadingCounters()
        counters.update(1)
        counters.update(2)
        counters.update(3)
        assert counters[3] == 1
        counters.update(2)
        assert counters[2] == 2
        assert counters[3] == 0

    def test_depth_jump_leaves_skipped_levels(self) -> None:
        counters = _counters(1, 4)
        assert counters.values == [1, 0, 0, 1, 0, 0]
        counters.update(2)
        assert counters.values == [1, 1, 0, 0, 0, 0]

    def test_depth_jump_sequence(self) -> None:
        counters = HeadingCounters()
        seen = []
        for depth in [1, 1, 3, 2]:
            counters.update(depth)
            seen.append(counters[depth])
        assert seen == [1, 2, 1, 1]
        assert counters.values == [2, 1, 0, 0, 0, 0]


class TestFormatNumber:
    def test_dotted_path(self) -> None:
        settings = _settings(NumeralStyle.decimal, NumeralStyle.decimal)
        assert format_number(_counters(1, 1, 2, 2, 2), 2, settings) == "2.3"

    def test_only_last_level(self) -> None:
        settings = _settings(NumeralStyle.decimal, NumeralStyle.decimal, only_last_level=True)
        assert format_number(_counters(1, 1, 2, 2, 2), 2, settings) == "3"

    def test_mixed_styles(self) -> None:
        settings = _settings(NumeralStyle.upper_roman, NumeralStyle.lower_alpha, NumeralStyle.decimal)
        assert format_number(_counters(1, 1, 2, 2, 3), 3, settings) == "II.b.1"

    def test_unnumbered_level(self) -> None:
        settings = _settings(NumeralStyle.decimal, NumeralStyle.none)
        assert format_number(_counters(1, 2), 2, settings) == ""

    def test_unnumbered_ancestors_are_skipped(self) -> None:
        settings = _settings(NumeralStyle.none, NumeralStyle.decimal, NumeralStyle.chinese)
        assert format_number(_counters(1, 2, 2, 3), 3, settings) == "2.一"

    def test_depth_jump_renders_zero_for_skipped_levels(self) -> None:
        settings = _settings(NumeralStyle.decimal, NumeralStyle.decimal, NumeralStyle.decimal)
        assert format_number(_counters(1, 3), 3, settings) == "1.0.1"

    def test_legal_style_alone(self) -> None:
        settings = _settings(NumeralStyle.chapter_chinese, only_last_level=True)
        assert format_number(_counters(1, 1), 1, settings) == "第二章"

    def test_legal_path_collapses(self) -> None:
        settings = _settings(
            NumeralStyle.chapter_chinese,
            NumeralStyle.section_chinese,
            NumeralStyle.subsection_chinese,
            only_last_level=True,
        )
        assert format_number(_counters(1, 2, 3, 3), 3, settings) == "第二条"

    def test_legal_path_without_collapse(self) -> None:
        settings = _settings(NumeralStyle.chapter_chinese, NumeralStyle.section_chinese)
        assert format_number(_counters(1, 2), 2, settings) == "第一章.第一节"
