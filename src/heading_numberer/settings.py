"""
Numbering settings: the numeral style and separator for each heading level.

Settings come from a TOML config file, from the command line, or from a plain
dict such as the JSON blob an editor plugin stores. Unknown style keys degrade
to `none` for that level (with a warning) instead of failing the whole run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, cast

from heading_numberer.numbering.numerals import NumeralStyle

log = logging.getLogger(__name__)

LEVEL_COUNT = 6

# Separator values that mean "no separator" (the empty marker shown in settings UIs).
_EMPTY_SEPARATORS = {"∅", "null"}

# Styles that write bare letter runs ("aa", "AB") once past 26.
_ALPHA_STYLES = {NumeralStyle.lower_alpha, NumeralStyle.upper_alpha}


class ConfigError(ValueError):
    """Settings that can't be interpreted at all (wrong types, unreadable file)."""


@dataclass
class LevelFormat:
    """Numbering for one heading level, e.g. `LevelFormat(NumeralStyle.decimal, ". ")`."""

    style: NumeralStyle = NumeralStyle.none
    separator: str = ""

    @property
    def is_numbered(self) -> bool:
        return self.style != NumeralStyle.none


def _default_levels() -> list[LevelFormat]:
    return [
        LevelFormat(NumeralStyle.chapter_chinese, ""),
        LevelFormat(NumeralStyle.section_chinese, "、"),
        LevelFormat(NumeralStyle.decimal_paren, " "),
        LevelFormat(),
        LevelFormat(),
        LevelFormat(),
    ]


@dataclass
class NumberingSettings:
    """
    Settings for one correction pass.

    `levels[0]` is H1, `levels[5]` is H6. With `only_last_level`, a heading shows
    just its own level's number ("3") instead of the dotted path ("2.3").
    `letter_numbers` makes typed letter runs followed by a space ("aa Intro")
    count as numbers; it is implied whenever a level uses an alphabetic style.
    """

    levels: list[LevelFormat] = field(default_factory=_default_levels)
    only_last_level: bool = False
    skip_code_blocks: bool = True
    letter_numbers: bool = False

    def __post_init__(self) -> None:
        if len(self.levels) != LEVEL_COUNT:
            raise ConfigError(f"Expected {LEVEL_COUNT} heading levels, got {len(self.levels)}")

    def level(self, depth: int) -> LevelFormat:
        """Format for a heading depth (1-6)."""
        return self.levels[depth - 1]

    @classmethod
    def no_numbers(cls) -> NumberingSettings:
        """Settings that remove every heading number."""
        return cls(levels=[LevelFormat() for _ in range(LEVEL_COUNT)])

    @property
    def matches_letter_runs(self) -> bool:
        """Whether stripping should treat "aa "-style letter runs as numbers."""
        return self.letter_numbers or any(fmt.style in _ALPHA_STYLES for fmt in self.levels)

    def without_numbers(self) -> NumberingSettings:
        """
        Settings that remove the numbers these settings would have written,
        including bare alphabetic ones.
        """
        return NumberingSettings(
            levels=[LevelFormat() for _ in range(LEVEL_COUNT)],
            skip_code_blocks=self.skip_code_blocks,
            letter_numbers=self.matches_letter_runs,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NumberingSettings:
        """
        Build settings from a dict, starting from the defaults. Accepts TOML-style
        keys (`only-last-level`, `[levels.h2]`) and editor-plugin keys
        (`onlyLastLevel`, `level2`). Each level is a table with `format` and
        `separator`, or just a style key string.
        """
        settings = cls()
        levels_table = cast(dict[str, Any], data.get("levels", {}))
        if not isinstance(levels_table, dict):
            raise ConfigError("`levels` must be a table")

        for depth in range(1, LEVEL_COUNT + 1):
            raw = levels_table.get(f"h{depth}", data.get(f"level{depth}"))
            if raw is not None:
                settings.levels[depth - 1] = _parse_level(depth, raw)

        for key in ("only-last-level", "only_last_level", "onlyLastLevel"):
            if key in data:
                settings.only_last_level = _parse_bool(key, data[key])
        for key in ("skip-code-blocks", "skip_code_blocks", "skipCodeBlocks"):
            if key in data:
                settings.skip_code_blocks = _parse_bool(key, data[key])
        return settings

    def to_dict(self) -> dict[str, Any]:
        """
        Plain dict in the editor-plugin shape (`onlyLastLevel`, `level1`..`level6`),
        which `from_dict` reads back.
        """
        data: dict[str, Any] = {
            "onlyLastLevel": self.only_last_level,
            "skipCodeBlocks": self.skip_code_blocks,
        }
        for depth, fmt in enumerate(self.levels, start=1):
            data[f"level{depth}"] = {"format": fmt.style.value, "separator": fmt.separator}
        return data


def parse_style(depth: int, value: object) -> NumeralStyle:
    """Parse a style key, degrading unknown keys to `none` with a warning."""
    style = NumeralStyle.parse(value) if isinstance(value, str) else None
    if style is None:
        log.warning(
            "Unknown numbering format %r for H%d; H%d will not be numbered", value, depth, depth
        )
        return NumeralStyle.none
    return style


def parse_separator(value: object) -> str:
    if value is None:
        return ""
    separator = str(value)
    return "" if separator in _EMPTY_SEPARATORS else separator


def _parse_level(depth: int, raw: object) -> LevelFormat:
    if isinstance(raw, str):
        return LevelFormat(parse_style(depth, raw), "")
    if not isinstance(raw, dict):
        raise ConfigError(f"Level H{depth} must be a table or a format name, got {raw!r}")
    table = cast(dict[str, Any], raw)
    return LevelFormat(
        style=parse_style(depth, table.get("format", NumeralStyle.none.value)),
        separator=parse_separator(table.get("separator", "")),
    )


def _parse_bool(key: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be true or false, got {value!r}")
    return value
