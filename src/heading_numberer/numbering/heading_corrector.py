"""
Heading correction for Markdown documents.

Walks a document top to bottom, keeps one set of heading counters, and rewrites
every heading line with a freshly computed number in the configured style.
Everything else passes through unchanged, including lines inside fenced code
blocks.

Typed numbers are replaced, never stacked. With H1 as `chapter-chinese`, H2 as
`decimal-paren` (separator " ") and `only_last_level` set:

Input:
    # 第三章 Intro
    ## Background
    ## 5. Goals

Output:
    # 第一章Intro
    ## （1） Background
    ## （2） Goals

Usage:
    from heading_numberer import NumberingSettings, correct_headings

    new_text = correct_headings(text, NumberingSettings())
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from heading_numberer.numbering.counters import HeadingCounters, format_number
from heading_numberer.numbering.heading_parser import (
    HEADING_MARKER,
    ParsedHeading,
    is_heading_line,
    parse_heading,
)
from heading_numberer.numbering.number_stripping import strip_existing_number
from heading_numberer.settings import NumberingSettings

# Opening or closing fence of a fenced code block (up to 3 spaces of indent).
_FENCE = re.compile(r"^ {0,3}(`{3,}|~{3,})")

# Heading markers and the whitespace after them.
_MARKERS = re.compile(rf"^{HEADING_MARKER}+\s*")

PREVIEW_ARROW = "→ "


def rebuild_heading(
    depth: int,
    prefix: str,
    text: str,
    suffix: str,
    number: str,
    separator: str,
    original_number: str | None = None,
) -> str:
    """
    Reassemble a heading line from its parts and a rendered number.

    With an empty `number` the heading loses any number it had. Otherwise the
    number and separator go right before the title, inside the decoration,
    which is also where a typed `original_number` was removed from.
    """
    line = HEADING_MARKER * depth + " "
    if number == "":
        return line + prefix + strip_existing_number(text).clean_text + suffix
    if original_number is not None:
        text = number + separator + text
        return line + prefix + text + suffix
    return line + prefix + number + separator + text + suffix


class HeadingNumberer:
    """
    Numbers headings in document order. Holds the counters for one document,
    so use a new instance per document.
    """

    def __init__(self, settings: NumberingSettings):
        self.settings: NumberingSettings = settings
        self.counters: HeadingCounters = HeadingCounters()

    def number_heading(self, heading: ParsedHeading) -> str:
        """Count this heading and return its corrected line."""
        self.counters.update(heading.depth)
        number = format_number(self.counters, heading.depth, self.settings)
        return rebuild_heading(
            heading.depth,
            heading.prefix,
            heading.text,
            heading.suffix,
            number,
            self.settings.level(heading.depth).separator,
            heading.original_number,
        )


def _split_line_ending(line: str) -> tuple[str, str]:
    if line.endswith("\r"):
        return line[:-1], "\r"
    return line, ""


def _correct_lines(text: str, settings: NumberingSettings) -> Iterator[tuple[str, bool]]:
    """Yield each corrected line with a flag telling whether it is a heading."""
    numberer = HeadingNumberer(settings)
    fence: str | None = None

    for raw_line in text.split("\n"):
        line, ending = _split_line_ending(raw_line)

        if settings.skip_code_blocks:
            fence_match = _FENCE.match(line)
            if fence is not None:
                if fence_match and fence_match.group(1).startswith(fence):
                    fence = None
                yield raw_line, False
                continue
            if fence_match:
                fence = fence_match.group(1)
                yield raw_line, False
                continue

        if is_heading_line(line):
            heading = parse_heading(line, settings.matches_letter_runs)
            if heading is not None:
                yield numberer.number_heading(heading) + ending, True
                continue
        yield raw_line, False


def correct_headings(text: str, settings: NumberingSettings) -> str:
    """
    Renumber every heading in a Markdown document.

    Lines keep their order and line endings; only heading lines change.
    Calls are independent: counters start from zero each time.
    """
    return "\n".join(line for line, _ in _correct_lines(text, settings))


def remove_heading_numbers(text: str, settings: NumberingSettings | None = None) -> str:
    """
    Strip the numbers from every heading in a document. Pass the `settings` the
    document was numbered with so bare alphabetic numbers ("aa ") are removed too.
    """
    numbered_with = settings if settings is not None else NumberingSettings()
    return correct_headings(text, numbered_with.without_numbers())


def preview_headings(text: str, settings: NumberingSettings, limit: int = 3) -> list[str]:
    """
    First few corrected headings, without their markers, as `→ title` lines.
    Useful for showing what a correction would do before applying it.
    """
    previews: list[str] = []
    for line, is_heading in _correct_lines(text, settings):
        if not is_heading:
            continue
        if len(previews) >= limit:
            break
        previews.append(PREVIEW_ARROW + _MARKERS.sub("", line).rstrip("\r"))
    return previews
