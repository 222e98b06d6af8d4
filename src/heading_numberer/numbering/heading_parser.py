"""
Heading line detection and parsing.

A heading line is 1-6 `#` markers followed by whitespace. Its content splits
into three parts:

- prefix: decoration wrapping the start of the title (`**`, `__`, `` ` ``, `<span ...>`)
- text: the title itself, with any typed number removed
- suffix: decoration closing the title (`**`, `` ` ``, `</span>`)

Example:
    "## **2. Setup**" -> depth=2, prefix="**", text="Setup", suffix="**",
    original_number="2. "
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from heading_numberer.numbering.number_stripping import strip_existing_number

HEADING_MARKER = "#"

MAX_DEPTH = 6

_HEADING_START = re.compile(rf"^{HEADING_MARKER}{{1,{MAX_DEPTH}}}\s")
_HEADING = re.compile(rf"^({HEADING_MARKER}{{1,{MAX_DEPTH}}})\s+(.*)$")

_EMPHASIS_CHARS = "*_"
_CODE_CHAR = "`"

_OPEN_TAG = re.compile(r"<[a-zA-Z][a-zA-Z0-9]*[^>]*>")
_CLOSE_TAG = re.compile(r"</[a-zA-Z][a-zA-Z0-9]*>$")


@dataclass
class ParsedHeading:
    """
    One heading line split into its parts.

    `prefix + original_number + text + suffix` gives back the heading content
    (up to whitespace around the title).
    """

    depth: int  # 1-6
    prefix: str
    text: str
    suffix: str
    original_number: str | None  # typed number that was stripped from the text, if any


def is_heading_line(line: str) -> bool:
    """True if the line starts with 1-6 heading markers followed by whitespace."""
    return _HEADING_START.match(line) is not None


def _scan_prefix(content: str) -> int:
    """Index where the opening decoration of `content` ends."""
    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        if char in _EMPHASIS_CHARS and i + 1 < length and content[i + 1] == char:
            i += 2
            continue
        if char == _CODE_CHAR:
            i += 1
            continue
        tag = _OPEN_TAG.match(content, i)
        if tag:
            i = tag.end()
            continue
        break
    return i


def _scan_suffix(content: str, start: int) -> int:
    """
    Index where the closing decoration of `content` begins, scanning backward
    but never past `start`.
    """
    j = len(content)
    while j > start:
        char = content[j - 1]
        if char in _EMPHASIS_CHARS and j - 2 >= start and content[j - 2] == char:
            j -= 2
            continue
        if char == _CODE_CHAR:
            j -= 1
            continue
        tag = _CLOSE_TAG.search(content, start, j)
        if tag:
            j = tag.start()
            continue
        break
    return j


def split_decorations(content: str) -> tuple[str, str, str]:
    """
    Split heading content into (prefix, title, suffix). The title is trimmed
    of surrounding whitespace; unmatched or malformed markup stays in the title.
    """
    i = _scan_prefix(content)
    j = _scan_suffix(content, i)
    return content[:i], content[i:j].strip(), content[j:]


def parse_heading(line: str, letter_numbers: bool = False) -> ParsedHeading | None:
    """
    Parse a heading line, or return `None` if the line isn't a heading.
    `letter_numbers` is passed through to `strip_existing_number`.

    Examples:
        >>> parse_heading("## 1. Intro")
        ParsedHeading(depth=2, prefix='', text='Intro', suffix='', original_number='1. ')
        >>> parse_heading("### **Bold** title")
        ParsedHeading(depth=3, prefix='**', text='Bold** title', suffix='', original_number=None)
    """
    match = _HEADING.match(line)
    if not match:
        return None
    markers, content = match.groups()
    prefix, title, suffix = split_decorations(content)
    stripped = strip_existing_number(title, letter_numbers)
    return ParsedHeading(
        depth=len(markers),
        prefix=prefix,
        text=stripped.clean_text,
        suffix=suffix,
        original_number=stripped.stripped_number,
    )
