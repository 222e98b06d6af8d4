"""
Detection and removal of a number already typed at the start of a heading.

A recognized number is a dotted path of one or more numeral components followed
by separator punctuation, for example:

- "第一章 " (legal unit), "一、", "3. ", "1.2 ", "IV. ", "b) ", "② "
- "(3) ", "（3）", "（iv）", "{2} "

Components are tried in priority order at each position: legal unit,
bracketed numeral, circled glyph, Chinese numerals, decimal digits, Latin letters.
Legal units, bracketed numerals and circled glyphs end on a closing character
so they need no separator after them; the others need at least one.

Letter runs of two or three letters ("AA.", "ab)") also need punctuation other
than whitespace, so titles like "AB Testing" keep their first word. When a
heading level is numbered alphabetically, the caller passes `letter_numbers`
and a run followed by a space ("aa ") is a number too.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from heading_numberer.numbering.numerals import is_roman_numeral

# Characters that may follow a typed number before the heading text starts.
SEPARATOR_CHARS = frozenset(" \t、.,。，．）)")

_CHINESE_NUMERALS = "零〇一二三四五六七八九十百千万"

_LEGAL = re.compile(rf"第[{_CHINESE_NUMERALS}]+[章节条款目]")
_BRACKETED = re.compile(
    rf"[（(]\s*(?P<inner>[0-9]+|[{_CHINESE_NUMERALS}]+|[A-Za-z]+)\s*[）)]|\{{[0-9]+\}}"
)
_CIRCLED = re.compile(r"[①-⑳❶-❿➀-➓⑴-⒛]")
_CHINESE = re.compile(rf"[{_CHINESE_NUMERALS}]+")
_DIGITS = re.compile(r"[0-9]+")
_LATIN = re.compile(r"[A-Za-z]+")

# Longest non-Roman letter run accepted as a number ("AA", "abc").
_MAX_LETTER_RUN = 3


class _Kind(str, Enum):
    closed = "closed"  # ends on its own closing character
    open = "open"  # needs a separator after it
    letters = "letters"  # multi-letter run, needs punctuation other than whitespace


@dataclass
class _Component:
    end: int
    kind: _Kind


@dataclass
class StrippedNumber:
    """
    Result of stripping a leading number from heading text.

    `stripped_number` is the exact removed substring, including the separator
    after it, or `None` when the text did not start with a number.
    """

    clean_text: str
    stripped_number: str | None


def _is_separator(char: str) -> bool:
    return char in SEPARATOR_CHARS or char.isspace()


def _is_letter_run(token: str) -> bool:
    return len(token) <= _MAX_LETTER_RUN and (token.isupper() or token.islower())


def _match_latin(token: str, letter_numbers: bool) -> _Kind | None:
    if len(token) == 1 or is_roman_numeral(token):
        return _Kind.open
    if _is_letter_run(token):
        return _Kind.open if letter_numbers else _Kind.letters
    return None


def _match_component(text: str, pos: int, letter_numbers: bool = False) -> _Component | None:
    """Match one numeral component of a number path starting at `pos`."""
    for pattern in (_LEGAL, _BRACKETED, _CIRCLED):
        m = pattern.match(text, pos)
        if m:
            inner = m.groupdict().get("inner")
            if inner and inner.isascii() and inner.isalpha():
                # Single-case runs count inside brackets: "(a)", "(iv)", "(AB)" but not "(Optional)"
                if not (is_roman_numeral(inner) or _is_letter_run(inner)):
                    return None
            return _Component(m.end(), _Kind.closed)
    for pattern in (_CHINESE, _DIGITS):
        m = pattern.match(text, pos)
        if m:
            return _Component(m.end(), _Kind.open)
    m = _LATIN.match(text, pos)
    if m:
        kind = _match_latin(m.group(0), letter_numbers)
        if kind is not None:
            return _Component(m.end(), kind)
    return None


def _separator_end(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and _is_separator(text[end]):
        end += 1
    return end


def _accepts_ending(text: str, component: _Component) -> int | None:
    """Where the number ends if the path stops at this component, or `None`."""
    end = _separator_end(text, component.end)
    if component.kind == _Kind.closed:
        return end
    if end == component.end:
        return None
    if component.kind == _Kind.letters and text[component.end].isspace():
        return None
    return end


def number_prefix_length(text: str, letter_numbers: bool = False) -> int:
    """
    Length of the typed number (with its trailing separators) at the start of
    `text`, or 0 if there is none. With `letter_numbers`, single-case letter
    runs such as "aa" or "AB" count as numbers even when followed by a space.
    """
    first = _match_component(text, 0, letter_numbers)
    if first is None:
        return 0

    # Collect the dotted path, e.g. "1.2.3"; then take the longest valid ending.
    path = [first]
    while text.startswith(".", path[-1].end):
        following = _match_component(text, path[-1].end + 1, letter_numbers)
        if following is None:
            break
        path.append(following)

    for component in reversed(path):
        end = _accepts_ending(text, component)
        if end is not None:
            return end
    return 0


def strip_existing_number(text: str, letter_numbers: bool = False) -> StrippedNumber:
    """
    Remove a manually typed number from the start of heading text.

    Examples:
        >>> strip_existing_number("第二章 总则")
        StrippedNumber(clean_text='总则', stripped_number='第二章 ')
        >>> strip_existing_number("1.2 Details")
        StrippedNumber(clean_text='Details', stripped_number='1.2 ')
        >>> strip_existing_number("Background")
        StrippedNumber(clean_text='Background', stripped_number=None)
    """
    length = number_prefix_length(text, letter_numbers)
    if length == 0:
        return StrippedNumber(clean_text=text, stripped_number=None)
    return StrippedNumber(clean_text=text[length:].strip(), stripped_number=text[:length])
