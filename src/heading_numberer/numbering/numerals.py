"""
Numeral styles used to render heading counters.

Each style key is the name used in settings files and on the command line,
e.g. `decimal` -> "3", `upper-roman` -> "III", `chapter-chinese` -> "第三章".
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class NumeralStyle(str, Enum):
    """Numeral style for one heading level."""

    none = "none"
    decimal = "decimal"  # 1, 2, 3
    chinese = "chinese"  # 一, 二, 三
    lower_alpha = "lower-alpha"  # a, b, c, ... z, aa
    upper_alpha = "upper-alpha"  # A, B, C, ... Z, AA
    lower_roman = "lower-roman"  # i, ii, iii
    upper_roman = "upper-roman"  # I, II, III
    circle = "circle"  # ①, ②, ③
    decimal_paren = "decimal-paren"  # （1）
    decimal_paren_half = "decimal-paren-half"  # (1)
    chinese_paren = "chinese-paren"  # （一）
    lower_alpha_paren = "lower-alpha-paren"  # （a）
    upper_alpha_paren = "upper-alpha-paren"  # （A）
    lower_roman_paren = "lower-roman-paren"  # （i）
    upper_roman_paren = "upper-roman-paren"  # （I）
    decimal_brace = "decimal-brace"  # {1}
    chapter_chinese = "chapter-chinese"  # 第一章
    section_chinese = "section-chinese"  # 第一节
    subsection_chinese = "subsection-chinese"  # 第一条

    @classmethod
    def parse(cls, value: str | None) -> NumeralStyle | None:
        """Look up a style by key, accepting `_` for `-`. Returns `None` if unknown."""
        if value is None:
            return None
        key = value.strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError:
            return None


# Short examples for each style, for help text and `--list-styles`.
STYLE_EXAMPLES: dict[NumeralStyle, str] = {
    NumeralStyle.none: "(no number)",
    NumeralStyle.decimal: "1, 2, 3",
    NumeralStyle.chinese: "一, 二, 三",
    NumeralStyle.lower_alpha: "a, b, c",
    NumeralStyle.upper_alpha: "A, B, C",
    NumeralStyle.lower_roman: "i, ii, iii",
    NumeralStyle.upper_roman: "I, II, III",
    NumeralStyle.circle: "①, ②, ③",
    NumeralStyle.decimal_paren: "（1）, （2）",
    NumeralStyle.decimal_paren_half: "(1), (2)",
    NumeralStyle.chinese_paren: "（一）, （二）",
    NumeralStyle.lower_alpha_paren: "（a）, （b）",
    NumeralStyle.upper_alpha_paren: "（A）, （B）",
    NumeralStyle.lower_roman_paren: "（i）, （ii）",
    NumeralStyle.upper_roman_paren: "（I）, （II）",
    NumeralStyle.decimal_brace: "{1}, {2}",
    NumeralStyle.chapter_chinese: "第一章, 第二章",
    NumeralStyle.section_chinese: "第一节, 第二节",
    NumeralStyle.subsection_chinese: "第一条, 第二条",
}


# === Number Conversion Functions ===

CHINESE_DIGITS = "零一二三四五六七八九"

# Place values from high to low: 万 (10^4), 千, 百, 十, and units.
_CHINESE_PLACES = [(10000, "万"), (1000, "千"), (100, "百"), (10, "十"), (1, "")]

CHINESE_MAX = 99999

CIRCLED_DIGITS = "①②③④⑤⑥⑦⑧⑨⑩⑪⑫⑬⑭⑮⑯⑰⑱⑲⑳"

ROMAN_MAX = 3999


def to_chinese(n: int) -> str:
    """
    Spell out an integer in Chinese numerals, e.g. 10 -> "十", 110 -> "一百一十",
    1005 -> "一千零五". Zero and negatives render as "零"; values above
    `CHINESE_MAX` fall back to decimal digits.
    """
    if n <= 0:
        return "零"
    if n > CHINESE_MAX:
        return str(n)

    parts: list[str] = []
    pending_zero = False
    rest = n
    for value, place in _CHINESE_PLACES:
        digit, rest = divmod(rest, value)
        if digit == 0:
            # A zero only shows up between two non-zero groups, and at most once.
            if parts:
                pending_zero = True
            continue
        if pending_zero:
            parts.append("零")
            pending_zero = False
        if value == 10 and digit == 1 and not parts:
            # Leading "十" is written alone: 十, 十一 (not 一十)
            parts.append("十")
        else:
            parts.append(CHINESE_DIGITS[digit] + place)
    return "".join(parts)


def int_to_alpha(n: int) -> str:
    """
    Convert an integer to uppercase bijective base-26 letters (A, ..., Z, AA, AB, ...).
    Non-positive values render as "A", the first letter.
    """
    if n <= 0:
        return "A"
    result = []
    while n > 0:
        n -= 1
        result.append(chr(ord("A") + (n % 26)))
        n //= 26
    return "".join(reversed(result))


def int_to_roman(n: int) -> str:
    """
    Convert an integer to an uppercase Roman numeral. Values outside 1..3999
    fall back to decimal digits.
    """
    if n <= 0 or n > ROMAN_MAX:
        return str(n)
    result = []
    for value, numeral in [
        (1000, "M"),
        (900, "CM"),
        (500, "D"),
        (400, "CD"),
        (100, "C"),
        (90, "XC"),
        (50, "L"),
        (40, "XL"),
        (10, "X"),
        (9, "IX"),
        (5, "V"),
        (4, "IV"),
        (1, "I"),
    ]:
        while n >= value:
            result.append(numeral)
            n -= value
    return "".join(result)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral string to integer."""
    s = s.upper()
    values = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
    result = 0
    prev = 0
    for char in reversed(s):
        curr = values.get(char, 0)
        if curr < prev:
            result -= curr
        else:
            result += curr
        prev = curr
    return result


def is_roman_numeral(s: str) -> bool:
    """True if `s` is a canonical Roman numeral in a single case (e.g. "XIV", "xiv")."""
    if not s or not (s.isupper() or s.islower()):
        return False
    return int_to_roman(roman_to_int(s)) == s.upper()


def to_circled(n: int) -> str:
    """Circled digit glyph for 1..20, otherwise "(n)"."""
    if 1 <= n <= len(CIRCLED_DIGITS):
        return CIRCLED_DIGITS[n - 1]
    return f"({n})"


def _full_paren(render: Callable[[int], str]) -> Callable[[int], str]:
    return lambda n: f"（{render(n)}）"


def _legal(unit: str) -> Callable[[int], str]:
    return lambda n: f"第{to_chinese(n)}{unit}"


def _lower(render: Callable[[int], str]) -> Callable[[int], str]:
    return lambda n: render(n).lower()


_RENDERERS: dict[NumeralStyle, Callable[[int], str]] = {
    NumeralStyle.none: lambda n: "",
    NumeralStyle.decimal: str,
    NumeralStyle.chinese: to_chinese,
    NumeralStyle.lower_alpha: _lower(int_to_alpha),
    NumeralStyle.upper_alpha: int_to_alpha,
    NumeralStyle.lower_roman: _lower(int_to_roman),
    NumeralStyle.upper_roman: int_to_roman,
    NumeralStyle.circle: to_circled,
    NumeralStyle.decimal_paren: _full_paren(str),
    NumeralStyle.decimal_paren_half: lambda n: f"({n})",
    NumeralStyle.chinese_paren: _full_paren(to_chinese),
    NumeralStyle.lower_alpha_paren: _full_paren(_lower(int_to_alpha)),
    NumeralStyle.upper_alpha_paren: _full_paren(int_to_alpha),
    NumeralStyle.lower_roman_paren: _full_paren(_lower(int_to_roman)),
    NumeralStyle.upper_roman_paren: _full_paren(int_to_roman),
    NumeralStyle.decimal_brace: lambda n: f"{{{n}}}",
    NumeralStyle.chapter_chinese: _legal("章"),
    NumeralStyle.section_chinese: _legal("节"),
    NumeralStyle.subsection_chinese: _legal("条"),
}

_LEGAL_STYLES = frozenset(
    {NumeralStyle.chapter_chinese, NumeralStyle.section_chinese, NumeralStyle.subsection_chinese}
)


def render_number(style: NumeralStyle, n: int) -> str:
    """
    Render a counter value in the given style. `NumeralStyle.none` renders
    as the empty string.

    Examples:
        >>> render_number(NumeralStyle.upper_roman, 14)
        'XIV'
        >>> render_number(NumeralStyle.chapter_chinese, 3)
        '第三章'
    """
    return _RENDERERS[style](n)


def is_legal_style(style: NumeralStyle) -> bool:
    """Whether a style names a legal document unit (chapter, section, subsection)."""
    return style in _LEGAL_STYLES
