"""
heading-numberer: number Markdown headings in decimal, Chinese, Roman, alphabetic,
circled and legal-document styles.
"""

from heading_numberer.numbering.heading_corrector import (
    correct_headings,
    preview_headings,
    remove_heading_numbers,
)
from heading_numberer.numbering.numerals import NumeralStyle, render_number
from heading_numberer.settings import ConfigError, LevelFormat, NumberingSettings

__all__ = [
    "ConfigError",
    "LevelFormat",
    "NumberingSettings",
    "NumeralStyle",
    "correct_headings",
    "preview_headings",
    "remove_heading_numbers",
    "render_number",
]
