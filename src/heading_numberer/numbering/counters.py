"""
Heading counters and the number string they produce.

Counters follow nested-section numbering: a heading increments its own level
and resets every deeper level, and never touches shallower ones. Skipped
levels keep their value, so `#`, `####`, `##` numbers the `##` as if the
`####` had not been there:

    counters after "# A"     -> [1, 0, 0, 0, 0, 0]
    counters after "## B"    -> [1, 1, 0, 0, 0, 0]
    counters after "#### C"  -> [1, 1, 0, 1, 0, 0]
    counters after "## D"    -> [1, 2, 0, 0, 0, 0]
"""

from __future__ import annotations

from dataclasses import dataclass, field

from heading_numberer.numbering.numerals import is_legal_style, render_number
from heading_numberer.settings import LEVEL_COUNT, NumberingSettings


@dataclass
class HeadingCounters:
    """Counter value for each heading level (index 0 = H1)."""

    values: list[int] = field(default_factory=lambda: [0] * LEVEL_COUNT)

    def update(self, depth: int) -> None:
        """Count a heading at `depth` (1-6): reset deeper levels, then increment this one."""
        for i in range(depth, LEVEL_COUNT):
            self.values[i] = 0
        self.values[depth - 1] += 1

    def __getitem__(self, depth: int) -> int:
        """Counter for a heading depth (1-6)."""
        return self.values[depth - 1]


def format_number(counters: HeadingCounters, depth: int, settings: NumberingSettings) -> str:
    """
    Format the number for a heading at `depth` from the current counters.

    Each numbered level from H1 down to `depth` contributes one part, rendered
    in that level's style; unnumbered levels are skipped. Parts are joined with
    "." unless `only_last_level` is set, in which case only the last part is used.
    Returns "" if this level is unnumbered.

    Example:
        counters=[2, 3, 0, 0, 0, 0], H1 and H2 decimal, depth=2 -> "2.3"
        same with only_last_level -> "3"
    """
    current = settings.level(depth)
    if not current.is_numbered:
        return ""

    parts = [
        render_number(fmt.style, counters[level])
        for level, fmt in enumerate(settings.levels[:depth], start=1)
        if fmt.is_numbered
    ]
    if not parts:
        return ""

    if settings.only_last_level and (len(parts) > 1 or is_legal_style(current.style)):
        return parts[-1]
    return ".".join(parts)
