"""
Markdown file discovery for directory and glob arguments.

Walks directories for `*.md` files, pruning common build, tool and vendor
directories and honoring `.gitignore` files found along the way.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

import pathspec

log = logging.getLogger(__name__)

DEFAULT_INCLUDES: list[str] = ["*.md", "*.markdown"]

DEFAULT_EXCLUDES: list[str] = [
    ".git/",
    ".hg/",
    ".svn/",
    ".venv/",
    "venv/",
    "__pycache__/",
    ".tox/",
    ".mypy_cache/",
    ".pytest_cache/",
    "*.egg-info/",
    "build/",
    "dist/",
    "node_modules/",
    ".idea/",
    ".vscode/",
    "vendor/",
    "third_party/",
]

# Characters that indicate a path is a glob pattern rather than a literal path.
_GLOB_CHARS = frozenset("*?[")


def _spec(lines: Sequence[str]) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitignore", lines)


def load_gitignore(directory: Path) -> pathspec.PathSpec | None:
    """Compiled `.gitignore` of a directory, or `None` if it has none (or it's empty)."""
    gitignore = directory / ".gitignore"
    if not gitignore.is_file():
        return None
    lines = [
        line
        for line in gitignore.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]
    return _spec(lines) if lines else None


def is_glob(path: str) -> bool:
    return any(c in path for c in _GLOB_CHARS)


class MarkdownFinder:
    """Expands file, directory and glob arguments into a sorted list of Markdown files."""

    def __init__(
        self,
        extend_exclude: Sequence[str] = (),
        respect_gitignore: bool = True,
    ):
        self.include: pathspec.PathSpec = _spec(DEFAULT_INCLUDES)
        self.exclude: pathspec.PathSpec = _spec([*DEFAULT_EXCLUDES, *extend_exclude])
        self.respect_gitignore: bool = respect_gitignore

    def find(self, paths: Sequence[str | Path]) -> list[Path]:
        """
        Resolve arguments into files. Explicitly named files are always kept;
        directories and globs only yield included, non-excluded files.
        Raises `FileNotFoundError` for a path that doesn't exist.
        """
        found: set[Path] = set()
        for raw_path in paths:
            path = Path(raw_path)
            if path.is_file():
                found.add(path.resolve())
            elif path.is_dir():
                found.update(p.resolve() for p in self._walk(path))
            elif is_glob(str(raw_path)):
                found.update(
                    p.resolve()
                    for p in Path().glob(str(raw_path))
                    if p.is_file() and self.include.match_file(p.name)
                )
            else:
                raise FileNotFoundError(f"Path not found: {raw_path}")
        return sorted(found)

    def _walk(self, root: Path) -> Iterator[Path]:
        # Gitignore specs by the directory they were found in
        ignores: dict[Path, pathspec.PathSpec] = {}

        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            if self.respect_gitignore:
                spec = load_gitignore(current)
                if spec is not None:
                    ignores[current] = spec

            def ignored(name: str, is_dir: bool) -> bool:
                candidate = current / name
                for base, spec in ignores.items():
                    if base != current and base not in current.parents:
                        continue
                    rel = candidate.relative_to(base).as_posix()
                    if spec.match_file(rel + "/" if is_dir else rel):
                        return True
                return False

            # Prune excluded directories in place so os.walk doesn't descend into them.
            dirnames[:] = sorted(
                d for d in dirnames if not self.exclude.match_file(d + "/") and not ignored(d, True)
            )
            for filename in sorted(filenames):
                if self.include.match_file(filename) and not ignored(filename, False):
                    yield current / filename
                else:
                    log.debug("Skipping %s", current / filename)
