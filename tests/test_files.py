"""Tests for Markdown file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from heading_numberer.files import MarkdownFinder, is_glob, load_gitignore


def _make_tree(root: Path) -> None:
    for rel in [
        "README.md",
        "docs/guide.md",
        "docs/notes.markdown",
        "docs/image.png",
        "docs/drafts/wip.md",
        "node_modules/pkg/README.md",
        ".git/info.md",
        "vendor/lib.md",
    ]:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("# Title\n")


def _names(paths: list[Path], root: Path) -> list[str]:
    return [p.relative_to(root.resolve()).as_posix() for p in paths]


def test_walks_directory_with_default_excludes(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    found = MarkdownFinder().find([tmp_path])
    assert _names(found, tmp_path) == [
        "README.md",
        "docs/drafts/wip.md",
        "docs/guide.md",
        "docs/notes.markdown",
    ]


def test_respects_gitignore(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    (tmp_path / ".gitignore").write_text("# comment\ndrafts/\n")
    (tmp_path / "docs" / ".gitignore").write_text("notes.markdown\n")
    found = MarkdownFinder().find([tmp_path])
    assert _names(found, tmp_path) == ["README.md", "docs/guide.md"]


def test_gitignore_can_be_disabled(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    (tmp_path / ".gitignore").write_text("drafts/\n")
    found = MarkdownFinder(respect_gitignore=False).find([tmp_path])
    assert "docs/drafts/wip.md" in _names(found, tmp_path)


def test_extend_exclude(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    found = MarkdownFinder(extend_exclude=["drafts/"]).find([tmp_path])
    assert "docs/drafts/wip.md" not in _names(found, tmp_path)


def test_explicit_files_always_included(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    explicit = tmp_path / "vendor" / "lib.md"
    other = tmp_path / "docs" / "image.png"
    assert MarkdownFinder().find([explicit, other]) == sorted(
        [explicit.resolve(), other.resolve()]
    )


def test_glob(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)
    found = MarkdownFinder().find(["docs/*"])
    assert _names(found, tmp_path) == ["docs/guide.md", "docs/notes.markdown"]


def test_deduplicates(tmp_path: Path) -> None:
    _make_tree(tmp_path)
    readme = tmp_path / "README.md"
    found = MarkdownFinder().find([readme, tmp_path / "docs", readme])
    assert found.count(readme.resolve()) == 1


def test_missing_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        MarkdownFinder().find([tmp_path / "missing.md"])


def test_load_gitignore_empty(tmp_path: Path) -> None:
    assert load_gitignore(tmp_path) is None
    (tmp_path / ".gitignore").write_text("# only a comment\n\n")
    assert load_gitignore(tmp_path) is None


def test_is_glob() -> None:
    assert is_glob("docs/*.md")
    assert is_glob("file?.md")
    assert not is_glob("docs/guide.md")
