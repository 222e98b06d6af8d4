"""
Reading documents, correcting their headings, and writing them back.

A file is only ever replaced as a whole: the corrected text is written to a
temporary file that is then renamed over the original, so a failure part way
through leaves the original untouched.
"""

from __future__ import annotations

import logging
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from strif import atomic_output_file

from heading_numberer.numbering.heading_corrector import correct_headings
from heading_numberer.settings import NumberingSettings

log = logging.getLogger(__name__)

STDIN = "-"

BACKUP_SUFFIX = ".orig"


@dataclass
class FileResult:
    """Outcome of correcting one input."""

    path: str
    original: str
    corrected: str

    @property
    def changed(self) -> bool:
        return self.original != self.corrected


def read_text(path: str) -> str:
    """Read a document from a path, or from stdin for `-`."""
    if path == STDIN:
        return sys.stdin.read()
    # newline="" keeps "\r\n" line endings as they are.
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: str, text: str, make_parents: bool = False) -> None:
    """Replace a document's whole content atomically, or print it for `-`."""
    if path == STDIN:
        sys.stdout.write(text)
        return
    with atomic_output_file(Path(path), make_parents=make_parents) as temp_path:
        with open(temp_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)


def correct_file(
    path: str,
    settings: NumberingSettings,
    output: str | None = STDIN,
    inplace: bool = False,
    nobackup: bool = False,
    make_parents: bool = False,
) -> FileResult:
    """
    Correct the headings of one document.

    With `inplace`, the file is rewritten (after copying it to `<path>.orig`
    unless `nobackup`) and only if something changed. Otherwise the result goes
    to `output`, which is stdout for `-`; `output=None` writes nothing.
    """
    if inplace and path == STDIN:
        raise ValueError("Cannot use --inplace with stdin")

    original = read_text(path)
    corrected = correct_headings(original, settings)
    result = FileResult(path=path, original=original, corrected=corrected)

    if inplace:
        if not result.changed:
            log.debug("No heading changes in %s", path)
            return result
        if not nobackup:
            shutil.copyfile(path, path + BACKUP_SUFFIX)
        write_text(path, result.corrected)
        log.debug("Corrected headings in %s", path)
    elif output is not None:
        write_text(output, result.corrected, make_parents=make_parents)
    return result


def correct_files(
    files: list[str],
    settings: NumberingSettings,
    output: str | None = STDIN,
    inplace: bool = False,
    nobackup: bool = False,
    make_parents: bool = False,
) -> list[FileResult]:
    """
    Correct several documents. Without `inplace`, only a single input is
    allowed since all output would go to the same place.
    """
    if len(files) > 1 and not inplace and output is not None:
        raise ValueError("Multiple inputs need --inplace (or --check / --preview)")
    return [
        correct_file(
            path,
            settings,
            output=output,
            inplace=inplace,
            nobackup=nobackup,
            make_parents=make_parents,
        )
        for path in files
    ]
