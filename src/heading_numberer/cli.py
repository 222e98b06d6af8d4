#!/usr/bin/env python3
"""
heading-numberer: Number (or renumber) Markdown headings in many numeral styles

Common usage:
  heading-numberer README.md                  # print corrected document
  heading-numberer -i docs/                   # correct all Markdown files in place
  heading-numberer --h1 decimal --h2 decimal:" " notes.md
  heading-numberer --remove -i notes.md       # strip all heading numbers
  heading-numberer --preview notes.md         # show the first few corrected headings

Settings are read from `.heading-numberer.toml`, `heading-numberer.toml`, or
`[tool.heading-numberer]` in `pyproject.toml`, searching up from the current
directory. Use `--list-styles` to see all numeral styles.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from heading_numberer.config import find_config_file, load_config, save_config
from heading_numberer.files import MarkdownFinder, is_glob
from heading_numberer.numbering.heading_corrector import preview_headings
from heading_numberer.numbering.numerals import STYLE_EXAMPLES, NumeralStyle
from heading_numberer.reformat_api import STDIN, correct_files, read_text
from heading_numberer.settings import (
    LEVEL_COUNT,
    ConfigError,
    LevelFormat,
    NumberingSettings,
    parse_separator,
    parse_style,
)

log = logging.getLogger(__name__)


@dataclass
class Options:
    """Command-line options for the heading-numberer tool."""

    files: list[str]
    output: str
    inplace: bool
    nobackup: bool
    remove: bool
    preview: bool
    check: bool
    levels: list[str | None]  # raw --h1..--h6 values, "STYLE[:SEPARATOR]"
    only_last_level: bool | None
    skip_code_blocks: bool | None
    config: str | None
    no_config: bool
    save_config: str | None
    extend_exclude: list[str]
    respect_gitignore: bool
    list_styles: bool
    verbose: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> Options:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        default=[],
        help="Input files or directories (use '-' for stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=STDIN,
        help="Output file (use '-' for stdout)",
    )
    parser.add_argument(
        "-i", "--inplace", action="store_true", help="Edit files in place (ignores --output)"
    )
    parser.add_argument(
        "--nobackup",
        action="store_true",
        help="Do not make a backup of the original file when using --inplace",
    )
    parser.add_argument(
        "--remove",
        action="store_true",
        help="Remove all heading numbers instead of adding them",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the first three corrected headings of each file without writing anything",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Write nothing; exit with status 1 if any file's headings would change",
    )
    for depth in range(1, LEVEL_COUNT + 1):
        parser.add_argument(
            f"--h{depth}",
            type=str,
            default=None,
            metavar="STYLE[:SEP]",
            help=f"Numeral style for H{depth}, optionally with the separator after the number",
        )
    parser.add_argument(
        "--only-last-level",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show only each heading's own level number (e.g. '3' instead of '2.3')",
    )
    parser.add_argument(
        "--skip-code-blocks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Leave '#' lines inside fenced code blocks alone (default: on)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="FILE",
        help="Read settings from this TOML or JSON file instead of searching for one",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore config files and start from the built-in defaults",
    )
    parser.add_argument(
        "--save-config",
        type=str,
        default=None,
        metavar="FILE",
        help="Save the effective settings as a JSON file",
    )
    parser.add_argument(
        "--extend-exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Additional exclusion patterns for directory arguments (e.g., 'drafts/')",
    )
    parser.add_argument(
        "--no-respect-gitignore",
        action="store_true",
        dest="no_respect_gitignore",
        help="Disable .gitignore integration",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List the available numeral styles and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    return Options(
        files=opts.files,
        output=opts.output,
        inplace=opts.inplace,
        nobackup=opts.nobackup,
        remove=opts.remove,
        preview=opts.preview,
        check=opts.check,
        levels=[getattr(opts, f"h{depth}") for depth in range(1, LEVEL_COUNT + 1)],
        only_last_level=opts.only_last_level,
        skip_code_blocks=opts.skip_code_blocks,
        config=opts.config,
        no_config=opts.no_config,
        save_config=opts.save_config,
        extend_exclude=opts.extend_exclude,
        respect_gitignore=not opts.no_respect_gitignore,
        list_styles=opts.list_styles,
        verbose=opts.verbose,
        version=opts.version,
    )


def parse_level_option(depth: int, value: str) -> LevelFormat:
    """
    Parse a `--hN` value: `STYLE` or `STYLE:SEPARATOR`, e.g. `decimal:. ` or
    `chinese:、`. Everything after the first colon is the separator.
    """
    style, _, separator = value.partition(":")
    return LevelFormat(style=parse_style(depth, style), separator=parse_separator(separator))


def _load_settings(options: Options) -> NumberingSettings:
    """
    Effective settings: explicit CLI flags > config file > built-in defaults.
    """
    config_path = None
    if options.config:
        config_path = Path(options.config)
    elif not options.no_config:
        config_path = find_config_file(Path.cwd())
    settings = load_config(config_path) if config_path else NumberingSettings()

    for depth, value in enumerate(options.levels, start=1):
        if value is not None:
            settings.levels[depth - 1] = parse_level_option(depth, value)
    if options.only_last_level is not None:
        settings.only_last_level = options.only_last_level
    if options.skip_code_blocks is not None:
        settings.skip_code_blocks = options.skip_code_blocks

    if options.remove:
        return settings.without_numbers()
    return settings


def _resolve_files(options: Options) -> list[str]:
    """Expand directory and glob arguments into Markdown files; pass others through."""
    if not any(f != STDIN and (Path(f).is_dir() or is_glob(f)) for f in options.files):
        return options.files

    finder = MarkdownFinder(
        extend_exclude=options.extend_exclude,
        respect_gitignore=options.respect_gitignore,
    )
    resolved = [str(p) for p in finder.find([f for f in options.files if f != STDIN])]
    if STDIN in options.files:
        resolved.insert(0, STDIN)
    return resolved


def _print_styles() -> None:
    width = max(len(style.value) for style in NumeralStyle)
    for style in NumeralStyle:
        print(f"{style.value:<{width}}  {STYLE_EXAMPLES[style]}")


def _print_previews(files: list[str], settings: NumberingSettings) -> None:
    for path in files:
        previews = preview_headings(read_text(path), settings)
        if len(files) > 1:
            print(f"{path}:")
        print("\n".join(previews) if previews else "(no headings found)")


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the heading-numberer CLI.

    Returns:
        Exit code (0 for success, 1 for usage errors or pending changes
        with --check, 2 for other errors)
    """
    options = _parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if options.version:
        try:
            version = importlib.metadata.version("heading-numberer")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.list_styles:
        _print_styles()
        return 0

    try:
        settings = _load_settings(options)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if options.save_config:
        save_config(settings, Path(options.save_config))
        if not options.files:
            return 0

    if not options.files:
        print(
            "Error: No input specified. Provide files, directories, or '-' for stdin."
            " Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    try:
        files = _resolve_files(options)

        if options.preview:
            _print_previews(files, settings)
            return 0

        if options.check:
            results = correct_files(files, settings, output=None)
            changed = [r.path for r in results if r.changed]
            for path in changed:
                print(f"Would correct headings: {path}")
            return 1 if changed else 0

        correct_files(
            files,
            settings,
            output=options.output,
            inplace=options.inplace,
            nobackup=options.nobackup,
            make_parents=True,
        )
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        log.debug("Correction failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
