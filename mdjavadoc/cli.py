"""CLI entrypoint for mdjavadoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, load_config
from .converter import JavadocConverter
from .logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdjavadoc",
        description="Convert traditional /** */ Javadoc comments into Markdown /// comments.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Root directory to scan (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the changes as unified diffs without writing any file.",
    )
    parser.add_argument(
        "--suffix",
        default=None,
        help="File name suffix to convert (defaults to .java).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .mdjavadoc.yml file (defaults to the one in the root directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdjavadoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    root = Path(args.path)
    try:
        config = load_config(args.config or root / CONFIG_FILENAME).with_overrides(suffix=args.suffix)
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")

    converter = JavadocConverter(config)
    try:
        report = converter.execute(root, dry_run=bool(args.dry_run))
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:
        parser.exit(1, f"mdjavadoc failed to scan {root}: {exc}\nRun with --verbose for more details.\n")

    if report.dry_run:
        for outcome in report.updated:
            print(outcome.diff or "(no diff)")

    summary = f"{len(report.updated)} updated, {len(report.skipped)} skipped, {len(report.failed)} failed"
    if report.dry_run:
        summary += " (dry-run)"
    print(summary)


if __name__ == "__main__":
    main(sys.argv[1:])
