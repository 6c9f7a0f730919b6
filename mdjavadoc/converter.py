"""Pipeline orchestration for converting a source tree to Markdown Javadoc."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import ConverterConfig
from .discovery import FileDiscoverer
from .extractor import BlockExtractor
from .logging import get_logger
from .models import FAILED, SKIPPED, UPDATED, ConversionReport, FileOutcome
from .transformer import MarkupTransformer
from .writer import FileWriter, render_diff


class JavadocConverter:
    """Coordinates discovery, block rewriting and writing for a source tree."""

    def __init__(
        self,
        config: ConverterConfig | None = None,
        discoverer: FileDiscoverer | None = None,
        extractor: BlockExtractor | None = None,
        writer: FileWriter | None = None,
    ) -> None:
        self.config = config or ConverterConfig(root=Path("."))
        self.discoverer = discoverer or FileDiscoverer(
            suffix=self.config.suffix, exclude_paths=self.config.exclude_paths
        )
        self.extractor = extractor or BlockExtractor(
            MarkupTransformer(base_indent=self.config.base_indent)
        )
        self.writer = writer or FileWriter(encoding=self.config.encoding)
        self.logger = get_logger("converter")

    def execute(self, root: str | Path | None = None, *, dry_run: bool = False) -> ConversionReport:
        """Convert every matching file under ``root`` in sorted path order.

        Errors traversing the root propagate; per-file errors are recorded in
        the report and the run continues.
        """
        root_path = Path(root if root is not None else self.config.root).expanduser()
        self.logger.info("Starting conversion run for %s", root_path)

        report = ConversionReport(root=root_path, dry_run=dry_run)
        for candidate in self.discoverer.discover(root_path):
            report.outcomes.append(self.convert_file(candidate.path, dry_run=dry_run))

        self.logger.info(
            "Conversion finished: %d updated, %d skipped, %d failed",
            len(report.updated),
            len(report.skipped),
            len(report.failed),
        )
        return report

    def convert_file(self, path: Path, *, dry_run: bool = False) -> FileOutcome:
        """Convert a single file, leaving it untouched when it has no legacy blocks."""
        try:
            original = self.writer.read(path)
            result = self.extractor.rewrite(original)
            if result is None:
                self.logger.debug("No javadoc to convert, skipped: %s", path)
                return FileOutcome(path=path, status=SKIPPED)

            if dry_run:
                diff = render_diff(path, original, result.text)
                self.logger.info("Would update: %s", path)
                return FileOutcome(path=path, status=UPDATED, blocks=result.replaced, diff=diff)

            self.writer.write(path, result.text)
        except (OSError, UnicodeError) as exc:
            self._log_exception(f"Error in '{path}'", exc)
            return FileOutcome(path=path, status=FAILED, error=str(exc))

        self.logger.info("Updated: %s", path)
        return FileOutcome(path=path, status=UPDATED, blocks=result.replaced)

    def convert_text(self, text: str) -> Optional[str]:
        """Return ``text`` with its legacy blocks converted, or ``None`` when unchanged."""
        result = self.extractor.rewrite(text)
        return result.text if result is not None else None

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.error("%s: %s", message, exc)
