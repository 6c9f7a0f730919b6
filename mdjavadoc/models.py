"""Core data models shared across mdjavadoc components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

UPDATED = "updated"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass(frozen=True)
class CandidateFile:
    """A source file selected for conversion."""

    path: Path

    @property
    def sort_key(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class CommentBlock:
    """A traditional Javadoc block located in a file's raw text."""

    start: int
    end: int
    inner: str


@dataclass
class FileOutcome:
    """Result of converting a single file."""

    path: Path
    status: str
    blocks: int = 0
    diff: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ConversionReport:
    """Ordered per-file outcomes for one conversion run."""

    root: Path
    outcomes: List[FileOutcome] = field(default_factory=list)
    dry_run: bool = False

    @property
    def updated(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == UPDATED]

    @property
    def skipped(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == SKIPPED]

    @property
    def failed(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == FAILED]
