"""Source file discovery for conversion runs."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Sequence

from .config import DEFAULT_SUFFIX
from .logging import get_logger
from .models import CandidateFile

# Never entered, whatever the configured exclusions say.
_SKIPPED_DIRS = frozenset({".git", ".hg", ".svn", ".idea", ".gradle", "node_modules"})


class ExcludePattern(NamedTuple):
    """One ``exclude_paths`` entry.

    ``generated/`` prunes any directory named ``generated``; ``*Test.java``
    drops matching files anywhere; a pattern with an inner or leading slash,
    such as ``/build`` or ``src/gen/``, is matched against the whole path
    relative to the root.
    """

    glob: str
    directory_only: bool
    whole_path: bool

    @classmethod
    def parse(cls, raw: str) -> Optional["ExcludePattern"]:
        text = raw.strip()
        directory_only = text.endswith("/")
        text = text.rstrip("/")
        glob = text.lstrip("/")
        if not glob:
            return None
        return cls(glob=glob, directory_only=directory_only, whole_path="/" in text)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        # Parents are pruned before their children are visited, so only the
        # last segment needs checking for segment patterns.
        target = rel_path if self.whole_path else rel_path.rsplit("/", 1)[-1]
        return fnmatchcase(target, self.glob)


class FileDiscoverer:
    """Enumerates source files under a root directory in sorted order."""

    def __init__(self, suffix: str = DEFAULT_SUFFIX, exclude_paths: Sequence[str] = ()) -> None:
        self.suffix = suffix
        self.excludes: List[ExcludePattern] = [
            pattern
            for pattern in (ExcludePattern.parse(raw) for raw in exclude_paths)
            if pattern is not None
        ]
        self.logger = get_logger("discovery")

    def discover(self, root: Path) -> Iterator[CandidateFile]:
        """Yield files ending with the configured suffix, sorted by path.

        The directory walk completes before the first file is yielded, so a
        failure to read the root surfaces on the first ``next()`` call and
        before any file has been touched.
        """
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise FileNotFoundError(f"Root path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {root}")

        candidates = [CandidateFile(path=path) for path in self._walk(root_path)]
        self.logger.debug("Discovered %d %s file(s) under %s", len(candidates), self.suffix, root_path)
        yield from sorted(candidates, key=lambda candidate: candidate.sort_key)

    def is_excluded(self, rel_path: str, is_dir: bool) -> bool:
        return any(pattern.matches(rel_path, is_dir) for pattern in self.excludes)

    def _walk(self, root: Path) -> Iterator[Path]:
        def _on_error(exc: OSError) -> None:
            if exc.filename is not None and Path(exc.filename) == root:
                raise exc
            self.logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc.strerror)

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            def _relative(name: str) -> str:
                return f"{rel_dir}/{name}" if rel_dir else name

            dirnames[:] = [
                name
                for name in dirnames
                if name not in _SKIPPED_DIRS and not self.is_excluded(_relative(name), True)
            ]

            for filename in filenames:
                if not filename.endswith(self.suffix) or self.is_excluded(_relative(filename), False):
                    continue
                path = current_dir / filename
                if path.is_file():
                    yield path
