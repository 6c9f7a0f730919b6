"""Locates traditional Javadoc blocks and substitutes their Markdown rewrite."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .models import CommentBlock
from .transformer import MARKDOWN_MARKER, MarkupTransformer

# Non-greedy so that two blocks in the same file are never merged.
JAVADOC_BLOCK_RE = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)


@dataclass
class ExtractionResult:
    """Rewritten file text and the number of blocks replaced."""

    text: str
    replaced: int


def line_prefix(text: str, offset: int) -> str:
    """Return the text between the start of the line containing ``offset`` and ``offset``."""
    return text[text.rfind("\n", 0, offset) + 1:offset]


def is_already_converted(text: str, offset: int) -> bool:
    """True when the line holding ``offset`` already starts with a Markdown comment."""
    return line_prefix(text, offset).lstrip().startswith(MARKDOWN_MARKER)


class BlockExtractor:
    """Finds ``/** ... */`` blocks in raw source text."""

    def __init__(self, transformer: MarkupTransformer | None = None) -> None:
        self.transformer = transformer or MarkupTransformer()

    def find_blocks(self, text: str) -> Iterator[CommentBlock]:
        """Yield every block that still needs conversion, left to right."""
        for match in JAVADOC_BLOCK_RE.finditer(text):
            if is_already_converted(text, match.start()):
                continue
            yield CommentBlock(start=match.start(), end=match.end(), inner=match.group(1))

    def rewrite(self, text: str) -> Optional[ExtractionResult]:
        """Return the text with all blocks converted, or ``None`` if nothing changed."""
        pieces: List[str] = []
        position = 0
        replaced = 0
        for block in self.find_blocks(text):
            pieces.append(text[position:block.start])
            pieces.append(self.transformer.transform(block.inner))
            position = block.end
            replaced += 1

        if not replaced:
            return None

        pieces.append(text[position:])
        return ExtractionResult(text="".join(pieces), replaced=replaced)
