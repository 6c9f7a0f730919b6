"""Rewrites the HTML markup of a Javadoc block into Markdown comment lines."""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

from .config import DEFAULT_BASE_INDENT, MIN_BASE_INDENT

MARKDOWN_MARKER = "///"
PARAGRAPH_BREAK = "\n"

# Applied in order to every legacy line.
MARKUP_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"<p>"), PARAGRAPH_BREAK),
    (re.compile(r"</p>"), ""),
    (re.compile(r"<code>(.*?)</code>"), r"`\1`"),
    (re.compile(r"\{@code\s+([^}]+)\}"), r"`\1`"),
    (re.compile(r"<b>(.*?)</b>"), r"**\1**"),
    (re.compile(r"<strong>(.*?)</strong>"), r"**\1**"),
    (re.compile(r"<i>(.*?)</i>"), r"*\1*"),
    (re.compile(r"<em>(.*?)</em>"), r"*\1*"),
    (re.compile(r"<ul>"), ""),
    (re.compile(r"</ul>"), ""),
    (re.compile(r"<li>"), "- "),
    (re.compile(r"</li>"), ""),
    (re.compile(r"<pre><code>"), "```"),
    (re.compile(r"</code></pre>"), "```"),
)

_LEADER_RE = re.compile(r"^(\s*)\*")


def apply_markup_rules(text: str) -> str:
    """Replace the supported HTML/Javadoc tags in a single line with Markdown."""
    for pattern, replacement in MARKUP_RULES:
        text = pattern.sub(replacement, text)
    return text


def split_leader(line: str) -> tuple[int, str]:
    """Return the column of the line's leading ``*`` (or -1) and the text after it."""
    match = _LEADER_RE.match(line)
    if match is None:
        return -1, line
    return len(match.group(1)), line[match.end():]


class MarkupTransformer:
    """Converts the inner text of one ``/** ... */`` block into ``///`` lines.

    The opening line, and lines whose ``*`` sits in the first two columns,
    are emitted without indentation because the text preceding the block in
    the file already carries it. Continuation lines of member comments get
    four columns, which lines them up with the usual member indentation.
    """

    def __init__(self, base_indent: int = DEFAULT_BASE_INDENT) -> None:
        if base_indent < MIN_BASE_INDENT:
            raise ValueError(f"base_indent must be at least {MIN_BASE_INDENT}")
        self.base_indent = base_indent
        self._prefix = " " * base_indent + MARKDOWN_MARKER + " "

    def transform(self, inner: str) -> str:
        """Return the Markdown comment text replacing a legacy block."""
        newline = "\r\n" if "\r\n" in inner else "\n"
        emitted: List[str] = []

        for raw_line in inner.split("\n"):
            if not raw_line.strip():
                continue

            column, text = split_leader(raw_line)
            segments = apply_markup_rules(text).split(PARAGRAPH_BREAK)

            head = segments[0].strip()
            # A line emptied by tag removal (e.g. <ul>) produces no output;
            # a bare leader line is kept as a blank separator.
            if head or not text.strip():
                emitted.append(self._render(column, head, first=not emitted))

            for segment in segments[1:]:
                if emitted:
                    emitted.append(self._render(column, "", first=False))
                content = segment.strip()
                if content:
                    emitted.append(self._render(column, content, first=not emitted))

        return newline.join(emitted)

    def _render(self, column: int, content: str, *, first: bool) -> str:
        offset = self.base_indent if column < 2 or first else self.base_indent - 4
        return self._prefix[offset:] + content
