"""Tests for mdjavadoc.transformer."""

from __future__ import annotations

import pytest

from mdjavadoc.transformer import MarkupTransformer, apply_markup_rules, split_leader


def test_inline_code_tag_becomes_backticks() -> None:
    result = MarkupTransformer().transform(" A method that does <code>something</code>.")
    assert result == "/// A method that does `something`."


def test_unordered_list_becomes_dash_items() -> None:
    result = MarkupTransformer().transform("<ul>\n  <li>First</li>\n  <li>Second</li>\n</ul>")
    assert result == "/// - First\n/// - Second"


def test_paragraph_tag_inserts_blank_separator() -> None:
    inner = "\n     * First para.\n     * <p>Para two.</p>\n     "
    result = MarkupTransformer().transform(inner)
    assert result == "/// First para.\n    /// \n    /// Para two."


def test_paragraph_tag_mid_line_splits_the_line() -> None:
    result = MarkupTransformer().transform("\n * One.<p>Two.\n ")
    assert result == "/// One.\n/// \n/// Two."


def test_leading_paragraph_tag_does_not_open_with_blank_line() -> None:
    result = MarkupTransformer().transform("\n * <p>Intro\n ")
    assert result == "/// Intro"


def test_code_macro_becomes_backticks() -> None:
    result = MarkupTransformer().transform(" * Use {@code foo} here")
    assert result == "/// Use `foo` here"


def test_emphasis_tags_become_asterisks() -> None:
    result = MarkupTransformer().transform(" * <b>x</b> <strong>y</strong> <i>z</i> <em>w</em>")
    assert result == "/// **x** **y** *z* *w*"


def test_preformatted_code_becomes_fence() -> None:
    inner = "\n     * <pre><code>\n     * int x = 1;\n     * </code></pre>\n     "
    result = MarkupTransformer().transform(inner)
    assert result == "/// ```\n    /// int x = 1;\n    /// ```"


def test_blank_lines_are_dropped_and_bare_leaders_kept() -> None:
    inner = "\n     * Summary.\n\n     *\n     * Details.\n     "
    result = MarkupTransformer().transform(inner)
    assert result == "/// Summary.\n    /// \n    /// Details."


def test_top_level_comment_lines_are_not_indented() -> None:
    result = MarkupTransformer().transform("\n * Summary.\n * Details.\n ")
    assert result == "/// Summary.\n/// Details."


def test_only_blank_lines_produce_empty_text() -> None:
    assert MarkupTransformer().transform("\n   \n  ") == ""
    assert MarkupTransformer().transform("") == ""


def test_unknown_tags_are_left_verbatim() -> None:
    result = MarkupTransformer().transform(' * See <a href="x">x</a>')
    assert result == '/// See <a href="x">x</a>'


def test_crlf_blocks_keep_crlf_line_breaks() -> None:
    result = MarkupTransformer().transform("\r\n     * One.\r\n     * Two.\r\n     ")
    assert result == "/// One.\r\n    /// Two."


def test_base_indent_below_continuation_step_is_rejected() -> None:
    with pytest.raises(ValueError):
        MarkupTransformer(base_indent=3)


def test_apply_markup_rules_handles_one_line_pre_block() -> None:
    # <code>...</code> is rewritten first, leaving the <pre> tags in place.
    assert apply_markup_rules("<pre><code>x</code></pre>") == "<pre>`x`</pre>"
    assert apply_markup_rules("</p>") == ""


def test_split_leader_reports_column() -> None:
    assert split_leader("     * text") == (5, " text")
    assert split_leader(" *") == (1, "")
    assert split_leader("no leader * here") == (-1, "no leader * here")
