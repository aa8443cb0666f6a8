# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_format_manifest.py
#   file_relpath : tests/formatting/test_format_manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end formatting of whole manifests."""

from __future__ import annotations

from cargofmt.config.types import Heuristics, NewlineStyle, SeparatorTactic
from tests.conftest import fmt

MANIFEST: str = """\
[package]
name="demo"
version = "0.1.0"
authors = [
  "Jane Doe <jane@example.com>",
]
keywords = ["cli", "toml"]
categories = ["command-line-utilities", "development-tools"]

[dependencies]
serde = {version="1.0",features=["derive"]}
[target]
[target.'cfg(unix)'.dependencies]
libc = '0.2'
"""

FORMATTED: str = """\
[package]
name = "demo"
version = "0.1.0"
authors = [
    "Jane Doe <jane@example.com>",
]
keywords = ["cli", "toml"]
categories = [
    "command-line-utilities",
    "development-tools",
]

[dependencies]
serde = { version = "1.0", features = ["derive"] }
[target."cfg(unix)".dependencies]
libc = "0.2"
"""


def test_realistic_manifest() -> None:
    """Every pass contributes to the formatted manifest."""
    assert fmt(MANIFEST) == FORMATTED


def test_formatting_is_idempotent() -> None:
    """Formatted output is a fixed point."""
    assert fmt(FORMATTED) == FORMATTED


def test_disable_all_formatting_returns_input() -> None:
    """The input is returned verbatim, line endings included."""
    text: str = "a=1\r\n\r\n\r\nb = [1,2]"
    assert fmt(text, disable_all_formatting=True) == text


def test_hard_tabs() -> None:
    """Expanded arrays are indented with tabs."""
    assert fmt('a = ["aaaaaaaaaaaa"]\n', hard_tabs=True) == 'a = [\n\t"aaaaaaaaaaaa",\n]\n'


def test_trailing_comma_never() -> None:
    """Vertical arrays lose their trailing comma."""
    src: str = 'a = [\n    "aaaaaaaaaaaa",\n]\n'
    expected: str = 'a = [\n    "aaaaaaaaaaaa"\n]\n'
    assert fmt(src, trailing_comma=SeparatorTactic.NEVER) == expected


def test_heuristics_off_makes_arrays_vertical() -> None:
    """An array width of zero leaves no room for single-line arrays."""
    src: str = "a = [1, 2]\n"
    expected: str = "a = [\n    1,\n    2,\n]\n"
    assert fmt(src, use_small_heuristics=Heuristics.OFF) == expected


def test_explicit_array_width() -> None:
    """``array_width`` overrides the heuristics."""
    assert fmt("a = [1, 2, 3]\n", array_width=13) == "a = [1, 2, 3]\n"
    assert fmt("a = [1, 2, 3]\n", array_width=12) == "a = [\n    1,\n    2,\n    3,\n]\n"


def test_over_spaced_array_is_judged_by_its_canonical_form() -> None:
    """Tabs and extra spaces are tidied before layout, so the result is stable."""
    once: str = fmt("a = [\t1 ,  2 ,  3 ]\n", array_width=13)
    assert once == "a = [1, 2, 3]\n"
    assert fmt(once, array_width=13) == once


def test_short_vertical_array_collapses() -> None:
    """A vertical array that fits goes back on one line."""
    assert fmt("a = [\n    1,\n    2,\n]\n") == "a = [1, 2]\n"


def test_auto_newline_style_keeps_crlf() -> None:
    """``Auto`` follows the first line ending of the input."""
    src: str = "a=1\r\nb = [1,2]\r\n"
    assert fmt(src, newline_style=NewlineStyle.AUTO) == "a = 1\r\nb = [1, 2]\r\n"


def test_windows_newline_style() -> None:
    """``Windows`` converts every line ending."""
    assert fmt("a = 1\nb = 2\n", newline_style=NewlineStyle.WINDOWS) == "a = 1\r\nb = 2\r\n"


def test_comment_wrapping_runs_last() -> None:
    """Wrapped comments are not rejoined by later passes."""
    src: str = "# aaa bbb ccc ddd eee fff\na = 1\n"
    expected: str = "# aaa bbb ccc ddd\n# eee fff\na = 1\n"
    assert fmt(src, wrap_comments=True, comment_width=20) == expected


def test_blank_line_bounds() -> None:
    """Sections are spaced within the configured bounds."""
    src: str = "[a]\nx = 1\n[b]\ny = 2\n"
    expected: str = "[a]\n\nx = 1\n\n[b]\n\ny = 2\n"
    assert fmt(src, blank_lines_lower_bound=1, blank_lines_upper_bound=2) == expected
