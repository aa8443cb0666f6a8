# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_indent_pass.py
#   file_relpath : tests/formatting/test_indent_pass.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation by bracket nesting."""

from __future__ import annotations

from cargofmt.formatting.indent import normalize_indent
from cargofmt.toml.tokens import TomlTokens
from tests.conftest import parametrize


def _indent(text: str, hard_tabs: bool = False, tab_spaces: int = 4) -> str:
    tokens: TomlTokens = TomlTokens.parse(text)
    normalize_indent(tokens, hard_tabs, tab_spaces)
    return tokens.to_string()


@parametrize(
    "src, expected",
    [
        ("a = [\n1,\n  2,\n]\n", "a = [\n    1,\n    2,\n]\n"),
        ("[a]\n  b = 1\n", "[a]\nb = 1\n"),
        ("a = [\n[\n1,\n],\n]\n", "a = [\n    [\n        1,\n    ],\n]\n"),
        ("a = [\n    1,\n  ]\n", "a = [\n    1,\n]\n"),
        ("a = [\n    1,\n   \n]\n", "a = [\n    1,\n\n]\n"),
    ],
)
def test_levels(src: str, expected: str) -> None:
    """Lines are indented one unit per open bracket; closers dedent their line."""
    assert _indent(src) == expected


def test_hard_tabs_and_tab_spaces() -> None:
    """The indent unit is a tab or ``tab_spaces`` spaces."""
    src: str = "a = [\n1,\n]\n"
    assert _indent(src, hard_tabs=True) == "a = [\n\t1,\n]\n"
    assert _indent(src, tab_spaces=2) == "a = [\n  1,\n]\n"


def test_multiline_string_body_is_untouched() -> None:
    """Continuation lines of a multi-line string belong to the string token."""
    src: str = 'a = """\n  keep\n    this"""\n'
    assert _indent(src) == src
