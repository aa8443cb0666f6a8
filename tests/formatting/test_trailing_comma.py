# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_trailing_comma.py
#   file_relpath : tests/formatting/test_trailing_comma.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Trailing comma tactics for arrays and inline tables."""

from __future__ import annotations

from cargofmt.config.types import SeparatorTactic
from cargofmt.formatting.trailing_comma import adjust_trailing_comma
from cargofmt.toml.tokens import TomlTokens
from tests.conftest import parametrize

VERTICAL: str = "a = [\n    1,\n    2\n]\n"
VERTICAL_WITH_COMMA: str = "a = [\n    1,\n    2,\n]\n"


def _comma(text: str, tactic: SeparatorTactic) -> str:
    tokens: TomlTokens = TomlTokens.parse(text)
    adjust_trailing_comma(tokens, tactic)
    return tokens.to_string()


@parametrize(
    "src, tactic, expected",
    [
        ("a = [1, 2,]\n", SeparatorTactic.VERTICAL, "a = [1, 2]\n"),
        ("a = [1, 2]\n", SeparatorTactic.VERTICAL, "a = [1, 2]\n"),
        (VERTICAL, SeparatorTactic.VERTICAL, VERTICAL_WITH_COMMA),
        ("a = [1, 2]\n", SeparatorTactic.ALWAYS, "a = [1, 2,]\n"),
        (VERTICAL, SeparatorTactic.ALWAYS, VERTICAL_WITH_COMMA),
        (VERTICAL_WITH_COMMA, SeparatorTactic.NEVER, VERTICAL),
        ("a = [1, 2,]\n", SeparatorTactic.NEVER, "a = [1, 2]\n"),
    ],
)
def test_tactics(src: str, tactic: SeparatorTactic, expected: str) -> None:
    """``Vertical`` wants a comma on multi-line arrays only."""
    assert _comma(src, tactic) == expected


def test_comma_goes_before_a_trailing_comment() -> None:
    """The comma follows the value, not the comment."""
    src: str = "a = [\n    1 # one\n]\n"
    assert _comma(src, SeparatorTactic.VERTICAL) == "a = [\n    1, # one\n]\n"


def test_empty_arrays_never_get_a_comma() -> None:
    """There is no last element to follow."""
    assert _comma("a = []\n", SeparatorTactic.ALWAYS) == "a = []\n"
    assert _comma("a = [\n]\n", SeparatorTactic.ALWAYS) == "a = [\n]\n"


def test_nested_arrays_follow_their_own_shape() -> None:
    """Each array is judged by its own line structure."""
    src: str = "a = [\n    [1, 2,],\n    [3]\n]\n"
    expected: str = "a = [\n    [1, 2],\n    [3],\n]\n"
    assert _comma(src, SeparatorTactic.VERTICAL) == expected


def test_inline_tables_lose_trailing_commas() -> None:
    """Inline tables and the arrays inside them never keep a trailing comma."""
    src: str = "x = { a = [1, 2,], }\n"
    assert _comma(src, SeparatorTactic.ALWAYS) == "x = { a = [1, 2] }\n"
