# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_comment_wrap.py
#   file_relpath : tests/formatting/test_comment_wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Word wrapping of standalone comments."""

from __future__ import annotations

from cargofmt.formatting.comment import wrap_comment_lines
from cargofmt.toml.tokens import TomlTokens
from tests.conftest import parametrize

LONG: str = "# aaa bbb ccc ddd eee fff\n"


def _wrap(text: str, width: int, wrap: bool = True) -> str:
    tokens: TomlTokens = TomlTokens.parse(text)
    wrap_comment_lines(tokens, wrap, width)
    return tokens.to_string()


def test_long_comment_is_split_at_spaces() -> None:
    """Words are packed greedily into the width."""
    assert _wrap(LONG, 20) == "# aaa bbb ccc ddd\n# eee fff\n"


def test_comment_that_fits_is_unchanged() -> None:
    """Nothing happens at or under the width."""
    assert _wrap(LONG, 25) == LONG


def test_indentation_is_repeated() -> None:
    """Continuation lines keep the comment's indentation."""
    src: str = "a = [\n    # aaa bbb ccc ddd eee fff\n    1,\n]\n"
    expected: str = "a = [\n    # aaa bbb ccc ddd\n    # eee fff\n    1,\n]\n"
    assert _wrap(src, 24) == expected


def test_prefix_is_repeated() -> None:
    """Doubled hashes survive on every line."""
    assert _wrap("## aaa bbb ccc ddd eee fff\n", 20) == "## aaa bbb ccc ddd\n## eee fff\n"


@parametrize(
    "src",
    [
        "a = 1 # aaa bbb ccc ddd eee fff\n",
        "# aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa\n",
    ],
)
def test_untouched_comments(src: str) -> None:
    """Comments after code and single overlong words are left as they are."""
    assert _wrap(src, 20) == src


def test_disabled() -> None:
    """``wrap_comments = false`` turns the pass off."""
    assert _wrap(LONG, 10, wrap=False) == LONG
