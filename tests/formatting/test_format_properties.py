# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_format_properties.py
#   file_relpath : tests/formatting/test_format_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for whole-manifest formatting.

For generated manifests the formatter must:
1) keep the document's values (tomlkit parses both to the same tree),
2) be idempotent: formatting formatted output changes nothing, and
3) keep laid-out array lines within `array_width` unless a line holds a
   single element.
"""

from __future__ import annotations

from typing import Any

import pytest
import tomlkit
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from cargofmt.formatting.overflow import reflow_arrays
from cargofmt.toml.tokens import TomlTokens
from tests.conftest import fmt
from tests.strategies_cargofmt import s_horizontal_array, s_manifest

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def _values(text: str) -> Any:
    return tomlkit.parse(text).unwrap()


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=30,
)
@given(manifest=s_manifest())
def test_formatting_keeps_values(manifest: str) -> None:
    """Formatting never changes what the manifest means."""
    assert _values(fmt(manifest)) == _values(manifest)


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=30,
)
@given(manifest=s_manifest())
def test_formatting_is_idempotent(manifest: str) -> None:
    """Formatted output is a fixed point."""
    once: str = fmt(manifest)
    assert fmt(once) == once


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=30,
)
@given(manifest=s_manifest())
def test_formatted_output_has_canonical_ends(manifest: str) -> None:
    """Output starts with content and ends with exactly one newline."""
    out: str = fmt(manifest)
    assert not out.startswith("\n")
    assert out.endswith("\n")
    assert not out.endswith("\n\n")


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=50,
)
@given(array=s_horizontal_array(), array_width=st.integers(min_value=0, max_value=40))
def test_layout_lines_respect_array_width(array: str, array_width: int) -> None:
    """A line wider than ``array_width`` holds at most one element."""
    tokens: TomlTokens = TomlTokens.parse(f"x = {array}\n")
    reflow_arrays(tokens, array_width, 10, 4)
    for line in tokens.to_string().splitlines():
        if len(line) > array_width:
            assert ", " not in line, line
