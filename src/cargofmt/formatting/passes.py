# topmark:header:start
#
#   project      : CargoFmt
#   file         : passes.py
#   file_relpath : src/cargofmt/formatting/passes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run every formatting pass over one manifest, in a fixed order.

The order matters: strings and datetimes are canonical before widths are
measured, spacing and indentation are canonical before arrays are laid out,
and indentation is derived once more after the layout engine and the
trailing-comma pass changed line structure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cargofmt.config.logging import get_logger
from cargofmt.formatting.blank_lines import constrain_blank_lines
from cargofmt.formatting.comment import wrap_comment_lines
from cargofmt.formatting.datetime import normalize_datetime_separators
from cargofmt.formatting.indent import normalize_indent
from cargofmt.formatting.newline_style import apply_newline_style, normalize_newlines
from cargofmt.formatting.overflow import reflow_arrays
from cargofmt.formatting.space_separators import normalize_space_separators
from cargofmt.formatting.string import normalize_strings
from cargofmt.formatting.trailing_comma import adjust_trailing_comma
from cargofmt.formatting.trailing_spaces import trim_trailing_spaces
from cargofmt.formatting.unused_parents import remove_unused_parent_tables
from cargofmt.toml.tokens import TomlTokens

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger
    from cargofmt.config.model import Config

logger: CargofmtLogger = get_logger(__name__)


def format_tokens(tokens: TomlTokens, config: Config) -> None:
    """Apply all passes to ``tokens`` in place."""
    normalize_strings(tokens)
    normalize_datetime_separators(tokens)
    remove_unused_parent_tables(tokens)
    trim_trailing_spaces(tokens)
    normalize_space_separators(tokens)
    # Array columns are measured against the final indentation of their line.
    normalize_indent(tokens, config.hard_tabs, config.tab_spaces)
    reflow_arrays(
        tokens,
        config.effective_array_width(),
        config.short_array_element_width_threshold,
        config.tab_spaces,
    )
    constrain_blank_lines(
        tokens, config.blank_lines_lower_bound, config.blank_lines_upper_bound
    )
    adjust_trailing_comma(tokens, config.trailing_comma)
    normalize_indent(tokens, config.hard_tabs, config.tab_spaces)
    wrap_comment_lines(tokens, config.wrap_comments, config.comment_width)


def format_text(text: str, config: Config) -> str:
    """Format a manifest's text.

    Args:
        text (str): Manifest content as read from disk.
        config (Config): Formatter configuration.

    Returns:
        str: The formatted content, with line endings per ``config.newline_style``.
            ``text`` itself when ``disable_all_formatting`` is set.
    """
    if config.disable_all_formatting:
        logger.debug("Formatting disabled by configuration")
        return text
    tokens: TomlTokens = TomlTokens.parse(normalize_newlines(text))
    format_tokens(tokens, config)
    return apply_newline_style(config.newline_style, tokens.to_string(), text)
