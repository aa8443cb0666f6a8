# topmark:header:start
#
#   project      : CargoFmt
#   file         : model.py
#   file_relpath : src/cargofmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter configuration model.

This module defines:
    - `Config`: an immutable, runtime snapshot consumed by the formatting passes.
    - `MutableConfig`: a mutable builder filled from a config file; it can be
      frozen into `Config` and thawed back for edits.

Filesystem discovery and TOML I/O live in [`cargofmt.config.io`][cargofmt.config.io]
to keep this model import-light.

Option names and defaults follow the rustfmt config file, so one
``rustfmt.toml`` configures both ``cargo fmt`` and CargoFmt. Keys that do not
affect manifests are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

from cargofmt.config.getters import get_bool_checked, get_enum_checked, get_int_checked
from cargofmt.config.logging import get_logger
from cargofmt.config.types import Heuristics, NewlineStyle, SeparatorTactic
from cargofmt.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from cargofmt.config.logging import CargofmtLogger

logger: CargofmtLogger = get_logger(__name__)

# Share of max_width used for arrays under the Default heuristics.
DEFAULT_ARRAY_WIDTH_PERCENT: Final[int] = 60

_BOOL_KEYS: Final[tuple[str, ...]] = (
    "disable_all_formatting",
    "format_generated_files",
    "hard_tabs",
    "wrap_comments",
    "error_on_line_overflow",
)
_INT_KEYS: Final[tuple[str, ...]] = (
    "generated_marker_line_search_limit",
    "blank_lines_lower_bound",
    "blank_lines_upper_bound",
    "tab_spaces",
    "max_width",
    "array_width",
    "short_array_element_width_threshold",
    "comment_width",
)
_ENUM_KEYS: Final[dict[str, type[Any]]] = {
    "newline_style": NewlineStyle,
    "trailing_comma": SeparatorTactic,
    "use_small_heuristics": Heuristics,
}

KNOWN_KEYS: Final[frozenset[str]] = frozenset((*_BOOL_KEYS, *_INT_KEYS, *_ENUM_KEYS))


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for one formatting run.

    Attributes:
        disable_all_formatting (bool): Leave every manifest untouched.
        newline_style (NewlineStyle): Line ending written to output.
        format_generated_files (bool): Format files carrying an ``@generated`` marker.
        generated_marker_line_search_limit (int): Number of leading lines searched for
            the marker.
        blank_lines_lower_bound (int): Minimum blank lines kept between lines.
        blank_lines_upper_bound (int): Maximum blank lines kept between lines.
        trailing_comma (SeparatorTactic): Trailing comma policy for arrays.
        hard_tabs (bool): Indent with tabs instead of spaces.
        tab_spaces (int): Width of one indentation level, and of a tab character.
        max_width (int): Maximum line width.
        array_width (int | None): Explicit array width; None derives it from ``max_width``.
        short_array_element_width_threshold (int): Horizontal arrays with a wider element
            are expanded.
        use_small_heuristics (Heuristics): How ``array_width`` is derived when unset.
        wrap_comments (bool): Word-wrap long standalone comments.
        comment_width (int): Maximum comment width when wrapping.
        error_on_line_overflow (bool): Report lines longer than ``max_width``.
        config_file (Path | None): Source file, or None for built-in defaults.
        diagnostics (tuple[Diagnostic, ...]): Warnings recorded while loading.
    """

    disable_all_formatting: bool = False
    newline_style: NewlineStyle = NewlineStyle.AUTO
    format_generated_files: bool = False
    generated_marker_line_search_limit: int = 5
    blank_lines_lower_bound: int = 0
    blank_lines_upper_bound: int = 1
    trailing_comma: SeparatorTactic = SeparatorTactic.VERTICAL
    hard_tabs: bool = False
    tab_spaces: int = 4
    max_width: int = 100
    array_width: int | None = None
    short_array_element_width_threshold: int = 10
    use_small_heuristics: Heuristics = Heuristics.DEFAULT
    wrap_comments: bool = False
    comment_width: int = 80
    error_on_line_overflow: bool = False
    config_file: Path | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    def effective_array_width(self) -> int:
        """Return the width budget handed to the array layout engine.

        An explicit ``array_width`` wins. Otherwise ``Default`` takes 60% of
        ``max_width`` (truncated), ``Off`` yields 0 (every non-empty array goes
        vertical) and ``Max`` uses ``max_width`` itself.
        """
        if self.array_width is not None:
            return self.array_width
        match self.use_small_heuristics:
            case Heuristics.OFF:
                return 0
            case Heuristics.MAX:
                return self.max_width
            case _:
                return self.max_width * DEFAULT_ARRAY_WIDTH_PERCENT // 100

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            disable_all_formatting=self.disable_all_formatting,
            newline_style=self.newline_style,
            format_generated_files=self.format_generated_files,
            generated_marker_line_search_limit=self.generated_marker_line_search_limit,
            blank_lines_lower_bound=self.blank_lines_lower_bound,
            blank_lines_upper_bound=self.blank_lines_upper_bound,
            trailing_comma=self.trailing_comma,
            hard_tabs=self.hard_tabs,
            tab_spaces=self.tab_spaces,
            max_width=self.max_width,
            array_width=self.array_width,
            short_array_element_width_threshold=self.short_array_element_width_threshold,
            use_small_heuristics=self.use_small_heuristics,
            wrap_comments=self.wrap_comments,
            comment_width=self.comment_width,
            error_on_line_overflow=self.error_on_line_overflow,
            config_file=self.config_file,
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used while loading a config file.

    Mirrors the fields of `Config`; see there for their meaning. Produce the
    runtime snapshot with `freeze`.
    """

    disable_all_formatting: bool = False
    newline_style: NewlineStyle = NewlineStyle.AUTO
    format_generated_files: bool = False
    generated_marker_line_search_limit: int = 5
    blank_lines_lower_bound: int = 0
    blank_lines_upper_bound: int = 1
    trailing_comma: SeparatorTactic = SeparatorTactic.VERTICAL
    hard_tabs: bool = False
    tab_spaces: int = 4
    max_width: int = 100
    array_width: int | None = None
    short_array_element_width_threshold: int = 10
    use_small_heuristics: Heuristics = Heuristics.DEFAULT
    wrap_comments: bool = False
    comment_width: int = 80
    error_on_line_overflow: bool = False
    config_file: Path | None = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def sanitize(self) -> None:
        """Repair inconsistent combinations, recording a warning for each."""
        if self.blank_lines_lower_bound > self.blank_lines_upper_bound:
            msg: str = (
                f"blank_lines_lower_bound ({self.blank_lines_lower_bound}) exceeds "
                f"blank_lines_upper_bound ({self.blank_lines_upper_bound}); "
                "clamping the lower bound"
            )
            logger.warning("%s", msg)
            self.diagnostics.add_warning(msg)
            self.blank_lines_lower_bound = self.blank_lines_upper_bound
        if self.tab_spaces == 0:
            msg = "tab_spaces must be at least 1; using 4"
            logger.warning("%s", msg)
            self.diagnostics.add_warning(msg)
            self.tab_spaces = 4

    def freeze(self) -> Config:
        """Sanitize and freeze this builder into an immutable `Config`."""
        self.sanitize()
        return Config(
            disable_all_formatting=self.disable_all_formatting,
            newline_style=self.newline_style,
            format_generated_files=self.format_generated_files,
            generated_marker_line_search_limit=self.generated_marker_line_search_limit,
            blank_lines_lower_bound=self.blank_lines_lower_bound,
            blank_lines_upper_bound=self.blank_lines_upper_bound,
            trailing_comma=self.trailing_comma,
            hard_tabs=self.hard_tabs,
            tab_spaces=self.tab_spaces,
            max_width=self.max_width,
            array_width=self.array_width,
            short_array_element_width_threshold=self.short_array_element_width_threshold,
            use_small_heuristics=self.use_small_heuristics,
            wrap_comments=self.wrap_comments,
            comment_width=self.comment_width,
            error_on_line_overflow=self.error_on_line_overflow,
            config_file=self.config_file,
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML table.

        Absent keys keep their defaults. Mistyped values keep their defaults and
        record a warning. Unknown keys are logged at DEBUG level and ignored.

        Args:
            data (Mapping[str, Any]): The parsed TOML document.
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting MutableConfig instance.
        """
        draft: MutableConfig = cls(config_file=config_file)
        diags: DiagnosticLog = draft.diagnostics

        for key in sorted(set(data) - KNOWN_KEYS):
            logger.debug("Ignoring option '%s' (does not apply to manifests)", key)

        for key in _BOOL_KEYS:
            b: bool | None = get_bool_checked(data, key, diagnostics=diags)
            if b is not None:
                setattr(draft, key, b)

        for key in _INT_KEYS:
            i: int | None = get_int_checked(data, key, diagnostics=diags)
            if i is not None:
                setattr(draft, key, i)

        for key, enum_cls in _ENUM_KEYS.items():
            e: Any = get_enum_checked(data, key, enum_cls, diagnostics=diags)
            if e is not None:
                setattr(draft, key, e)

        logger.trace("Config draft from %s: %s", config_file or "<dict>", draft)
        return draft
