# topmark:header:start
#
#   project      : CargoFmt
#   file         : io.py
#   file_relpath : src/cargofmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate and load formatter config files.

Parsing is done with `tomlkit` and returned as plain `dict` structures before
being turned into a [`MutableConfig`][cargofmt.config.model.MutableConfig].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cargofmt.config.logging import get_logger
from cargofmt.config.model import Config, MutableConfig
from cargofmt.constants import CONFIG_FILE_NAMES
from cargofmt.errors import ConfigError

if TYPE_CHECKING:
    from cargofmt.config.logging import CargofmtLogger

logger: CargofmtLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(path, f"cannot read file: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(path, f"invalid TOML: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}


def find_config_file(start: Path) -> Path | None:
    """Return the nearest config file at or above ``start``.

    Each directory is checked for ``.rustfmt.toml`` first, then ``rustfmt.toml``,
    before moving to its parent.

    Args:
        start (Path): A directory, or a file whose directory is the starting point.

    Returns:
        Path | None: The config file found, or None when the walk reaches the root.
    """
    directory: Path = start if start.is_dir() else start.parent
    directory = directory.resolve()
    for candidate_dir in (directory, *directory.parents):
        for name in CONFIG_FILE_NAMES:
            candidate: Path = candidate_dir / name
            if candidate.is_file():
                logger.debug("Found config file %s", candidate)
                return candidate
    logger.debug("No config file found above %s", directory)
    return None


def load_config(path: Path | None) -> Config:
    """Load a config file into a frozen `Config`; None yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    if path is None:
        return MutableConfig().freeze()
    data: dict[str, Any] = load_toml_dict(path)
    logger.info("Using config file %s", path)
    return MutableConfig.from_toml_dict(data, config_file=path).freeze()


def resolve_config(manifest_path: Path, explicit: Path | None = None) -> Config:
    """Return the config that applies to ``manifest_path``.

    An explicit config file takes precedence over discovery.
    """
    return load_config(explicit if explicit is not None else find_config_file(manifest_path))
