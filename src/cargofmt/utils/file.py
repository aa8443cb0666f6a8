# topmark:header:start
#
#   project      : CargoFmt
#   file         : file.py
#   file_relpath : src/cargofmt/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from cargofmt.config.logging import get_logger

logger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path): The root path to compute the relative path from.

    Returns:
        Path: The relative path from root_path to file_path, using ``..`` when
            ``file_path`` lies outside ``root_path``.
    """
    resolved_path = file_path.resolve()
    resolved_root = root_path.resolve()
    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def atomic_write_text(path: Path, text: str) -> int:
    """Replace ``path`` with ``text`` (UTF-8) in one rename.

    The content goes to a temporary file in the same directory first, so a
    crash never leaves a half-written manifest. The original file's permission
    bits are kept.

    Returns:
        int: Number of bytes written.
    """
    data: bytes = text.encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        try:
            os.chmod(tmp_name, path.stat().st_mode & 0o7777)
        except FileNotFoundError:
            pass
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
