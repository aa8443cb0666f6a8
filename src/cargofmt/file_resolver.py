# topmark:header:start
#
#   project      : CargoFmt
#   file         : file_resolver.py
#   file_relpath : src/cargofmt/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Select the ``Cargo.toml`` manifests to format.

Manifests are located the way ``cargo`` does it, without running ``cargo``:
workspace membership is read from the ``[workspace]`` table of the workspace
root (``members`` globs minus ``exclude`` paths) and local dependencies from
``path`` keys in the dependency tables.

Strategies:
  * ``ROOT`` (default): at a workspace root, the root manifest plus every
    member; elsewhere, the selected manifest only.
  * ``ALL`` (``--all``): the whole workspace plus local ``path`` dependencies,
    followed recursively.
  * ``SOME`` (``-p NAME``): the workspace members whose ``package.name`` is
    listed.

The result is filtered by gitignore-style ``--exclude`` patterns, evaluated
relative to the workspace root.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern
from tomlkit.exceptions import ParseError

from cargofmt.config.logging import get_logger
from cargofmt.constants import MANIFEST_FILE_NAME
from cargofmt.errors import ManifestError, TargetError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from cargofmt.config.logging import CargofmtLogger

logger: CargofmtLogger = get_logger(__name__)

_DEPENDENCY_TABLES: tuple[str, ...] = (
    "dependencies",
    "dev-dependencies",
    "build-dependencies",
)


class Strategy(Enum):
    """Which manifests of a workspace are selected."""

    ROOT = "root"
    ALL = "all"
    SOME = "some"


@dataclass(frozen=True)
class Selection:
    """Manifest selection requested on the command line.

    Attributes:
        strategy (Strategy): Selection strategy.
        packages (tuple[str, ...]): Package names for ``SOME``.
    """

    strategy: Strategy = Strategy.ROOT
    packages: tuple[str, ...] = ()

    @classmethod
    def from_options(cls, *, format_all: bool, packages: Sequence[str]) -> Selection:
        """Build a selection from ``--all`` and ``-p``; ``--all`` wins."""
        if format_all:
            return cls(Strategy.ALL)
        if packages:
            return cls(Strategy.SOME, tuple(packages))
        return cls(Strategy.ROOT)


# ------------------------------ manifests ------------------------------


def load_manifest(path: Path) -> dict[str, Any]:
    """Parse a manifest into plain Python values.

    Raises:
        ManifestError: The manifest cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"failed to read `{path}`: {e}") from e
    try:
        data: Any = tomlkit.parse(text).unwrap()
    except ParseError as e:
        raise ManifestError(f"failed to parse manifest at `{path}`: {e}") from e
    return cast("dict[str, Any]", data)


def package_name(data: Mapping[str, Any]) -> str | None:
    """Return ``package.name`` of a parsed manifest, or None for a virtual manifest."""
    package: Any = data.get("package")
    if isinstance(package, dict):
        name: Any = cast("dict[str, Any]", package).get("name")
        if isinstance(name, str):
            return name
    return None


def locate_manifest(manifest_path: Path | None, cwd: Path | None = None) -> Path:
    """Return the manifest to start from.

    Args:
        manifest_path (Path | None): Explicit ``--manifest-path``; must name a
            ``Cargo.toml``.
        cwd (Path | None): Directory to search from when no path is given;
            defaults to the current directory. Its ancestors are searched too.

    Returns:
        Path: Absolute path of the manifest.

    Raises:
        ManifestError: The explicit path is not a ``Cargo.toml`` or does not
            exist, or no manifest was found.
    """
    if manifest_path is not None:
        if manifest_path.name != MANIFEST_FILE_NAME:
            raise ManifestError("the manifest-path must be a path to a Cargo.toml file")
        if not manifest_path.is_file():
            raise ManifestError(f"manifest path `{manifest_path}` does not exist")
        return manifest_path.resolve()

    start: Path = (cwd or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate: Path = directory / MANIFEST_FILE_NAME
        if candidate.is_file():
            return candidate
    raise ManifestError(
        f"could not find `{MANIFEST_FILE_NAME}` in `{start}` or any parent directory"
    )


# ------------------------------ workspace ------------------------------


def _workspace_table(data: Mapping[str, Any]) -> dict[str, Any] | None:
    workspace: Any = data.get("workspace")
    return cast("dict[str, Any]", workspace) if isinstance(workspace, dict) else None


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in cast("list[Any]", value) if isinstance(v, str)]


def workspace_members(root: Path, data: Mapping[str, Any]) -> list[Path]:
    """Return the member manifests of the workspace rooted at ``root``.

    ``members`` entries are globs relative to the root directory; directories
    without a ``Cargo.toml`` are ignored. ``exclude`` entries remove a directory
    and everything below it.

    Args:
        root (Path): The workspace root manifest.
        data (Mapping[str, Any]): Its parsed content.

    Returns:
        list[Path]: Sorted member manifests, the root itself excluded.
    """
    workspace: dict[str, Any] | None = _workspace_table(data)
    if workspace is None:
        return []
    base: Path = root.parent
    excluded: list[Path] = [
        (base / e).resolve() for e in _string_list(workspace.get("exclude"))
    ]
    found: set[Path] = set()
    for pattern in _string_list(workspace.get("members")):
        for directory in sorted(base.glob(pattern)) if _is_glob(pattern) else [base / pattern]:
            manifest: Path = (directory / MANIFEST_FILE_NAME).resolve()
            if not manifest.is_file():
                logger.debug("Workspace member %s has no %s", directory, MANIFEST_FILE_NAME)
                continue
            if any(manifest.is_relative_to(e) for e in excluded):
                logger.debug("Workspace member %s is excluded", directory)
                continue
            if manifest != root:
                found.add(manifest)
    return sorted(found)


def _is_glob(pattern: str) -> bool:
    return any(ch in pattern for ch in "*?[")


def find_workspace_root(manifest: Path, data: Mapping[str, Any] | None = None) -> Path | None:
    """Return the workspace root manifest that ``manifest`` belongs to.

    A manifest with a ``[workspace]`` table is its own root. A
    ``package.workspace`` key points at the root explicitly. Otherwise the
    nearest ancestor ``Cargo.toml`` with a ``[workspace]`` listing this
    manifest as a member is the root.

    Returns:
        Path | None: The root manifest, or None for a standalone package.
    """
    data = load_manifest(manifest) if data is None else data
    if _workspace_table(data) is not None:
        return manifest
    package: Any = data.get("package")
    if isinstance(package, dict):
        explicit: Any = cast("dict[str, Any]", package).get("workspace")
        if isinstance(explicit, str):
            return (manifest.parent / explicit / MANIFEST_FILE_NAME).resolve()

    for directory in manifest.parent.parents:
        candidate: Path = directory / MANIFEST_FILE_NAME
        if not candidate.is_file():
            continue
        candidate_data: dict[str, Any] = load_manifest(candidate)
        if _workspace_table(candidate_data) is None:
            continue
        if manifest in workspace_members(candidate, candidate_data):
            return candidate
        # Cargo stops at the first enclosing workspace.
        return None
    return None


def path_dependencies(manifest: Path, data: Mapping[str, Any]) -> list[Path]:
    """Return the manifests of local ``path`` dependencies declared by ``manifest``.

    Dependency tables at the top level, under ``target.<cfg>`` and under
    ``workspace`` are searched. Paths without a ``Cargo.toml`` are ignored.
    """
    tables: list[Any] = [data.get(name) for name in _DEPENDENCY_TABLES]
    target: Any = data.get("target")
    if isinstance(target, dict):
        for cfg in cast("dict[str, Any]", target).values():
            if isinstance(cfg, dict):
                tables.extend(cast("dict[str, Any]", cfg).get(n) for n in _DEPENDENCY_TABLES)
    workspace: dict[str, Any] | None = _workspace_table(data)
    if workspace is not None:
        tables.append(workspace.get("dependencies"))

    found: list[Path] = []
    for table in tables:
        if not isinstance(table, dict):
            continue
        for spec in cast("dict[str, Any]", table).values():
            if not isinstance(spec, dict):
                continue
            path: Any = cast("dict[str, Any]", spec).get("path")
            if not isinstance(path, str):
                continue
            dep: Path = (manifest.parent / path / MANIFEST_FILE_NAME).resolve()
            if dep.is_file() and dep not in found:
                found.append(dep)
    return found


# ------------------------------ selection ------------------------------


def _unique(paths: Iterable[Path]) -> list[Path]:
    seen: set[Path] = set()
    out: list[Path] = []
    for p in paths:
        if p not in seen:
            seen.add(p)
            out.append(p)
    return out


def _select_all(start: list[Path]) -> list[Path]:
    selected: list[Path] = list(start)
    queue: list[Path] = list(start)
    while queue:
        manifest: Path = queue.pop(0)
        for dep in path_dependencies(manifest, load_manifest(manifest)):
            if dep not in selected:
                logger.debug("Adding path dependency %s", dep)
                selected.append(dep)
                queue.append(dep)
    return selected


def _select_some(candidates: list[Path], names: Sequence[str]) -> list[Path]:
    wanted: set[str] = set(names)
    selected: list[Path] = []
    for manifest in candidates:
        name: str | None = package_name(load_manifest(manifest))
        if name is not None and name in wanted:
            wanted.discard(name)
            selected.append(manifest)
    if wanted:
        raise TargetError(f"package `{sorted(wanted)[0]}` is not a member of the workspace")
    return selected


def apply_excludes(manifests: Sequence[Path], base: Path, patterns: Sequence[str]) -> list[Path]:
    """Drop manifests matching gitignore-style ``patterns`` relative to ``base``."""
    if not patterns:
        return list(manifests)
    spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, patterns)
    kept: list[Path] = []
    for manifest in manifests:
        try:
            rel: str = manifest.relative_to(base).as_posix()
        except ValueError:
            rel = manifest.as_posix()
        if spec.match_file(rel):
            logger.info("Excluded %s", rel)
            continue
        kept.append(manifest)
    return kept


def resolve_manifests(
    manifest_path: Path | None,
    selection: Selection,
    *,
    exclude_patterns: Sequence[str] = (),
    cwd: Path | None = None,
) -> list[Path]:
    """Return the manifests to format, in a deterministic order.

    Args:
        manifest_path (Path | None): ``--manifest-path``, or None to search from ``cwd``.
        selection (Selection): Which manifests of the workspace to format.
        exclude_patterns (Sequence[str]): Gitignore-style patterns relative to the
            workspace root.
        cwd (Path | None): Directory to search from; defaults to the current directory.

    Returns:
        list[Path]: Absolute manifest paths; the workspace root comes first.

    Raises:
        ManifestError: A manifest cannot be located, read or parsed.
        TargetError: No manifest is selected, or ``-p`` names an unknown package.
    """
    manifest: Path = locate_manifest(manifest_path, cwd)
    data: dict[str, Any] = load_manifest(manifest)
    root: Path | None = find_workspace_root(manifest, data)
    logger.debug("Manifest %s, workspace root %s", manifest, root)

    workspace: list[Path] = [manifest]
    if root is not None and root.is_file():
        workspace = [root, *workspace_members(root, load_manifest(root))]

    match selection.strategy:
        case Strategy.ALL:
            selected: list[Path] = _select_all(workspace)
        case Strategy.SOME:
            selected = _select_some(workspace, selection.packages)
        case _:
            selected = workspace if manifest == root else [manifest]

    base: Path = (root or manifest).parent
    selected = apply_excludes(_unique(selected), base, exclude_patterns)
    if not selected:
        raise TargetError("Failed to find targets")
    logger.info("Selected %d manifest(s)", len(selected))
    return selected
