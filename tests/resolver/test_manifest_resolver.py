# topmark:header:start
#
#   project      : CargoFmt
#   file         : test_manifest_resolver.py
#   file_relpath : tests/resolver/test_manifest_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for manifest selection in cargofmt.file_resolver.

The fixture workspace looks like this:

    ws/
      Cargo.toml          workspace root and package "root"
      crates/a/           member "a"
      crates/b/           member "b"
      crates/skip/        excluded from the workspace
      vendor/local/       path dependency of the root
      vendor/deeper/      path dependency of vendor/local
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cargofmt.errors import ManifestError, TargetError
from cargofmt.file_resolver import (
    Selection,
    Strategy,
    apply_excludes,
    find_workspace_root,
    load_manifest,
    locate_manifest,
    package_name,
    path_dependencies,
    resolve_manifests,
    workspace_members,
)
from tests.conftest import parametrize, write_manifest

ROOT_MANIFEST: str = """\
[workspace]
members = ["crates/*"]
exclude = ["crates/skip"]

[package]
name = "root"
version = "0.1.0"

[dependencies]
local = { path = "vendor/local" }
"""


def _package(name: str, extra: str = "") -> str:
    return f'[package]\nname = "{name}"\nversion = "0.1.0"\n{extra}'


@pytest.fixture
def ws(tmp_path: Path) -> Path:
    """Create the fixture workspace and return its (resolved) root directory."""
    root: Path = (tmp_path / "ws").resolve()
    write_manifest(root, ROOT_MANIFEST)
    write_manifest(root / "crates" / "a", _package("a"))
    write_manifest(root / "crates" / "b", _package("b"))
    write_manifest(root / "crates" / "skip", _package("skip"))
    (root / "crates" / "notes").mkdir()
    write_manifest(
        root / "vendor" / "local",
        _package("local", '\n[dependencies]\ndeeper = { path = "../deeper" }\n'),
    )
    write_manifest(root / "vendor" / "deeper", _package("deeper"))
    return root


def _names(paths: list[Path]) -> list[str]:
    return [package_name(load_manifest(p)) or "" for p in paths]


@parametrize(
    "format_all, packages, expected",
    [
        (False, [], Selection(Strategy.ROOT)),
        (False, ["a", "b"], Selection(Strategy.SOME, ("a", "b"))),
        (True, ["a"], Selection(Strategy.ALL)),
    ],
)
def test_selection_from_options(
    format_all: bool, packages: list[str], expected: Selection
) -> None:
    """``--all`` wins over ``-p``; no option selects the root."""
    assert Selection.from_options(format_all=format_all, packages=packages) == expected


def test_workspace_members(ws: Path) -> None:
    """Globs are expanded; excluded and manifest-less directories are dropped."""
    root: Path = ws / "Cargo.toml"
    members: list[Path] = workspace_members(root, load_manifest(root))
    assert members == [ws / "crates" / "a" / "Cargo.toml", ws / "crates" / "b" / "Cargo.toml"]


def test_find_workspace_root(ws: Path) -> None:
    """Members find their root; excluded crates are standalone."""
    root: Path = ws / "Cargo.toml"
    assert find_workspace_root(root) == root
    assert find_workspace_root(ws / "crates" / "a" / "Cargo.toml") == root
    assert find_workspace_root(ws / "crates" / "skip" / "Cargo.toml") is None


def test_explicit_package_workspace_key(tmp_path: Path) -> None:
    """``package.workspace`` names the root directly."""
    member: Path = write_manifest(
        tmp_path / "member", _package("m", '\nworkspace = "../elsewhere"\n')
    )
    assert find_workspace_root(member) == (tmp_path / "elsewhere" / "Cargo.toml").resolve()


def test_path_dependencies(ws: Path) -> None:
    """Local ``path`` dependencies resolve to their manifests."""
    root: Path = ws / "Cargo.toml"
    assert path_dependencies(root, load_manifest(root)) == [
        ws / "vendor" / "local" / "Cargo.toml"
    ]


def test_target_specific_path_dependencies(tmp_path: Path) -> None:
    """Dependency tables under ``target.<cfg>`` are searched too."""
    write_manifest(tmp_path / "sys", _package("sys"))
    manifest: Path = write_manifest(
        tmp_path / "app",
        _package("app", "\n[target.'cfg(unix)'.dependencies]\nsys = { path = \"../sys\" }\n"),
    )
    deps: list[Path] = path_dependencies(manifest, load_manifest(manifest))
    assert deps == [(tmp_path / "sys" / "Cargo.toml").resolve()]


def test_root_strategy_at_workspace_root(ws: Path) -> None:
    """The root manifest comes first, then the members."""
    selected: list[Path] = resolve_manifests(None, Selection(), cwd=ws)
    assert _names(selected) == ["root", "a", "b"]


def test_root_strategy_inside_member(ws: Path) -> None:
    """Inside a member only that member is selected."""
    selected: list[Path] = resolve_manifests(None, Selection(), cwd=ws / "crates" / "a")
    assert _names(selected) == ["a"]


def test_all_strategy_follows_path_dependencies(ws: Path) -> None:
    """``--all`` adds path dependencies, recursively."""
    selected: list[Path] = resolve_manifests(None, Selection(Strategy.ALL), cwd=ws / "crates" / "a")
    assert _names(selected) == ["root", "a", "b", "local", "deeper"]


def test_some_strategy(ws: Path) -> None:
    """``-p`` selects members by package name."""
    selection: Selection = Selection(Strategy.SOME, ("b",))
    assert _names(resolve_manifests(ws / "Cargo.toml", selection)) == ["b"]


def test_some_strategy_unknown_package(ws: Path) -> None:
    """Naming a package outside the workspace is an error."""
    with pytest.raises(TargetError, match="nope"):
        resolve_manifests(ws / "Cargo.toml", Selection(Strategy.SOME, ("nope",)))


def test_exclude_patterns(ws: Path) -> None:
    """Gitignore-style patterns are matched relative to the workspace root."""
    selected: list[Path] = resolve_manifests(
        None, Selection(), exclude_patterns=["crates/b/"], cwd=ws
    )
    assert _names(selected) == ["root", "a"]


def test_excluding_everything_is_an_error(ws: Path) -> None:
    """An empty selection fails instead of silently doing nothing."""
    with pytest.raises(TargetError):
        resolve_manifests(None, Selection(), exclude_patterns=["Cargo.toml"], cwd=ws)


def test_apply_excludes_without_patterns(ws: Path) -> None:
    """No patterns keeps everything."""
    paths: list[Path] = [ws / "Cargo.toml"]
    assert apply_excludes(paths, ws, []) == paths


@parametrize(
    "name, message",
    [
        ("Cargo.lock", "must be a path to a Cargo.toml"),
        ("missing/Cargo.toml", "does not exist"),
    ],
)
def test_locate_manifest_errors(tmp_path: Path, name: str, message: str) -> None:
    """Bad ``--manifest-path`` values are rejected."""
    with pytest.raises(ManifestError, match=message):
        locate_manifest(tmp_path / name)


def test_locate_manifest_walks_up(ws: Path) -> None:
    """Without ``--manifest-path`` the nearest ancestor manifest is used."""
    nested: Path = ws / "crates" / "notes"
    assert locate_manifest(None, nested) == ws / "Cargo.toml"


def test_invalid_manifest(tmp_path: Path) -> None:
    """Unparseable manifests raise ManifestError."""
    manifest: Path = write_manifest(tmp_path, "[package\n")
    with pytest.raises(ManifestError, match="failed to parse"):
        resolve_manifests(manifest, Selection())
