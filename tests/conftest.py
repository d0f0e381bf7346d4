"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Source directory with a nested layout.

    src/
        a.txt          "alpha"
        sub/
            b.txt      "beta"
            deeper/
                c.txt  "gamma"
    """
    src = tmp_path / "src"
    (src / "sub" / "deeper").mkdir(parents=True)
    (src / "a.txt").write_text("alpha")
    (src / "sub" / "b.txt").write_text("beta")
    (src / "sub" / "deeper" / "c.txt").write_text("gamma")
    return src


@pytest.fixture
def empty_destination(tmp_path: Path) -> Path:
    """Existing, empty destination directory."""
    dst = tmp_path / "dst"
    dst.mkdir()
    return dst


@pytest.fixture
def clear_tree(tmp_path: Path) -> Path:
    """Directory C with a subdirectory holding one file.

    C/
        sub/
            file.txt
    """
    target = tmp_path / "C"
    (target / "sub").mkdir(parents=True)
    (target / "sub" / "file.txt").write_text("content")
    return target


DEEP_TREE_DEPTH = 1100


@pytest.fixture
def deep_tree(tmp_path: Path) -> Iterator[Path]:
    """Chain of DEEP_TREE_DEPTH nested directories ending in one file.

    deep/d/d/.../d/f.txt
    """
    root = tmp_path / "deep"
    root.mkdir()
    current = root
    # os.makedirs recurses once per missing level
    for _ in range(DEEP_TREE_DEPTH):
        current = current / "d"
        current.mkdir()
    (current / "f.txt").write_text("bottom")

    yield root

    # remove bottom-up; shutil.rmtree may also recurse once per level
    (current / "f.txt").unlink(missing_ok=True)
    while current != tmp_path:
        if current.exists():
            current.rmdir()
        current = current.parent
