"""Unit tests for relativization policies."""

from pathlib import Path

import pytest
from folderops.folders.relativize import (
    RELATIVIZERS,
    relative_to_source_name,
    relative_to_source_root,
)


class TestRelativeToSourceName:
    """Tests for the legacy name-based mapping."""

    def test_source_itself(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The source root maps to '.' when run from its parent."""
        monkeypatch.chdir(tmp_path)

        assert relative_to_source_name(Path("A"), Path("A")) == Path(".")

    def test_direct_child(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A direct child maps to its parent, '..'."""
        monkeypatch.chdir(tmp_path)

        assert relative_to_source_name(Path("A/f.txt"), Path("A")) == Path("..")

    def test_nested_child(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each level of nesting adds one '..'."""
        monkeypatch.chdir(tmp_path)

        assert relative_to_source_name(Path("A/sub/g.txt"), Path("A")) == Path("../..")

    def test_absolute_entry_rejected(self) -> None:
        """An absolute entry cannot be related to the bare source name."""
        source = Path("/data/A")

        with pytest.raises(ValueError, match="absolute"):
            relative_to_source_name(source, source)
        with pytest.raises(ValueError, match="absolute"):
            relative_to_source_name(source / "f.txt", source)

    def test_absolute_entry_rejected_for_any_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The rejection does not depend on the working directory."""
        source = tmp_path.resolve() / "A"

        for cwd in (tmp_path, tmp_path.parent):
            monkeypatch.chdir(cwd)
            with pytest.raises(ValueError):
                relative_to_source_name(source, source)

    def test_relative_entry_with_absolute_source_uses_name(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Only the source's name matters, so a relative entry still maps."""
        monkeypatch.chdir(tmp_path)

        assert relative_to_source_name(Path("A/f.txt"), Path("/elsewhere/A")) == Path("..")


class TestRelativeToSourceRoot:
    """Tests for the mirror mapping."""

    def test_source_itself(self) -> None:
        """The root maps to '.'."""
        assert relative_to_source_root(Path("/x/A"), Path("/x/A")) == Path(".")

    def test_nested(self) -> None:
        """Entries keep their location inside the source tree."""
        assert relative_to_source_root(Path("/x/A/sub/g.txt"), Path("/x/A")) == Path("sub/g.txt")

    def test_outside_source_raises(self) -> None:
        """Entries outside the source cannot be mapped."""
        with pytest.raises(ValueError):
            relative_to_source_root(Path("/y/f.txt"), Path("/x/A"))


def test_registry_names() -> None:
    """The registry exposes both policies by name."""
    assert RELATIVIZERS == {
        "name": relative_to_source_name,
        "source": relative_to_source_root,
    }
