"""Relativization policies used to map source entries onto a destination.

A policy takes a visited entry and the clone source root and returns
the relative path that is joined onto the destination root.

Two policies are provided:
- relative_to_source_name: the path leading from the entry to the bare
  name of the source directory. This is the historical behavior and the
  library default. It only accepts relative paths. For the source root
  itself (with the working directory at the source's parent) it yields
  ".", for its direct children "..".
- relative_to_source_root: the entry's location inside the source tree,
  the usual mirror-copy mapping.
"""

import os
from collections.abc import Callable
from pathlib import Path

Relativizer = Callable[[Path, Path], Path]


def relative_to_source_name(entry: Path, source: Path) -> Path:
    """Return the path leading from ``entry`` to the bare name of ``source``.

    The bare name is a relative path, so only relative entries can be
    mapped; both are anchored at the current working directory. An
    absolute entry is rejected before anything is resolved.

    Args:
        entry: Visited path under the source tree.
        source: Clone source root.

    Returns:
        Relative path from the entry to ``Path(source.name)``.

    Raises:
        ValueError: If one of ``entry`` and the source name is absolute
            and the other is not.
    """
    name = Path(source.name)
    if entry.is_absolute() != name.is_absolute():
        msg = f"Cannot relativize '{name}' against '{entry}': only one of them is absolute"
        raise ValueError(msg)
    return Path(os.path.relpath(name, start=entry))


def relative_to_source_root(entry: Path, source: Path) -> Path:
    """Return the location of ``entry`` inside the ``source`` tree.

    Args:
        entry: Visited path under the source tree.
        source: Clone source root.

    Returns:
        Relative path of the entry below the source ("." for the root).

    Raises:
        ValueError: If the entry is not located under the source.
    """
    return entry.relative_to(source)


RELATIVIZERS: dict[str, Relativizer] = {
    "name": relative_to_source_name,
    "source": relative_to_source_root,
}
