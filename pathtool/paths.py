"""Parsing, editing and cleaning of colon-separated PATH-like strings."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable

SEPARATOR = ":"


def _unique(items: Iterable[str]) -> list[str]:
    """Return the items in their first-seen order with repeats dropped."""
    return list(dict.fromkeys(items))


def parse_raw_path(source: str) -> list[str]:
    """Split a PATH-like string into its non-empty entries, keeping repeats."""
    return [entry for entry in source.split(SEPARATOR) if entry]


def parse_path(source: str) -> list[str]:
    """Split a PATH-like string into its distinct non-empty entries."""
    return _unique(parse_raw_path(source))


def join_path(dirs: Iterable[str]) -> str:
    """Join directories into a PATH-like string."""
    return SEPARATOR.join(dirs)


def remove(path: Iterable[str], directory: str) -> list[str]:
    """Return the path with every occurrence of ``directory`` removed."""
    return [entry for entry in path if entry != directory]


def add_last(path: Iterable[str], directory: str) -> list[str]:
    """Return the path with ``directory`` moved (or added) to the end."""
    return [*remove(path, directory), directory]


def add_unique(path: Iterable[str], directory: str) -> list[str]:
    """Return the path with ``directory`` appended unless empty or present."""
    result = list(path)
    if directory and directory not in result:
        result.append(directory)
    return result


def _add_all_last(path: list[str], arguments: Iterable[str]) -> list[str]:
    for argument in arguments:
        for directory in parse_path(argument):
            path = add_last(path, directory)
    return path


def _add_all_unique(path: list[str], others: Iterable[str]) -> list[str]:
    for directory in others:
        path = add_unique(path, directory)
    return path


def build_new(directories: Iterable[str]) -> list[str]:
    """Build a path from the given arguments, each of which may hold several entries."""
    return _add_all_last([], directories)


def build_add(current: Iterable[str], directories: Iterable[str]) -> list[str]:
    """Build a path with ``directories`` in front of the ``current`` entries."""
    return _add_all_unique(_add_all_last([], directories), current)


def build_append(current: Iterable[str], directories: Iterable[str]) -> list[str]:
    """Build a path with ``directories`` behind the ``current`` entries."""
    return _add_all_last(_add_all_unique([], current), directories)


def is_valid(path: str) -> bool:
    """Tell whether ``path`` names an existing directory, following symlinks."""
    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(info.st_mode)


def canonicalize(path: str) -> str | None:
    """Return the canonical absolute form of a directory, or None if it is not one."""
    if not is_valid(path):
        return None
    return os.path.realpath(path, strict=True) or path


def filter_dirs(path: Iterable[str]) -> list[str]:
    """Keep only distinct entries that are existing directories."""
    return _unique(entry for entry in path if is_valid(entry))


def normalize(path: Iterable[str]) -> list[str]:
    """Canonicalize entries, dropping non-directories and repeats."""
    canonical = (canonicalize(entry) for entry in path)
    return _unique(entry for entry in canonical if entry)


def apply_filters(
    path: Iterable[str], filter_requested: bool, normalize_requested: bool
) -> list[str]:
    """Apply filtering, or else normalization, as requested; filtering wins."""
    if filter_requested:
        return filter_dirs(path)
    if normalize_requested:
        return normalize(path)
    return list(path)