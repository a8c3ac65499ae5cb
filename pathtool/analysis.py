"""Reports on problems in a PATH-like string: invalid, duplicate and shadowing entries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO

from pathtool.paths import is_valid, parse_raw_path

_INDENT = "    "


@dataclass(frozen=True)
class Shadow:
    """A file in a later directory hidden by the same name in ``owner_dir``."""

    owner_dir: str
    file: str


def get_invalid_dirs(path_str: str) -> list[str]:
    """Return the entries, in order and with repeats, that are not directories."""
    return [entry for entry in parse_raw_path(path_str) if not is_valid(entry)]


def get_duplicate_dirs(path_str: str) -> list[str]:
    """Return every entry that repeats an earlier one, once per repetition."""
    seen: set[str] = set()
    duplicates = []
    for entry in parse_raw_path(path_str):
        if entry in seen:
            duplicates.append(entry)
        else:
            seen.add(entry)
    return duplicates


def files_in_dir(directory: str) -> list[str]:
    """Return the sorted names of regular files in ``directory``.

    A directory that does not exist holds no files; any other failure to
    read it raises ``OSError``.
    """
    if not os.path.exists(directory):
        return []
    with os.scandir(directory) as entries:
        return sorted({entry.name for entry in entries if entry.is_file()})


def get_shadowed(path_str: str) -> list[tuple[str, list[Shadow]]]:
    """Return, for each entry that has any, the files hidden by earlier entries."""
    owners: dict[str, str] = {}
    all_shadowed = []
    for directory in parse_raw_path(path_str):
        shadowed = []
        for name in files_in_dir(directory):
            owner = owners.get(name)
            if owner is None:
                owners[name] = directory
            else:
                shadowed.append(Shadow(owner, name))
        if shadowed:
            all_shadowed.append((directory, shadowed))
    return all_shadowed


def _write_section(output: TextIO, title: str, items: list[str]) -> None:
    output.write(f"{title}\n")
    if not items:
        output.write(f"{_INDENT}None\n")
    for item in items:
        output.write(f"{_INDENT}{item}\n")


def write_analysis(path_str: str, output: TextIO) -> None:
    """Write a report on invalid, duplicate and shadowing entries to ``output``."""
    _write_section(output, "Invalid Directories:", get_invalid_dirs(path_str))
    output.write("\n")
    _write_section(output, "Duplicate Directories:", get_duplicate_dirs(path_str))
    output.write("\n")

    shadows = get_shadowed(path_str)
    output.write("Shadowed Files:\n")
    if not shadows:
        output.write(f"{_INDENT}None\n")
    for position, (directory, dir_shadows) in enumerate(shadows):
        if position:
            output.write("\n")
        output.write(f"{_INDENT}{directory}\n")
        for shadow in dir_shadows:
            output.write(f"{_INDENT * 2}{shadow.file}  =>  {shadow.owner_dir}\n")