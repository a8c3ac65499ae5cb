# pathtool

A small command-line utility for editing, filtering, analyzing and printing
Unix `PATH`-like strings.

## Installation

```
pip install .
```

This installs the `path-tool` command.

## Usage

```
path-tool [-V] [-e NAME] [-f] [-p] [-n] COMMAND [DIRECTORIES...]
```

A command must always be given. The variable that is read defaults to
`PATH`; use `-e NAME` / `--env NAME` to work on another variable, such as
`MANPATH`. If the variable is not set, it is treated as empty.

### Commands

- `print`: print the current path with one directory per line.
- `new [DIR...]`: build a new path from the given directories only.
- `add [DIR...]`: put the directories in front of the current path.
- `append [DIR...]`: put the directories behind the current path.
- `analyze`: report invalid directories (entries that are not existing
  directories), duplicated entries, and, for each entry, the regular files
  hidden by a file of the same name in an earlier entry. After the report an
  empty path is printed (a blank line unless `--pretty` is given).

Each directory argument may itself be a colon-separated list. Empty entries
are ignored and duplicates are removed. When a directory is given more than
once on the command line, its last position is kept; entries from the current
path that are also given on the command line appear only once, at the
command-line position.

The result is printed as a single colon-joined line, except for `print` and
when `--pretty` is given, where it is printed one directory per line.

### Options

- `-f`, `--filter`: drop entries that are not existing directories (symbolic
  links are followed), and repeats.
- `-n`, `--normalize`: replace each entry with its canonical absolute path.
  Entries that are not existing directories are dropped, and entries that
  resolve to the same directory are merged. If `--filter` is also given,
  filtering takes precedence and no normalization is done.
- `-p`, `--pretty`: print one directory per line instead of a single
  colon-joined string.
- `-V`, `--version`: print the version and exit.

On a file-system error while analyzing, the command prints `Error: ...` to
standard error and exits with status 1.

### Examples

Put `~/bin` ahead of everything else and keep only real directories:

```
export PATH="$(path-tool --filter add ~/bin)"
```

Inspect the current `PATH` for problems:

```
path-tool analyze
```

List `MANPATH` one entry per line:

```
path-tool --env MANPATH print
```

## Library use

The same operations are available from Python:

- `pathtool.paths`: `parse_path`, `parse_raw_path`, `join_path`, `remove`,
  `add_last`, `add_unique`, `build_new`, `build_add`, `build_append`,
  `is_valid`, `canonicalize`, `filter_dirs`, `normalize` and `apply_filters`.
  These work on lists of strings and return new lists.
- `pathtool.analysis`: `get_invalid_dirs`, `get_duplicate_dirs`,
  `files_in_dir`, `get_shadowed` (returning `Shadow(owner_dir, file)`
  records) and `write_analysis`, which writes the report to a text stream.
- `pathtool.cli`: `parse_args` returns an `Options` dataclass holding a
  `Command`; `run(options, output, environ)` carries it out against any
  mapping of environment variables and writes to any text stream.

## What it does not do

The tool only prints a new value; it cannot change the environment of the
shell that runs it. Use command substitution, as in the example above, to
assign the result.