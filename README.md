# dotforge

dotforge is a small set of helpers for tying dotfiles to the places programs
expect them by means of symbolic links, in the spirit of GNU Stow. It also has
a `dotforge` command whose subcommands are laid out but do not yet act on
files (see "What it does not do" below).

## Installation

```
pip install .
```

## Library

```python
from dotforge.dotfile import link_file, unlink_file
from dotforge.scanner import scan_directory
from dotforge.paths import normalize

# Link a file. An existing symlink at the target is replaced; an existing
# regular file is first copied to the same path with its extension replaced
# by ".bak", then removed. Missing parent directories are created.
link_file(normalize("~/dotfiles/vimrc"), normalize("~/.vimrc"))

# Remove the link and move the ".bak" copy back into place, if there is one.
# Raises ValueError if the target exists but is not a symlink.
unlink_file(normalize("~/.vimrc"))

# Every file below a directory, descending into subdirectories.
# Raises NotADirectoryError if the path is not a directory.
for path in scan_directory(normalize("~/dotfiles")):
    print(path)
```

Modules:

- `dotforge.paths`: `expand_tilde` (expands a leading `~` component only, not
  `~user`), `is_absolute`, `normalize` (tilde expansion, then made absolute
  against the current directory), `get_version`.
- `dotforge.symlink`: `create_symlink(source, target)`, `is_symlink(path)`,
  `get_symlink_target(path)` (raises `ValueError` for a path that is not a
  symlink).
- `dotforge.scanner`: `scan_directory(directory)`.
- `dotforge.dotfile`: the `DotFile` dataclass (`source`, `target`, `profile`),
  `backup_file`, `link_file`, `unlink_file`, `list_dotfiles(profile=None)`.
- `dotforge.config`: `default_db_path()`, the SQLite database location
  `dotforge/dotforge.db` inside the user configuration directory, and the
  `Config` dataclass (`db_path`, `connection`) whose `connect()` opens that
  database with `sqlite3`.

## Command line

```
dotforge --help
dotforge --version
dotforge heat FILE...
dotforge forge
dotforge cool FILE...
dotforge profile create NAME
dotforge profile list
dotforge profile switch NAME
dotforge -I
```

Each subcommand parses its arguments and prints what it was asked to do, for
example `Heating files: ["a", "b"]` or `Creating profile: work`, and exits
with status 0.

## What it does not do

- The `heat`, `forge`, `cool` and `profile` commands and interactive mode
  (`-I`) only print a message; they do not stage, link or unlink files, and
  no profiles are stored.
- Nothing is written to the configuration database. `Config.connect()` opens
  it and does not create its parent directory, so that directory must exist.
- `list_dotfiles()` returns an empty list: none of the public operations
  record dotfiles anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```