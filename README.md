# justlib

Building blocks for a command runner driven by a `justfile`.

## What is in it

- `justlib.search`: `find(search_config, invocation_directory)` locates an
  existing justfile by walking up from a directory (the name is matched
  case-insensitively; several matches in one directory raise
  `MultipleCandidatesError`). `init(search_config, invocation_directory)`
  chooses where a new justfile should go: the nearest ancestor holding a
  `.bzr`, `.git`, `.hg`, `.svn` or `_darcs` entry, or the directory itself.
  Both return a `Search` with `justfile` and `working_directory`. Also
  `find_justfile`, `clean`, `project_root` and
  `working_directory_from_justfile`.
- `justlib.search_config`: the configurations `find` and `init` accept:
  `FromInvocationDirectory`, `FromSearchDirectory`, `WithJustfile` and
  `WithJustfileAndWorkingDirectory`.
- `justlib.search_error`: `SearchError` and its subclasses
  `MultipleCandidatesError`, `SearchIoError`, `NotFoundError` and
  `JustfileHadNoParentError`.
- `justlib.token` and `justlib.token_kind`: `Token` with `lexeme()` and
  `write_context()`, which renders the token's source line with carets
  beneath the token; `TokenKind`, whose `str()` is a readable description.
- `justlib.string_kind`: `StringKind`, `StringDelimiter`, `UnterminatedKind`
  and `StringLiteral` for quoted strings and backticks, plain or indented
  (tripled).
- `justlib.table`: `Table`, values stored under their own key and iterated in
  key order.
- `justlib.scope`: `Scope` and `Binding`, nested variable bindings that fall
  back to a parent scope on lookup.
- `justlib.settings`: `Settings`, the setting items `DotenvLoad`, `Export`,
  `PositionalArguments` and `Shell`, the `Set` item, and `ShellConfig` for
  the shell given on the command line. `Settings.shell_command(config)`
  returns the argument vector for the shell.
- Smaller helpers: `justlib.shebang.Shebang`, `justlib.unindent`,
  `justlib.show_whitespace.show_whitespace`, `justlib.suggestion.Suggestion`,
  `justlib.tree.Tree`, `justlib.verbosity` (`Verbosity`, `UseColor`) and
  `justlib.warning.Warning`.
- `justlib.tmptree`: `tempdir()` and `tmptree(entries)` build throwaway
  directory trees from nested mappings (a string is a file, a mapping a
  directory).

## Installation

```
pip install justlib
```

## Examples

Find the justfile that applies to the current directory:

```python
from pathlib import Path

from justlib.search import find
from justlib.search_config import FromInvocationDirectory
from justlib.search_error import NotFoundError

try:
    search = find(FromInvocationDirectory(), Path.cwd())
except NotFoundError:
    print("No justfile found")
else:
    print(search.justfile, search.working_directory)
```

Normalise a path against a directory:

```python
from pathlib import Path

from justlib.search import clean

clean(Path("/foo/bar"), Path(".."))  # Path("/foo")
```

Split a shebang line:

```python
from justlib.shebang import Shebang

shebang = Shebang.parse("#!/usr/bin/env python -x")
shebang.interpreter  # "/usr/bin/env"
shebang.argument     # "python -x"
```

Remove the indentation that all lines share:

```python
from justlib.unindent import unindent

unindent("  foo\n  bar")  # "foo\nbar"
```

## What it does not do

This package holds the supporting pieces only. It has no justfile lexer,
parser or evaluator, does not run recipes, backticks or shells (the shell
command is returned as a list, never started), and provides no command-line
program.

## Running the tests

```
pip install -e ".[test]"
pytest
```