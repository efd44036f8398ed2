# stackview

Building blocks for a terminal viewer of a repository's commit stack. The
package produces plain data (strings and lightweight styled-text objects)
that a terminal front end can draw.

It provides:

- **Commit trees** (`stackview.tree`): turn a list of `Commit` objects into
  `TreeNode`s with lanes, commit types (`CommitType`: initial, branch, merge,
  tag, revert, squash, regular) and one-line renderings with relative times
  (`format_tree_node`, `format_tree_lines`, `format_relative_time`).
- **Diffs** (`stackview.diff`): `DiffParser` classifies unified-diff lines
  (`DiffLineType`), counts insertions, deletions and files (`DiffStats`),
  detects a file's language from its extension and produces styled lines,
  with or without line numbers.
- **Syntax highlighting** (`stackview.syntax`, `stackview.languages`): a small
  per-line tokenizer (`highlight_line`) that colours strings, comments,
  numbers, keywords and type names, with keyword and type tables for Rust,
  Python, Ruby, JavaScript/TypeScript, Go, Java, C/C++, C#, Swift and Kotlin.
- **Themes** (`stackview.theme`): the `dark`, `light`, `monokai` and `nord`
  colour schemes, along with the `Color`, `Modifier`, `Style`, `Span` and
  `Line` types that styled output is made of.
- **Key bindings** (`stackview.keybindings`): default bindings, TOML load and
  save, and mapping a key press (`KeyCode`, `KeyModifiers`) to an action name.

## Installing

```
pip install .
```

For running the tests:

```
pip install '.[test]'
pytest
```

## Examples

Build a commit tree and render it:

```python
from datetime import datetime, timezone
from stackview.tree import Commit, CommitTree, format_tree_lines

commits = [
    Commit(hash="b123456789abcde", short_hash="b123456", message="Second",
           summary="Second", author="Test", email="test@example.com",
           date=datetime.now(timezone.utc), parent_hashes=["a123456789abcde"]),
    Commit(hash="a123456789abcde", short_hash="a123456", message="First",
           summary="First", author="Test", email="test@example.com",
           date=datetime.now(timezone.utc), parent_hashes=[]),
]
tree = CommitTree(commits)
for line in format_tree_lines(tree.nodes(), 0, 10):
    print(line)
```

Summarise a diff:

```python
from stackview.diff import DiffParser

lines = DiffParser.parse(diff_text)
stats = DiffParser.count_stats(lines)
print(stats.format_summary())          # e.g. "2 insertion(+), 1 deletion(-)"
print(DiffParser.detect_language("src/app.py"))   # "python"
```

Highlight a line of code:

```python
from stackview.diff import DiffParser

line = DiffParser.apply_syntax_highlighting('let s = "hi";', "rust", True, True)
for span in line.spans:
    print(repr(span.content), span.style.foreground)
```

Map key presses to actions:

```python
from stackview.keybindings import KeyBindings, KeyCode, KeyModifiers

bindings = KeyBindings.load(None)   # the user's file if there is one, else defaults
action = bindings.parse_key(KeyCode.char("q"), KeyModifiers.NONE)   # "quit"
```

Key bindings are read from and saved to `keybindings.toml` in the
`stackview` directory of the user's configuration folder (see
`stackview.keybindings.default_config_path`); `load` and `save` also accept
an explicit path. Every section (`navigation`, `actions`, `views`) and every
field must be present in a file that is loaded, or `ValueError` is raised.

Cycle through themes:

```python
from stackview.theme import Theme

theme = Theme.dark()
theme.next()
print(theme.name)   # "light"
```

## What it does not do

- It does not read repositories: commits are `Commit` objects you build
  yourself, and diffs are text you supply.
- It does not draw anything on the terminal or handle input events; there is
  no interactive screen and no command-line program. `Line`, `Span` and
  `Style` describe styled text for a front end to render.