"""Commit trees, coloured diffs, syntax highlighting, themes and key bindings for a terminal commit-stack viewer."""

__version__ = "0.1.0"
__all__ = ["diff", "keybindings", "languages", "syntax", "theme", "tree"]