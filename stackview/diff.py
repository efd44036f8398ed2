"""Parsing of unified diffs into typed lines, statistics and styled output."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import PurePath

from stackview.syntax import highlight_line, syntax_colors
from stackview.theme import Color, Line, Modifier, Span, Style


class DiffLineType(enum.Enum):
    """What a line of a unified diff is."""

    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"
    HEADER = "header"
    META = "meta"
    HUNK_HEADER = "hunk_header"


@dataclass
class ColoredDiffLine:
    """One line of a diff with its kind and display line number."""

    content: str
    line_type: DiffLineType
    line_number: int | None = None


@dataclass
class DiffStats:
    """Counts of changes found in a diff."""

    additions: int = 0
    deletions: int = 0
    files_changed: int = 0
    net_change: int = 0
    current_file: str = ""

    def format_summary(self) -> str:
        """A one-line summary of insertions and deletions."""
        if self.files_changed > 1:
            return (
                f"{self.files_changed} file(s) changed, "
                f"{self.additions} insertion(+), {self.deletions} deletion(-)"
            )
        return f"{self.additions} insertion(+), {self.deletions} deletion(-)"

    def format_file_info(self) -> str:
        """The file being viewed, or an empty string when none is known."""
        if self.current_file:
            return f"Viewing: {self.current_file}"
        return ""


_EXTENSION_LANGUAGES: dict[str, str] = {
    "rs": "rust",
    "py": "python",
    "js": "javascript",
    "ts": "javascript",
    "jsx": "javascript",
    "tsx": "javascript",
    "go": "go",
    "java": "java",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
    "rb": "ruby",
    "php": "php",
    "swift": "swift",
    "kt": "kotlin",
    "kts": "kotlin",
    "scala": "scala",
    "html": "html",
    "htm": "html",
    "css": "css",
    "scss": "scss",
    "sass": "scss",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "xml": "xml",
    "sh": "bash",
    "bash": "bash",
    "zsh": "bash",
    "toml": "toml",
    "md": "markdown",
    "sql": "sql",
    "r": "r",
    "lua": "lua",
    "perl": "perl",
    "pl": "perl",
    "ex": "elixir",
    "exs": "elixir",
    "erl": "erlang",
    "hrl": "erlang",
    "clj": "clojure",
    "cljs": "clojure",
    "cljc": "clojure",
    "hs": "haskell",
    "ml": "ocaml",
    "mli": "ocaml",
    "fs": "fsharp",
    "fsi": "fsharp",
    "fsx": "fsharp",
    "nim": "nim",
    "v": "v",
    "vv": "v",
    "zig": "zig",
}


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping a final empty line and trailing carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _classify(line: str) -> DiffLineType:
    if not line:
        return DiffLineType.CONTEXT
    if line.startswith("diff --git"):
        return DiffLineType.HEADER
    if line.startswith("index "):
        return DiffLineType.META
    if line.startswith(("+++", "---")):
        return DiffLineType.HEADER
    if line.startswith("@@"):
        return DiffLineType.HUNK_HEADER
    if line.startswith("+"):
        return DiffLineType.ADDITION
    if line.startswith("-"):
        return DiffLineType.DELETION
    return DiffLineType.CONTEXT


def _line_styles(dark_theme: bool) -> dict[DiffLineType, Style]:
    if dark_theme:
        addition, deletion = Color.rgb(0, 255, 127), Color.rgb(255, 69, 0)
        header, meta = Color.rgb(255, 215, 0), Color.rgb(136, 192, 208)
        hunk, context = Color.rgb(189, 147, 249), Color.rgb(200, 200, 200)
    else:
        addition, deletion = Color.GREEN, Color.RED
        header, meta = Color.rgb(180, 140, 0), Color.BLUE
        hunk, context = Color.MAGENTA, Color.DARK_GRAY
    return {
        DiffLineType.ADDITION: Style().fg(addition).add_modifier(Modifier.BOLD),
        DiffLineType.DELETION: Style().fg(deletion).add_modifier(Modifier.DIM),
        DiffLineType.HEADER: Style().fg(header).add_modifier(Modifier.BOLD),
        DiffLineType.META: Style().fg(meta),
        DiffLineType.HUNK_HEADER: Style().fg(hunk).add_modifier(Modifier.BOLD),
        DiffLineType.CONTEXT: Style().fg(context),
    }


def _number_style(dark_theme: bool) -> Style:
    return Style().fg(Color.rgb(100, 100, 100) if dark_theme else Color.GRAY)


def _number_prefix(line_number: int | None) -> str:
    return f"{line_number:>4} " if line_number is not None else " " * 6


class DiffParser:
    """Turns diff text into typed lines and renders them."""

    @staticmethod
    def parse(diff_content: str) -> list[ColoredDiffLine]:
        """Classify each line; deletions do not advance the line number."""
        result = []
        line_number = 1
        for line in _split_lines(diff_content):
            line_type = _classify(line)
            result.append(ColoredDiffLine(line, line_type, line_number))
            if line_type is not DiffLineType.DELETION:
                line_number += 1
        return result

    @staticmethod
    def to_styled_lines(lines: Iterable[ColoredDiffLine], dark_theme: bool) -> list[Line]:
        """One styled line per diff line, coloured by its kind."""
        styles = _line_styles(dark_theme)
        return [Line.styled(line.content, styles[line.line_type]) for line in lines]

    @staticmethod
    def to_styled_lines_with_numbers(
        lines: Iterable[ColoredDiffLine], dark_theme: bool
    ) -> list[Line]:
        """Styled lines, each preceded by its right-aligned line number."""
        styles = _line_styles(dark_theme)
        number_style = _number_style(dark_theme)
        return [
            Line(
                [
                    Span.styled(_number_prefix(line.line_number), number_style),
                    Span.styled(line.content, styles[line.line_type]),
                ]
            )
            for line in lines
        ]

    @staticmethod
    def count_stats(lines: Sequence[ColoredDiffLine]) -> DiffStats:
        """Count additions, deletions and changed files."""
        additions = deletions = files_changed = 0
        current_file = ""
        for line in lines:
            match line.line_type:
                case DiffLineType.ADDITION:
                    additions += 1
                case DiffLineType.DELETION:
                    deletions += 1
                case DiffLineType.HEADER if line.content.startswith("+++"):
                    files_changed += 1
                    if line.content.startswith("+++ b/"):
                        current_file = line.content.removeprefix("+++ b/")
        return DiffStats(
            additions=additions,
            deletions=deletions,
            files_changed=max(files_changed, 1),
            net_change=max(additions - deletions, 0),
            current_file=current_file,
        )

    @staticmethod
    def detect_language(file_path: str) -> str:
        """The highlighting language for a file, from its extension."""
        extension = PurePath(file_path).suffix.removeprefix(".").lower()
        return _EXTENSION_LANGUAGES.get(extension, "plaintext")

    @staticmethod
    def apply_syntax_highlighting(
        content: str, language: str, is_addition: bool, dark_theme: bool
    ) -> Line:
        """Highlight one line of code; additions are bold, the rest dim."""
        if language == "plaintext" or not content.strip():
            spans = [Span.raw(content)]
        else:
            spans = highlight_line(content, language, syntax_colors(dark_theme))
        modifier = Modifier.BOLD if is_addition else Modifier.DIM
        return Line(spans, Style().add_modifier(modifier))

    @staticmethod
    def apply_syntax_highlighting_with_numbers(
        content: str,
        line_number: int | None,
        language: str,
        line_type: DiffLineType,
        dark_theme: bool,
    ) -> Line:
        """A numbered line whose text carries the highlighted line's style."""
        styled = DiffParser.apply_syntax_highlighting(
            content, language, line_type is DiffLineType.ADDITION, dark_theme
        )
        return Line(
            [
                Span.styled(_number_prefix(line_number), _number_style(dark_theme)),
                Span.styled(styled.plain_text(), styled.style),
            ]
        )