"""Token classification and single-line syntax highlighting for diff views."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from stackview.languages import SyntaxHighlight, keywords, types
from stackview.theme import Color, Span, Style

_NUMBER_CHARS = frozenset("0123456789.xXob")


@dataclass(frozen=True)
class SyntaxColors:
    """The colour given to each kind of token."""

    keyword: Color
    string: Color
    comment: Color
    function: Color
    number: Color
    type_color: Color
    attribute: Color

    def color_for(self, highlight: SyntaxHighlight) -> Color:
        """The colour used for a kind of token."""
        match highlight:
            case SyntaxHighlight.KEYWORD:
                return self.keyword
            case SyntaxHighlight.STRING:
                return self.string
            case SyntaxHighlight.COMMENT:
                return self.comment
            case SyntaxHighlight.FUNCTION:
                return self.function
            case SyntaxHighlight.NUMBER:
                return self.number
            case SyntaxHighlight.TYPE:
                return self.type_color
            case SyntaxHighlight.ATTRIBUTE:
                return self.attribute
            case _:
                return Color.RESET


def syntax_colors(dark_theme: bool) -> SyntaxColors:
    """The token colours for a dark or a light background."""
    if dark_theme:
        return SyntaxColors(
            keyword=Color.rgb(189, 147, 249),
            string=Color.rgb(166, 227, 161),
            comment=Color.rgb(129, 161, 193),
            function=Color.rgb(136, 192, 208),
            number=Color.rgb(243, 139, 168),
            type_color=Color.rgb(235, 203, 139),
            attribute=Color.rgb(249, 226, 175),
        )
    return SyntaxColors(
        keyword=Color.rgb(155, 89, 182),
        string=Color.rgb(39, 174, 96),
        comment=Color.rgb(149, 165, 166),
        function=Color.rgb(41, 128, 185),
        number=Color.rgb(192, 57, 43),
        type_color=Color.rgb(241, 196, 15),
        attribute=Color.rgb(230, 126, 34),
    )


def classify_token(
    token: str,
    keyword_map: Mapping[str, SyntaxHighlight],
    type_map: Mapping[str, SyntaxHighlight],
    colors: SyntaxColors,
) -> Span:
    """Colour a run of text as a keyword, a type, a number or plain text."""
    trimmed = token.strip()

    for vocabulary in (keyword_map, type_map):
        highlight = vocabulary.get(trimmed)
        if highlight is not None:
            return Span.styled(token, Style().fg(colors.color_for(highlight)))

    if all(c in _NUMBER_CHARS for c in trimmed):
        return Span.styled(token, Style().fg(colors.number))

    return Span.raw(token)


def highlight_line(line: str, language: str, colors: SyntaxColors) -> list[Span]:
    """Split one line into coloured spans of strings, comments and other text."""
    keyword_map = keywords(language)
    type_map = types(language)
    chars = list(line)
    byte_length = len(line.encode("utf-8"))

    spans: list[Span] = []
    current: list[str] = []
    in_string = False
    in_comment = False
    quote = ""

    def flush() -> None:
        if current:
            spans.append(classify_token("".join(current), keyword_map, type_map, colors))
            current.clear()

    def char_at(position: int) -> str | None:
        return chars[position] if position < len(chars) else None

    # Look-ahead is addressed by the byte offset of the current character.
    offset = 0
    for pos, ch in enumerate(chars):
        idx = offset
        offset += len(ch.encode("utf-8"))
        following = char_at(idx + 1)

        if in_comment:
            current.append(ch)
            if ch == "*" and following == "/":
                current.pop()
                spans.append(Span.styled("".join(current), Style().fg(colors.comment)))
                current.clear()
                in_comment = False
        elif in_string:
            current.append(ch)
            if ch == "\\" and idx + 1 < byte_length:
                current.append(following if following is not None else "\0")
            elif ch == quote:
                spans.append(Span.styled("".join(current), Style().fg(colors.string)))
                current.clear()
                in_string = False
        elif ch in ('"', "'"):
            flush()
            in_string = True
            quote = ch
            current.append(ch)
        elif ch == "/" and following == "/":
            flush()
            spans.append(Span.styled(line[pos:], Style().fg(colors.comment)))
            break
        elif ch == "/" and following == "*":
            flush()
            current.append(ch)
            in_comment = True
        else:
            current.append(ch)

    text = "".join(current)
    if in_string or in_comment:
        color = colors.comment if in_comment else colors.string
        spans.append(Span.styled(text, Style().fg(color)))
    elif text:
        spans.append(classify_token(text, keyword_map, type_map, colors))

    return spans or [Span.raw(line)]