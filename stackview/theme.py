"""Colours, text styles and the colour themes of the interface."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields, replace


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named palette entry or an RGB triple."""

    name: str
    rgb_value: tuple[int, int, int] | None = None

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Return a true-colour value."""
        for component in (r, g, b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        return cls("rgb", (r, g, b))

    def __str__(self) -> str:
        if self.rgb_value is not None:
            r, g, b = self.rgb_value
            return f"#{r:02x}{g:02x}{b:02x}"
        return self.name


Color.RESET = Color("reset")
Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.MAGENTA = Color("magenta")
Color.CYAN = Color("cyan")
Color.GRAY = Color("gray")
Color.DARK_GRAY = Color("darkgray")
Color.WHITE = Color("white")


class Modifier(enum.Flag):
    """Text attributes that can be combined."""

    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    REVERSED = enum.auto()


@dataclass(frozen=True)
class Style:
    """Foreground colour plus a set of modifiers; methods return new styles."""

    foreground: Color | None = None
    modifiers: Modifier = Modifier.NONE

    def fg(self, color: Color) -> Style:
        """Return a copy with the foreground colour set."""
        return replace(self, foreground=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        """Return a copy with the modifier added."""
        return replace(self, modifiers=self.modifiers | modifier)


@dataclass(frozen=True)
class Span:
    """A run of text drawn in a single style."""

    content: str
    style: Style = field(default_factory=Style)

    @classmethod
    def raw(cls, content: str) -> Span:
        """A span with the default style."""
        return cls(content)

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        """A span drawn in the given style."""
        return cls(content, style)


@dataclass
class Line:
    """A row of spans with a style that applies to the whole row."""

    spans: list[Span] = field(default_factory=list)
    style: Style = field(default_factory=Style)

    @classmethod
    def styled(cls, content: str, style: Style) -> Line:
        """A line holding one span of text in the given style."""
        return cls([Span.styled(content, style)], style)

    def plain_text(self) -> str:
        """The text of all spans, without styling."""
        return "".join(span.content for span in self.spans)


@dataclass
class Theme:
    """The named colour set of the interface."""

    name: str
    background: Color
    text: Color
    title: Color
    border: Color
    help: Color
    selected: Color
    selected_bg: Color
    accent: Color
    success: Color
    warning: Color
    error: Color
    addition: Color
    deletion: Color

    @classmethod
    def dark(cls) -> Theme:
        return cls(
            name="dark",
            background=Color.RESET,
            text=Color.rgb(200, 200, 200),
            title=Color.rgb(0, 191, 255),
            border=Color.rgb(255, 215, 0),
            help=Color.rgb(100, 100, 100),
            selected=Color.rgb(255, 255, 255),
            selected_bg=Color.rgb(70, 70, 100),
            accent=Color.rgb(255, 0, 128),
            success=Color.rgb(0, 255, 127),
            warning=Color.rgb(255, 215, 0),
            error=Color.rgb(255, 69, 0),
            addition=Color.rgb(0, 255, 127),
            deletion=Color.rgb(255, 69, 0),
        )

    @classmethod
    def light(cls) -> Theme:
        return cls(
            name="light",
            background=Color.RESET,
            text=Color.DARK_GRAY,
            title=Color.BLUE,
            border=Color.BLACK,
            help=Color.GRAY,
            selected=Color.BLACK,
            selected_bg=Color.GRAY,
            accent=Color.MAGENTA,
            success=Color.GREEN,
            warning=Color.YELLOW,
            error=Color.RED,
            addition=Color.GREEN,
            deletion=Color.RED,
        )

    @classmethod
    def monokai(cls) -> Theme:
        return cls(
            name="monokai",
            background=Color.RESET,
            text=Color.rgb(248, 248, 248),
            title=Color.rgb(255, 209, 102),
            border=Color.rgb(248, 248, 248),
            help=Color.rgb(128, 128, 128),
            selected=Color.rgb(248, 248, 248),
            selected_bg=Color.rgb(78, 74, 103),
            accent=Color.rgb(189, 147, 249),
            success=Color.rgb(166, 227, 161),
            warning=Color.rgb(249, 226, 175),
            error=Color.rgb(243, 139, 168),
            addition=Color.rgb(166, 227, 161),
            deletion=Color.rgb(243, 139, 168),
        )

    @classmethod
    def nord(cls) -> Theme:
        return cls(
            name="nord",
            background=Color.RESET,
            text=Color.rgb(216, 222, 233),
            title=Color.rgb(136, 192, 208),
            border=Color.rgb(236, 239, 244),
            help=Color.rgb(129, 161, 193),
            selected=Color.rgb(236, 239, 244),
            selected_bg=Color.rgb(76, 86, 106),
            accent=Color.rgb(129, 161, 193),
            success=Color.rgb(163, 190, 140),
            warning=Color.rgb(235, 203, 139),
            error=Color.rgb(191, 97, 106),
            addition=Color.rgb(163, 190, 140),
            deletion=Color.rgb(191, 97, 106),
        )

    @classmethod
    def by_name(cls, name: str) -> Theme:
        """The theme with this name; unknown names give the dark theme."""
        factory = _THEMES.get(name, cls.dark)
        return factory()

    def next(self) -> None:
        """Switch in place to the next theme in the cycle."""
        self._become(Theme.by_name(_NEXT.get(self.name, "dark")))

    def set(self, name: str) -> None:
        """Switch in place to the named theme."""
        self._become(Theme.by_name(name))

    def _become(self, other: Theme) -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))


_THEMES = {
    "dark": Theme.dark,
    "light": Theme.light,
    "monokai": Theme.monokai,
    "nord": Theme.nord,
}

_NEXT = {"dark": "light", "light": "monokai", "monokai": "nord", "nord": "dark"}