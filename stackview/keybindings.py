"""Key binding configuration and the mapping of key presses to actions."""

from __future__ import annotations

import enum
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w


@dataclass(frozen=True)
class KeyCode:
    """A key on the keyboard; characters and function keys carry a value."""

    name: str
    value: str | int | None = None

    @classmethod
    def char(cls, c: str) -> KeyCode:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return cls("Char", c)

    @classmethod
    def function(cls, n: int) -> KeyCode:
        return cls("F", n)


KeyCode.ENTER = KeyCode("Enter")
KeyCode.ESC = KeyCode("Esc")
KeyCode.UP = KeyCode("Up")
KeyCode.DOWN = KeyCode("Down")
KeyCode.LEFT = KeyCode("Left")
KeyCode.RIGHT = KeyCode("Right")
KeyCode.HOME = KeyCode("Home")
KeyCode.END = KeyCode("End")
KeyCode.PAGE_UP = KeyCode("PageUp")
KeyCode.PAGE_DOWN = KeyCode("PageDown")
KeyCode.TAB = KeyCode("Tab")
KeyCode.BACK_TAB = KeyCode("BackTab")
KeyCode.BACKSPACE = KeyCode("Backspace")
KeyCode.DELETE = KeyCode("Delete")
KeyCode.INSERT = KeyCode("Insert")
KeyCode.NULL = KeyCode("Null")
KeyCode.CAPS_LOCK = KeyCode("CapsLock")


class KeyModifiers(enum.Flag):
    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


_ARROWS = {"Up": "↑", "Down": "↓", "Left": "←", "Right": "→"}


def format_key_code(key_code: KeyCode, modifiers: KeyModifiers = KeyModifiers.NONE) -> str:
    """Render a key press the way bindings are written in the configuration."""
    if KeyModifiers.SHIFT in modifiers:
        prefix = "Shift+"
    elif KeyModifiers.CONTROL in modifiers:
        prefix = "Ctrl+"
    else:
        prefix = ""

    match key_code.name:
        case "Char":
            label = str(key_code.value)
        case "F":
            label = f"F{key_code.value}"
        case name if name in _ARROWS:
            label = _ARROWS[name]
        case name if key_code.value is None:
            label = name
        case name:
            label = f"{name}({key_code.value!r})"
    return prefix + label


def default_config_path() -> Path:
    """Where the key binding file lives in the user's configuration directory."""
    return platformdirs.user_config_path("stackview") / "keybindings.toml"


@dataclass
class NavigationBindings:
    up: str = "j/k/↑/↓"
    down: str = "j/k/↑/↓"
    page_up: str = "PageUp"
    page_down: str = "PageDown"
    go_to_start: str = "Home"
    go_to_end: str = "End"


@dataclass
class ActionBindings:
    quit: str = "q/Esc"
    help: str = "?"
    toggle_theme: str = "t"
    checkout: str = "c"
    create_branch: str = "b"
    view_diff: str = "D"
    view_details: str = "Enter"
    cancel: str = "Esc"
    confirm: str = "Enter"


@dataclass
class ViewBindings:
    next_view: str = "]"
    prev_view: str = "["


def _section(section_cls: type, data: Any, section: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"{section}: expected a table")
    values = {}
    for f in fields(section_cls):
        if f.name not in data:
            raise ValueError(f"missing field `{f.name}` in {section}")
        value = data[f.name]
        if not isinstance(value, str):
            raise ValueError(f"{section}.{f.name}: expected a string")
        values[f.name] = value
    return section_cls(**values)


@dataclass
class KeyBindings:
    navigation: NavigationBindings = field(default_factory=NavigationBindings)
    actions: ActionBindings = field(default_factory=ActionBindings)
    views: ViewBindings = field(default_factory=ViewBindings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KeyBindings:
        """Build bindings from a mapping; every section and field is required."""
        if not isinstance(data, Mapping):
            raise ValueError("expected a table of key bindings")
        parts = {}
        for f, section_cls in (
            ("navigation", NavigationBindings),
            ("actions", ActionBindings),
            ("views", ViewBindings),
        ):
            if f not in data:
                raise ValueError(f"missing field `{f}`")
            parts[f] = _section(section_cls, data[f], f)
        return cls(**parts)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return asdict(self)

    @classmethod
    def from_toml(cls, text: str) -> KeyBindings:
        return cls.from_dict(tomllib.loads(text))

    def to_toml(self) -> str:
        return tomli_w.dumps(self.to_dict())

    @classmethod
    def load(cls, path: Path | str | None = None) -> KeyBindings:
        """Read bindings from the file, or return the defaults if it is absent."""
        config_path = Path(path) if path is not None else default_config_path()
        if config_path.exists():
            return cls.from_toml(config_path.read_text(encoding="utf-8"))
        return cls()

    def save(self, path: Path | str | None = None) -> None:
        config_path = Path(path) if path is not None else default_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.to_toml(), encoding="utf-8")

    def parse_key(
        self, key_code: KeyCode, modifiers: KeyModifiers = KeyModifiers.NONE
    ) -> str | None:
        """The action a key press maps to, or None."""
        key_str = format_key_code(key_code, modifiers)
        candidates = (
            ("quit", self.actions.quit),
            ("help", self.actions.help),
            ("toggle_theme", self.actions.toggle_theme),
            ("checkout", self.actions.checkout),
            ("create_branch", self.actions.create_branch),
            ("view_diff", self.actions.view_diff),
            ("view_details", self.actions.view_details),
            ("page_up", self.navigation.page_up),
            ("page_down", self.navigation.page_down),
            ("go_to_start", self.navigation.go_to_start),
            ("go_to_end", self.navigation.go_to_end),
        )
        for action, binding in candidates:
            if key_str in binding:
                return action
        if key_code in (KeyCode.char("j"), KeyCode.DOWN):
            return "up"
        if key_code in (KeyCode.char("k"), KeyCode.UP):
            return "down"
        return None