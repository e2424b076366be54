"""UI theme definitions and selection helpers.

Themes are ANSI palettes for change-tree rows. ``PLAIN_THEME`` disables all
styling and is selected by ``--no-color``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    default_text: str
    staged: str
    unstaged: str
    untracked: str
    green: str
    yellow: str
    cyan: str
    magenta: str
    icons_colored: bool = True


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    default_text="",
    staged="\033[32m",
    unstaged="\033[31m",
    untracked="\033[31m",
    green="\033[32m",
    yellow="\033[33m",
    cyan="\033[36m",
    magenta="\033[35m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    default_text="\033[38;5;252m",
    staged="\033[38;5;84m",
    unstaged="\033[38;5;203m",
    untracked="\033[38;5;215m",
    green="\033[38;5;84m",
    yellow="\033[38;5;221m",
    cyan="\033[38;5;45m",
    magenta="\033[38;5;176m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    default_text="",
    staged="",
    unstaged="",
    untracked="",
    green="",
    yellow="",
    cyan="",
    magenta="",
    icons_colored=False,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def paint(text: str, color: str, theme: UITheme) -> str:
    """Wrap ``text`` in ``color`` and the theme reset; no-op for empty colors."""
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


def paint_256(text: str, color_index: int, theme: UITheme) -> str:
    """Paint ``text`` with a 256-color foreground when the theme allows it."""
    if not theme.icons_colored:
        return text
    return paint(text, f"\033[38;5;{color_index}m", theme)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "paint",
    "paint_256",
]
