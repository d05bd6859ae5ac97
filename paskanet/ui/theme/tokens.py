"""
Design tokens: colors and metrics of the shell chrome. TokenSet per theme; the
current set (Tokens) is updated in place by ThemeManager.
"""
from __future__ import annotations


class TokenSet:
    __slots__ = (
        "desktop", "surface", "surface_alt",
        "accent", "accent_hover",
        "text_primary", "text_secondary", "text_on_accent",
        "border",
        "title_bar", "title_bar_text",
        "taskbar", "menu_bar",
        "online", "warning", "offline", "error",
        "space_sm", "space_md", "space_lg",
        "radius_sm", "title_bar_height", "taskbar_height",
    )

    def __init__(
        self,
        *,
        desktop: str = "#1c4a7a",
        surface: str = "#f0f0f0",
        surface_alt: str = "#ffffff",
        accent: str = "#0078d7",
        accent_hover: str = "#1a88e0",
        text_primary: str = "#1b1b1b",
        text_secondary: str = "#5f5f5f",
        text_on_accent: str = "#ffffff",
        border: str = "#a0a0a0",
        title_bar: str = "#0078d7",
        title_bar_text: str = "#ffffff",
        taskbar: str = "#101820",
        menu_bar: str = "#e6e6e6",
        online: str = "#22c55e",
        warning: str = "#eab308",
        offline: str = "#9ca3af",
        error: str = "#dc2626",
        space_sm: int = 4,
        space_md: int = 8,
        space_lg: int = 16,
        radius_sm: int = 2,
        title_bar_height: int = 30,
        taskbar_height: int = 40,
    ) -> None:
        self.desktop = desktop
        self.surface = surface
        self.surface_alt = surface_alt
        self.accent = accent
        self.accent_hover = accent_hover
        self.text_primary = text_primary
        self.text_secondary = text_secondary
        self.text_on_accent = text_on_accent
        self.border = border
        self.title_bar = title_bar
        self.title_bar_text = title_bar_text
        self.taskbar = taskbar
        self.menu_bar = menu_bar
        self.online = online
        self.warning = warning
        self.offline = offline
        self.error = error
        self.space_sm = space_sm
        self.space_md = space_md
        self.space_lg = space_lg
        self.radius_sm = radius_sm
        self.title_bar_height = title_bar_height
        self.taskbar_height = taskbar_height

    def copy_into(self, target: TokenSet) -> None:
        """Copy this set's values into target (mutates target)."""
        for key in self.__slots__:
            setattr(target, key, getattr(self, key))

    def status_color(self, status: str) -> str:
        """Dot color for a server/service status ("online", "Running", ...)."""
        key = status.lower()
        if key in ("online", "running"):
            return self.online
        if key == "warning":
            return self.warning
        return self.offline


LIGHT = TokenSet()

DARK = TokenSet(
    desktop="#0b1e33",
    surface="#202124",
    surface_alt="#2b2c30",
    accent="#3b82f6",
    accent_hover="#60a5fa",
    text_primary="#e2e8f0",
    text_secondary="#94a3b8",
    border="#3f4451",
    title_bar="#1f3b5c",
    title_bar_text="#e2e8f0",
    taskbar="#05090f",
    menu_bar="#2b2c30",
)

# Current tokens; ThemeManager copies LIGHT or DARK into this object.
Tokens = TokenSet()
LIGHT.copy_into(Tokens)


def apply_token_set(source: TokenSet) -> None:
    source.copy_into(Tokens)
