"""Theme: design tokens (light/dark) and the ThemeManager that applies them."""

from paskanet.ui.theme.manager import THEME_DARK, THEME_LIGHT, ThemeManager
from paskanet.ui.theme.tokens import DARK, LIGHT, Tokens, TokenSet

__all__ = ["ThemeManager", "THEME_DARK", "THEME_LIGHT", "TokenSet", "Tokens", "DARK", "LIGHT"]
