"""Light/dark theme with persisted choice."""

from atelier.contexts.interaction.state import UIState
from atelier.contexts.interaction.storage import THEME_KEY

THEME_ICONS = {"dark": "🌙", "light": "☀️"}


class ThemeController:
    """
    Resolves the initial theme from storage, else the system preference,
    and persists every change.
    """

    def __init__(self, ui: UIState, prefers_dark: bool = False):
        self.ui = ui
        self.prefers_dark = prefers_dark
        self.theme = "light"

    def init(self) -> str:
        saved = self.ui.store.get_item(self.ui.storage_key(THEME_KEY))
        if not saved:
            saved = "dark" if self.prefers_dark else "light"
        self.apply(saved)
        return self.theme

    def apply(self, theme: str) -> None:
        self.theme = "dark" if theme == "dark" else "light"
        self.ui.store.set_item(self.ui.storage_key(THEME_KEY), self.theme)

    def toggle(self) -> str:
        self.apply("dark" if self.theme == "light" else "light")
        return self.theme

    @property
    def icon(self) -> str:
        return THEME_ICONS[self.theme]
