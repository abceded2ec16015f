"""Free-text search inputs."""

from atelier.contexts.interaction.filters import FilterEngine
from atelier.contexts.interaction.scheduler import Debouncer
from atelier.contexts.interaction.state import UIState


class SearchBox:
    """
    Global search input.

    Keystrokes are debounced: the query is applied once typing pauses for the
    configured delay. Clearing applies immediately.
    """

    def __init__(self, ui: UIState, engine: FilterEngine):
        self.engine = engine
        self.value = ""
        self._debouncer = Debouncer(ui.scheduler, ui.settings.search.debounce_s, engine.set_query)

    @property
    def clear_button_hidden(self) -> bool:
        return not self.value

    def input(self, text: str) -> None:
        self.value = text or ""
        self._debouncer.call(self.value)

    def clear(self) -> None:
        self._debouncer.cancel()
        self.value = ""
        self.engine.set_query("")


class SectionSearchBox:
    """Per-section search input; applied on every keystroke."""

    def __init__(self, section: str, engine: FilterEngine):
        self.section = section
        self.engine = engine
        self.value = ""

    @property
    def placeholder(self) -> str:
        return f"Search {self.section}…"

    @property
    def clear_button_hidden(self) -> bool:
        return not self.value

    def input(self, text: str) -> None:
        self.value = text or ""
        self.engine.set_section_query(self.section, self.value)

    def clear(self) -> None:
        self.input("")
