"""
Explicit UI state holder.

One ``UIState`` is created per session and passed by reference to every
controller. Controllers expose operations; they do not hand out their fields
for direct mutation.
"""

from dataclasses import dataclass, field
from typing import Dict, Set

from atelier.contexts.interaction.modal import FocusManager, KeyboardDispatcher
from atelier.contexts.interaction.scheduler import CooperativeScheduler
from atelier.contexts.interaction.storage import KeyValueStore
from atelier.contexts.rendering.cards import CardRegistry
from atelier.utils.settings import UISettings


@dataclass
class FilterState:
    """
    Process-wide filter state.

    Attributes:
        query: Global free-text query (lowercase, trimmed)
        section_query: Per-section free-text query
        single_tag: At most one active tag per section ("" = inactive)
        multi_tag: Zero or more active tags per section, OR-combined
    """

    query: str = ""
    section_query: Dict[str, str] = field(default_factory=dict)
    single_tag: Dict[str, str] = field(default_factory=dict)
    multi_tag: Dict[str, Set[str]] = field(default_factory=dict)


@dataclass
class UIState:
    registry: CardRegistry = field(default_factory=CardRegistry)
    filters: FilterState = field(default_factory=FilterState)
    store: KeyValueStore = field(default_factory=KeyValueStore)
    scheduler: CooperativeScheduler = field(default_factory=CooperativeScheduler)
    keyboard: KeyboardDispatcher = field(default_factory=KeyboardDispatcher)
    focus: FocusManager = field(default_factory=FocusManager)
    settings: UISettings = field(default_factory=UISettings)

    def storage_key(self, suffix: str) -> str:
        """Full persisted key under the configured prefix."""
        return f"{self.settings.storage.key_prefix}{suffix}"
