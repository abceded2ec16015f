"""
Filter Engine

Combines the global query, per-section queries, single-tag filters and
multi-tag filters into one visibility flag per card. Every state change
triggers a full synchronous pass over the card registry.

A card is visible iff all four hold:
- global query empty, or it is a substring of the card's search text
- section query empty, or it is a substring of the card's search text
- single-tag filter empty, or the tag is among the card's tags
- multi-tag filter empty, or it shares at least one tag with the card

Tag comparison is exact and case-sensitive. Unknown section keys are no-ops.
"""

from typing import FrozenSet, List

from atelier.contexts.interaction.logger import log_filter_pass
from atelier.contexts.interaction.state import UIState
from atelier.contexts.interaction.storage import GALLERY_FILTER_KEY, MULTI_FILTER_KEY
from atelier.contexts.rendering.cards import Card
from atelier.contexts.rendering.sections import SECTION_KINDS, SectionKind


def normalize_query(query: str) -> str:
    return (query or "").lower().strip()


class FilterEngine:
    """
    Owns FilterState mutations and the visibility pass.

    Single-tag filters are persisted for gallery sections only, multi-tag
    filters for project sections only.
    """

    def __init__(self, ui: UIState):
        self.ui = ui

    @property
    def _state(self):
        return self.ui.filters

    def _known(self, section: str) -> bool:
        return section in SECTION_KINDS

    def _persist_single(self, section: str) -> None:
        if SECTION_KINDS[section] == SectionKind.GALLERY:
            key = self.ui.storage_key(GALLERY_FILTER_KEY + section)
            self.ui.store.set_item(key, self._state.single_tag.get(section, ""))

    def _persist_multi(self, section: str) -> None:
        if SECTION_KINDS[section] == SectionKind.PROJECTS:
            key = self.ui.storage_key(MULTI_FILTER_KEY + section)
            self.ui.store.set_json(key, sorted(self._state.multi_tag.get(section, set())))

    # Operations

    def set_query(self, query: str) -> None:
        self._state.query = normalize_query(query)
        self.recompute()

    def set_section_query(self, section: str, query: str) -> None:
        if not self._known(section):
            return
        self._state.section_query[section] = normalize_query(query)
        self.recompute()

    def set_single_tag(self, section: str, tag: str = "") -> None:
        if not self._known(section):
            return
        self._state.single_tag[section] = "" if tag is None else str(tag)
        self._persist_single(section)
        self.recompute()

    def toggle_multi_tag(self, section: str, tag: str) -> None:
        if not self._known(section):
            return
        selected = self._state.multi_tag.setdefault(section, set())
        key = str(tag)
        if key in selected:
            selected.discard(key)
        else:
            selected.add(key)
        self._persist_multi(section)
        self.recompute()

    def clear_section(self, section: str) -> None:
        """Drop the section's tag filters (the All / Clear filters chips)."""
        if not self._known(section):
            return
        self._state.single_tag[section] = ""
        self._state.multi_tag[section] = set()
        self._persist_single(section)
        self._persist_multi(section)
        self.recompute()

    def restore_persisted(self, section: str) -> None:
        """
        Load a section's persisted filter into state without recomputing.

        Corrupt or mistyped stored values degrade to an inactive filter.
        """
        if not self._known(section):
            return
        kind = SECTION_KINDS[section]
        if kind == SectionKind.GALLERY:
            saved = self.ui.store.get_item(self.ui.storage_key(GALLERY_FILTER_KEY + section))
            self._state.single_tag[section] = saved or ""
        elif kind == SectionKind.PROJECTS:
            saved = self.ui.store.get_json(self.ui.storage_key(MULTI_FILTER_KEY + section), [])
            if not isinstance(saved, list):
                saved = []
            self._state.multi_tag[section] = {str(tag) for tag in saved}

    # Queries

    def active_single_tag(self, section: str) -> str:
        return self._state.single_tag.get(section, "")

    def active_multi_tags(self, section: str) -> FrozenSet[str]:
        return frozenset(self._state.multi_tag.get(section, set()))

    def section_query(self, section: str) -> str:
        return self._state.section_query.get(section, "")

    def clear_chip_sections(self) -> List[str]:
        """Non-gallery sections with an active single-tag filter."""
        return [
            section
            for section, tag in self._state.single_tag.items()
            if tag and SECTION_KINDS.get(section) != SectionKind.GALLERY
        ]

    def is_visible(self, card: Card) -> bool:
        state = self._state
        text = card.search_text

        query = state.query
        if query and query not in text:
            return False

        section_query = state.section_query.get(card.section, "")
        if section_query and section_query not in text:
            return False

        tag = state.single_tag.get(card.section, "")
        if tag and tag not in card.tags:
            return False

        selected = state.multi_tag.get(card.section)
        if selected and not selected.intersection(card.tags):
            return False

        return True

    def recompute(self) -> None:
        """Re-evaluate every card's visibility."""
        registry = self.ui.registry
        num_visible = 0
        for card in registry:
            visible = self.is_visible(card)
            registry.set_visible(card.card_id, visible)
            num_visible += visible
        log_filter_pass(
            len(registry),
            num_visible,
            {
                "query": self._state.query,
                "section_query": {k: v for k, v in self._state.section_query.items() if v},
                "single_tag": {k: v for k, v in self._state.single_tag.items() if v},
                "multi_tag": {k: sorted(v) for k, v in self._state.multi_tag.items() if v},
            },
        )
