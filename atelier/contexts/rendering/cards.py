"""
Card Registry

Flat table of renderable items. Every intro block, track, post, gallery item,
project and contact block becomes one card. The filter engine writes each
card's visibility flag; the presentation layer only reads the table.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass
class Card:
    """
    Single renderable unit.

    Attributes:
        card_id: Position in the registry (stable, cards are never removed)
        section: Section key (e.g., "art", "games")
        title: Display title
        tags: Tags stringified at creation; filtering compares by string equality
        kind: Card role ("intro", "track", "post", "work", "project", "contact")
        item_index: Index of the backing item in its section list (None for intro/contact)
        needs_upload: Item is rendered as a needs-upload placeholder
        visible: Result of the last filter pass
    """

    card_id: int
    section: str
    title: str
    tags: Tuple[str, ...] = ()
    kind: str = "item"
    item_index: Optional[int] = None
    needs_upload: bool = False
    visible: bool = True

    @property
    def search_text(self) -> str:
        """Lowercased title and tags matched by free-text queries."""
        return f"{self.title.lower()} {' '.join(self.tags).lower()}".strip()


class CardRegistry:
    """Arena of cards indexed by ``card_id``."""

    def __init__(self):
        self._cards: List[Card] = []

    def add(
        self,
        section: str,
        title: str,
        tags: Iterable = (),
        kind: str = "item",
        item_index: Optional[int] = None,
        needs_upload: bool = False,
    ) -> Card:
        """
        Append a card and return it.

        Args:
            section: Section key
            title: Card title (None becomes "")
            tags: Tags of any type; stored as strings

        Returns:
            The created Card
        """
        card = Card(
            card_id=len(self._cards),
            section=section,
            title=title or "",
            tags=tuple(str(tag) for tag in tags),
            kind=kind,
            item_index=item_index,
            needs_upload=needs_upload,
        )
        self._cards.append(card)
        return card

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def get(self, card_id: int) -> Card:
        return self._cards[card_id]

    def set_visible(self, card_id: int, visible: bool) -> None:
        self._cards[card_id].visible = visible

    def in_section(self, section: str) -> List[Card]:
        return [card for card in self._cards if card.section == section]

    def visible_in_section(self, section: str, kind: Optional[str] = None) -> List[Card]:
        """Visible cards of a section, optionally restricted to one kind."""
        return [
            card
            for card in self._cards
            if card.section == section and card.visible and (kind is None or card.kind == kind)
        ]

    def sections(self) -> List[str]:
        """Section keys in first-seen order."""
        seen = []
        for card in self._cards:
            if card.section not in seen:
                seen.append(card.section)
        return seen

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
