"""
Interaction Context

Responsibilities:
- Holds the explicit UI state shared by all controllers
- Computes card visibility from queries and tag filters
- Drives the playlist, lightbox, reader and details carousel
- Persists theme, filters and audio position

Owns: Filter state, modal state machines, keyboard/focus scoping, persistence
Never: Parses the content document or emits markup
"""

from atelier.contexts.interaction.session import PortfolioSession
from atelier.contexts.interaction.state import FilterState, UIState

__all__ = ["PortfolioSession", "UIState", "FilterState"]
