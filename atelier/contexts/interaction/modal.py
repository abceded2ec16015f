"""
Keyboard and focus scoping for modals.

Key handlers are registered explicitly and must be released explicitly: a
closed modal never sees global key events. ``ModalScope`` pairs handler
registration with focus capture so every exit path restores both.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Optional


@dataclass
class KeyEvent:
    """
    Keyboard event.

    Attributes:
        key: Key value ("Escape", "ArrowLeft", "Tab", "+", " ", ...)
        shift: Shift modifier held
        default_prevented: Set by handlers that consume the event
    """

    key: str
    shift: bool = False
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


KeyHandler = Callable[[KeyEvent], None]


class KeyboardDispatcher:
    """Global keydown listeners with explicit bind/unbind."""

    def __init__(self):
        self._handlers: Dict[int, KeyHandler] = {}
        self._next_token = 0

    def bind(self, handler: KeyHandler) -> int:
        token = self._next_token
        self._next_token += 1
        self._handlers[token] = handler
        return token

    def unbind(self, token: int) -> None:
        self._handlers.pop(token, None)

    def dispatch(self, event: KeyEvent) -> KeyEvent:
        for handler in list(self._handlers.values()):
            handler(event)
        return event

    def press(self, key: str, shift: bool = False) -> KeyEvent:
        return self.dispatch(KeyEvent(key=key, shift=shift))

    @property
    def num_bound(self) -> int:
        return len(self._handlers)


class FocusManager:
    """Tracks the focused element (any hashable handle)."""

    def __init__(self, active: Optional[Hashable] = None):
        self.active = active

    def focus(self, element: Optional[Hashable]) -> None:
        self.active = element


class ModalScope:
    """
    Scoped acquisition of the keyboard and focus for one modal.

    ``acquire`` binds the key handler and captures the focused element;
    ``release`` unbinds and restores focus. Both are idempotent.
    """

    def __init__(self, keyboard: KeyboardDispatcher, focus: FocusManager, handler: KeyHandler):
        self.keyboard = keyboard
        self.focus = focus
        self.handler = handler
        self._token: Optional[int] = None
        self._previous_focus: Optional[Hashable] = None

    @property
    def held(self) -> bool:
        return self._token is not None

    def acquire(self) -> None:
        if self.held:
            return
        self._previous_focus = self.focus.active
        self._token = self.keyboard.bind(self.handler)

    def release(self) -> None:
        if not self.held:
            return
        self.keyboard.unbind(self._token)
        self._token = None
        self.focus.focus(self._previous_focus)
        self._previous_focus = None

    def __enter__(self) -> "ModalScope":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def cycle_focus(focus: FocusManager, controls: tuple, backwards: bool = False) -> None:
    """Move focus to the next (or previous) control, wrapping at both ends."""
    if not controls:
        return
    step = -1 if backwards else 1
    if focus.active in controls:
        current = controls.index(focus.active)
    else:
        current = len(controls) if backwards else -1
    focus.focus(controls[(current + step) % len(controls)])
