"""Contact block: copy-to-clipboard with a transient toast."""

from typing import Optional

from atelier.contexts.interaction.logger import _log_warning
from atelier.contexts.interaction.scheduler import Timer
from atelier.contexts.interaction.state import UIState

COPIED_MESSAGE = "Copied!"
COPY_FAILED_MESSAGE = "Copy failed"


class ClipboardError(Exception):
    """Raised by a clipboard that cannot accept the text."""

    pass


class Clipboard:
    """In-memory clipboard; hosts substitute the platform clipboard."""

    def __init__(self, available: bool = True):
        self.available = available
        self.text = ""

    def write_text(self, text: str) -> None:
        if not self.available:
            raise ClipboardError("Clipboard is not available")
        self.text = text


class Toast:
    """Single transient message, hidden after the configured duration."""

    def __init__(self, ui: UIState):
        self.ui = ui
        self.message = ""
        self.visible = False
        self._hide_timer: Optional[Timer] = None

    def show(self, message: str) -> None:
        self.message = message
        self.visible = True
        if self._hide_timer is not None:
            self._hide_timer.cancel()
        self._hide_timer = self.ui.scheduler.call_later(self.ui.settings.toast.duration_s, self.hide)

    def hide(self) -> None:
        self.visible = False
        self._hide_timer = None


class ContactController:
    def __init__(self, ui: UIState, email: str, toast: Toast):
        self.ui = ui
        self.email = email
        self.toast = toast

    def copy_email(self, clipboard: Clipboard) -> bool:
        """Copy the address; failures show a toast instead of raising."""
        try:
            clipboard.write_text(self.email)
        except ClipboardError as e:
            _log_warning(f"Copy to clipboard failed: {e}")
            self.toast.show(COPY_FAILED_MESSAGE)
            return False
        self.toast.show(COPIED_MESSAGE)
        return True
