"""
clipboard.py - Clipboard copy that wipes itself after a delay.

The guard belongs to the app window, not to a view. The main view is torn
down and rebuilt on every theme change, and a pending wipe has to survive
that: Tk drops an `after` callback together with the widget that scheduled it.
"""

import logging
import tkinter
from typing import Callable, Optional

logger = logging.getLogger(__name__)

FEEDBACK_MS = 1500


class ClipboardGuard:
    """
    Puts text on the clipboard and clears it again after `clear_seconds`.

    Args:
        root: The app window (anything with the Tk clipboard and `after` API)
        clear_seconds: Delay before the wipe; 0 never wipes
    """

    def __init__(self, root, clear_seconds: int):
        self.root = root
        self.clear_seconds = clear_seconds
        self.clear_job = None
        self.on_cleared: Optional[Callable[[], None]] = None

    @property
    def pending(self) -> bool:
        return self.clear_job is not None

    def copy(self, text: str):
        """
        Replace the clipboard contents and (re)start the wipe timer.

        Raises:
            tkinter.TclError: If the clipboard can't be written
        """
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
        self.root.update()

        self.cancel()
        if self.clear_seconds:
            self.clear_job = self.root.after(self.clear_seconds * 1000, self.clear)

    def cancel(self):
        if self.clear_job:
            self.root.after_cancel(self.clear_job)
            self.clear_job = None

    def clear(self):
        self.clear_job = None
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append("")
            self.root.update()
        except tkinter.TclError as e:
            # Window may already be going away
            logger.warning("Clearing clipboard failed: %s", e)
            return
        logger.debug("Clipboard cleared")
        if self.on_cleared:
            self.on_cleared()

    def wipe_now(self):
        """Clear right away if a wipe is still pending. Used on exit."""
        if self.clear_job:
            self.cancel()
            self.clear()


def flash_button(button, text: str, fg_color: str, reset_text: str, reset_color: str):
    """
    Show copy feedback on a button, then put it back.

    The reset runs on the toplevel so it still fires after the button's view
    is rebuilt; by then the button may be gone and is left alone.
    """
    button.configure(text=text, fg_color=fg_color)

    def reset():
        if button.winfo_exists():
            button.configure(text=reset_text, fg_color=reset_color)

    button.winfo_toplevel().after(FEEDBACK_MS, reset)
