import logging
from typing import Callable, Optional

import pyperclip

logger = logging.getLogger(__name__)


def tk_copy(text: str):
    import tkinter

    root = tkinter.Tk()
    root.withdraw()
    try:
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
    finally:
        root.destroy()


class Clipboard:
    """System clipboard with a second mechanism tried when the first fails."""

    def __init__(self, primary: Optional[Callable[[str], None]] = None,
                 fallback: Optional[Callable[[str], None]] = None):
        self.primary = primary or pyperclip.copy
        self.fallback = fallback or tk_copy

    def copy(self, text: str) -> bool:
        try:
            self.primary(text)
            return True
        except Exception as e:
            logger.warning(f"Failed to copy text (clipboard): {e}")

        try:
            self.fallback(text)
            return True
        except Exception as e:
            logger.warning(f"Fallback copy failed: {e}")
            return False
