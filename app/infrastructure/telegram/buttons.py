"""Inline keyboard buttons for Telegram messages."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class TelegramButton:
    """Inline keyboard button.

    Two kinds exist: a callback button posts ``callback_data`` back to the
    webhook, a URL button opens a link.

    Example:
        buttons = [
            TelegramButton.callback("Approve", "approve:42"),
            TelegramButton.link("Open", "https://example.com/requests/42"),
        ]
    """

    text: str
    callback_data: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def callback(cls, text: str, data: str) -> "TelegramButton":
        """Create a callback button (Telegram limits data to 64 bytes)."""
        return cls(text=text, callback_data=data)

    @classmethod
    def link(cls, text: str, url: str) -> "TelegramButton":
        """Create a URL button."""
        return cls(text=text, url=url)

    @property
    def is_callback(self) -> bool:
        return self.callback_data is not None

    @property
    def is_url(self) -> bool:
        return self.url is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the Bot API InlineKeyboardButton shape."""
        if self.callback_data is not None:
            return {"text": self.text, "callback_data": self.callback_data}
        return {"text": self.text, "url": self.url}


def build_inline_keyboard(
    buttons: Sequence[TelegramButton],
    layout: Optional[Sequence[Sequence[int]]] = None,
) -> str:
    """Build a ``reply_markup`` JSON string.

    Args:
        buttons: Flat list of buttons
        layout: Rows of indices into ``buttons``, e.g. ``[[0, 1], [2]]``.
            Without a layout every button goes in a single row. Indices out
            of range are skipped and rows left empty are dropped.

    Returns:
        JSON encoded ``{"inline_keyboard": [[...], ...]}``
    """
    keyboard: List[List[Dict[str, Any]]] = []

    if buttons and not layout:
        keyboard.append([button.to_dict() for button in buttons])
    elif buttons:
        for indices in layout:
            row = [
                buttons[index].to_dict()
                for index in indices
                if 0 <= index < len(buttons)
            ]
            if row:
                keyboard.append(row)

    return json.dumps({"inline_keyboard": keyboard})
