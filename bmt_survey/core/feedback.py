"""Transient user notifications queued by the form and dashboard."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Tuple

Feedback = Tuple[str, str]

SUCCESS = "success"
ERROR = "error"


class FeedbackLog:
    """Ordered ``(message, level)`` pairs waiting to be shown as toasts."""

    def __init__(self) -> None:
        self._items: List[Feedback] = []

    def push(self, message: str, level: str) -> None:
        self._items.append((message, level))

    def success(self, message: str) -> None:
        self.push(message, SUCCESS)

    def error(self, message: str) -> None:
        self.push(message, ERROR)

    def drain(self) -> List[Feedback]:
        """Return pending notifications and forget them."""

        items, self._items = self._items, []
        return items

    def __len__(self) -> int:
        return len(self._items)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
