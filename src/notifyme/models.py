"""Core data types for NotifyMe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class MessageType(str, Enum):
    TEXT = "TextMessage"
    PASTE = "PasteMessage"
    TWEET = "TweetMessage"
    SOUND = "SoundMessage"


@dataclass
class Response:
    """Uniform result of a gateway call.

    Built fresh per call: ``Response().set_raw(raw).map({...})``.  ``raw``
    carries whatever diagnostic payload the gateway collected, ``data`` the
    normalized ``{success, message}`` mapping.
    """

    success: bool = False
    message: str = ""
    raw: dict[str, Any] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)

    def set_raw(self, raw: Mapping[str, Any]) -> Response:
        self.raw = dict(raw)
        return self

    def map(self, data: Mapping[str, Any]) -> Response:
        self.data = dict(data)
        self.success = bool(data.get("success", False))
        self.message = str(data.get("message", ""))
        return self

    def is_sent(self) -> bool:
        return self.success

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "success": self.success,
            "message": self.message,
        }
        if self.raw:
            d["raw"] = self.raw
        return d
