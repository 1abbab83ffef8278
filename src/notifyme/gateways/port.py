"""Gateway port: protocol definition for notification gateways."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from notifyme.models import Response


@runtime_checkable
class GatewayPort(Protocol):
    """Protocol shared by every provider gateway."""

    def notify(self, to: str, message: str) -> Response: ...
