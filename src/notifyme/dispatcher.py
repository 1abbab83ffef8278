"""Best-effort notification dispatch. Never raises."""

from __future__ import annotations

import logging

import httpx

from notifyme.config import ConfigError
from notifyme.gateways.port import GatewayPort
from notifyme.models import Response

log = logging.getLogger("notifyme.dispatcher")


def _failed(message: str) -> Response:
    return Response().set_raw({"error": message}).map({
        "success": False,
        "message": message,
    })


def notify(to: str, message: str, gateway: GatewayPort | None = None) -> Response:
    """Send through ``gateway`` (default: the cached env gateway).

    Configuration, transport and any other failure comes back as a failed
    Response instead of an exception.
    """
    try:
        if gateway is None:
            from notifyme.gateways.factory import get_gateway

            gateway = get_gateway()
        return gateway.notify(to, message)
    except ConfigError as exc:
        log.warning("Notification to room %s not sent: %s", to, exc, extra={"room": to})
        return _failed(f"Configuration error: {exc}")
    except httpx.HTTPError as exc:
        log.warning(
            "Notification to room %s failed in transport", to,
            exc_info=True, extra={"room": to},
        )
        return _failed(f"Transport error: {exc}")
    except Exception as exc:
        log.exception("Notification to room %s failed", to, extra={"room": to})
        return _failed(f"Notification error: {exc}")
