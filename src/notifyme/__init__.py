"""NotifyMe Campfire: send chat messages to Campfire rooms."""

from __future__ import annotations

from notifyme.config import CampfireConfig, ConfigError
from notifyme.gateways.campfire import CampfireGateway
from notifyme.gateways.factory import make_gateway
from notifyme.gateways.port import GatewayPort
from notifyme.models import MessageType, Response

__all__ = [
    "CampfireConfig",
    "CampfireGateway",
    "ConfigError",
    "GatewayPort",
    "MessageType",
    "Response",
    "make_gateway",
]

__version__ = "0.1.0"
