"""Gateway factory with a process-wide cached instance."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from notifyme.config import CampfireConfig
from notifyme.gateways.campfire import CampfireGateway

log = logging.getLogger("notifyme.gateways.factory")

_gateway: CampfireGateway | None = None
_owned_client: httpx.Client | None = None


def make_gateway(
    config: CampfireConfig | Mapping[str, Any] | None = None,
    client: httpx.Client | None = None,
) -> CampfireGateway:
    """Build a Campfire gateway.

    ``config`` defaults to the ``NOTIFYME_CAMPFIRE_*`` environment; a plain
    mapping is reduced to its ``token``, ``from`` and ``type`` keys.  A fresh
    ``httpx.Client`` is created when none is given.
    """
    if config is None:
        config = CampfireConfig.from_env()
    elif not isinstance(config, CampfireConfig):
        config = CampfireConfig.from_mapping(config)
    return CampfireGateway(client or httpx.Client(), config)


def get_gateway() -> CampfireGateway:
    """Get or create the environment-configured gateway."""
    global _gateway, _owned_client
    if _gateway is None:
        _owned_client = httpx.Client()
        _gateway = make_gateway(client=_owned_client)
        log.debug("Campfire gateway created for %s", _gateway.config.get("from", "<unset>"))
    return _gateway


def reset_gateway() -> None:
    """Drop the cached gateway and close the client created for it."""
    global _gateway, _owned_client
    if _owned_client is not None:
        _owned_client.close()
    _gateway = None
    _owned_client = None
