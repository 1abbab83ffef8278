"""Campfire room gateway: posts messages to a room's speak.json endpoint."""

from __future__ import annotations

import base64
import json
from typing import Any, Mapping

import httpx

from notifyme.config import CampfireConfig
from notifyme.defaults import (
    ALLOWED_MESSAGE_TYPES,
    ALLOWED_SOUNDS,
    BASIC_AUTH_PASSWORD,
    CAMPFIRE_ENDPOINT,
    CONNECT_TIMEOUT_SECONDS,
    DEFAULT_MESSAGE_TYPE,
    DEFAULT_SOUND,
    ERROR_BAD_REQUEST,
    ERROR_INVALID_RESPONSE,
    ERROR_INVALID_ROOM,
    MESSAGE_SENT,
    REQUEST_TIMEOUT_SECONDS,
    SOUND_MESSAGE_TYPE,
    SPEAK_PATH,
    STATUS_BAD_REQUEST,
    STATUS_CREATED,
    STATUS_NOT_FOUND,
)
from notifyme.models import Response


def resolve_message_type(requested: Any) -> str:
    """Return ``requested`` if Campfire knows it, else ``TextMessage``."""
    requested = getattr(requested, "value", requested)
    if isinstance(requested, str) and requested in ALLOWED_MESSAGE_TYPES:
        return requested
    return DEFAULT_MESSAGE_TYPE


def resolve_sound(requested: Any) -> str:
    """Return ``requested`` if it is a known sound, else ``horn``."""
    if isinstance(requested, str) and requested in ALLOWED_SOUNDS:
        return requested
    return DEFAULT_SOUND


def basic_auth_header(token: str) -> str:
    credentials = f"{token}:{BASIC_AUTH_PASSWORD}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def _extract_error(body: str) -> str | None:
    """Pull a provider error description out of a JSON body, if any."""
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        error = error.get("message")
    if not error:
        error = data.get("message")
    if isinstance(error, str) and error:
        return error
    return None


def response_error(raw_response: httpx.Response) -> str:
    """Describe an unmapped status. Never raises."""
    body = raw_response.text
    return _extract_error(body) or f"{ERROR_INVALID_RESPONSE} (Raw response API {body})"


class CampfireGateway:
    """Send notifications to a Campfire room.

    Recognized HTTP outcomes (201, 400, 404 and any other status) always
    resolve into a :class:`Response`.  Transport failures raised by the
    ``httpx.Client`` (connect errors, timeouts) propagate to the caller;
    :func:`notifyme.dispatcher.notify` is the never-raise wrapper.
    """

    endpoint = CAMPFIRE_ENDPOINT

    def __init__(
        self,
        client: httpx.Client,
        config: CampfireConfig | Mapping[str, Any],
    ) -> None:
        self._client = client
        if not isinstance(config, CampfireConfig):
            config = CampfireConfig.from_mapping(config)
        self._config = config

    @property
    def config(self) -> CampfireConfig:
        return self._config

    def notify(self, to: str, message: str) -> Response:
        msg_type = resolve_message_type(self._config.get("type", DEFAULT_MESSAGE_TYPE))

        params: dict[str, Any] = {
            "to": to,
            "type": msg_type,
        }
        if msg_type == SOUND_MESSAGE_TYPE:
            params["body"] = resolve_sound(message)
        else:
            params["body"] = message

        return self._commit(params)

    # -- HTTP ---------------------------------------------------------------

    def request_url(self) -> str:
        return self.endpoint.replace("{domain}", self._config.require("from"))

    def build_url(self, path: str) -> str:
        return self.request_url().rstrip("/") + "/" + path.lstrip("/")

    def _commit(self, params: dict[str, Any]) -> Response:
        url = self.build_url(SPEAK_PATH.format(room=params["to"]))
        headers = {
            "Authorization": basic_auth_header(self._config.require("token")),
            "Content-Type": "application/json",
        }
        raw_response = self._client.post(
            url,
            headers=headers,
            json={"message": params},
            timeout=httpx.Timeout(REQUEST_TIMEOUT_SECONDS, connect=CONNECT_TIMEOUT_SECONDS),
        )

        status = raw_response.status_code

        success = False
        raw: dict[str, Any] = {}
        if status == STATUS_CREATED:
            success = True
        elif status == STATUS_BAD_REQUEST:
            raw["error"] = ERROR_BAD_REQUEST
        elif status == STATUS_NOT_FOUND:
            raw["error"] = ERROR_INVALID_ROOM
        else:
            raw["error"] = response_error(raw_response)

        return self._map_response(success, raw)

    @staticmethod
    def _map_response(success: bool, raw: dict[str, Any]) -> Response:
        return Response().set_raw(raw).map({
            "success": success,
            "message": MESSAGE_SENT if success else raw["error"],
        })
