"""Shared constants for the Campfire gateway.

Provider-defined values (message types, sound catalog, status texts) live
here so the gateway, the CLI and the tests agree on them.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

CAMPFIRE_ENDPOINT = "https://{domain}.campfirenow.com"
SPEAK_PATH = "room/{room}/speak.json"

# ---------------------------------------------------------------------------
# HTTP timeouts (seconds)
# ---------------------------------------------------------------------------

CONNECT_TIMEOUT_SECONDS = 30.0
REQUEST_TIMEOUT_SECONDS = 80.0

# Campfire ignores the Basic auth password; the token is the username.
BASIC_AUTH_PASSWORD = "x"

# ---------------------------------------------------------------------------
# Message types and sounds
# ---------------------------------------------------------------------------

DEFAULT_MESSAGE_TYPE = "TextMessage"
SOUND_MESSAGE_TYPE = "SoundMessage"

ALLOWED_MESSAGE_TYPES: frozenset[str] = frozenset({
    "TextMessage",
    "PasteMessage",
    "TweetMessage",
    "SoundMessage",
})

DEFAULT_SOUND = "horn"

ALLOWED_SOUNDS: frozenset[str] = frozenset({
    "56k",
    "bueller",
    "crickets",
    "dangerzone",
    "deeper",
    "drama",
    "greatjob",
    "horn",
    "horror",
    "inconceivable",
    "live",
    "loggins",
    "noooo",
    "nyan",
    "ohmy",
    "ohyeah",
    "pushit",
    "rimshot",
    "sax",
    "secret",
    "tada",
    "tmyk",
    "trombone",
    "vuvuzela",
    "yeah",
    "yodel",
})

# ---------------------------------------------------------------------------
# Response texts
# ---------------------------------------------------------------------------

STATUS_CREATED = 201
STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404

MESSAGE_SENT = "Message sent"
ERROR_BAD_REQUEST = "Incorrect request values."
ERROR_INVALID_ROOM = "Invalid room."
ERROR_INVALID_RESPONSE = "API Response not valid."

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

ENV_TOKEN = "NOTIFYME_CAMPFIRE_TOKEN"
ENV_FROM = "NOTIFYME_CAMPFIRE_FROM"
ENV_TYPE = "NOTIFYME_CAMPFIRE_TYPE"
ENV_LOG_LEVEL = "NOTIFYME_LOG_LEVEL"
ENV_LOG_JSON = "NOTIFYME_LOG_JSON"
