"""Campfire gateway configuration.

Supplied once when the gateway is built and read-only afterwards.  Nothing
is validated up front: a missing ``token`` or ``from`` only surfaces as a
``ConfigError`` when a request needs it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from notifyme.defaults import ENV_FROM, ENV_TOKEN, ENV_TYPE

# Wire-level key -> dataclass attribute
_FIELDS: dict[str, str] = {
    "token": "token",
    "from": "from_",
    "type": "type",
}


class ConfigError(Exception):
    """Raised when a required configuration key is missing."""


@dataclass(frozen=True)
class CampfireConfig:
    token: str | None = None
    from_: str | None = None        # account subdomain
    type: str | None = None         # message type selector

    def get(self, key: str, default: Any = None) -> Any:
        attr = _FIELDS.get(key)
        if attr is None:
            return default
        value = getattr(self, attr)
        return default if value is None else value

    def require(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise ConfigError(f"Campfire config key '{key}' is not set")
        return str(value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CampfireConfig:
        """Build from a plain mapping, keeping only the known keys."""
        return cls(**{attr: mapping.get(key) for key, attr in _FIELDS.items()})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CampfireConfig:
        env = os.environ if environ is None else environ
        return cls(
            token=env.get(ENV_TOKEN) or None,
            from_=env.get(ENV_FROM) or None,
            type=env.get(ENV_TYPE) or None,
        )

    def merged(self, **overrides: str | None) -> CampfireConfig:
        """Return a copy with every non-None override applied."""
        values = {attr: getattr(self, attr) for attr in _FIELDS.values()}
        for key, value in overrides.items():
            if value is not None:
                values[_FIELDS.get(key, key)] = value
        return CampfireConfig(**values)

    def to_dict(self) -> dict[str, Any]:
        # never expose the token
        return {"from": self.from_, "type": self.type, "token_set": self.token is not None}
