"""Tests for the gateway factory."""

import httpx

from notifyme.config import CampfireConfig
from notifyme.gateways import factory
from notifyme.gateways.campfire import CampfireGateway


def test_make_gateway_from_mapping_whitelists_keys():
    gw = factory.make_gateway({"token": "t", "from": "acme", "room": "ignored"})
    assert isinstance(gw, CampfireGateway)
    assert gw.config == CampfireConfig(token="t", from_="acme")


def test_make_gateway_from_env(monkeypatch):
    monkeypatch.setenv("NOTIFYME_CAMPFIRE_TOKEN", "t")
    monkeypatch.setenv("NOTIFYME_CAMPFIRE_FROM", "acme")
    gw = factory.make_gateway()
    assert gw.config.get("from") == "acme"


def test_make_gateway_uses_given_client():
    client = httpx.Client()
    try:
        gw = factory.make_gateway(CampfireConfig(token="t"), client=client)
        assert gw._client is client
    finally:
        client.close()


def test_get_gateway_is_cached(monkeypatch):
    monkeypatch.setenv("NOTIFYME_CAMPFIRE_FROM", "acme")
    first = factory.get_gateway()
    assert factory.get_gateway() is first
    factory.reset_gateway()
    assert factory.get_gateway() is not first


def test_reset_gateway_closes_owned_client(monkeypatch):
    monkeypatch.setenv("NOTIFYME_CAMPFIRE_FROM", "acme")
    client = factory.get_gateway()._client
    factory.reset_gateway()
    assert client.is_closed


def test_reset_gateway_without_gateway():
    factory.reset_gateway()
    factory.reset_gateway()
