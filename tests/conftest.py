"""
Shared fixtures: an in-memory bridge host and a fake aiohttp session.
"""
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from custom_components.vektiva.accessory import PlatformAccessory
from custom_components.vektiva.const import CONF_API_KEY, CONF_DEVICE_ID, CONF_REMOTE_ID
from custom_components.vektiva.host import BridgeHost


class FakeHost(BridgeHost):
    """Records every call the platform makes against the bridge."""

    def __init__(self):
        self.ready_callbacks = []
        self.created = []
        self.registrations = []

    def generate_uuid(self, data):
        return f"uuid-{data}"

    def platform_accessory(self, display_name, accessory_uuid):
        accessory = PlatformAccessory(display_name, accessory_uuid)
        self.created.append(accessory)
        return accessory

    def register_platform_accessories(self, plugin_name, platform_name, accessories):
        self.registrations.append((plugin_name, platform_name, list(accessories)))

    def on_ready(self, callback):
        self.ready_callbacks.append(callback)

    def fire_ready(self):
        for callback in self.ready_callbacks:
            callback()


def make_response(body="OK", status=200):
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=body)
    if status >= 400:
        response.raise_for_status.side_effect = aiohttp.ClientResponseError(
            request_info=MagicMock(), history=(), status=status, message="error"
        )
    return response


def make_session(routes):
    """routes maps a command to a response or to an exception raised by get()."""
    session = MagicMock()

    def _get(url):
        outcome = routes[url.rsplit("/", 1)[-1]]
        if isinstance(outcome, BaseException):
            raise outcome
        ctx = MagicMock()
        ctx.__aenter__.return_value = outcome
        ctx.__aexit__.return_value = False
        return ctx

    session.get.side_effect = _get
    return session


@pytest.fixture
def config():
    return {CONF_REMOTE_ID: "r1", CONF_API_KEY: "k1", CONF_DEVICE_ID: "d1"}


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def log():
    return MagicMock()
