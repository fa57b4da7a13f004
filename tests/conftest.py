"""Pytest configuration and fixtures for Key Light tests."""

import pytest
from pathlib import Path

from core.errors import DeviceCommunicationError
from models.state import AccessoryInfo, DeviceState


class FakeKeyLight:
    """Stands in for KeyLightClient, recording every call in order.

    fetch_state() returns the scripted state; writes update it so later reads
    see them. Set fail_on to a method name to make that call raise.
    """

    def __init__(self, state: DeviceState, fail_on: str | None = None):
        self.state = state
        self.fail_on = fail_on
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name == self.fail_on:
            raise DeviceCommunicationError(f"{name} failed", '192.168.0.16')

    def fetch_state(self) -> DeviceState:
        self._record('fetch_state')
        return self.state

    def fetch_info(self) -> AccessoryInfo:
        self._record('fetch_info')
        return AccessoryInfo('Elgato Key Light', 'Desk', 'BW12345', '1.0.3')

    def set_power(self, on: bool):
        self._record('set_power', on)
        self.state = DeviceState(on, self.state.brightness, self.state.temperature)

    def set_brightness(self, brightness: int):
        self._record('set_brightness', brightness)
        self.state = DeviceState(self.state.power, brightness, self.state.temperature)

    def set_temperature(self, temperature: int):
        self._record('set_temperature', temperature)
        self.state = DeviceState(self.state.power, self.state.brightness, temperature)

    @property
    def writes(self):
        return [call for call in self.calls if call[0].startswith('set_')]


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def user_config_file(tmp_path, monkeypatch):
    """Point the user config file at a temporary path for every test."""
    config_file = tmp_path / '.keylight' / 'config.json'
    monkeypatch.setattr('core.config.USER_CONFIG_FILE', config_file)
    return config_file


@pytest.fixture
def light_on():
    """Fake light that is on at 90% and 4000K."""
    return FakeKeyLight(DeviceState(power=True, brightness=90, temperature=4000))


@pytest.fixture
def light_off():
    """Fake light that is off, last set to 20% and 3000K."""
    return FakeKeyLight(DeviceState(power=False, brightness=20, temperature=3000))
