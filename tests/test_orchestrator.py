"""
Tests for the device call sequences run by core.orchestrator.

A FakeKeyLight records each call so the tests can check both which calls
are made and their order.
"""

from ipaddress import IPv4Address

import pytest

from core.errors import DeviceCommunicationError
from core.orchestrator import apply_delta, ensure_powered_on, execute
from keylight_control import parse
from models.intent import AdjustBrightness, Info, Off, On, SetTemperature, Status
from models.state import AccessoryInfo, DeviceState
from tests.conftest import FakeKeyLight

ADDRESS = IPv4Address('192.168.0.16')


class TestApplyDelta:
    """Tests for relative brightness arithmetic."""

    def test_every_combination_stays_in_range(self):
        """For every current value and delta, the result is the clamped sum."""
        for current in range(0, 101):
            for delta in range(-100, 101):
                result = apply_delta(current, delta)
                assert 0 <= result <= 100
                if current + delta < 0:
                    assert result == 0
                elif current + delta > 100:
                    assert result == 100
                else:
                    assert result == current + delta

    def test_saturates_high(self):
        assert apply_delta(90, 50) == 100

    def test_saturates_low(self):
        assert apply_delta(20, -50) == 0


class TestEnsurePoweredOn:
    """Tests for the power-on precondition."""

    def test_powers_on_when_off(self, light_off):
        state = ensure_powered_on(light_off)

        assert light_off.calls == [('fetch_state',), ('set_power', True)]
        assert state.brightness == 20

    def test_no_write_when_on(self, light_on):
        ensure_powered_on(light_on)

        assert light_on.calls == [('fetch_state',)]


class TestOn:
    """'on' writes power, brightness and temperature unconditionally."""

    @pytest.mark.parametrize('fixture', ['light_on', 'light_off'])
    def test_three_writes_in_order(self, fixture, request):
        light = request.getfixturevalue(fixture)

        result = execute(On(ADDRESS, brightness=40, temperature=4500), light)

        assert result is None
        assert light.calls == [
            ('set_power', True),
            ('set_brightness', 40),
            ('set_temperature', 4500),
        ]

    def test_stops_after_failed_brightness(self, light_off):
        """A failed second call aborts the sequence without rollback."""
        light_off.fail_on = 'set_brightness'

        with pytest.raises(DeviceCommunicationError):
            execute(On(ADDRESS, brightness=40, temperature=4500), light_off)

        assert light_off.calls == [('set_power', True), ('set_brightness', 40)]
        # The power write already applied stays applied
        assert light_off.state.power is True

    def test_stops_after_failed_power(self, light_off):
        light_off.fail_on = 'set_power'

        with pytest.raises(DeviceCommunicationError):
            execute(On(ADDRESS), light_off)

        assert light_off.calls == [('set_power', True)]


class TestOff:
    """'off' is a single unconditional write."""

    def test_single_write(self, light_on):
        assert execute(Off(ADDRESS), light_on) is None
        assert light_on.calls == [('set_power', False)]


class TestAdjustBrightness:
    """'brightness' reads once, powers on if needed, then writes the clamped value."""

    def test_saturates_without_power_write(self, light_on):
        """Light at 90% plus 50 reads once and writes 100."""
        execute(AdjustBrightness(ADDRESS, delta=50), light_on)

        assert light_on.calls == [('fetch_state',), ('set_brightness', 100)]

    def test_powers_on_first_when_off(self, light_off):
        execute(AdjustBrightness(ADDRESS, delta=-5), light_off)

        assert light_off.calls == [
            ('fetch_state',),
            ('set_power', True),
            ('set_brightness', 15),
        ]

    def test_read_precedes_every_write(self, light_off):
        execute(AdjustBrightness(ADDRESS, delta=10), light_off)

        assert light_off.calls[0] == ('fetch_state',)
        assert light_off.writes.count(('set_power', True)) == 1

    def test_decrease_to_zero(self, light_on):
        execute(AdjustBrightness(ADDRESS, delta=-100), light_on)

        assert light_on.writes == [('set_brightness', 0)]

    def test_read_failure_makes_no_writes(self, light_on):
        light_on.fail_on = 'fetch_state'

        with pytest.raises(DeviceCommunicationError):
            execute(AdjustBrightness(ADDRESS, delta=10), light_on)

        assert light_on.writes == []


class TestSetTemperature:
    """'temperature' powers on if needed, then writes."""

    def test_powers_on_then_sets_temperature(self, light_off):
        execute(SetTemperature(ADDRESS, temperature=5000), light_off)

        assert light_off.calls == [
            ('fetch_state',),
            ('set_power', True),
            ('set_temperature', 5000),
        ]

    def test_no_power_write_when_on(self, light_on):
        execute(SetTemperature(ADDRESS, temperature=5000), light_on)

        assert light_on.calls == [('fetch_state',), ('set_temperature', 5000)]

    def test_failed_power_on_skips_temperature(self, light_off):
        light_off.fail_on = 'set_power'

        with pytest.raises(DeviceCommunicationError):
            execute(SetTemperature(ADDRESS, temperature=5000), light_off)

        assert ('set_temperature', 5000) not in light_off.calls


class TestReads:
    """'status' and 'info' read once and never write."""

    def test_status_returns_snapshot(self, light_on):
        state = execute(Status(ADDRESS), light_on)

        assert state == DeviceState(power=True, brightness=90, temperature=4000)
        assert light_on.calls == [('fetch_state',)]

    def test_info_returns_identity(self, light_on):
        info = execute(Info(ADDRESS), light_on)

        assert isinstance(info, AccessoryInfo)
        assert light_on.calls == [('fetch_info',)]

    def test_unknown_intent(self, light_on):
        with pytest.raises(TypeError):
            execute(object(), light_on)
        assert light_on.calls == []


class TestEndToEnd:
    """Parsed command lines executed against a fake light."""

    def test_brightness_plus_fifty_on_bright_light(self, light_on):
        execute(parse(['brightness', '50']), light_on)

        assert light_on.calls == [('fetch_state',), ('set_brightness', 100)]

    def test_temperature_on_light_that_is_off(self, light_off):
        execute(parse(['temperature', '5000']), light_off)

        assert light_off.writes == [('set_power', True), ('set_temperature', 5000)]

    def test_negative_delta(self):
        light = FakeKeyLight(DeviceState(power=True, brightness=60, temperature=3000))

        execute(parse(['brightness', '-50']), light)

        assert light.writes == [('set_brightness', 10)]
