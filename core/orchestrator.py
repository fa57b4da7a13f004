"""Executes an Intent against a light.

Each Intent maps to a fixed, ordered sequence of device calls. Calls are
made one after another; the first one that raises aborts the sequence and
the exception propagates unchanged. Steps already applied are not undone,
so a failed `on` can leave the light powered but at its old brightness.

The device argument only needs fetch_state(), fetch_info(), set_power(),
set_brightness() and set_temperature(), which lets tests pass a fake.
"""

from models.intent import (
    AdjustBrightness,
    Info,
    Intent,
    Off,
    On,
    SetTemperature,
    Status,
)
from models.state import AccessoryInfo, DeviceState
from models.utils import clamp


def apply_delta(current: int, delta: int) -> int:
    """Return current brightness plus delta, saturated to 0-100."""
    return clamp(current + delta, 0, 100)


def ensure_powered_on(device) -> DeviceState:
    """Read the light's state and power it on if it is off.

    This is a read followed by a conditional write. The light can be
    switched by another client or its own button in between; nothing in
    the API lets us detect that, so the race is accepted.

    Returns:
        The state read before any power change
    """
    state = device.fetch_state()
    if not state.power:
        device.set_power(True)
    return state


def execute(intent: Intent, device) -> DeviceState | AccessoryInfo | None:
    """Run the device calls for intent.

    Returns:
        DeviceState for Status, AccessoryInfo for Info, None for writes

    Raises:
        DeviceCommunicationError: From the first device call that fails
        TypeError: If intent isn't a known Intent
    """
    if isinstance(intent, On):
        # Unconditional; powering on twice is harmless
        device.set_power(True)
        device.set_brightness(intent.brightness)
        device.set_temperature(intent.temperature)
        return None

    if isinstance(intent, Off):
        device.set_power(False)
        return None

    if isinstance(intent, AdjustBrightness):
        # The precondition read doubles as the read for the new brightness;
        # powering on doesn't change the stored brightness.
        current = ensure_powered_on(device)
        device.set_brightness(apply_delta(current.brightness, intent.delta))
        return None

    if isinstance(intent, SetTemperature):
        ensure_powered_on(device)
        device.set_temperature(intent.temperature)
        return None

    if isinstance(intent, Status):
        return device.fetch_state()

    if isinstance(intent, Info):
        return device.fetch_info()

    raise TypeError(f"Unsupported intent: {intent!r}")
