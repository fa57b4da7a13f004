"""Snapshots read from the light.

Both classes are immutable; every read builds a new instance.
"""

from dataclasses import dataclass

from models.types import AccessoryInfoPayload, LightPayload
from models.utils import device_to_kelvin


@dataclass(frozen=True)
class DeviceState:
    """Power, brightness (0-100) and temperature (Kelvin) at the time of a read."""
    power: bool
    brightness: int
    temperature: int

    @classmethod
    def from_payload(cls, light: LightPayload) -> 'DeviceState':
        """Build a DeviceState from one entry of the 'lights' array.

        Raises:
            KeyError: If a field is missing
            ValueError/TypeError: If a field isn't numeric
        """
        return cls(
            power=bool(int(light['on'])),
            brightness=int(light['brightness']),
            temperature=device_to_kelvin(int(light['temperature'])),
        )


@dataclass(frozen=True)
class AccessoryInfo:
    """Identity record of the light."""
    product_name: str
    display_name: str
    serial_number: str
    firmware_version: str

    @classmethod
    def from_payload(cls, info: AccessoryInfoPayload) -> 'AccessoryInfo':
        return cls(
            product_name=info['productName'],
            # Unnamed lights report an empty displayName
            display_name=info.get('displayName') or info['productName'],
            serial_number=info.get('serialNumber', 'Unknown'),
            firmware_version=info.get('firmwareVersion', 'Unknown'),
        )
