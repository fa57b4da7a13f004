"""KeyLightClient class for the Elgato Key Light HTTP API.

This module contains the client that handles all communication with a
single light. Every method is one blocking HTTP round trip; nothing is
cached between calls.
"""

import requests

from core.config import DEFAULT_PORT, REQUEST_TIMEOUT
from core.errors import DeviceCommunicationError
from models.state import AccessoryInfo, DeviceState
from models.types import LightPayload
from models.utils import kelvin_to_device


class KeyLightClient:
    """Reads and writes the state of one Key Light over its local HTTP API.

    There is no identity handshake before the first call; it would add a
    round trip to every command. Instead every /lights response, including
    the reply to each PUT, must carry a non-empty 'lights' array, and a
    device that answers without one raises DeviceCommunicationError. Use
    fetch_info() to read the product name explicitly.
    """

    def __init__(self, ip_address: str, port: int = DEFAULT_PORT,
                 timeout: float = REQUEST_TIMEOUT):
        """Initialise KeyLightClient.

        Args:
            ip_address: IPv4 address of the light
            port: HTTP port of the light's API
            timeout: Seconds to wait for each request
        """
        self.ip_address = str(ip_address)
        self.base_url = f"http://{self.ip_address}:{port}/elgato"
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, endpoint: str, data: dict | None = None) -> dict:
        """Make a request to the light and return the decoded JSON body.

        Raises:
            DeviceCommunicationError: On connection errors, timeouts,
                HTTP error statuses or a body that isn't a JSON object
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.request(method, url, json=data, timeout=self.timeout)
            response.raise_for_status()
            result = response.json()
        except requests.exceptions.RequestException as e:
            raise DeviceCommunicationError(
                f"Request to {url} failed: {e}", self.ip_address
            ) from e
        except ValueError as e:
            raise DeviceCommunicationError(
                f"Light at {self.ip_address} returned invalid JSON: {e}", self.ip_address
            ) from e

        if not isinstance(result, dict):
            raise DeviceCommunicationError(
                f"Light at {self.ip_address} returned an unexpected response: {result!r}",
                self.ip_address
            )
        return result

    def _first_light(self, result: dict) -> LightPayload:
        """Return the single light entry of a /lights response."""
        lights = result.get('lights')
        if not isinstance(lights, list) or not lights:
            raise DeviceCommunicationError(
                f"Device at {self.ip_address} reported no lights; is it a Key Light?",
                self.ip_address
            )
        return lights[0]

    def _update_light(self, light: LightPayload):
        """Send the given fields of the light state in one PUT request."""
        result = self._request('PUT', '/lights', {'numberOfLights': 1, 'lights': [light]})
        self._first_light(result)

    def fetch_state(self) -> DeviceState:
        """Read the current power, brightness and temperature of the light."""
        light = self._first_light(self._request('GET', '/lights'))
        try:
            return DeviceState.from_payload(light)
        except (KeyError, TypeError, ValueError) as e:
            raise DeviceCommunicationError(
                f"Light at {self.ip_address} returned a malformed state: {light!r}",
                self.ip_address
            ) from e

    def fetch_info(self) -> AccessoryInfo:
        """Read the product name, serial number and firmware of the light."""
        result = self._request('GET', '/accessory-info')
        try:
            return AccessoryInfo.from_payload(result)
        except KeyError as e:
            raise DeviceCommunicationError(
                f"Device at {self.ip_address} returned no product name; is it a Key Light?",
                self.ip_address
            ) from e

    def set_power(self, on: bool):
        """Turn the light on or off."""
        self._update_light({'on': 1 if on else 0})

    def set_brightness(self, brightness: int):
        """Set brightness as a percentage (0-100)."""
        if not 0 <= brightness <= 100:
            raise ValueError(f"Brightness must be in 0-100, got {brightness}")
        self._update_light({'brightness': brightness})

    def set_temperature(self, temperature: int):
        """Set colour temperature in Kelvin.

        Values outside 2900-7000K are saturated to the nearest supported value.
        """
        self._update_light({'temperature': kelvin_to_device(temperature)})
