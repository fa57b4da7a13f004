"""Type definitions for the Key Light HTTP API.

This module provides TypedDict definitions for the JSON payloads exchanged
with the light, improving type safety and IDE autocompletion.
"""

from typing import TypedDict


class LightPayload(TypedDict, total=False):
    """One entry of the 'lights' array.

    Fields are optional because PUT requests only carry the changed ones.
    """
    on: int
    brightness: int
    temperature: int


class LightsPayload(TypedDict):
    """Body of GET/PUT /elgato/lights."""
    numberOfLights: int
    lights: list[LightPayload]


class AccessoryInfoPayload(TypedDict, total=False):
    """Body of GET /elgato/accessory-info."""
    productName: str
    hardwareBoardType: int
    firmwareBuildNumber: int
    firmwareVersion: str
    serialNumber: str
    displayName: str
