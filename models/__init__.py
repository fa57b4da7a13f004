"""Data models and utility functions.

This package contains:
- intent: Validated command intents and parse errors
- state: DeviceState and AccessoryInfo snapshots
- types: TypedDict definitions for the light's JSON payloads
- utils: Utility functions (clamping, temperature units, fuzzy matching)
"""
