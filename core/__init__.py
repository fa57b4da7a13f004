"""Core functionality for Key Light control.

This package contains:
- client: KeyLightClient for the light's HTTP API
- orchestrator: Executes an Intent as an ordered sequence of device calls
- config: Defaults and the optional user configuration file
- errors: Device communication errors
"""
