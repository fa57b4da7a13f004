"""Errors raised while talking to the light."""


class DeviceCommunicationError(Exception):
    """The light could not be reached or returned something unusable.

    Raised by KeyLightClient for transport failures, HTTP error statuses and
    malformed responses. The original exception is chained as __cause__.
    """

    def __init__(self, message: str, ip_address: str | None = None):
        super().__init__(message)
        self.ip_address = ip_address


class ConfigError(Exception):
    """The user configuration file exists but can't be read as JSON."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
