"""Validated command intents.

An Intent is the typed form of one command line: which operation to run,
its parameters and the address of the light. Intents are built once per
invocation and never modified.

Parse errors subclass click.UsageError so the CLI can show them together
with the usage line of the command that failed.
"""

from dataclasses import dataclass
from ipaddress import AddressValueError, IPv4Address

import click

from core.config import DEFAULT_BRIGHTNESS, DEFAULT_TEMPERATURE

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100
MAX_DELTA = 100


class ParseError(click.UsageError):
    """Base class for command line input rejected before contacting the light."""


class InvalidNumberError(ParseError, click.BadParameter):
    """A numeric argument isn't an integer literal."""


class OutOfRangeError(ParseError, click.BadParameter):
    """A numeric argument is outside its allowed range."""


class InvalidAddressError(ParseError, click.BadParameter):
    """The device address isn't a valid IPv4 address."""


class UnknownCommandError(ParseError):
    """The command name doesn't exist."""


class MissingArgumentError(ParseError):
    """The command or one of its required arguments is missing."""


class UnknownOptionError(ParseError):
    """An option flag isn't recognised by the command."""


class InvalidConfigError(ParseError):
    """The user configuration file holding the default address is unreadable."""


@dataclass(frozen=True)
class On:
    address: IPv4Address
    brightness: int = DEFAULT_BRIGHTNESS
    temperature: int = DEFAULT_TEMPERATURE


@dataclass(frozen=True)
class Off:
    address: IPv4Address


@dataclass(frozen=True)
class AdjustBrightness:
    address: IPv4Address
    delta: int


@dataclass(frozen=True)
class SetTemperature:
    address: IPv4Address
    temperature: int


@dataclass(frozen=True)
class Status:
    address: IPv4Address


@dataclass(frozen=True)
class Info:
    address: IPv4Address


Intent = On | Off | AdjustBrightness | SetTemperature | Status | Info


def parse_integer(text: str) -> int:
    """Parse a decimal integer literal with an optional leading sign.

    The sign is handled before the digits so that '-50' is read as a value.

    Raises:
        InvalidNumberError: If text isn't an integer literal
    """
    text = text.strip()
    sign = -1 if text.startswith('-') else 1
    digits = text[1:] if text[:1] in ('-', '+') else text

    if not digits.isascii() or not digits.isdigit():
        raise InvalidNumberError(f"'{text}' is not a valid integer.")

    return sign * int(digits)


def parse_brightness_delta(text: str) -> int:
    """Parse a relative brightness change in -100..100."""
    delta = parse_integer(text)
    if not -MAX_DELTA <= delta <= MAX_DELTA:
        raise OutOfRangeError(f"{delta} is not in the range -{MAX_DELTA} to {MAX_DELTA}.")
    return delta


def parse_brightness(text: str) -> int:
    """Parse an absolute brightness percentage in 0..100."""
    brightness = parse_integer(text)
    if not MIN_BRIGHTNESS <= brightness <= MAX_BRIGHTNESS:
        raise OutOfRangeError(
            f"{brightness} is not in the range {MIN_BRIGHTNESS} to {MAX_BRIGHTNESS}."
        )
    return brightness


def parse_temperature(text: str) -> int:
    """Parse a colour temperature in Kelvin (unsigned)."""
    temperature = parse_integer(text)
    if temperature < 0:
        raise OutOfRangeError(f"{temperature} is negative; temperature must be unsigned.")
    return temperature


def parse_address(text: str) -> IPv4Address:
    """Parse a dotted-quad IPv4 address.

    Raises:
        InvalidAddressError: If text isn't a valid IPv4 address
    """
    try:
        return IPv4Address(text.strip())
    except AddressValueError as e:
        raise InvalidAddressError(f"'{text}' is not a valid IPv4 address ({e}).") from e


class _ValidatedParamType(click.ParamType):
    """click parameter type backed by one of the parse_* functions."""

    def __init__(self, name: str, parser):
        self.name = name
        self._parser = parser

    def convert(self, value, param, ctx):
        if not isinstance(value, str):
            # Defaults arrive already converted
            return value

        try:
            return self._parser(value)
        except ParseError as e:
            e.ctx = ctx
            e.param = param
            raise


BRIGHTNESS_DELTA = _ValidatedParamType('delta', parse_brightness_delta)
BRIGHTNESS = _ValidatedParamType('brightness', parse_brightness)
TEMPERATURE = _ValidatedParamType('kelvin', parse_temperature)
IPV4_ADDRESS = _ValidatedParamType('ipv4', parse_address)
