"""
Control commands for the light.

Includes power, absolute on, relative brightness and temperature. Each
command only validates its arguments and returns the matching Intent.
"""

import click

from core.config import DEFAULT_BRIGHTNESS, DEFAULT_IP_ADDRESS, DEFAULT_TEMPERATURE, get_default_ip_address
from core.errors import ConfigError
from models.intent import (
    BRIGHTNESS,
    BRIGHTNESS_DELTA,
    IPV4_ADDRESS,
    TEMPERATURE,
    AdjustBrightness,
    InvalidConfigError,
    InvalidNumberError,
    Off,
    On,
    SetTemperature,
    UnknownOptionError,
    parse_integer,
)


def default_ip_address() -> str:
    """Default for --ip-address; an unreadable config file is a usage error."""
    try:
        return get_default_ip_address()
    except ConfigError as e:
        raise InvalidConfigError(
            f"{e}\nFix the file or run 'keylight configure -i <address>'.",
            ctx=click.get_current_context(silent=True)
        ) from e


ip_address_option = click.option(
    '--ip-address', '-i', 'address',
    type=IPV4_ADDRESS,
    default=default_ip_address,
    show_default=f'configured address or {DEFAULT_IP_ADDRESS}',
    help='IPv4 address of the light'
)


class SignedValueCommand(click.Command):
    """Command whose positional value may be a negative integer such as '-50'.

    Unknown options are let through to the argument so negative numbers
    reach it, but any other dash-prefixed token is still rejected as an
    unknown option.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.context_settings.setdefault('ignore_unknown_options', True)

    def parse_args(self, ctx, args):
        known = {
            name
            for param in self.get_params(ctx)
            for name in param.opts + param.secondary_opts
            if name.startswith('-')
        }

        for arg in args:
            if arg == '--':
                break
            if not arg.startswith('-') or arg.split('=', 1)[0] in known or arg[:2] in known:
                continue
            try:
                parse_integer(arg)
            except InvalidNumberError:
                raise UnknownOptionError(f"No such option: {arg}", ctx=ctx) from None

        return super().parse_args(ctx, args)


@click.command()
@click.option('--brightness', '-b', type=BRIGHTNESS, default=DEFAULT_BRIGHTNESS,
              show_default=True, help='Brightness (0-100)')
@click.option('--temperature', '-t', type=TEMPERATURE, default=DEFAULT_TEMPERATURE,
              show_default=True, help='Colour temperature in Kelvin')
@ip_address_option
def on_command(brightness: int, temperature: int, address):
    """Turn the light ON with the given brightness and temperature.

    \b
    Examples:
      keylight on
      keylight on -b 40 -t 4500
      keylight on --ip-address 192.168.0.20
    """
    return On(address=address, brightness=brightness, temperature=temperature)


@click.command()
@ip_address_option
def off_command(address):
    """Turn the light OFF."""
    return Off(address=address)


@click.command(cls=SignedValueCommand)
@click.argument('delta', type=BRIGHTNESS_DELTA)
@ip_address_option
def brightness_command(delta: int, address):
    """Change brightness by DELTA percent (-100 to 100).

    The light is turned on first if it is off. The result is kept within
    0-100, so 'brightness 50' on a light at 90% sets it to 100%.

    \b
    Examples:
      keylight brightness 10
      keylight brightness -50
    """
    return AdjustBrightness(address=address, delta=delta)


@click.command(cls=SignedValueCommand)
@click.argument('temperature', type=TEMPERATURE)
@ip_address_option
def temperature_command(temperature: int, address):
    """Set the colour temperature in Kelvin.

    The light is turned on first if it is off. It supports 2900-7000K;
    values outside that range are set to the nearest limit.

    \b
    Examples:
      keylight temperature 5000
    """
    return SetTemperature(address=address, temperature=temperature)
