#!/usr/bin/env python3
"""
Key Light Control CLI
Turn an Elgato Key Light on/off, change brightness and temperature, and show status.
"""

import sys

import click

from core.client import KeyLightClient
from core.errors import DeviceCommunicationError
from core.orchestrator import execute
from models.intent import (
    AdjustBrightness,
    Intent,
    MissingArgumentError,
    On,
    Off,
    ParseError,
    UnknownOptionError,
)
from models.state import AccessoryInfo, DeviceState

# Import commands from command modules
from commands.setup import ColouredGroup, help_command, configure_command
from commands.control import on_command, off_command, brightness_command, temperature_command
from commands.inspection import status_command, info_command

EXIT_DEVICE_ERROR = 1
EXIT_USAGE_ERROR = 2


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 120
    }
)
@click.version_option(version='0.1.0', prog_name='Key Light Control')
def cli():
    """Key Light Control CLI - Control an Elgato Key Light on your network.

The light address comes from --ip-address, then 'configure', then 192.168.0.16.

Use 'help' for a quick reference of all commands.
Use 'COMMAND -h' or 'COMMAND --help' for detailed help on a specific command."""
    pass


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(configure_command, name='configure')

# Register control commands
cli.add_command(on_command, name='on')
cli.add_command(off_command, name='off')
cli.add_command(brightness_command, name='brightness')
cli.add_command(temperature_command, name='temperature')

# Register inspection commands
cli.add_command(status_command, name='status')
cli.add_command(info_command, name='info')


def parse(args: list[str]) -> Intent | None:
    """Turn command line arguments into an Intent without contacting the light.

    Returns:
        The Intent for a device command, or None when the command was fully
        handled by the CLI itself (help, version, configure)

    Raises:
        ParseError: If the arguments are invalid
    """
    try:
        result = cli.main(args=list(args), prog_name='keylight', standalone_mode=False)
    except ParseError:
        raise
    except click.MissingParameter as e:
        raise MissingArgumentError(e.format_message(), ctx=e.ctx) from e
    except click.NoSuchOption as e:
        raise UnknownOptionError(e.format_message(), ctx=e.ctx) from e
    except click.UsageError as e:
        raise ParseError(e.format_message(), ctx=e.ctx) from e

    if isinstance(result, Intent):
        return result
    return None


def describe(intent: Intent) -> str:
    """Return the confirmation line for a completed write."""
    if isinstance(intent, On):
        return f"Key Light turned ON at {intent.brightness}% and {intent.temperature}K"
    if isinstance(intent, Off):
        return "Key Light turned OFF"
    if isinstance(intent, AdjustBrightness):
        return f"Key Light brightness changed by {intent.delta:+d}%"
    return f"Key Light temperature set to {intent.temperature}K"


def show_state(state: DeviceState, address):
    """Print a status snapshot."""
    power = click.style('ON', fg='green') if state.power else click.style('OFF', fg='red')
    click.secho(f"Key Light at {address}", fg='cyan', bold=True)
    click.echo(f"  Power:        {power}")
    click.echo(f"  Brightness:   {state.brightness}%")
    click.echo(f"  Temperature:  {state.temperature}K")


def show_info(info: AccessoryInfo, address):
    """Print the light's identity record."""
    click.secho(f"{info.display_name} at {address}", fg='cyan', bold=True)
    click.echo(f"  Product:   {info.product_name}")
    click.echo(f"  Serial:    {info.serial_number}")
    click.echo(f"  Firmware:  {info.firmware_version}")


def main(argv: list[str] | None = None) -> int:
    """Parse, execute and report one command. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        intent = parse(argv)
    except ParseError as e:
        e.show()
        return EXIT_USAGE_ERROR
    except click.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_DEVICE_ERROR

    if intent is None:
        return 0

    try:
        result = execute(intent, KeyLightClient(intent.address))
    except DeviceCommunicationError as e:
        click.secho(f"✗ Error: {e}", fg='red', err=True)
        return EXIT_DEVICE_ERROR

    if isinstance(result, DeviceState):
        show_state(result, intent.address)
    elif isinstance(result, AccessoryInfo):
        show_info(result, intent.address)
    else:
        click.secho(f"✓ {describe(intent)}", fg='green')
    return 0


if __name__ == '__main__':
    sys.exit(main())
