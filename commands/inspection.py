"""
Inspection commands for reading the light.
"""

import click

from commands.control import ip_address_option
from models.intent import Info, Status


@click.command()
@ip_address_option
def status_command(address):
    """Show power, brightness and temperature of the light."""
    return Status(address=address)


@click.command()
@ip_address_option
def info_command(address):
    """Show product name, serial number and firmware of the light."""
    return Info(address=address)
