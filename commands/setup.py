"""
Setup and help commands for Key Light Control CLI.

Contains custom Click group class for coloured help output and typo suggestions.
"""

from dataclasses import dataclass

import click

from core.config import DEFAULT_IP_ADDRESS, load_config, save_config
from core.errors import ConfigError
from models.intent import IPV4_ADDRESS, InvalidConfigError, MissingArgumentError, UnknownCommandError
from models.utils import find_similar_strings


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    commands: list[tuple[str, str]]


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def parse_args(self, ctx, args):
        """Reject a missing command instead of printing help and exiting 0."""
        if not args and not ctx.resilient_parsing:
            raise MissingArgumentError("Missing command.", ctx=ctx)
        return super().parse_args(ctx, args)

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        cmd_name = args[0] if args else ''
        if cmd_name and not cmd_name.startswith('-') and self.get_command(ctx, cmd_name) is None:
            error_msg = f"No such command '{cmd_name}'."

            suggestions = self._get_suggestions(ctx, cmd_name)
            if suggestions:
                error_msg += "\n\n" + click.style("Did you mean one of these?\n", fg='yellow')
                for suggestion in suggestions:
                    error_msg += click.style(f"  • {suggestion}\n", fg='green')
            raise UnknownCommandError(error_msg, ctx=ctx)

        return super().resolve_command(ctx, args)

    def _get_suggestions(self, ctx, cmd_name):
        """Get visible command names similar to cmd_name."""
        visible = [
            name for name in self.list_commands(ctx)
            if not self.get_command(ctx, name).hidden
        ]
        return find_similar_strings(cmd_name, visible)

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            f'{ctx.command_path} COMMAND [ARGS]...'
        )

    def format_commands(self, ctx, formatter):
        """List commands with their names in green."""
        rows = [
            (click.style(name, fg='green'), self.get_command(ctx, name).get_short_help_str(limit=80))
            for name in self.list_commands(ctx)
            if not self.get_command(ctx, name).hidden
        ]
        if rows:
            with formatter.section(click.style('Commands', fg='yellow', bold=True)):
                formatter.write_dl(rows)


COMMAND_SECTIONS = [
    CommandSection(
        name="POWER",
        commands=[
            ("on", "Turn on at 10% and 3000K"),
            ("on -b <0-100> -t <kelvin>", "Turn on with brightness and temperature"),
            ("off", "Turn off"),
        ]
    ),
    CommandSection(
        name="ADJUST (turns the light on if needed)",
        commands=[
            ("brightness <delta>", "Change brightness by -100 to 100 percent"),
            ("temperature <kelvin>", "Set colour temperature (2900-7000K)"),
        ]
    ),
    CommandSection(
        name="INSPECT",
        commands=[
            ("status", "Show power, brightness and temperature"),
            ("info", "Show product, serial number and firmware"),
        ]
    ),
    CommandSection(
        name="SETUP",
        commands=[
            ("configure -i <address>", "Save the default light address"),
            ("configure --show", "Show the default light address"),
        ]
    ),
]


@click.command(name='help')
def help_command():
    """Display help and common commands."""
    click.secho("\nKey Light Control - Quick Reference", fg='cyan', bold=True)
    click.echo()

    for section in COMMAND_SECTIONS:
        click.secho(section.name, fg='yellow', bold=True)
        for cmd, desc in section.commands:
            click.echo("  ", nl=False)
            click.secho(cmd, fg='green', nl=False)
            click.echo(" " * (30 - len(cmd)) + "  " + desc)
        click.echo()

    click.secho("All commands accept -i/--ip-address to target a specific light.", fg='cyan')
    click.echo(f"  For detailed help: keylight {click.style('<command> -h', fg='white', bold=True)}")
    click.echo()


@click.command()
@click.option('--ip-address', '-i', 'address', type=IPV4_ADDRESS, default=None,
              help='Address to use when --ip-address is omitted')
@click.option('--show', is_flag=True, help='Show the current default address')
def configure_command(address, show: bool):
    """Save the default light address to ~/.keylight/config.json.

    \b
    Examples:
      keylight configure -i 192.168.0.20
      keylight configure --show
    """
    try:
        config = load_config()
    except ConfigError as e:
        if show or address is None:
            raise InvalidConfigError(str(e)) from e
        # Saving a new address replaces the unreadable file
        click.secho(f"⚠ {e}; replacing it", fg='yellow', err=True)
        config = {}

    if show or address is None:
        configured = config.get('ip_address')
        if configured:
            click.echo(f"Default light address: {configured} (configured)")
        else:
            click.echo(f"Default light address: {DEFAULT_IP_ADDRESS} (built-in)")
        return None

    config['ip_address'] = str(address)
    save_config(config)
    click.secho(f"✓ Default light address set to {address}", fg='green')
    return None
