"""CLI command modules.

This package contains:
- control: Commands that change the light (on, off, brightness, temperature)
- inspection: Commands that read the light (status, info)
- setup: Coloured command group, help and configure commands

Device commands return an Intent instead of talking to the light; the entry
point executes it.
"""
