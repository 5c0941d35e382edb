"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Canopy, a product of Garudex Labs

CLI context for Canopy.

Provides shared context object and decorators for CLI commands.
"""

import functools
import sys

import click

from canopy.config.settings import CanopyConfig, get_default_config
from canopy.exceptions import CanopyError
from canopy.merkle.hasher import Hasher
from canopy.merkle.utils import from_hex


class CLIContext:
    """Context object for CLI commands."""

    def __init__(self):
        self.config = None
        self.config_path = None
        self.verbose = False

    def get_config(self) -> CanopyConfig:
        """Get loaded configuration, falling back to defaults."""
        if self.config is None:
            self.config = get_default_config()
        return self.config

    def get_hasher(self) -> Hasher:
        """Build the hasher selected by configuration."""
        return Hasher(self.get_config().tree.digest_algorithm)


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


# Input validation helpers
def validate_hex(ctx, param, value):
    """
    Validate that a value (or each value of a multiple option) is hex.

    Args:
        ctx: Click context
        param: Click parameter
        value: Value to validate

    Returns:
        Decoded bytes, or a tuple of bytes for multiple options

    Raises:
        click.BadParameter: If value is not valid hex
    """
    if value is None:
        return value

    if isinstance(value, tuple):
        return tuple(validate_hex(ctx, param, item) for item in value)

    try:
        return from_hex(value)
    except ValueError:
        raise click.BadParameter(f"must be a hex string, got '{value}'")


def handle_canopy_error(func):
    """
    Decorator to handle CanopyError exceptions in CLI commands.

    Catches CanopyError exceptions and displays user-friendly error messages.

    Args:
        func: CLI command function to wrap

    Returns:
        Wrapped function
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CanopyError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper
