"""Output routing shared by core integrations and CLI commands.

user_output: human-facing messages, sent to stderr
machine_output: structured data (JSON), sent to stdout
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write machine-readable output to stdout."""
    click.echo(message, nl=nl)
