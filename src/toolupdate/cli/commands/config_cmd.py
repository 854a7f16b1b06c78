"""Config command group - inspect and change the global configuration."""

import click

from toolupdate.cli.ensure import Ensure
from toolupdate.cli.output import machine_output, user_output
from toolupdate.core.config_store import CONFIG_KEYS
from toolupdate.core.context import UpdaterContext


@click.group("config")
def config_group() -> None:
    """Manage toolupdate configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: UpdaterContext) -> None:
    """Print a list of configuration keys and values."""
    user_output(click.style("Global configuration:", bold=True))
    if not ctx.config_store.exists():
        user_output(f"  (no config file at {ctx.config_store.path()}, showing defaults)")
    for key in CONFIG_KEYS:
        user_output(f"  {key}={getattr(ctx.config, key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: UpdaterContext, key: str) -> None:
    """Print the value of a given configuration key."""
    Ensure.invariant(key in CONFIG_KEYS, f"Unknown config key: {key}")
    machine_output(str(getattr(ctx.config, key)))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: UpdaterContext, key: str, value: str) -> None:
    """Update the value of a configuration key."""
    try:
        ctx.config_store.set_value(key, value)
    except ValueError as e:
        Ensure.fail(str(e))
    except OSError as e:
        Ensure.fail(f"Failed to write {ctx.config_store.path()}: {e}")

    user_output(f"Set {key}={value}")
