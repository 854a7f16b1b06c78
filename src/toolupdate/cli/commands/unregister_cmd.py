"""Unregister command implementation."""

import click

from toolupdate.cli.ensure import Ensure
from toolupdate.core.context import UpdaterContext
from toolupdate.core.errors import NotFoundError, RegistryIOError


@click.command("unregister")
@click.argument("name")
@click.pass_obj
def unregister_cmd(ctx: UpdaterContext, name: str) -> None:
    """Remove a project from the registry.

    The project's installed files are left in place.
    """
    ctx.feedback.info(f"Unregistering project: {name}")
    try:
        ctx.registry.remove(name)
    except (NotFoundError, RegistryIOError) as e:
        Ensure.fail(str(e))

    ctx.feedback.success(f"Successfully unregistered {name}")
