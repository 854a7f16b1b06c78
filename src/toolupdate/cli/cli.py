import logging
import os

import click

from toolupdate.cli.commands.config_cmd import config_group
from toolupdate.cli.commands.info_cmd import info_cmd
from toolupdate.cli.commands.list_cmd import list_cmd
from toolupdate.cli.commands.register_cmd import register_cmd
from toolupdate.cli.commands.run_cmd import run_cmd
from toolupdate.cli.commands.unregister_cmd import unregister_cmd
from toolupdate.cli.ensure import Ensure
from toolupdate.cli.help_formatter import GroupedCommandGroup
from toolupdate.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "TOOLUPDATE_DEBUG"


@click.group(
    cls=GroupedCommandGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(package_name="toolupdate")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Keep self-registered projects up to date.

    Running toolupdate without a command is the same as `toolupdate run`.
    """
    if verbose or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            Ensure.fail(str(e))

    if ctx.invoked_subcommand is None:
        ctx.invoke(run_cmd)


cli.add_command(run_cmd)
cli.add_command(list_cmd)
cli.add_command(list_cmd, name="ls")
cli.add_command(register_cmd)
cli.add_command(unregister_cmd)
cli.add_command(info_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `toolupdate` console script."""
    cli()
