"""Info command implementation - environment diagnostics."""

import click

from toolupdate.cli.output import user_output
from toolupdate.core.context import UpdaterContext
from toolupdate.core.platform_info import detect_platform
from toolupdate.core.prerequisites import REQUIRED_TOOLS
from toolupdate.version import __version__


@click.command("info")
@click.pass_obj
def info_cmd(ctx: UpdaterContext) -> None:
    """Show version, file locations, tools and platform."""
    entries = ctx.registry.list_entries()

    user_output(click.style("toolupdate", bold=True) + f" {__version__}")
    user_output(f"  Registry:   {ctx.config.registry_path} ({len(entries)} project(s))")
    config_state = "" if ctx.config_store.exists() else " (not created, using defaults)"
    user_output(f"  Config:     {ctx.config_store.path()}{config_state}")
    user_output(f"  Engine:     {ctx.config.engine_path}")
    user_output(f"  Running:    {ctx.running_path}")
    user_output(f"  Platform:   {detect_platform().describe()}")

    user_output()
    user_output(click.style("Required tools:", bold=True))
    for tool in REQUIRED_TOOLS:
        path = ctx.shell.get_installed_tool_path(tool)
        if path is None:
            user_output(f"  {click.style('✗', fg='red')} {tool} (not found)")
        else:
            user_output(f"  {click.style('✓', fg='green')} {tool} ({path})")
