"""List command implementation - shows registered projects."""

import click

from toolupdate.cli.json_output import emit_json
from toolupdate.cli.json_schemas import ListCommandResponse, ProjectInfo
from toolupdate.cli.output import user_output
from toolupdate.core.context import UpdaterContext
from toolupdate.core.registry.file import FileRegistryStore
from toolupdate.core.version_resolver import NOT_INSTALLED, resolve_local


@click.command("list")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def list_cmd(ctx: UpdaterContext, output_json: bool) -> None:
    """List all registered projects."""
    entries = ctx.registry.list_entries()

    if output_json:
        projects = [
            ProjectInfo(
                name=entry.name,
                repo_url=entry.repo_url,
                branch=entry.branch,
                install_dir=str(entry.resolved_install_dir()),
                version_file=str(entry.resolved_version_file()),
                install_cmd=str(entry.install_cmd) if entry.install_cmd else None,
                installed_version=resolve_local(entry.resolved_version_file()),
            )
            for entry in entries
        ]
        response = ListCommandResponse(
            registry_path=_registry_location(ctx),
            projects=projects,
        )
        emit_json(response.model_dump(mode="json"))
        return

    if not entries:
        user_output("No projects registered yet")
        return

    user_output("Registered projects:")
    user_output()
    for entry in entries:
        user_output(f"  {click.style(entry.name, fg='cyan', bold=True)}")
        user_output(f"    Repository: {entry.repo_url}")
        user_output(f"    Branch:     {entry.branch}")
        user_output(f"    Location:   {entry.resolved_install_dir()}")
        version = resolve_local(entry.resolved_version_file())
        if version != NOT_INSTALLED:
            user_output(f"    Version:    {version}")
        if entry.install_cmd is not None:
            user_output(f"    Install:    {entry.install_cmd}")
        user_output()

    user_output(click.style(f"Total: {len(entries)} project(s)", fg="green"))


def _registry_location(ctx: UpdaterContext) -> str:
    if isinstance(ctx.registry, FileRegistryStore):
        return str(ctx.registry.path)
    return str(ctx.config.registry_path)
