"""Register command implementation - adds or replaces a registry entry."""

import click

from toolupdate.cli.ensure import Ensure
from toolupdate.core.context import UpdaterContext
from toolupdate.core.errors import RegistryIOError, ValidationError
from toolupdate.core.registry.types import InstallCommand, RegistryEntry


@click.command("register")
@click.argument("name")
@click.argument("repo_url")
@click.argument("branch")
@click.argument("install_dir")
@click.argument("version_file")
@click.argument("install_cmd", required=False, default="")
@click.pass_obj
def register_cmd(
    ctx: UpdaterContext,
    name: str,
    repo_url: str,
    branch: str,
    install_dir: str,
    version_file: str,
    install_cmd: str,
) -> None:
    """Register a project (replaces any existing entry with the same NAME).

    INSTALL_DIR and VERSION_FILE may contain ~, $HOME or $USER; they are
    expanded each time the registry is used. INSTALL_CMD is split on
    whitespace and run from the root of a fresh clone.

    \b
    Example:
      toolupdate register my_tool https://github.com/user/my_tool main \\
          '${HOME}/.local/bin' '${HOME}/.local/bin/VERSION' './install.sh --force'
    """
    entry = RegistryEntry(
        name=name,
        repo_url=repo_url,
        branch=branch,
        install_dir=install_dir,
        version_file=version_file,
        install_cmd=InstallCommand.parse(install_cmd),
    )

    ctx.feedback.info(f"Registering project: {name}")
    try:
        ctx.registry.add(entry)
    except ValidationError as e:
        Ensure.fail(f"Failed to register {name}: {e}")
    except RegistryIOError as e:
        Ensure.fail(str(e))

    ctx.feedback.success(f"Successfully registered {name}")

