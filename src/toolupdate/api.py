"""Public registration API for project installers.

A project's install script calls these once it has installed itself:

    from toolupdate.api import register_project

    register_project(
        "my_tool",
        "https://github.com/user/my_tool",
        "main",
        "${HOME}/.local/bin",
        "${HOME}/.local/bin/VERSION",
        "./install.sh --force",
    )

Paths may keep their placeholders; they are expanded each time the registry
is read.
"""

from toolupdate.core.config_store import RealConfigStore, apply_env_overrides
from toolupdate.core.registry.abc import RegistryStore
from toolupdate.core.registry.file import FileRegistryStore
from toolupdate.core.registry.types import InstallCommand, RegistryEntry


def default_registry() -> FileRegistryStore:
    """Registry store at the configured location."""
    config = apply_env_overrides(RealConfigStore().load_or_defaults())
    return FileRegistryStore(config.registry_path)


def register_project(
    name: str,
    repo_url: str,
    branch: str,
    install_dir: str,
    version_file: str,
    install_cmd: str | None = None,
    *,
    registry: RegistryStore | None = None,
) -> RegistryEntry:
    """Register (or re-register) a project for updates.

    Raises:
        ValidationError: If a required field is missing or malformed
        RegistryIOError: If the registry cannot be written
    """
    entry = RegistryEntry(
        name=name,
        repo_url=repo_url,
        branch=branch,
        install_dir=install_dir,
        version_file=version_file,
        install_cmd=InstallCommand.parse(install_cmd) if install_cmd else None,
    )
    (registry or default_registry()).add(entry)
    return entry


def unregister_project(name: str, *, registry: RegistryStore | None = None) -> None:
    """Remove a project from the registry.

    Raises:
        NotFoundError: If the project is not registered
        RegistryIOError: If the registry cannot be rewritten
    """
    (registry or default_registry()).remove(name)
