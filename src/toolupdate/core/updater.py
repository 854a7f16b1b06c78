"""Per-project update driver.

update_one() brings a single registry entry up to date:

1. Resolve local and remote versions (remote failure fails this entry only)
2. Equal version strings mean the project is up to date
3. In dry-run mode, stop and report that an update would happen
4. Shallow-clone the project into a scratch directory
5. Run the project's install command from the clone, or
6. copy the clone over install_dir when no install command is registered
7. Remove the scratch directory on every path
"""

import logging
import shutil
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from toolupdate.core.context import UpdaterContext
from toolupdate.core.errors import InstallError, NetworkError
from toolupdate.core.registry.types import InstallCommand, RegistryEntry
from toolupdate.core.version_resolver import NOT_INSTALLED, resolve_local, resolve_remote

logger = logging.getLogger(__name__)


class UpdateOutcome(Enum):
    UP_TO_DATE = "up-to-date"
    UPDATED = "updated"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of one update_one() call. Never persisted."""

    name: str
    local_version: str
    remote_version: str | None
    outcome: UpdateOutcome
    message: str | None = None


def update_one(ctx: UpdaterContext, entry: RegistryEntry) -> UpdateResult:
    """Check one project and update it if its version string changed.

    Per-project failures are returned as a FAILED result rather than raised,
    so the caller can continue with the next entry.
    """
    feedback = ctx.feedback
    feedback.info(f"Checking {entry.name} for updates...")

    install_dir = entry.resolved_install_dir()
    local_version = resolve_local(entry.resolved_version_file())
    feedback.info(f"  Current version: {local_version}")

    try:
        remote_version = resolve_remote(
            ctx.remote,
            entry.repo_url,
            entry.branch,
            artifact=ctx.config.version_artifact,
            timeout=ctx.config.fetch_timeout,
        )
    except NetworkError as e:
        feedback.error(f"  Failed to fetch remote version: {e}")
        return UpdateResult(entry.name, local_version, None, UpdateOutcome.FAILED, str(e))

    feedback.info(f"  Latest version:  {remote_version}")

    if local_version == remote_version:
        feedback.success(f"  {entry.name} is up to date ({local_version})")
        return UpdateResult(entry.name, local_version, remote_version, UpdateOutcome.UP_TO_DATE)

    if local_version == NOT_INSTALLED:
        feedback.info(f"  {entry.name} not currently installed")
        feedback.info(f"  Will install version: {remote_version}")
    else:
        feedback.info(f"  Update available: {local_version} → {remote_version}")

    if ctx.dry_run:
        feedback.info(f"  [DRY RUN] Would download and install {entry.name} {remote_version}")
        return UpdateResult(
            entry.name, local_version, remote_version, UpdateOutcome.SKIPPED, "would update"
        )

    try:
        _fetch_and_install(ctx, entry, install_dir)
    except (NetworkError, InstallError) as e:
        feedback.error(f"  {e}")
        return UpdateResult(
            entry.name, local_version, remote_version, UpdateOutcome.FAILED, str(e)
        )

    feedback.success(f"  Updated {entry.name} to {remote_version}")
    return UpdateResult(entry.name, local_version, remote_version, UpdateOutcome.UPDATED)


def _fetch_and_install(ctx: UpdaterContext, entry: RegistryEntry, install_dir: Path) -> None:
    if entry.install_cmd is None and not entry.install_dir.strip():
        raise InstallError(f"No install command and no install_dir registered for {entry.name}")

    # The scratch directory is owned by this call alone and removed on exit
    with tempfile.TemporaryDirectory(
        prefix=f"toolupdate-{entry.name}-", ignore_cleanup_errors=True
    ) as scratch:
        clone_dir = Path(scratch) / "clone"
        ctx.feedback.info(f"  Downloading {entry.name}...")
        ctx.git.shallow_clone(entry.repo_url, entry.branch, clone_dir)

        if entry.install_cmd is not None:
            _run_install_command(ctx, entry.install_cmd, clone_dir)
        else:
            ctx.feedback.info(f"  Copying files to {install_dir}...")
            copy_tree_contents(clone_dir, install_dir)


def _run_install_command(ctx: UpdaterContext, install_cmd: InstallCommand, clone_dir: Path) -> None:
    command = install_cmd.with_update_flags(skip_tests=ctx.skip_tests)
    ctx.feedback.info("  Installing update...")
    logger.debug("Running install command: %s", command)

    exit_code = ctx.shell.run_command(command.argv(), cwd=clone_dir)
    if exit_code != 0:
        raise InstallError(f"Installation failed: {command} exited with {exit_code}", exit_code)


def copy_tree_contents(source: Path, dest: Path) -> None:
    """Copy every non-hidden top-level entry of source into dest, overwriting.

    Raises:
        InstallError: If dest cannot be created or a copy fails
    """
    try:
        dest.mkdir(parents=True, exist_ok=True)
        for child in sorted(source.iterdir()):
            if child.name.startswith("."):
                continue
            target = dest / child.name
            if child.is_dir() and not child.is_symlink():
                shutil.copytree(child, target, symlinks=True, dirs_exist_ok=True)
            else:
                shutil.copy2(child, target, follow_symlinks=False)
    except OSError as e:
        raise InstallError(f"Failed to copy files to {dest}: {e}") from e
