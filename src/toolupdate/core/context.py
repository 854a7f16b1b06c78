"""Application context with dependency injection."""

import sys
from dataclasses import dataclass, replace
from pathlib import Path

from toolupdate.core.config_store import (
    ConfigStore,
    GlobalConfig,
    RealConfigStore,
    apply_env_overrides,
)
from toolupdate.core.git.abc import Git
from toolupdate.core.git.real import RealGit
from toolupdate.core.registry.abc import RegistryStore
from toolupdate.core.registry.file import FileRegistryStore
from toolupdate.core.remote.abc import RemoteVersions
from toolupdate.core.remote.real import RequestsRemoteVersions
from toolupdate.core.shell.abc import Shell
from toolupdate.core.shell.real import RealShell
from toolupdate.core.time.abc import Time
from toolupdate.core.time.real import RealTime
from toolupdate.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class UpdaterContext:
    """Immutable context holding all dependencies for toolupdate operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime; per-command flags
    such as dry_run are applied with with_run_options(), which returns a copy.
    """

    registry: RegistryStore
    remote: RemoteVersions
    git: Git
    shell: Shell
    time: Time
    config_store: ConfigStore
    feedback: UserFeedback
    config: GlobalConfig
    running_path: Path  # Resolved path of the executing engine entry point
    dry_run: bool
    skip_tests: bool

    def with_run_options(
        self,
        *,
        dry_run: bool,
        skip_tests: bool,
        feedback: UserFeedback | None = None,
    ) -> "UpdaterContext":
        return replace(
            self,
            dry_run=dry_run,
            skip_tests=skip_tests,
            feedback=feedback if feedback is not None else self.feedback,
        )


def create_context() -> UpdaterContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution. Commands that emit JSON swap in SuppressedFeedback
    through UpdaterContext.with_run_options().

    Raises:
        ValueError: If the global config file is malformed
    """
    # Defaults when no config file exists
    config_store = RealConfigStore()
    config = apply_env_overrides(config_store.load_or_defaults())

    return UpdaterContext(
        registry=FileRegistryStore(config.registry_path),
        remote=RequestsRemoteVersions(),
        git=RealGit(),
        shell=RealShell(),
        time=RealTime(),
        config_store=config_store,
        feedback=InteractiveFeedback(),
        config=config,
        running_path=Path(sys.argv[0]).resolve(),
        dry_run=False,
        skip_tests=False,
    )
