"""Production Git implementation using subprocess."""

import logging
from pathlib import Path

from toolupdate.core.errors import FetchError
from toolupdate.core.git.abc import Git
from toolupdate.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealGit(Git):
    """All git operations execute actual git commands via subprocess."""

    def shallow_clone(self, repo_url: str, branch: str, dest: Path) -> None:
        logger.debug("Cloning %s@%s into %s", repo_url, branch, dest)
        try:
            run_subprocess_with_context(
                ["git", "clone", "--depth", "1", "--branch", branch, "--quiet", repo_url, str(dest)],
                operation_context=f"clone {repo_url} at branch '{branch}'",
            )
        except RuntimeError as e:
            raise FetchError(str(e)) from e
