"""Fake Git implementation for testing."""

from pathlib import Path

from toolupdate.core.errors import FetchError
from toolupdate.core.git.abc import Git


class FakeGit(Git):
    """Clones by writing pre-configured file trees to disk.

    Constructor Injection:
    - repos maps (repo_url, branch) to {relative_path: content}
    - Unknown (repo_url, branch) pairs fail like an unreachable remote

    When partial_clone_on_failure is True, a failing clone still leaves a
    half-written dest directory behind, as git does when interrupted.
    """

    def __init__(
        self,
        *,
        repos: dict[tuple[str, str], dict[str, str]] | None = None,
        partial_clone_on_failure: bool = False,
    ) -> None:
        self._repos = repos or {}
        self._partial_clone_on_failure = partial_clone_on_failure
        self._clones: list[tuple[str, str, Path]] = []

    def shallow_clone(self, repo_url: str, branch: str, dest: Path) -> None:
        self._clones.append((repo_url, branch, dest))
        files = self._repos.get((repo_url, branch))
        if files is None:
            if self._partial_clone_on_failure:
                dest.mkdir(parents=True)
                (dest / ".git").mkdir()
            raise FetchError(f"Failed to clone {repo_url} at branch '{branch}'")

        dest.mkdir(parents=True)
        (dest / ".git").mkdir()
        for relative, content in files.items():
            target = dest / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

    @property
    def clones(self) -> list[tuple[str, str, Path]]:
        """(repo_url, branch, dest) of every shallow_clone() call."""
        return list(self._clones)
