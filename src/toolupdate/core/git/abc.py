"""Git operations needed to fetch a fresh copy of a project.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation that materializes files for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def shallow_clone(self, repo_url: str, branch: str, dest: Path) -> None:
        """Clone a single branch at depth 1 into dest.

        Args:
            repo_url: Repository URL to clone
            branch: Branch to check out
            dest: Directory to clone into (must not exist yet)

        Raises:
            FetchError: If the clone fails
        """
        ...
