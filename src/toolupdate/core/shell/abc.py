"""Shell operations: running install commands and locating tools."""

from abc import ABC, abstractmethod
from pathlib import Path


class Shell(ABC):
    """Abstract interface for running external programs."""

    @abstractmethod
    def run_command(self, command: list[str], cwd: Path) -> int:
        """Run a command from cwd, streaming its combined output to the user.

        Args:
            command: Program followed by its arguments
            cwd: Working directory for the command

        Returns:
            The command's exit code

        Raises:
            InstallError: If the program cannot be started at all
        """
        ...

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of tool_name on PATH, or None."""
        ...
