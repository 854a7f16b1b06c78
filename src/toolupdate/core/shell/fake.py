"""Fake Shell implementation for testing."""

from collections.abc import Callable
from pathlib import Path

from toolupdate.core.errors import InstallError
from toolupdate.core.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake of shell operations.

    Constructor Injection:
    - installed_tools maps tool name to executable path
    - command_exit_code is returned from every run_command() call
    - missing_programs lists programs that fail to start
    - on_run is called with (command, cwd) before returning, letting a test
      simulate what an install script writes to disk

    Examples:
        >>> shell = FakeShell(installed_tools={"git": "/usr/bin/git"})
        >>> shell.get_installed_tool_path("git")
        '/usr/bin/git'
    """

    def __init__(
        self,
        *,
        installed_tools: dict[str, str] | None = None,
        command_exit_code: int = 0,
        missing_programs: set[str] | None = None,
        on_run: Callable[[list[str], Path], None] | None = None,
    ) -> None:
        self._installed_tools = installed_tools or {}
        self._command_exit_code = command_exit_code
        self._missing_programs = missing_programs or set()
        self._on_run = on_run
        self._command_calls: list[tuple[list[str], Path]] = []

    def run_command(self, command: list[str], cwd: Path) -> int:
        self._command_calls.append((list(command), cwd))
        if command[0] in self._missing_programs:
            raise InstallError(f"Could not start {command[0]}: No such file or directory")
        if self._on_run is not None:
            self._on_run(command, cwd)
        return self._command_exit_code

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return self._installed_tools.get(tool_name)

    @property
    def command_calls(self) -> list[tuple[list[str], Path]]:
        """(command, cwd) of every run_command() call.

        This property is for test assertions only.
        """
        return self._command_calls.copy()
