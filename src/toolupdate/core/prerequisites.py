"""External tools that must be on PATH before an update pass."""

from toolupdate.core.shell.abc import Shell

REQUIRED_TOOLS = ("git",)


def find_missing_tools(shell: Shell, tools: tuple[str, ...] = REQUIRED_TOOLS) -> list[str]:
    """Return the required tools that are not installed, in declaration order."""
    return [tool for tool in tools if shell.get_installed_tool_path(tool) is None]
