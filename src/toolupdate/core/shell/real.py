"""Production Shell implementation using subprocess."""

import logging
import shutil
import subprocess
from pathlib import Path

from toolupdate.core.errors import InstallError
from toolupdate.core.output import user_output
from toolupdate.core.shell.abc import Shell

logger = logging.getLogger(__name__)

OUTPUT_INDENT = "    "


class RealShell(Shell):
    """Runs commands with stdout and stderr merged and echoed line by line."""

    def run_command(self, command: list[str], cwd: Path) -> int:
        logger.debug("Running: %s (cwd=%s)", " ".join(command), cwd)
        try:
            process = subprocess.Popen(
                command,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise InstallError(f"Could not start {command[0]}: {e}") from e

        assert process.stdout is not None
        with process.stdout:
            for line in process.stdout:
                user_output(OUTPUT_INDENT + line.rstrip("\n"))

        return process.wait()

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
