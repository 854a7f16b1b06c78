"""Subprocess execution with rich error context."""

import subprocess
from collections.abc import Sequence
from pathlib import Path


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command to completion, capturing text output.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of the operation,
            used as "Failed to <operation_context>"
        cwd: Working directory for command execution

    Raises:
        RuntimeError: If the command exits non-zero or its binary is missing.
            The message carries the command, exit code and captured output.
    """
    cmd_str = " ".join(cmd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        lines = [
            f"Failed to {operation_context}",
            f"Command: {cmd_str}",
            f"Exit code: {e.returncode}",
        ]
        for label, output in (("stdout", e.stdout), ("stderr", e.stderr)):
            if output and output.strip():
                lines.append(f"{label}: {output.strip()}")
        raise RuntimeError("\n".join(lines)) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Command not found while trying to {operation_context}: {cmd[0]}\n"
            f"Full command: {cmd_str}"
        ) from e
