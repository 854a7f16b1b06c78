"""Placeholder expansion for registry paths.

Registry entries store install_dir and version_file exactly as the installer
registered them. Placeholders are expanded when the entry is used, never with a
shell, so only the known patterns below are substituted.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path

_VAR_PATTERN = re.compile(r"\$\{(HOME|USER)\}|\$(HOME|USER)\b")


def expand_path(raw: str, env: Mapping[str, str] | None = None) -> Path:
    """Expand ``~``, ``$HOME``, ``${HOME}``, ``$USER`` and ``${USER}`` in a path.

    Args:
        raw: Path string as stored in the registry
        env: Environment to read HOME and USER from (defaults to os.environ)

    Returns:
        Expanded path. Unknown variables are left untouched.
    """
    if env is None:
        env = os.environ

    home = env.get("HOME", str(Path.home()))
    user = env.get("USER", "")

    path = raw
    if path == "~":
        path = home
    elif path.startswith("~/"):
        path = home + path[1:]

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2)
        return home if name == "HOME" else user

    return Path(_VAR_PATTERN.sub(_substitute, path))


def config_root(env: Mapping[str, str] | None = None) -> Path:
    """Return the user's configuration root ($XDG_CONFIG_HOME or ~/.config)."""
    if env is None:
        env = os.environ
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path(env.get("HOME", str(Path.home()))) / ".config"
