"""Local and remote version resolution.

Versions are opaque strings. Comparison elsewhere is exact string equality;
no semantic ordering is applied.
"""

import logging
from pathlib import Path

from toolupdate.core.errors import NetworkError
from toolupdate.core.remote.abc import RemoteVersions

logger = logging.getLogger(__name__)

NOT_INSTALLED = "not installed"
UNKNOWN_VERSION = "unknown"


def version_url(repo_url: str, branch: str, artifact: str = "VERSION") -> str:
    """Build the raw-content URL of the version artifact on a branch.

    Example:
        >>> version_url("https://github.com/user/tool", "main")
        'https://github.com/user/tool/raw/main/VERSION'
    """
    base = repo_url.rstrip("/")
    if base.endswith(".git"):
        base = base[: -len(".git")]
    return f"{base}/raw/{branch}/{artifact}"


def resolve_remote(
    remote: RemoteVersions,
    repo_url: str,
    branch: str,
    *,
    artifact: str = "VERSION",
    timeout: float = 10.0,
) -> str:
    """Fetch the published version of a project.

    All whitespace is removed from the fetched text.

    Raises:
        NetworkError: If the fetch fails or yields an empty version
    """
    url = version_url(repo_url, branch, artifact)
    text = remote.fetch_text(url, timeout=timeout)
    version = "".join(text.split())
    if not version:
        raise NetworkError(f"Empty version artifact at {url}")
    logger.debug("Remote version for %s@%s: %s", repo_url, branch, version)
    return version


def resolve_local(version_file: Path) -> str:
    """Read the installed version of a project. Never raises.

    Returns:
        NOT_INSTALLED if the file is absent, UNKNOWN_VERSION if it cannot be
        read, otherwise the stripped file contents
    """
    if not version_file.exists():
        return NOT_INSTALLED
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", version_file, e)
        return UNKNOWN_VERSION
