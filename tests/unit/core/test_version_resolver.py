"""Tests for local and remote version resolution."""

from pathlib import Path

import pytest

from toolupdate.core.errors import NetworkError
from toolupdate.core.remote.fake import FakeRemoteVersions
from toolupdate.core.version_resolver import (
    NOT_INSTALLED,
    UNKNOWN_VERSION,
    resolve_local,
    resolve_remote,
    version_url,
)


def test_version_url_uses_raw_branch_path() -> None:
    assert (
        version_url("https://github.com/user/tool", "main")
        == "https://github.com/user/tool/raw/main/VERSION"
    )


def test_version_url_strips_git_suffix_and_slash() -> None:
    assert version_url("https://github.com/user/tool.git/", "dev", "RELEASE") == (
        "https://github.com/user/tool/raw/dev/RELEASE"
    )


def test_resolve_remote_removes_all_whitespace() -> None:
    remote = FakeRemoteVersions(
        artifacts={"https://example.com/toolA/raw/main/VERSION": " 1.1.0 \r\n"}
    )

    assert resolve_remote(remote, "https://example.com/toolA", "main") == "1.1.0"


def test_resolve_remote_passes_timeout() -> None:
    remote = FakeRemoteVersions(artifacts={"https://example.com/t/raw/main/VERSION": "1"})

    resolve_remote(remote, "https://example.com/t", "main", timeout=3.5)

    assert remote.requests == [("https://example.com/t/raw/main/VERSION", 3.5)]


def test_resolve_remote_empty_artifact_is_an_error() -> None:
    remote = FakeRemoteVersions(artifacts={"https://example.com/t/raw/main/VERSION": "\n \n"})

    with pytest.raises(NetworkError, match="Empty version"):
        resolve_remote(remote, "https://example.com/t", "main")


def test_resolve_remote_propagates_fetch_failure() -> None:
    with pytest.raises(NetworkError):
        resolve_remote(FakeRemoteVersions(), "https://example.com/t", "main")


def test_resolve_local_missing_file(tmp_path: Path) -> None:
    assert resolve_local(tmp_path / "VERSION") == NOT_INSTALLED


def test_resolve_local_strips_surrounding_whitespace(tmp_path: Path) -> None:
    version_file = tmp_path / "VERSION"
    version_file.write_text("  1.0.0\n", encoding="utf-8")

    assert resolve_local(version_file) == "1.0.0"


def test_resolve_local_unreadable_file(tmp_path: Path) -> None:
    # A directory exists but cannot be read as text
    version_dir = tmp_path / "VERSION"
    version_dir.mkdir()

    assert resolve_local(version_dir) == UNKNOWN_VERSION
