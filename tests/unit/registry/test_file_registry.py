"""Tests for the file-backed registry store."""

from pathlib import Path

import pytest

from toolupdate.core.errors import NotFoundError, RegistryIOError, ValidationError
from toolupdate.core.registry import REGISTRY_HEADER, FileRegistryStore, InstallCommand
from toolupdate.core.registry.types import RegistryEntry


def _entry(name: str, install_cmd: str = "") -> RegistryEntry:
    return RegistryEntry(
        name=name,
        repo_url=f"https://example.com/{name}",
        branch="main",
        install_dir=f"/opt/{name}",
        version_file=f"/opt/{name}/VERSION",
        install_cmd=InstallCommand.parse(install_cmd),
    )


def test_init_creates_file_with_header(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "update-registry"
    store = FileRegistryStore(path)

    store.init()

    assert path.read_text(encoding="utf-8") == REGISTRY_HEADER


def test_init_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    store = FileRegistryStore(path)
    store.init()
    store.add(_entry("toolA"))

    store.init()

    assert [e.name for e in store.list_entries()] == ["toolA"]


def test_list_on_missing_file_is_empty(tmp_path: Path) -> None:
    store = FileRegistryStore(tmp_path / "absent")

    assert store.list_entries() == []
    assert not (tmp_path / "absent").exists()


def test_add_appends_in_order(tmp_path: Path) -> None:
    store = FileRegistryStore(tmp_path / "update-registry")

    store.add(_entry("toolA"))
    store.add(_entry("toolB", "./install.sh"))

    entries = store.list_entries()
    assert [e.name for e in entries] == ["toolA", "toolB"]
    assert entries[1].install_cmd == InstallCommand("./install.sh")


def test_add_existing_name_replaces_and_moves_to_end(tmp_path: Path) -> None:
    store = FileRegistryStore(tmp_path / "update-registry")
    store.add(_entry("toolA"))
    store.add(_entry("toolB"))

    replacement = RegistryEntry(
        name="toolA",
        repo_url="https://example.com/toolA-fork",
        branch="dev",
        install_dir="/opt/toolA",
        version_file="/opt/toolA/VERSION",
    )
    store.add(replacement)

    entries = store.list_entries()
    assert [e.name for e in entries] == ["toolB", "toolA"]
    assert entries[1] == replacement


def test_add_keeps_header_and_comments(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    store = FileRegistryStore(path)
    store.init()
    with path.open("a", encoding="utf-8") as f:
        f.write("# my note\n")

    store.add(_entry("toolA"))

    content = path.read_text(encoding="utf-8")
    assert content.startswith(REGISTRY_HEADER)
    assert "# my note\n" in content
    assert content.endswith("toolA|https://example.com/toolA|main|/opt/toolA|/opt/toolA/VERSION|\n")


def test_add_rejects_invalid_entry_without_touching_file(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    store = FileRegistryStore(path)

    with pytest.raises(ValidationError):
        store.add(_entry(""))

    assert not path.exists()


def test_remove_deletes_every_matching_line(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    path.write_text(
        REGISTRY_HEADER
        + "toolA|u|main|/a|/a/V|\n"
        + "toolB|u|main|/b|/b/V|\n"
        + "toolA|u2|main|/a|/a/V|\n",
        encoding="utf-8",
    )
    store = FileRegistryStore(path)

    store.remove("toolA")

    assert [e.name for e in store.list_entries()] == ["toolB"]
    assert path.read_text(encoding="utf-8").startswith(REGISTRY_HEADER)


def test_remove_missing_name_leaves_file_unchanged(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    store = FileRegistryStore(path)
    store.add(_entry("toolA"))
    before = path.read_bytes()

    with pytest.raises(NotFoundError, match="toolB"):
        store.remove("toolB")

    assert path.read_bytes() == before


def test_remove_on_missing_file_raises_not_found(tmp_path: Path) -> None:
    store = FileRegistryStore(tmp_path / "absent")

    with pytest.raises(NotFoundError):
        store.remove("toolA")


def test_remove_does_not_match_name_prefix(tmp_path: Path) -> None:
    store = FileRegistryStore(tmp_path / "update-registry")
    store.add(_entry("toolAB"))

    with pytest.raises(NotFoundError):
        store.remove("toolA")


def test_malformed_lines_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    path.write_text(
        REGISTRY_HEADER
        + "broken|line\n"
        + "toolA|u|main|/a|/a/V|\n"
        + "\n"
        + "too|many|fields|in|this|line|here\n",
        encoding="utf-8",
    )

    entries = FileRegistryStore(path).list_entries()

    assert [e.name for e in entries] == ["toolA"]


def test_get_returns_entry_or_none(tmp_path: Path) -> None:
    store = FileRegistryStore(tmp_path / "update-registry")
    store.add(_entry("toolA"))

    found = store.get("toolA")
    assert found is not None
    assert found.repo_url == "https://example.com/toolA"
    assert store.get("toolB") is None


def test_unreadable_registry_raises_from_read_all(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    path.write_bytes(b"\xff\xfe not utf-8\n")
    store = FileRegistryStore(path)

    with pytest.raises(RegistryIOError):
        store.read_all()

    assert store.list_entries() == []


def test_writes_leave_no_temporary_files(tmp_path: Path) -> None:
    store = FileRegistryStore(tmp_path / "update-registry")
    store.add(_entry("toolA"))
    store.add(_entry("toolB"))
    store.remove("toolA")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["update-registry"]


def test_add_rejects_name_that_would_read_back_as_comment(tmp_path: Path) -> None:
    path = tmp_path / "update-registry"
    store = FileRegistryStore(path)

    with pytest.raises(ValidationError):
        store.add(_entry(" #toolA"))

    assert not path.exists()
    assert store.list_entries() == []
