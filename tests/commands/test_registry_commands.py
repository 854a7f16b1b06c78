"""Tests for the list, register and unregister commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from toolupdate.cli.cli import cli
from toolupdate.core.registry import FileRegistryStore, InMemoryRegistryStore, InstallCommand
from toolupdate.core.registry.types import RegistryEntry
from tests.fakes.context import create_test_config, create_test_context
from tests.fakes.user_feedback import FakeUserFeedback


def _entry(name: str, install_dir: str = "/opt/tool", install_cmd: str = "") -> RegistryEntry:
    return RegistryEntry(
        name=name,
        repo_url=f"https://example.com/{name}",
        branch="main",
        install_dir=install_dir,
        version_file=f"{install_dir}/VERSION",
        install_cmd=InstallCommand.parse(install_cmd),
    )


def test_list_empty_registry() -> None:
    result = CliRunner().invoke(cli, ["list"], obj=create_test_context())

    assert result.exit_code == 0, result.output
    assert "No projects registered yet" in result.output


def test_list_shows_projects_and_total(tmp_path: Path) -> None:
    install_dir = tmp_path / "toolA"
    install_dir.mkdir()
    (install_dir / "VERSION").write_text("1.0.0\n", encoding="utf-8")
    registry = InMemoryRegistryStore(
        [_entry("toolA", str(install_dir)), _entry("toolB", install_cmd="make install")]
    )

    result = CliRunner().invoke(cli, ["list"], obj=create_test_context(registry=registry))

    assert result.exit_code == 0, result.output
    assert "toolA" in result.output
    assert "Repository: https://example.com/toolA" in result.output
    assert "Version:    1.0.0" in result.output
    assert "Install:    make install" in result.output
    assert "Total: 2 project(s)" in result.output


def test_ls_alias_lists_projects() -> None:
    registry = InMemoryRegistryStore([_entry("toolA")])

    result = CliRunner().invoke(cli, ["ls"], obj=create_test_context(registry=registry))

    assert result.exit_code == 0, result.output
    assert "Total: 1 project(s)" in result.output


def test_list_json_output(tmp_path: Path) -> None:
    registry = InMemoryRegistryStore([_entry("toolA", install_cmd="./install.sh --force")])
    ctx = create_test_context(registry=registry, config=create_test_config(tmp_path))

    result = CliRunner().invoke(cli, ["list", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["registry_path"] == str(tmp_path / "config" / "bash" / "update-registry")
    [project] = data["projects"]
    assert project["name"] == "toolA"
    assert project["install_cmd"] == "./install.sh --force"
    assert project["installed_version"] == "not installed"


def test_list_json_reports_file_registry_path(tmp_path: Path) -> None:
    registry = FileRegistryStore(tmp_path / "elsewhere")

    result = CliRunner().invoke(
        cli, ["list", "--json"], obj=create_test_context(registry=registry)
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "registry_path": str(tmp_path / "elsewhere"),
        "projects": [],
    }


def test_register_adds_entry() -> None:
    registry = InMemoryRegistryStore()
    feedback = FakeUserFeedback()
    ctx = create_test_context(registry=registry, feedback=feedback)

    result = CliRunner().invoke(
        cli,
        [
            "register",
            "my_tool",
            "https://github.com/user/my_tool",
            "main",
            "${HOME}/.local/bin",
            "${HOME}/.local/bin/VERSION",
            "./install.sh --force",
        ],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    [entry] = registry.list_entries()
    assert entry.name == "my_tool"
    assert entry.install_dir == "${HOME}/.local/bin"
    assert entry.install_cmd == InstallCommand("./install.sh", ("--force",))
    assert "Successfully registered my_tool" in feedback.texts("success")


def test_register_writes_registry_file(tmp_path: Path) -> None:
    path = tmp_path / "bash" / "update-registry"
    ctx = create_test_context(registry=FileRegistryStore(path))

    result = CliRunner().invoke(
        cli, ["register", "toolA", "https://example.com/toolA", "main", "/opt/a", "/opt/a/V"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8").endswith(
        "toolA|https://example.com/toolA|main|/opt/a|/opt/a/V|\n"
    )


def test_register_invalid_field_exits_with_error() -> None:
    registry = InMemoryRegistryStore()

    result = CliRunner().invoke(
        cli,
        ["register", "toolA", "https://example.com/a|b", "main", "/opt/a", "/opt/a/V"],
        obj=create_test_context(registry=registry),
    )

    assert result.exit_code == 1
    assert "Error: Failed to register toolA" in result.output
    assert registry.list_entries() == []


def test_register_requires_all_positional_fields() -> None:
    result = CliRunner().invoke(
        cli, ["register", "toolA", "https://example.com/a"], obj=create_test_context()
    )

    assert result.exit_code == 2
    assert "Missing argument" in result.output


def test_unregister_removes_entry() -> None:
    registry = InMemoryRegistryStore([_entry("toolA"), _entry("toolB")])

    result = CliRunner().invoke(
        cli, ["unregister", "toolA"], obj=create_test_context(registry=registry)
    )

    assert result.exit_code == 0, result.output
    assert [e.name for e in registry.list_entries()] == ["toolB"]


def test_unregister_unknown_project_fails() -> None:
    registry = InMemoryRegistryStore([_entry("toolA")])

    result = CliRunner().invoke(
        cli, ["unregister", "ghost"], obj=create_test_context(registry=registry)
    )

    assert result.exit_code == 1
    assert "Project not found in registry: ghost" in result.output
    assert [e.name for e in registry.list_entries()] == ["toolA"]
