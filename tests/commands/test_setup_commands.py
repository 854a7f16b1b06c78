"""Tests for the info and config commands."""

from pathlib import Path

from click.testing import CliRunner

from toolupdate.cli.cli import cli
from toolupdate.core.config_store import FakeConfigStore
from toolupdate.core.shell.fake import FakeShell
from tests.fakes.context import create_test_config, create_test_context


def test_info_shows_locations_and_tools(tmp_path: Path) -> None:
    config = create_test_config(tmp_path)
    ctx = create_test_context(config=config)

    result = CliRunner().invoke(cli, ["info"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert f"Registry:   {config.registry_path} (0 project(s))" in result.output
    assert "git (/usr/bin/git)" in result.output
    assert "Platform:" in result.output


def test_info_reports_missing_git() -> None:
    ctx = create_test_context(shell=FakeShell(installed_tools={}))

    result = CliRunner().invoke(cli, ["info"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "git (not found)" in result.output


def test_config_list_shows_every_key(tmp_path: Path) -> None:
    ctx = create_test_context(config=create_test_config(tmp_path))

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Global configuration:" in result.output
    assert "fetch_timeout=10.0" in result.output
    assert "engine_project=common_core" in result.output
    assert "version_artifact=VERSION" in result.output


def test_config_get_prints_value_to_stdout(tmp_path: Path) -> None:
    ctx = create_test_context(config=create_test_config(tmp_path))

    result = CliRunner().invoke(cli, ["config", "get", "engine_project"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout == "common_core\n"


def test_config_get_unknown_key_fails() -> None:
    result = CliRunner().invoke(cli, ["config", "get", "colour"], obj=create_test_context())

    assert result.exit_code == 1
    assert "Unknown config key: colour" in result.output


def test_config_set_persists_through_store() -> None:
    store = FakeConfigStore()
    ctx = create_test_context(config_store=store)

    result = CliRunner().invoke(cli, ["config", "set", "fetch_timeout", "3"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert store.set_calls == [("fetch_timeout", "3")]
    assert store.load().fetch_timeout == 3.0


def test_config_set_invalid_value_fails() -> None:
    store = FakeConfigStore()
    ctx = create_test_context(config_store=store)

    result = CliRunner().invoke(cli, ["config", "set", "fetch_timeout", "soon"], obj=ctx)

    assert result.exit_code == 1
    assert "must be a number" in result.output
    assert store.set_calls == []


def test_help_groups_commands() -> None:
    result = CliRunner().invoke(cli, ["--help"], obj=create_test_context())

    assert result.exit_code == 0, result.output
    assert "Registry:" in result.output
    assert "Updates:" in result.output
