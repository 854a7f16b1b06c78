"""Tests for registry path placeholder expansion."""

from pathlib import Path

import pytest

from toolupdate.core.paths import config_root, expand_path

ENV = {"HOME": "/home/alice", "USER": "alice"}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("~", "/home/alice"),
        ("~/.local/bin", "/home/alice/.local/bin"),
        ("$HOME/.local/bin", "/home/alice/.local/bin"),
        ("${HOME}/.local/bin", "/home/alice/.local/bin"),
        ("/srv/$USER/tools", "/srv/alice/tools"),
        ("/srv/${USER}/tools", "/srv/alice/tools"),
        ("/opt/tool", "/opt/tool"),
    ],
)
def test_expand_known_placeholders(raw: str, expected: str) -> None:
    assert expand_path(raw, ENV) == Path(expected)


def test_unknown_variables_are_left_alone() -> None:
    assert expand_path("$OTHER/tool", ENV) == Path("$OTHER/tool")


def test_variable_name_prefix_is_not_expanded() -> None:
    assert expand_path("/x/$HOMEDIR", ENV) == Path("/x/$HOMEDIR")


def test_tilde_user_form_is_not_expanded() -> None:
    assert expand_path("~bob/tools", ENV) == Path("~bob/tools")


def test_config_root_prefers_xdg() -> None:
    assert config_root({"XDG_CONFIG_HOME": "/xdg", "HOME": "/home/alice"}) == Path("/xdg")


def test_config_root_falls_back_to_home() -> None:
    assert config_root({"HOME": "/home/alice"}) == Path("/home/alice/.config")
