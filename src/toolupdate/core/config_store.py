"""Global configuration data structures and loading.

Provides immutable global config data loaded from
$XDG_CONFIG_HOME/toolupdate/config.toml. A missing file means defaults; the
file only needs the keys a user wants to change.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import tomlkit

from toolupdate.core.paths import config_root, expand_path

REGISTRY_ENV_VAR = "TOOLUPDATE_REGISTRY"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in UpdaterContext.
    All fields are read-only after construction.
    """

    registry_path: Path
    version_artifact: str
    fetch_timeout: float
    engine_path: Path
    engine_project: str
    bundled_engine: str

    @staticmethod
    def defaults(env: Mapping[str, str] | None = None) -> "GlobalConfig":
        root = config_root(env)
        return GlobalConfig(
            registry_path=root / "bash" / "update-registry",
            version_artifact="VERSION",
            fetch_timeout=10.0,
            engine_path=root / "toolupdate" / "bin" / "toolupdate",
            engine_project="common_core",
            bundled_engine="bin/toolupdate",
        )


def _parse_path(value: Any) -> Path:
    return expand_path(str(value))


def _parse_str(value: Any) -> str:
    text = str(value).strip()
    if not text:
        raise ValueError("must not be empty")
    return text


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"must be a number, got {value!r}") from None
    if timeout <= 0:
        raise ValueError(f"must be positive, got {timeout}")
    return timeout


# Config file key -> parser producing the GlobalConfig field value
CONFIG_KEYS: dict[str, Callable[[Any], Any]] = {
    "registry_path": _parse_path,
    "version_artifact": _parse_str,
    "fetch_timeout": _parse_timeout,
    "engine_path": _parse_path,
    "engine_project": _parse_str,
    "bundled_engine": _parse_str,
}


def config_from_mapping(data: Mapping[str, Any], base: GlobalConfig, source: Path) -> GlobalConfig:
    """Overlay known keys from a parsed TOML document onto base.

    Raises:
        ValueError: If a key is unknown or its value is malformed
    """
    overrides: dict[str, Any] = {}
    for key, raw in data.items():
        parser = CONFIG_KEYS.get(key)
        if parser is None:
            raise ValueError(f"Unknown key '{key}' in {source}")
        try:
            overrides[key] = parser(raw)
        except ValueError as e:
            raise ValueError(f"Invalid value for '{key}' in {source}: {e}") from None
    return replace(base, **overrides)


def apply_env_overrides(config: GlobalConfig, env: Mapping[str, str] | None = None) -> GlobalConfig:
    """Apply environment variable overrides (currently TOOLUPDATE_REGISTRY)."""
    if env is None:
        env = os.environ
    registry = env.get(REGISTRY_ENV_VAR)
    if registry:
        return replace(config, registry_path=expand_path(registry, env))
    return config


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, falling back to defaults for absent keys.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def set_value(self, key: str, value: str) -> None:
        """Persist one key, keeping the rest of the file untouched.

        Raises:
            ValueError: If the key is unknown or the value is malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages)."""
        ...

    def load_or_defaults(self) -> GlobalConfig:
        if self.exists():
            return self.load()
        return GlobalConfig.defaults()


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes the TOML config file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config_path = self.path()
        if not config_path.exists():
            raise FileNotFoundError(f"Global config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config {config_path}: {e}") from None
        return config_from_mapping(data, GlobalConfig.defaults(), config_path)

    def set_value(self, key: str, value: str) -> None:
        config_path = self.path()
        parser = CONFIG_KEYS.get(key)
        if parser is None:
            raise ValueError(f"Unknown config key: {key}")
        parsed = parser(value)

        if config_path.exists():
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global toolupdate configuration"))

        # Store paths as typed so placeholders survive; expansion happens on load
        doc[key] = parsed if isinstance(parsed, float) else value

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return config_root() / "toolupdate" / "config.toml"


class FakeConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config
        self._set_calls: list[tuple[str, str]] = []

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            raise FileNotFoundError(f"Global config not found at {self.path()}")
        return self._config

    def set_value(self, key: str, value: str) -> None:
        parser = CONFIG_KEYS.get(key)
        if parser is None:
            raise ValueError(f"Unknown config key: {key}")
        base = self._config or GlobalConfig.defaults()
        self._config = replace(base, **{key: parser(value)})
        self._set_calls.append((key, value))

    def path(self) -> Path:
        return Path("/fake/toolupdate/config.toml")

    @property
    def set_calls(self) -> list[tuple[str, str]]:
        return list(self._set_calls)
