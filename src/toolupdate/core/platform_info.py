"""Advisory platform information.

Shown to the user for context only; nothing in the update path branches on it.
"""

import platform
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PlatformInfo:
    system: str
    release: str
    machine: str
    python_version: str
    distro: str | None

    def describe(self) -> str:
        name = self.distro or self.system
        return f"{name} {self.release} ({self.machine}), Python {self.python_version}"


def _read_os_release(path: Path = Path("/etc/os-release")) -> str | None:
    if not path.exists():
        return None
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None
    fields: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        if sep:
            fields[key.strip()] = value.strip().strip('"')
    return fields.get("PRETTY_NAME") or fields.get("ID")


def detect_platform() -> PlatformInfo:
    system = platform.system()
    distro = _read_os_release() if system == "Linux" else None
    if system == "Darwin":
        mac_version = platform.mac_ver()[0]
        distro = f"macOS {mac_version}" if mac_version else None
    return PlatformInfo(
        system=system,
        release=platform.release(),
        machine=platform.machine(),
        python_version=".".join(str(part) for part in sys.version_info[:3]),
        distro=distro,
    )
