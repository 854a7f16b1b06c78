"""File-backed registry store.

One entry per line, six pipe-separated fields:

    name|repo_url|branch|install_dir|version_file|install_cmd

Every mutation rewrites the whole file through a temporary file in the same
directory and swaps it in with os.replace(), so readers never observe a
partially written registry.
"""

import logging
import os
import tempfile
from pathlib import Path

from toolupdate.core.errors import NotFoundError, RegistryIOError
from toolupdate.core.registry.abc import RegistryStore
from toolupdate.core.registry.types import (
    FIELD_SEPARATOR,
    RegistryEntry,
    format_entry,
    is_ignored_line,
    parse_entry,
)

logger = logging.getLogger(__name__)

REGISTRY_HEADER = """\
# Bash Project Update Registry
# Format: name|repo_url|branch|install_dir|version_file|install_cmd
# Lines starting with # are ignored
# DO NOT edit manually - use: toolupdate register or project installers
"""


class FileRegistryStore(RegistryStore):
    """Production registry persisted as a text file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def init(self) -> None:
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RegistryIOError(
                f"Failed to create registry directory: {self._path.parent}: {e}"
            ) from e
        self._write_atomic(REGISTRY_HEADER)
        logger.debug("Created registry file: %s", self._path)

    def read_all(self) -> list[RegistryEntry]:
        """Parse every entry line of the registry file.

        Lines with the wrong number of fields are skipped.

        Raises:
            RegistryIOError: If the file exists but cannot be read
        """
        if not self._path.exists():
            logger.debug("Registry file does not exist yet: %s", self._path)
            return []

        entries: list[RegistryEntry] = []
        for number, line in enumerate(self._read_lines(), start=1):
            if is_ignored_line(line):
                continue
            entry = parse_entry(line)
            if entry is None:
                logger.debug("Skipping malformed registry line %d: %r", number, line)
                continue
            entries.append(entry)

        logger.debug("Read %d projects from registry", len(entries))
        return entries

    def remove(self, name: str) -> None:
        if not self._path.exists():
            raise NotFoundError(name)

        lines = self._read_lines()
        kept = [line for line in lines if not _line_has_name(line, name)]
        if len(kept) == len(lines):
            raise NotFoundError(name)

        self._write_atomic("".join(_terminated(line) for line in kept))
        logger.debug("Removed from registry: %s", name)

    def _append(self, entry: RegistryEntry) -> None:
        existing = self._read_lines() if self._path.exists() else []
        content = "".join(_terminated(line) for line in existing)
        self._write_atomic(content + format_entry(entry) + "\n")
        logger.debug("Added to registry: %s", entry.name)

    def _read_lines(self) -> list[str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RegistryIOError(f"Failed to read registry {self._path}: {e}") from e
        return text.splitlines()

    def _write_atomic(self, content: str) -> None:
        parent = self._path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=parent)
        except OSError as e:
            raise RegistryIOError(f"Cannot write registry in {parent}: {e}") from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise RegistryIOError(f"Failed to write registry {self._path}: {e}") from e


def _line_has_name(line: str, name: str) -> bool:
    if is_ignored_line(line):
        return False
    return line.split(FIELD_SEPARATOR, 1)[0] == name


def _terminated(line: str) -> str:
    return line + "\n"
