"""Registry data types and the line codec for the registry file."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from toolupdate.core.errors import ValidationError
from toolupdate.core.paths import expand_path

FIELD_SEPARATOR = "|"
FIELD_COUNT = 6

FORCE_FLAG = "--force"
SKIP_TESTS_FLAG = "--skip-tests"


@dataclass(frozen=True)
class InstallCommand:
    """Program plus argument vector run from the root of a fresh clone.

    Persisted as a single whitespace-joined string, so arguments may not
    contain whitespace themselves.
    """

    program: str
    args: tuple[str, ...] = field(default_factory=tuple)

    @staticmethod
    def parse(text: str) -> "InstallCommand | None":
        """Split a command string on whitespace.

        Returns None for an empty or whitespace-only string (no install command).
        """
        parts = text.split()
        if not parts:
            return None
        return InstallCommand(program=parts[0], args=tuple(parts[1:]))

    def with_update_flags(self, *, skip_tests: bool) -> "InstallCommand":
        """Return a copy with --force (and --skip-tests if requested) appended.

        Flags already present are not duplicated.
        """
        args = list(self.args)
        if FORCE_FLAG not in args:
            args.append(FORCE_FLAG)
        if skip_tests and SKIP_TESTS_FLAG not in args:
            args.append(SKIP_TESTS_FLAG)
        return InstallCommand(program=self.program, args=tuple(args))

    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv())


@dataclass(frozen=True)
class RegistryEntry:
    """One registered project's update metadata.

    install_dir and version_file are kept exactly as registered; use the
    resolved_* helpers to expand placeholders at the point of use.
    """

    name: str
    repo_url: str
    branch: str
    install_dir: str
    version_file: str
    install_cmd: InstallCommand | None = None

    def resolved_install_dir(self, env: Mapping[str, str] | None = None) -> Path:
        return expand_path(self.install_dir, env)

    def resolved_version_file(self, env: Mapping[str, str] | None = None) -> Path:
        return expand_path(self.version_file, env)


def validate_entry(entry: RegistryEntry) -> None:
    """Check that an entry can be stored and read back unchanged.

    Raises:
        ValidationError: If a required field is empty, the name is padded or
            starts with '#', install_dir is blank without an install command,
            a field contains the separator or a line break, or an install
            argument has whitespace
    """
    for label, value in (
        ("name", entry.name),
        ("repo_url", entry.repo_url),
        ("branch", entry.branch),
    ):
        if not value.strip():
            raise ValidationError(f"Missing required field: {label}")

    if entry.name != entry.name.strip():
        raise ValidationError(
            f"Project name may not start or end with whitespace: {entry.name!r}"
        )
    if entry.name.startswith("#"):
        raise ValidationError(f"Project name may not start with '#': {entry.name}")

    if entry.install_cmd is None and not entry.install_dir.strip():
        raise ValidationError(
            f"install_dir is required when no install command is given: {entry.name}"
        )

    fields = [entry.name, entry.repo_url, entry.branch, entry.install_dir, entry.version_file]
    if entry.install_cmd is not None:
        fields.extend(entry.install_cmd.argv())
    for value in fields:
        if FIELD_SEPARATOR in value or "\n" in value or "\r" in value:
            raise ValidationError(
                f"Field may not contain '{FIELD_SEPARATOR}' or a line break: {value!r}"
            )

    if entry.install_cmd is not None:
        for part in entry.install_cmd.argv():
            if not part or any(ch.isspace() for ch in part):
                raise ValidationError(
                    f"Install command arguments may not contain whitespace: {part!r}"
                )


def format_entry(entry: RegistryEntry) -> str:
    """Serialize an entry to one registry line (without trailing newline)."""
    install_cmd = str(entry.install_cmd) if entry.install_cmd is not None else ""
    return FIELD_SEPARATOR.join(
        [
            entry.name,
            entry.repo_url,
            entry.branch,
            entry.install_dir,
            entry.version_file,
            install_cmd,
        ]
    )


def is_ignored_line(line: str) -> bool:
    """Blank lines and lines starting with '#' carry no entry."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_entry(line: str) -> RegistryEntry | None:
    """Parse one registry line.

    Returns None for comment/blank lines and for lines that do not have
    exactly six fields.
    """
    if is_ignored_line(line):
        return None

    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        return None

    name, repo_url, branch, install_dir, version_file, install_cmd = fields
    if not name:
        return None

    return RegistryEntry(
        name=name,
        repo_url=repo_url,
        branch=branch,
        install_dir=install_dir,
        version_file=version_file,
        install_cmd=InstallCommand.parse(install_cmd),
    )
