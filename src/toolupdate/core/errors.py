"""Error kinds raised by registry and update operations.

Per-project errors (NetworkError, FetchError, InstallError) are caught by the
update driver and turned into a failed UpdateResult. RegistryIOError is fatal
to the invoking command.
"""


class ToolUpdateError(Exception):
    """Base class for all toolupdate errors."""


class ValidationError(ToolUpdateError):
    """Registration input is malformed."""


class NotFoundError(ToolUpdateError):
    """Lookup or unregister target is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Project not found in registry: {name}")
        self.name = name


class RegistryIOError(ToolUpdateError, OSError):
    """Registry file could not be read or written."""


class NetworkError(ToolUpdateError):
    """Remote version fetch failed."""


class FetchError(NetworkError):
    """Shallow clone of a project repository failed."""


class InstallError(ToolUpdateError):
    """Project install command failed or could not be started."""

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code
