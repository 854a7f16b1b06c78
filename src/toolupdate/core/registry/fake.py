"""In-memory registry store for tests."""

from toolupdate.core.errors import NotFoundError
from toolupdate.core.registry.abc import RegistryStore
from toolupdate.core.registry.types import RegistryEntry


class InMemoryRegistryStore(RegistryStore):
    """Registry held in a list, never touching the filesystem.

    Constructor Injection:
    - Initial entries are provided via the constructor
    - Mutations happen only through add() and remove()
    """

    def __init__(self, entries: list[RegistryEntry] | None = None) -> None:
        self._entries: list[RegistryEntry] = list(entries) if entries else []
        self._initialized = entries is not None

    @property
    def initialized(self) -> bool:
        """Whether init() has run (or entries were provided up front)."""
        return self._initialized

    def init(self) -> None:
        self._initialized = True

    def remove(self, name: str) -> None:
        remaining = [entry for entry in self._entries if entry.name != name]
        if len(remaining) == len(self._entries):
            raise NotFoundError(name)
        self._entries = remaining

    def read_all(self) -> list[RegistryEntry]:
        return list(self._entries)

    def _append(self, entry: RegistryEntry) -> None:
        self._entries.append(entry)
