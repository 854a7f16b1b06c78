"""Abstract registry store interface.

The registry is an ordered sequence of RegistryEntry records keyed by name.
Implementations:
- FileRegistryStore: persistent pipe-delimited text file
- InMemoryRegistryStore: list held in memory, for tests
"""

import logging
from abc import ABC, abstractmethod

from toolupdate.core.errors import NotFoundError, RegistryIOError
from toolupdate.core.registry.types import RegistryEntry, validate_entry

logger = logging.getLogger(__name__)


class RegistryStore(ABC):
    """CRUD operations over the project registry.

    add() is implemented once here in terms of remove() and _append() so that
    every store gets the same upsert semantics: validate, drop any entry with
    the same name, then append at the end.
    """

    @abstractmethod
    def init(self) -> None:
        """Create the backing store if it does not exist. Idempotent.

        Raises:
            RegistryIOError: If the store cannot be created
        """
        ...

    @abstractmethod
    def remove(self, name: str) -> None:
        """Remove every entry with the given name.

        Raises:
            NotFoundError: If no entry matched (the store is left unchanged)
            RegistryIOError: If the store cannot be rewritten
        """
        ...

    @abstractmethod
    def read_all(self) -> list[RegistryEntry]:
        """Return all entries in stored order.

        Raises:
            RegistryIOError: If the store exists but cannot be read
        """
        ...

    @abstractmethod
    def _append(self, entry: RegistryEntry) -> None:
        """Append an already-validated entry to the end of the store."""
        ...

    def add(self, entry: RegistryEntry) -> None:
        """Register or re-register a project.

        Raises:
            ValidationError: If the entry is malformed
            RegistryIOError: If the store cannot be written
        """
        validate_entry(entry)
        self.init()
        try:
            self.remove(entry.name)
        except NotFoundError:
            pass
        self._append(entry)

    def list_entries(self) -> list[RegistryEntry]:
        """Return all entries in stored order, or an empty list. Never raises."""
        try:
            return self.read_all()
        except RegistryIOError as e:
            logger.warning("%s", e)
            return []

    def get(self, name: str) -> RegistryEntry | None:
        for entry in self.list_entries():
            if entry.name == name:
                return entry
        return None
