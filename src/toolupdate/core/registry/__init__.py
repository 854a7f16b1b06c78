"""Project registry: entry types, store interface and implementations."""

from toolupdate.core.registry.abc import RegistryStore
from toolupdate.core.registry.fake import InMemoryRegistryStore
from toolupdate.core.registry.file import REGISTRY_HEADER, FileRegistryStore
from toolupdate.core.registry.types import InstallCommand, RegistryEntry

__all__ = [
    "REGISTRY_HEADER",
    "FileRegistryStore",
    "InMemoryRegistryStore",
    "InstallCommand",
    "RegistryEntry",
    "RegistryStore",
]
