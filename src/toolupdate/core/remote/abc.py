"""Remote version artifact access.

Architecture:
- RemoteVersions: Abstract base class defining the interface
- RequestsRemoteVersions: Production implementation over HTTP (requests)
- FakeRemoteVersions: In-memory implementation for tests
"""

from abc import ABC, abstractmethod


class RemoteVersions(ABC):
    """Fetches the raw text of a published version artifact."""

    @abstractmethod
    def fetch_text(self, url: str, *, timeout: float) -> str:
        """Fetch the body at url with a bounded timeout.

        Args:
            url: Raw-content URL of the version artifact
            timeout: Seconds to wait for connect and read

        Returns:
            Response body as text (untrimmed)

        Raises:
            NetworkError: If the request fails, times out or is not 2xx
        """
        ...
