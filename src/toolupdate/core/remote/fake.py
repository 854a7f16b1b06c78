"""Fake RemoteVersions implementation for testing."""

from toolupdate.core.errors import NetworkError
from toolupdate.core.remote.abc import RemoteVersions


class FakeRemoteVersions(RemoteVersions):
    """In-memory map of URL to artifact body.

    URLs missing from the map, or listed in failing_urls, raise NetworkError
    the way a failed or timed-out request would.
    """

    def __init__(
        self,
        *,
        artifacts: dict[str, str] | None = None,
        failing_urls: set[str] | None = None,
    ) -> None:
        self._artifacts = artifacts or {}
        self._failing_urls = failing_urls or set()
        self._requests: list[tuple[str, float]] = []

    def fetch_text(self, url: str, *, timeout: float) -> str:
        self._requests.append((url, timeout))
        if url in self._failing_urls:
            raise NetworkError(f"Timed out after {timeout}s fetching {url}")
        if url not in self._artifacts:
            raise NetworkError(f"Failed to fetch {url}: 404 Not Found")
        return self._artifacts[url]

    @property
    def requests(self) -> list[tuple[str, float]]:
        """(url, timeout) pairs of every fetch_text() call, for assertions."""
        return list(self._requests)
