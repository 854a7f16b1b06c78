"""Production RemoteVersions implementation using requests."""

import logging

import requests

from toolupdate.core.errors import NetworkError
from toolupdate.core.remote.abc import RemoteVersions

logger = logging.getLogger(__name__)


class RequestsRemoteVersions(RemoteVersions):
    """Fetches version artifacts over HTTP(S), following redirects."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def fetch_text(self, url: str, *, timeout: float) -> str:
        logger.debug("GET %s (timeout=%ss)", url, timeout)
        try:
            response = self._session.get(url, timeout=timeout, allow_redirects=True)
            response.raise_for_status()
        except requests.Timeout as e:
            raise NetworkError(f"Timed out after {timeout}s fetching {url}") from e
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e
        return response.text
