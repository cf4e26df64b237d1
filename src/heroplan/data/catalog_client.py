"""HTTP access to catalog documents published on a web server."""
from __future__ import annotations

import logging

import requests

from .errors import DataLoadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class CatalogClient:
    """Fetches catalog JSON documents relative to a base URL."""

    def __init__(self, base_url: str, *, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None) -> None:
        if not base_url:
            raise ValueError("Catalog base URL must not be empty.")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, filename: str) -> str:
        return f"{self._base_url}/{filename.lstrip('/')}"

    def fetch_json(self, filename: str) -> object:
        """GET ``filename`` and decode it, raising DataLoadError on any failure."""
        url = self.url_for(filename)
        logger.debug("Fetching catalog document %s", url)
        try:
            res = self._session.get(url, headers={"Accept": "application/json"}, timeout=self._timeout)
            res.raise_for_status()
        except requests.RequestException as exc:
            raise DataLoadError(f"Unable to fetch catalog document {url}: {exc}") from exc
        try:
            return res.json()
        except ValueError as exc:
            raise DataLoadError(f"Invalid JSON from {url}: {exc}") from exc
