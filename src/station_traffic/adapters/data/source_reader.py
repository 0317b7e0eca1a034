"""Reads dataset documents from an http(s) URL or a local path."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import aiohttp

from station_traffic.domain.errors import DatasetLoadError

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    """Return True for http(s) URLs."""
    return source.startswith(("http://", "https://"))


class SourceReader:
    """Fetches the raw text of a dataset."""

    def __init__(self, session: ClientSession | None = None, timeout_seconds: int = 60) -> None:
        """Initialize with an optional aiohttp session.

        Args:
            session: Session used for remote sources. Required for URLs.
            timeout_seconds: Total timeout per download.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def read_text(self, source: str) -> str:
        """Return the document at ``source`` as text.

        Raises:
            DatasetLoadError: On network errors, non-200 responses, unreadable
                files or text that is not valid UTF-8.
        """
        if is_remote(source):
            return await self._fetch(source)
        return self._read_file(source)

    async def _fetch(self, url: str) -> str:
        if self._session is None:
            raise DatasetLoadError(url, "no HTTP session available for remote source")

        logger.info(f"Downloading {url}")
        try:
            async with self._session.get(url, timeout=self._timeout) as response:
                if response.status != 200:
                    raise DatasetLoadError(url, f"HTTP {response.status}")
                return await response.text()
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError) as e:
            raise DatasetLoadError(url, str(e) or type(e).__name__) from e

    @staticmethod
    def _read_file(path: str) -> str:
        logger.info(f"Reading {path}")
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(path, str(e)) from e
