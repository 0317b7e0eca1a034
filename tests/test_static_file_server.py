"""Tests for static file serving."""

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from station_traffic.adapters.web.servers.static_file_server import (
    CACHE_CONTROL,
    StaticFileCacheApp,
    find_static_directory,
)


def test_find_static_directory_locates_map_hook() -> None:
    """Given the project layout, when locating static files, then the hook script is there."""
    static_path = find_static_directory()

    assert static_path is not None
    assert (static_path / "assets" / "traffic_map.js").exists()


def test_find_static_directory_prefers_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given a static directory in the working directory, when locating, then it wins."""
    (tmp_path / "static").mkdir()
    monkeypatch.chdir(tmp_path)

    assert find_static_directory() == tmp_path / "static"


@pytest.mark.asyncio
async def test_cache_header_is_added() -> None:
    """Given a response without cache headers, when sent, then Cache-Control is added."""
    sent: list[dict[str, Any]] = []

    async def static_files(_scope: Any, _receive: Any, send: Any) -> None:
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"x"})

    async def send(message: dict[str, Any]) -> None:
        sent.append(message)

    app = StaticFileCacheApp(MagicMock(side_effect=static_files))
    await app({"type": "http"}, AsyncMock(), send)

    assert (b"cache-control", CACHE_CONTROL.encode()) in sent[0]["headers"]
    assert sent[1]["body"] == b"x"
