"""Shared fixtures for installer tests."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from core.config import InstallSettings

ARTIFACT_URL = "https://example.test/jrdap"
ARTIFACT = b"#!/usr/bin/env python3\nprint('jrdap')\n\x00\xff binary tail\n"


class StaticFetcher:
    """Fetcher double returning fixed bytes (or raising) and recording URLs."""

    def __init__(self, data: bytes = ARTIFACT, *, error: Exception | None = None) -> None:
        self.data = data
        self.error = error
        self.urls: list[str] = []

    async def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    return tmp_path / "bin" / "jrdap"


@pytest.fixture
def settings(destination: Path) -> InstallSettings:
    destination.parent.mkdir()
    return InstallSettings(source_url=ARTIFACT_URL, destination_path=destination)


def serve(content: bytes = ARTIFACT, status_code: int = 200) -> httpx.MockTransport:
    """Mock transport answering every request with `content`."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=content)

    return httpx.MockTransport(handler)
