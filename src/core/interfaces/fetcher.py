"""Artifact fetcher contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ArtifactFetcher(Protocol):
    """Minimal contract for downloading the artifact.

    - `fetch` is async because it does network I/O.
    - It returns the complete body; there is no streaming.
    - Any failure is raised as `FetchError`.
    """

    async def fetch(self, url: str) -> bytes:
        """Download `url` and return the full response body."""

        ...
