"""httpx wrapper.

- Builds the `httpx.AsyncClient` used for the download (timeout and redirect
  policy come from `InstallSettings`).
- Accepts an injected transport so tests can use `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import InstallSettings
from core.domain.errors import FetchError
from core.interfaces.fetcher import ArtifactFetcher

logger = logging.getLogger(__name__)


def build_async_client(
    settings: InstallSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` for fetching the artifact.

    No extra headers are sent; the client defaults apply.
    """

    settings = settings or InstallSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        transport=transport,
    )


class HttpArtifactFetcher(ArtifactFetcher):
    """Downloads the artifact with a single GET request."""

    def __init__(
        self,
        settings: InstallSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or InstallSettings()
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.get(url)
                resp.raise_for_status()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise FetchError(_describe(exc)) from exc

        logger.debug("GET %s -> HTTP %s, %d bytes", url, resp.status_code, len(resp.content))
        return resp.content


def _describe(exc: Exception) -> str:
    """One-line description of an httpx failure."""

    if isinstance(exc, httpx.HTTPStatusError):
        resp = exc.response
        return f"HTTP {resp.status_code} {resp.reason_phrase} for url '{exc.request.url}'"
    lines = str(exc).splitlines()
    return lines[0] if lines else exc.__class__.__name__
