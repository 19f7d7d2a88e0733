"""Install pipeline.

Fetch the artifact, write it, describe the outcome. Printing and exit codes
belong to the CLI; this module only returns an `InstallResult` or raises an
`InstallerError` subclass.
"""

from __future__ import annotations

import logging

from adapters.artifact_writer import write_executable
from adapters.http_client import HttpArtifactFetcher
from core.config import InstallSettings
from core.domain.models import InstallResult
from core.interfaces.fetcher import ArtifactFetcher

logger = logging.getLogger(__name__)


async def install(
    settings: InstallSettings | None = None,
    *,
    fetcher: ArtifactFetcher | None = None,
) -> InstallResult:
    """Download the artifact and install it at the destination path.

    Raises:
        FetchError: the download failed; the destination was not touched.
        WriteError: the destination could not be written or re-moded.
    """

    settings = settings or InstallSettings()
    fetcher = fetcher or HttpArtifactFetcher(settings)

    logger.info("Fetching %s", settings.source_url)
    data = await fetcher.fetch(settings.source_url)

    logger.info("Installing %s", settings.destination_path)
    path = write_executable(
        data=data,
        output_path=settings.destination_path,
        mode=settings.file_mode,
    )

    return InstallResult(
        destination_path=path,
        size_bytes=len(data),
        file_mode=settings.file_mode,
        source_url=settings.source_url,
    )
