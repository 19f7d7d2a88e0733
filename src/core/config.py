"""Installer configuration.

Holds the compiled-in constants of the installer (source URL, destination
path, file mode) as a single typed object.

Note:
- Nothing here is read from environment variables or command-line flags.
  Tests build their own `InstallSettings` pointing at temporary paths.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

TOOL_NAME = "jrdap"
SOURCE_URL = "https://raw.githubusercontent.com/gbxyz/jrdap/main/jrdap"
DESTINATION_PATH = Path("/usr/local/bin/jrdap")
FILE_MODE = 0o755


class InstallSettings(BaseModel):
    """Immutable parameters of a single install run."""

    model_config = ConfigDict(frozen=True)

    tool_name: str = Field(
        default=TOOL_NAME,
        min_length=1,
        description="Name of the installed tool, used in the success message.",
    )
    source_url: str = Field(
        default=SOURCE_URL,
        description="Remote location of the artifact.",
    )
    destination_path: Path = Field(
        default=DESTINATION_PATH,
        description="Local file the artifact is written to (replaced if present).",
    )
    file_mode: int = Field(
        default=FILE_MODE,
        ge=0,
        le=0o7777,
        description="Permission bits applied to the written file.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for the download (seconds). None waits indefinitely.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow HTTP redirects while fetching the artifact.",
    )
