"""Writes the downloaded artifact to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.errors import WriteError

logger = logging.getLogger(__name__)


def write_executable(*, data: bytes, output_path: Path, mode: int) -> Path:
    """Create or replace `output_path` with `data` and set its mode.

    Notes:
    - Whole-file replace, in place: no temp file, no rename, and nothing is
      cleaned up if the write fails halfway.
    - The parent directory must already exist.
    - `chmod` runs after the write so the final bits do not depend on the
      umask or on the mode of a previous file.
    """

    try:
        output_path.write_bytes(data)
        output_path.chmod(mode)
    except OSError as exc:
        raise WriteError(str(exc)) from exc

    logger.debug("Wrote %d bytes to %s (mode %o)", len(data), output_path, mode)
    return output_path
