"""Installer errors.

Both stages of the pipeline fail with a subclass of `InstallerError`; the CLI
reports any of them the same way.
"""

from __future__ import annotations


class InstallerError(Exception):
    """Base error. `str()` is the human readable description."""


class FetchError(InstallerError):
    """Download failed: network error, non-2xx status or unreadable body."""


class WriteError(InstallerError):
    """Writing the artifact or setting its mode failed."""
