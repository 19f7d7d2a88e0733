"""Outcome model of an install run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class InstallResult(BaseModel):
    """What was installed, and where."""

    destination_path: Path = Field(
        ...,
        description="File the artifact was written to.",
    )
    size_bytes: int = Field(
        ...,
        ge=0,
        description="Number of bytes written.",
    )
    file_mode: int = Field(
        ...,
        description="Permission bits applied to the file.",
    )
    source_url: str = Field(
        ...,
        description="URL the artifact was downloaded from.",
    )
