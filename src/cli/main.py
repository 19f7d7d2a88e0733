"""CLI entrypoint (Typer).

Single command, no options: download the artifact, install it, report the
outcome on stderr. Exit status 0 on success, 1 on any failure.
"""

from __future__ import annotations

import asyncio

import typer

from cli.ui_components import build_console, print_error, print_success
from core.config import InstallSettings
from core.domain.errors import InstallerError
from core.interfaces.fetcher import ArtifactFetcher
from core.services.installer import install

app = typer.Typer(add_completion=False, help="Download and install the jrdap executable.")

_console = build_console()


def execute(settings: InstallSettings, *, fetcher: ArtifactFetcher | None = None) -> int:
    """Run one install and print its outcome. Returns the exit status."""

    try:
        result = asyncio.run(install(settings, fetcher=fetcher))
    except InstallerError as exc:
        print_error(_console, exc)
        return 1

    print_success(_console, tool_name=settings.tool_name, result=result)
    return 0


# Command-line arguments are accepted and ignored.
@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main() -> None:
    """Download jrdap and install it to /usr/local/bin/jrdap."""

    code = execute(InstallSettings())
    if code:
        raise typer.Exit(code=code)


def run() -> None:
    app(args=[])


if __name__ == "__main__":
    run()
