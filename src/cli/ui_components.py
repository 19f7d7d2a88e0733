"""Rich output helpers for the CLI.

Every message goes to stderr, printed as plain text (no markup, no
highlighting, no wrapping) so the stream carries exactly the message.
"""

from __future__ import annotations

from rich.console import Console

from core.domain.models import InstallResult


def build_console() -> Console:
    """Console bound to stderr."""

    return Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_success(console: Console, *, tool_name: str, result: InstallResult) -> None:
    console.print(
        f"{tool_name} successfully installed to {result.destination_path}!",
        markup=False,
    )


def print_error(console: Console, error: BaseException) -> None:
    console.print(f"Error: {error}", markup=False)
