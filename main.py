"""Checkout entrypoint for `jrdap-install`.

The installer is usually piped straight from a checkout and run with
elevated privileges, e.g. `sudo python -m main`, before anything is
pip-installed. This module puts `src/` on `sys.path` so the `cli` and
`core` packages resolve without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run

    run()


if __name__ == "__main__":
    main()
