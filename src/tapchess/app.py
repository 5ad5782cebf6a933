"""Application entry point."""

from __future__ import annotations

import logging
import sys

from tapchess.settings import AppSettings


def main() -> None:
    """Launch the tapchess board window."""
    try:
        settings = AppSettings.from_env()
    except ValueError as exc:
        sys.exit(f"tapchess: {exc}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from tapchess.ui.bootstrap import run_application

    sys.exit(run_application(settings))


if __name__ == "__main__":
    main()
