"""Entry point for the New Relic application ID lookup action."""

import logging
import os
import sys

from newrelic_appid.action import run


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Resolve the configured application and publish its ID."""
    _configure_logging()
    logger = logging.getLogger("newrelic-app-id")

    try:
        exit_code = run()
    except Exception:
        logger.exception("Lookup stopped due to an unexpected error.")
        raise

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
