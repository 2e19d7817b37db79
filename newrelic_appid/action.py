"""Action runner: settings in, `appID` step output out."""

import asyncio
import logging
import sys
from collections.abc import Mapping
from typing import TextIO

import httpx

from newrelic_appid.client import NewRelicApiClient, NewRelicApiError
from newrelic_appid.lookup import resolve_application_id
from newrelic_appid.output import emit_output
from newrelic_appid.settings import Settings, SettingsError

logger = logging.getLogger(__name__)

OUTPUT_NAME = "appID"


async def lookup_application_id(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Query the configured region for `settings.app_name` and return its ID."""
    async with NewRelicApiClient.from_settings(settings, transport=transport) as client:
        return await resolve_application_id(client, settings.app_name)


def run(
    environ: Mapping[str, str] | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Execute the lookup and return the process exit code."""
    stdout = stdout if stdout is not None else sys.stdout

    try:
        settings = Settings.load(environ)
    except SettingsError as exc:
        logger.error("Invalid action inputs: %s", exc)
        print(exc, file=stdout)
        return 1

    logger.info(
        "Looking up application",
        extra={"app_name": settings.app_name, "region": settings.region.value},
    )

    try:
        application_id = asyncio.run(lookup_application_id(settings, transport=transport))
    except NewRelicApiError as exc:
        logger.warning("Application lookup failed", exc_info=True)
        print(exc, file=stdout)
        return 1

    try:
        emit_output(OUTPUT_NAME, application_id, stream=stdout, github_output=settings.github_output)
    except OSError as exc:
        logger.error("Could not write GITHUB_OUTPUT file", exc_info=True)
        print(f"Could not write step output to {settings.github_output}: {exc}", file=stdout)
        return 1
    return 0
