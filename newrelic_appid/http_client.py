"""HTTP client factory for the New Relic REST API."""

import httpx

from newrelic_appid.settings import Settings


def create_newrelic_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an AsyncClient bound to the configured region's API host.

    The API key travels as the `Api-Key` header on every request. A custom
    transport can be supplied to route requests to a mock.
    """
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
        headers={
            "Api-Key": settings.api_key,
            "Accept": "application/json",
        },
        transport=transport,
    )
