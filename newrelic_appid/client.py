"""
New Relic REST API client wrapper.

Fetches the applications listing and turns every way the call can go wrong
into a NewRelicApiError.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from newrelic_appid.http_client import create_newrelic_client
from newrelic_appid.models import ApplicationRecord, parse_applications
from newrelic_appid.settings import Settings

logger = logging.getLogger(__name__)

APPLICATIONS_PATH = "/v2/applications.json"
_ERROR_SNIPPET_LIMIT = 512


class NewRelicApiError(RuntimeError):
    """Represents failures when communicating with the New Relic API."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_snippet(response: httpx.Response) -> str:
    snippet = response.text.strip()
    if len(snippet) > _ERROR_SNIPPET_LIMIT:
        snippet = f"{snippet[:_ERROR_SNIPPET_LIMIT]}..."
    return snippet or "no body provided."


@dataclass(slots=True)
class NewRelicApiClient:
    """Typed wrapper around the shared AsyncClient."""

    _client: httpx.AsyncClient

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "NewRelicApiClient":
        """Factory that builds the client from Settings."""
        return cls(create_newrelic_client(settings, transport=transport))

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "NewRelicApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def list_applications(self, name: str) -> list[ApplicationRecord]:
        """
        Return the applications matched by the server-side name filter.

        The name is sent as given; callers are expected to have validated it.
        """
        payload = await self._get_json(APPLICATIONS_PATH, {"filter[name]": name})
        try:
            records = parse_applications(payload)
        except ValidationError as exc:
            logger.error(
                "New Relic API returned an unexpected payload",
                extra={"path": APPLICATIONS_PATH, "errors": exc.error_count()},
            )
            raise NewRelicApiError(
                f"New Relic API returned an unexpected payload for GET {APPLICATIONS_PATH}."
            ) from exc

        logger.debug("Applications listed", extra={"app_name": name, "count": len(records)})
        return records

    async def _get_json(self, path: str, params: dict[str, str]) -> Any:
        """GET `path` and return the decoded body of a 200 response."""
        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            logger.error("New Relic API request timed out", extra={"path": path}, exc_info=exc)
            raise NewRelicApiError(f"New Relic API request timed out (GET {path}).") from exc
        except httpx.RequestError as exc:
            logger.error("New Relic API request failed", extra={"path": path}, exc_info=exc)
            raise NewRelicApiError(f"New Relic API request failed (GET {path}): {exc!s}") from exc

        logger.info(
            "New Relic API responded",
            extra={"path": path, "status_code": response.status_code},
        )
        if response.status_code != httpx.codes.OK:
            snippet = _error_snippet(response)
            logger.warning(
                "New Relic API responded with error",
                extra={"path": path, "status_code": response.status_code, "content": snippet},
            )
            raise NewRelicApiError(
                f"New Relic API error ({response.status_code}) during GET {path}: {snippet}",
                status_code=response.status_code,
            )

        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        try:
            return response.json()
        except ValueError as exc:
            logger.error("New Relic API returned invalid JSON", extra={"path": path})
            raise NewRelicApiError(f"New Relic API returned invalid JSON during GET {path}.") from exc
