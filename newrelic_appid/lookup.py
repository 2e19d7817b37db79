"""Resolution of an application name to its numeric New Relic ID."""

import logging
from collections.abc import Sequence

from newrelic_appid.client import NewRelicApiClient, NewRelicApiError
from newrelic_appid.models import ApplicationRecord

logger = logging.getLogger(__name__)


class ApplicationNotFoundError(NewRelicApiError):
    """Raised when the name filter matched no application."""


def select_application_id(records: Sequence[ApplicationRecord], name: str) -> int:
    """Return the ID of the first record; the API's ordering decides ties."""
    if not records:
        raise ApplicationNotFoundError(f"No application named '{name}' was found.")
    if len(records) > 1:
        logger.warning(
            "Multiple applications matched, using the first",
            extra={"app_name": name, "ids": [record.id for record in records]},
        )
    return records[0].id


async def resolve_application_id(client: NewRelicApiClient, name: str) -> int:
    """Look up `name` through the API and return the matching application ID."""
    records = await client.list_applications(name)
    application_id = select_application_id(records, name)
    logger.info(
        "Resolved application ID",
        extra={"app_name": name, "app_id": application_id},
    )
    return application_id
