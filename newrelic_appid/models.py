"""
Typed views of the New Relic `applications.json` payload.

Only `id` and `name` are consumed; the remaining fields are optional because
their presence varies between API schema versions.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class ApplicationLinks(BaseModel):
    """Related resource references attached to one application."""

    model_config = ConfigDict(extra="ignore")

    application_servers: list[int] | None = None
    servers: list[int] | None = None
    application_hosts: list[int] | None = None
    application_instances: list[int] | None = None


class ApplicationRecord(BaseModel):
    """One monitored application as reported by the REST API."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    language: str | None = None
    health_status: str | None = None
    reporting: bool | None = None
    last_reported_at: datetime | None = None
    response_time: float | None = None
    throughput: float | None = None
    error_rate: float | None = None
    apdex_target: float | None = None
    apdex_score: float | None = None
    host_count: int | None = None
    instance_count: int | None = None
    app_apdex_threshold: float | None = None
    end_user_apdex_threshold: float | None = None
    enable_real_user_monitoring: bool | None = None
    use_server_side_config: bool | None = None
    links: ApplicationLinks | None = None


class ApplicationsPage(BaseModel):
    """Wrapper object returned by the applications listing endpoint."""

    model_config = ConfigDict(extra="ignore")

    applications: list[ApplicationRecord] = Field(default_factory=list)
    links: dict[str, Any] | None = None

    @field_validator("applications", mode="before")
    @classmethod
    def _null_applications_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# The endpoint has been observed returning either a single wrapper object or
# an array of them.
_PAYLOAD_ADAPTER: TypeAdapter[ApplicationsPage | list[ApplicationsPage]] = TypeAdapter(
    ApplicationsPage | list[ApplicationsPage]
)


def parse_applications(payload: Any) -> list[ApplicationRecord]:
    """
    Decode a decoded JSON body into application records, preserving order.

    Raises pydantic.ValidationError when the payload matches neither shape.
    """
    parsed = _PAYLOAD_ADAPTER.validate_python(payload)
    if isinstance(parsed, ApplicationsPage):
        return list(parsed.applications)
    return [record for page in parsed for record in page.applications]
