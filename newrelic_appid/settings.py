"""Environment-driven configuration for the application ID lookup."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv


class SettingsError(ValueError):
    """Raised when the action inputs are missing or malformed."""


class Region(str, Enum):
    """New Relic data center regions and their REST API hosts."""

    US = "US"
    EU = "EU"

    @property
    def base_url(self) -> str:
        return _REGION_BASE_URLS[self]

    @classmethod
    def parse(cls, value: str) -> "Region":
        try:
            return cls(value)
        except ValueError as exc:
            raise SettingsError("Invalid NewRelic region specified.") from exc


_REGION_BASE_URLS: dict[Region, str] = {
    Region.US: "https://api.newrelic.com",
    Region.EU: "https://api.eu.newrelic.com",
}


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for the action inputs and runtime options."""

    api_key: str
    region: Region
    app_name: str
    api_timeout: float = 30.0
    base_url_override: str | None = None
    github_output: str | None = None

    @property
    def api_base_url(self) -> str:
        """Base URL requests are sent to: the override if set, else the region host."""
        return self.base_url_override or self.region.base_url

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Load configuration from environment variables.

        With no explicit mapping, python-dotenv is used so developers can rely
        on a local .env file without exporting variables globally. Passing a
        mapping skips the .env file and the process environment entirely.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        api_key = environ.get("INPUT_NEWRELICAPIKEY", "").strip()
        if not api_key:
            raise SettingsError("NewRelic API key not specified.")
        if not api_key.isascii():
            raise SettingsError("NewRelic API key must contain only ASCII characters.")

        app_name = environ.get("INPUT_APPNAME", "").strip()
        if not app_name:
            raise SettingsError("App name not specified.")

        region = Region.parse(environ.get("INPUT_NEWRELICREGION", "").strip())

        api_timeout_raw = environ.get("API_TIMEOUT", "").strip() or "30"
        try:
            api_timeout = float(api_timeout_raw)
        except ValueError as exc:
            raise SettingsError("API_TIMEOUT must be a numeric value.") from exc
        if api_timeout <= 0:
            raise SettingsError("API_TIMEOUT must be greater than zero.")

        base_url_override = environ.get("NEWRELIC_API_BASE_URL", "").strip() or None
        github_output = environ.get("GITHUB_OUTPUT", "").strip() or None

        return cls(
            api_key=api_key,
            region=region,
            app_name=app_name,
            api_timeout=api_timeout,
            base_url_override=base_url_override,
            github_output=github_output,
        )
