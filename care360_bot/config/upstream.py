"""
Upstream clinic API configuration.
"""

from pydantic import BaseModel, field_validator

from .settings import Settings


class UpstreamAPIConfig(BaseModel):
    """Clinic REST API endpoints and request limits."""

    base_url: str = "https://app.future-it-pro.ru/api"
    timeout: float = 10.0

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamAPIConfig":
        return cls(base_url=settings.api_base_url, timeout=settings.upstream_timeout)

    def snapshot_url(self) -> str:
        """Full doctors/branches/schedule snapshot used by the main flow."""
        return f"{self.base_url}/global/doctor_time"

    def categories_url(self) -> str:
        return f"{self.base_url}/categories"

    def availability_url(self) -> str:
        return f"{self.base_url}/availability"

    def timeslots_url(self) -> str:
        return f"{self.base_url}/timeslots"
