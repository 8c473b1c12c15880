"""
Upstream clinic API client.
"""

from typing import Any, Dict, List, Optional
import httpx
from pydantic import TypeAdapter, ValidationError

from ...config import UpstreamAPIConfig
from ...core.exceptions import UpstreamUnavailable
from ...core.models.clinic import (
    Availability,
    BranchRecord,
    ClinicSnapshot,
    DoctorCategory,
    DoctorRecord,
    ScheduleSlot,
)
from ...utils.logging import get_logger

logger = get_logger("care360.upstream")

_CATEGORIES = TypeAdapter(List[DoctorCategory])
_AVAILABILITY = TypeAdapter(List[Availability])
_TIMESLOTS = TypeAdapter(List[str])


class UpstreamClient:
    """Read-only client for the clinic REST API. Every call fetches fresh data."""

    def __init__(
        self,
        config: Optional[UpstreamAPIConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or UpstreamAPIConfig()
        self._transport = transport

    async def _get_json(
        self,
        operation: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Issue a GET request and decode JSON, mapping every failure to UpstreamUnavailable."""
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.TimeoutException:
            logger.error("%s timed out after %ss", operation, self.config.timeout)
            raise UpstreamUnavailable(operation, "request timed out")
        except httpx.HTTPStatusError as e:
            logger.error("%s HTTP %s", operation, e.response.status_code)
            raise UpstreamUnavailable(operation, f"HTTP error {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error("%s request failed: %s", operation, e)
            raise UpstreamUnavailable(operation, f"request failed: {e}")

        try:
            return response.json()
        except ValueError as e:
            logger.error("%s invalid JSON: %s", operation, e)
            raise UpstreamUnavailable(operation, "invalid JSON body")

    def _validate(self, operation: str, adapter: TypeAdapter, payload: Any) -> Any:
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            logger.error("%s unexpected payload shape: %s errors", operation, e.error_count())
            raise UpstreamUnavailable(operation, "unexpected payload shape")

    async def fetch_snapshot(self) -> ClinicSnapshot:
        """Fetch doctors, branches and schedule in one call."""
        operation = "fetch_snapshot"
        payload = await self._get_json(operation, self.config.snapshot_url())
        if not isinstance(payload, dict):
            logger.error("%s expected an object, got %s", operation, type(payload).__name__)
            raise UpstreamUnavailable(operation, "unexpected payload shape")
        try:
            return ClinicSnapshot.model_validate(payload)
        except ValidationError as e:
            logger.error("%s unexpected payload shape: %s errors", operation, e.error_count())
            raise UpstreamUnavailable(operation, "unexpected payload shape")

    async def list_doctors(self) -> List[DoctorRecord]:
        return (await self.fetch_snapshot()).doctors

    async def list_branches(self) -> List[BranchRecord]:
        return (await self.fetch_snapshot()).branches

    async def list_doctor_times(self) -> List[ScheduleSlot]:
        return (await self.fetch_snapshot()).doctor_times

    async def list_categories(self) -> List[DoctorCategory]:
        operation = "list_categories"
        payload = await self._get_json(operation, self.config.categories_url())
        return self._validate(operation, _CATEGORIES, payload)

    async def list_availability(self, category_id: int) -> List[Availability]:
        operation = "list_availability"
        payload = await self._get_json(
            operation,
            self.config.availability_url(),
            params={"category_id": category_id},
        )
        return self._validate(operation, _AVAILABILITY, payload)

    async def list_timeslots(self, date: str) -> List[str]:
        operation = "list_timeslots"
        payload = await self._get_json(
            operation,
            self.config.timeslots_url(),
            params={"date": date},
        )
        return self._validate(operation, _TIMESLOTS, payload)
