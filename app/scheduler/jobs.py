"""
SCHEDULER JOB DEFINITIONS

Jobs only hit the HTTP trigger over loopback so scheduled and manual
sends take the same path. Failures are logged; the schedule keeps going.
"""

import logging

import httpx

from app.config import settings
from app.domain.errors import ScheduleInvocationError

_logger = logging.getLogger(__name__)


async def call_trigger(route: str, base_url: str | None = None, timeout: float | None = None) -> int:
    """
    GET the trigger route. Raises ScheduleInvocationError on transport
    failure or a non-2xx response.
    """
    url = f"{(base_url or settings.LOOPBACK_BASE_URL).rstrip('/')}/{route.lstrip('/')}"
    try:
        async with httpx.AsyncClient(timeout=timeout or settings.LOOPBACK_TIMEOUT_SECONDS) as client:
            resp = await client.get(url, headers={"Content-Type": "application/json"})
    except httpx.HTTPError as exc:
        raise ScheduleInvocationError(f"GET {url} failed: {exc}") from exc

    if resp.is_error:
        raise ScheduleInvocationError(f"GET {url} returned {resp.status_code}: {resp.text}")
    return resp.status_code


async def hit_routine_service(
    route: str,
    base_url: str | None = None,
    timeout: float | None = None,
) -> None:
    _logger.info(f"⏰ Scheduled trigger for {route}")
    try:
        await call_trigger(route, base_url=base_url, timeout=timeout)
    except ScheduleInvocationError as exc:
        _logger.error(f"Error hitting routine service: {exc}")
        return
    _logger.info(f"✅ Scheduled trigger for {route} done")
