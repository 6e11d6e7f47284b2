from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from salon_dashboard.schemas.analytics import AggregateResult, DateFilter, ReportResponse
from salon_dashboard.services.aggregation import aggregate
from salon_dashboard.services.appointment import AppointmentService
from salon_dashboard.services.shop_config import ShopConfigService

logger = logging.getLogger(__name__)


def local_clock(timezone_name: Optional[str]) -> Callable[[], datetime]:
    """Return a callable giving "now" in the shop's zone as a naive datetime."""
    if not timezone_name:
        return datetime.now
    zone = ZoneInfo(timezone_name)
    return lambda: datetime.now(zone).replace(tzinfo=None)


class ReportService:
    """Feeds a fresh snapshot of appointments and opening hours to ``aggregate``."""

    def __init__(
        self,
        appointments: AppointmentService,
        shop_config: ShopConfigService,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._appointments = appointments
        self._shop_config = shop_config
        self._clock = clock

    async def summarize(self, period: DateFilter = DateFilter.all_time) -> AggregateResult:
        logger.info("Computing %s summary", period.value)
        # A failed fetch propagates and no aggregation runs.
        appointments, config = await asyncio.gather(
            self._appointments.list(),
            self._shop_config.get(),
        )
        return aggregate(appointments, period, config.hours, now=self._clock())

    async def report(self, period: DateFilter = DateFilter.all_time) -> ReportResponse:
        summary = await self.summarize(period)
        return ReportResponse(
            period=period,
            generated_at=datetime.now(timezone.utc).isoformat(),
            summary=summary,
        )
