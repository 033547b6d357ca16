"""
SCHEDULER BOOTSTRAP

Registers the two countdown jobs on an APScheduler instance.
Scheduler is orchestration-only and contains no business logic.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import pytz
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from app.config import Settings, settings as default_settings
from app.domain.models.notification import Occasion
from app.scheduler.jobs import hit_routine_service

_logger = logging.getLogger(__name__)


class NotificationScheduler:
    def __init__(
        self,
        config: Optional[Settings] = None,
        job: Callable[..., Awaitable[None]] = hit_routine_service,
    ):
        self.config = config or default_settings
        self.timezone = pytz.timezone(self.config.TIMEZONE)
        self.scheduler = AsyncIOScheduler(timezone=self.timezone)
        self._job = job
        self._register_jobs()

    def _register_jobs(self) -> None:
        cfg = self.config

        # ------------------------------------------------------------
        # MORNING COUNTDOWN
        # Mon–Fri @ 07:00 WIB
        # ------------------------------------------------------------
        self.scheduler.add_job(
            self._job,
            trigger=CronTrigger(
                day_of_week=cfg.MORNING_DAYS,
                hour=cfg.MORNING_HOUR,
                minute=cfg.MORNING_MINUTE,
                timezone=self.timezone,
            ),
            args=[cfg.MORNING_ROUTE, cfg.LOOPBACK_BASE_URL, cfg.LOOPBACK_TIMEOUT_SECONDS],
            id=f"{Occasion.MORNING.value}_countdown_job",
            replace_existing=True,
        )

        # ------------------------------------------------------------
        # EVENING COUNTDOWN
        # Daily @ 20:00 WIB
        # ------------------------------------------------------------
        self.scheduler.add_job(
            self._job,
            trigger=CronTrigger(
                day_of_week=cfg.EVENING_DAYS,
                hour=cfg.EVENING_HOUR,
                minute=cfg.EVENING_MINUTE,
                timezone=self.timezone,
            ),
            args=[cfg.EVENING_ROUTE, cfg.LOOPBACK_BASE_URL, cfg.LOOPBACK_TIMEOUT_SECONDS],
            id=f"{Occasion.EVENING.value}_countdown_job",
            replace_existing=True,
        )

    @property
    def running(self) -> bool:
        return bool(self.scheduler.running)

    def get_job(self, occasion: Occasion):
        return self.scheduler.get_job(f"{Occasion(occasion).value}_countdown_job")

    def start(self) -> None:
        """Must be called from inside the running event loop."""
        self.scheduler.start()
        _logger.info("✅ Scheduler started with all jobs registered")

    async def stop(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            # shutdown is queued on the loop; let it run before returning
            await asyncio.sleep(0)
            _logger.info("🛑 Scheduler shut down")
