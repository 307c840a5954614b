"""
Cron-style job registration on top of APScheduler.

A `ScheduledJob` pairs a crontab expression with an async handler. The
scheduler owns triggering; the handler owns the work.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledJob:
    name: str
    title: str
    cron: str
    handler: Callable[[], Awaitable[object]]


def build_scheduler(jobs: Iterable[ScheduledJob], *, timezone: str = "UTC") -> AsyncIOScheduler:
    """
    Create an (unstarted) scheduler with every job registered.

    Each job runs at most once at a time; missed runs collapse into one.
    """
    scheduler = AsyncIOScheduler(
        timezone=timezone,
        job_defaults={
            "coalesce": True,
            "max_instances": 1,
            "misfire_grace_time": 300,
        },
    )
    for job in jobs:
        scheduler.add_job(
            job.handler,
            trigger=CronTrigger.from_crontab(job.cron, timezone=timezone),
            id=job.name,
            name=job.title,
            replace_existing=True,
        )
        logger.info("job_registered name=%s cron=%r timezone=%s", job.name, job.cron, timezone)
    return scheduler
