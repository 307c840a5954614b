"""
Daily incomplete-tasks report.

Runs on a cron schedule (see `main.py`), reads incomplete tasks and writes a
human-readable summary to the log. It has no caller to report failures to,
so a failed read is logged and the run ends.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Protocol

import pydantic

from core.errors import StorageError
from core.scheduler import ScheduledJob

JOB_NAME = "daily-incomplete-tasks-report"
JOB_TITLE = "Daily Incomplete Tasks Report"
FOOTER = "=== End Report ==="
EMPTY_LINE = "No incomplete tasks found."

logger = logging.getLogger(__name__)


class ReportableTask(Protocol):
    goal_id: int
    title: str
    created_at: datetime


class IncompleteTaskSource(Protocol):
    async def list_incomplete(self) -> Sequence[ReportableTask]: ...


def render_report(tasks: Sequence[ReportableTask], *, generated_at: datetime) -> list[str]:
    if not tasks:
        return [EMPTY_LINE]

    lines = [
        f"=== {JOB_TITLE} ({generated_at:%Y-%m-%d %H:%M:%S}, {len(tasks)} incomplete) ==="
    ]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"  {i}. [Goal ID: {task.goal_id}] {task.title} (Created: {task.created_at:%Y-%m-%d})")
    lines.append(FOOTER)
    return lines


class DailyIncompleteTasksReport:
    def __init__(self, source: IncompleteTaskSource) -> None:
        self.source = source

    async def run(self) -> list[str]:
        """
        Log the report and return its lines.

        Returns [] when the read failed or a row could not be mapped.
        """
        try:
            tasks = await self.source.list_incomplete()
        except (StorageError, pydantic.ValidationError):
            logger.exception("report_failed job=%s", JOB_NAME)
            return []

        lines = render_report(tasks, generated_at=datetime.now(timezone.utc))
        for line in lines:
            logger.info(line)
        return lines

    def as_job(self, cron: str) -> ScheduledJob:
        return ScheduledJob(name=JOB_NAME, title=JOB_TITLE, cron=cron, handler=self.run)
