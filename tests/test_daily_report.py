# tests/test_daily_report.py

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from core.errors import StorageError
from reports.daily import EMPTY_LINE, FOOTER, JOB_NAME, DailyIncompleteTasksReport, render_report
from tasks.repository import TaskStore
from tasks.schemas import Task

from .fakes import FakeDatabase


class FakeSource:
    def __init__(self, tasks=None, error: Exception | None = None) -> None:
        self.tasks = tasks or []
        self.error = error
        self.calls = 0

    async def list_incomplete(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.tasks


def _task(task_id: int, goal_id: int, title: str, day: int) -> Task:
    return Task(
        id=task_id,
        goal_id=goal_id,
        title=title,
        completed=False,
        created_at=datetime(2026, 10, day, 12, 0, tzinfo=timezone.utc),
    )


def test_render_empty_is_single_line() -> None:
    assert render_report([], generated_at=datetime.now(timezone.utc)) == [EMPTY_LINE]


def test_render_lists_tasks_in_given_order() -> None:
    tasks = [_task(2, 1, "Write notes", 18), _task(1, 3, "Read book", 17)]
    lines = render_report(tasks, generated_at=datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc))

    assert lines[0].startswith("=== Daily Incomplete Tasks Report")
    assert "2 incomplete" in lines[0]
    assert lines[1] == "  1. [Goal ID: 1] Write notes (Created: 2026-10-18)"
    assert lines[2] == "  2. [Goal ID: 3] Read book (Created: 2026-10-17)"
    assert lines[3] == FOOTER
    assert len(lines) == 4


@pytest.mark.asyncio
async def test_run_logs_every_line(caplog) -> None:
    caplog.set_level(logging.INFO, logger="reports.daily")
    source = FakeSource([_task(2, 1, "Write notes", 18), _task(1, 1, "Read book", 17)])

    lines = await DailyIncompleteTasksReport(source).run()

    assert source.calls == 1
    assert [r.getMessage() for r in caplog.records] == lines
    assert len(lines) == 4


@pytest.mark.asyncio
async def test_run_with_nothing_pending(caplog) -> None:
    caplog.set_level(logging.INFO, logger="reports.daily")
    lines = await DailyIncompleteTasksReport(FakeSource()).run()

    assert lines == [EMPTY_LINE]
    assert [r.getMessage() for r in caplog.records] == [EMPTY_LINE]


@pytest.mark.asyncio
async def test_run_logs_storage_failure_and_does_not_raise(caplog) -> None:
    caplog.set_level(logging.INFO, logger="reports.daily")
    report = DailyIncompleteTasksReport(FakeSource(error=StorageError("db down")))

    assert await report.run() == []
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert JOB_NAME in errors[0].getMessage()
    assert errors[0].exc_info is not None


@pytest.mark.asyncio
async def test_run_again_after_a_failure() -> None:
    source = FakeSource(error=StorageError("db down"))
    report = DailyIncompleteTasksReport(source)
    await report.run()

    source.error = None
    source.tasks = [_task(1, 1, "Read book", 17)]
    lines = await report.run()
    assert lines[-1] == FOOTER
    assert source.calls == 2


@pytest.mark.asyncio
async def test_run_logs_unmappable_rows_and_does_not_raise(caplog) -> None:
    caplog.set_level(logging.INFO, logger="reports.daily")
    bad_row = {"id": 1, "title": "no goal column", "completed": False, "created_at": datetime.now(timezone.utc)}
    report = DailyIncompleteTasksReport(TaskStore(FakeDatabase(all_rows=[bad_row])))

    assert await report.run() == []
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info is not None
