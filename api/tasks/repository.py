"""
Task persistence (raw SQL).

Every statement returns the same column list (`_COLUMNS`) so rows map onto
`Task` the same way everywhere. Referential integrity of `goal_id` is left to
the `tasks.goal_id` foreign key; a violation surfaces as `StorageError`.
"""

from __future__ import annotations

import logging
from typing import Any

from core.clock import utc_now
from core.db import Database
from core.errors import NotFoundError, StorageError

from .schemas import Task

logger = logging.getLogger(__name__)

_COLUMNS = "id, goal_id, title, completed, created_at"


def _to_tasks(rows: list[dict[str, Any]]) -> list[Task]:
    return [Task.model_validate(r) for r in rows]


class TaskStore:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def create(self, *, goal_id: int, title: str) -> Task:
        row = await self.db.fetch_one(
            f"""
            INSERT INTO tasks (goal_id, title, completed, created_at)
            VALUES ($1, $2, $3, $4)
            RETURNING {_COLUMNS}
            """,
            goal_id,
            title,
            False,
            utc_now(),
        )
        if row is None:
            raise StorageError("Failed to create task.")
        task = Task.model_validate(row)
        logger.info("task_created id=%s goal_id=%s", task.id, task.goal_id)
        return task

    async def list_by_goal(self, goal_id: int) -> list[Task]:
        rows = await self.db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM tasks
            WHERE goal_id = $1
            ORDER BY created_at DESC, id DESC
            """,
            goal_id,
        )
        return _to_tasks(rows)

    async def list_all(self) -> list[Task]:
        rows = await self.db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM tasks
            ORDER BY created_at DESC, id DESC
            """
        )
        return _to_tasks(rows)

    async def list_incomplete(self) -> list[Task]:
        rows = await self.db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM tasks
            WHERE completed = false
            ORDER BY created_at DESC, id DESC
            """
        )
        return _to_tasks(rows)

    async def update_completion(self, task_id: int, *, completed: bool) -> Task:
        """
        Set `completed` (full replace, not a toggle) and return the updated row.
        """
        row = await self.db.fetch_one(
            f"""
            UPDATE tasks
            SET completed = $1
            WHERE id = $2
            RETURNING {_COLUMNS}
            """,
            completed,
            task_id,
        )
        if row is None:
            raise NotFoundError("Task", task_id)
        logger.info("task_updated id=%s completed=%s", task_id, completed)
        return Task.model_validate(row)
