"""
Goal persistence (raw SQL).
"""

from __future__ import annotations

import logging

from core.clock import utc_now
from core.db import Database
from core.errors import NotFoundError, StorageError

from .schemas import Goal

logger = logging.getLogger(__name__)


class GoalStore:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def create(self, title: str) -> Goal:
        row = await self.db.fetch_one(
            """
            INSERT INTO goals (title, created_at)
            VALUES ($1, $2)
            RETURNING id, title, created_at
            """,
            title,
            utc_now(),
        )
        if row is None:
            raise StorageError("Failed to create goal.")
        goal = Goal.model_validate(row)
        logger.info("goal_created id=%s", goal.id)
        return goal

    async def list_all(self) -> list[Goal]:
        rows = await self.db.fetch_all(
            """
            SELECT id, title, created_at
            FROM goals
            ORDER BY created_at DESC, id DESC
            """
        )
        return [Goal.model_validate(r) for r in rows]

    async def get(self, goal_id: int) -> Goal:
        row = await self.db.fetch_one(
            """
            SELECT id, title, created_at
            FROM goals
            WHERE id = $1
            """,
            goal_id,
        )
        if row is None:
            raise NotFoundError("Goal", goal_id)
        return Goal.model_validate(row)
