from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_db

from .repository import GoalStore


def get_goal_store(db: Database = Depends(get_db)) -> GoalStore:
    return GoalStore(db)
