from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_db

from .repository import TaskStore


def get_task_store(db: Database = Depends(get_db)) -> TaskStore:
    return TaskStore(db)
