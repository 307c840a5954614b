"""
Task API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateTaskRequest(BaseModel):
    goal_id: int
    title: str


class UpdateTaskRequest(BaseModel):
    task_id: int = Field(..., alias="taskId")
    completed: bool


class Task(BaseModel):
    id: int
    goal_id: int
    title: str
    completed: bool
    created_at: datetime = Field(..., serialization_alias="createdAt")


class ListTasksResponse(BaseModel):
    # Always a list; an empty result is [] rather than null.
    tasks: list[Task]
