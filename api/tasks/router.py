"""
Task API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from . import schemas
from .dependencies import get_task_store
from .repository import TaskStore

router = APIRouter()


@router.post("/tasks", response_model=schemas.Task)
async def create_task(
    request: schemas.CreateTaskRequest,
    store: TaskStore = Depends(get_task_store),
) -> schemas.Task:
    return await store.create(goal_id=request.goal_id, title=request.title)


@router.get("/tasks", response_model=schemas.ListTasksResponse)
async def list_tasks(
    goal_id: int = Query(...),
    store: TaskStore = Depends(get_task_store),
) -> schemas.ListTasksResponse:
    return schemas.ListTasksResponse(tasks=await store.list_by_goal(goal_id))


@router.patch("/tasks/update", response_model=schemas.Task)
async def update_task(
    request: schemas.UpdateTaskRequest,
    store: TaskStore = Depends(get_task_store),
) -> schemas.Task:
    """
    Mark a task complete or incomplete.
    """
    return await store.update_completion(request.task_id, completed=request.completed)


@router.get("/tasks/all", response_model=schemas.ListTasksResponse)
async def list_all_tasks(store: TaskStore = Depends(get_task_store)) -> schemas.ListTasksResponse:
    """
    Every task across all goals (debugging aid).
    """
    return schemas.ListTasksResponse(tasks=await store.list_all())


@router.get("/tasks/incomplete", response_model=schemas.ListTasksResponse)
async def list_incomplete_tasks(store: TaskStore = Depends(get_task_store)) -> schemas.ListTasksResponse:
    return schemas.ListTasksResponse(tasks=await store.list_incomplete())
