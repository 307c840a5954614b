"""
Goal API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import schemas
from .dependencies import get_goal_store
from .repository import GoalStore

router = APIRouter()


@router.post("/goals", response_model=schemas.Goal)
async def create_goal(
    request: schemas.CreateGoalRequest,
    store: GoalStore = Depends(get_goal_store),
) -> schemas.Goal:
    return await store.create(request.title)


@router.get("/goals", response_model=schemas.ListGoalsResponse)
async def list_goals(store: GoalStore = Depends(get_goal_store)) -> schemas.ListGoalsResponse:
    """
    All goals, most recent first.
    """
    return schemas.ListGoalsResponse(goals=await store.list_all())


@router.get("/goals/{goal_id}", response_model=schemas.GoalResponse)
async def get_goal(goal_id: int, store: GoalStore = Depends(get_goal_store)) -> schemas.GoalResponse:
    return schemas.GoalResponse(goal=await store.get(goal_id))
