"""
Goal API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateGoalRequest(BaseModel):
    # Empty titles are accepted.
    title: str


class Goal(BaseModel):
    id: int
    title: str
    created_at: datetime = Field(..., serialization_alias="createdAt")


class ListGoalsResponse(BaseModel):
    goals: list[Goal]


class GoalResponse(BaseModel):
    goal: Goal
