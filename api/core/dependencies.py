"""
FastAPI dependencies for shared resources.
"""

from __future__ import annotations

from fastapi import Request

from .db import Database


def get_db(request: Request) -> Database:
    # Set by the lifespan handler in main.py.
    return request.app.state.db
