"""
Error types shared by the stores and mapped to HTTP responses in `main.py`.
"""

from __future__ import annotations


# Anything that went wrong talking to Postgres: connectivity, constraint
# violations, bad data. Callers cannot fix these by changing the request id.
class StorageError(RuntimeError):
    pass


class NotFoundError(LookupError):
    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found.")
        self.entity = entity
        self.entity_id = entity_id
