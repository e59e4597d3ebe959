"""Project Schemas: response shapes for project endpoints.

Invariants:
    - Built from ORM rows (from_attributes); timestamps serialize as ISO-8601

Design Decisions:
    - Request bodies are NOT modelled here: they arrive as raw dicts and are
      checked by core/validate_body.py, which owns the fixed 422 messages
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ProjectResponse(BaseModel):
    """Project row as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectListResponse(BaseModel):
    projects: list[ProjectResponse]


class CreatedResponse(BaseModel):
    """Id of a row created or updated by a write endpoint."""
    id: int
