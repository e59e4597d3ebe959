"""Project Routes: CRUD over projects plus palette listing/creation per project.

Invariants:
    - Body shape is checked (core/validate_body.py) before any query runs
    - Missing rows raise ResourceNotFoundError → 404 via the global handler
    - DELETE answers text/plain, every other success answers JSON
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.core.errors import ResourceNotFoundError
from palette_picker.core.validate_body import (
    check_palette_body, check_project_body, check_rename_body,
)
from palette_picker.infrastructure.database import get_db
from palette_picker.schemas.palette import PaletteListResponse, PaletteResponse
from palette_picker.schemas.project import (
    CreatedResponse, ProjectListResponse, ProjectResponse,
)
from palette_picker.services.palette_repository import PaletteRepository
from palette_picker.services.project_repository import ProjectRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


def get_project_repository(
    db: AsyncSession = Depends(get_db),
) -> ProjectRepository:
    return ProjectRepository(db)


def get_palette_repository(
    db: AsyncSession = Depends(get_db),
) -> PaletteRepository:
    return PaletteRepository(db)


def _project_not_found(project_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        f"Could not find project with an id of {project_id}",
        "project", project_id,
    )


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    projects: ProjectRepository = Depends(get_project_repository),
):
    """All projects."""
    rows = await projects.list_all()
    return ProjectListResponse(
        projects=[ProjectResponse.model_validate(row) for row in rows],
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    projects: ProjectRepository = Depends(get_project_repository),
):
    project = await projects.get(project_id)
    if project is None:
        raise ResourceNotFoundError(
            f"No project found with an id of {project_id}",
            "project", project_id,
        )
    return ProjectResponse.model_validate(project)


@router.get("/{project_id}/palettes", response_model=PaletteListResponse)
async def list_project_palettes(
    project_id: int,
    palettes: PaletteRepository = Depends(get_palette_repository),
):
    """Palettes of one project; 404 when it has none."""
    rows = await palettes.list_for_project(project_id)
    if not rows:
        raise ResourceNotFoundError(
            "No palettes could be found matching a project "
            f"with an id of {project_id}",
            "project", project_id,
        )
    return PaletteListResponse(
        palettes=[PaletteResponse.model_validate(row) for row in rows],
    )


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: dict[str, Any] | None = Body(default=None),
    projects: ProjectRepository = Depends(get_project_repository),
):
    name = check_project_body(body or {})
    project_id = await projects.create(name)
    logger.info("Project created", extra={"project_id": project_id})
    return CreatedResponse(id=project_id)


@router.post(
    "/{project_id}/palettes",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_palette(
    project_id: int,
    body: dict[str, Any] | None = Body(default=None),
    palettes: PaletteRepository = Depends(get_palette_repository),
):
    """Create a palette under the project named by the path."""
    fields = check_palette_body({**(body or {}), "projects_id": project_id})
    palette_id = await palettes.create(fields)
    logger.info(
        "Palette created",
        extra={"project_id": project_id, "palette_id": palette_id},
    )
    return CreatedResponse(id=palette_id)


@router.patch("/{project_id}", response_model=CreatedResponse)
async def rename_project(
    project_id: int,
    body: dict[str, Any] | None = Body(default=None),
    projects: ProjectRepository = Depends(get_project_repository),
):
    name = check_rename_body(body or {})
    if not await projects.rename(project_id, name):
        raise _project_not_found(project_id)
    return CreatedResponse(id=project_id)


@router.delete("/{project_id}", response_class=PlainTextResponse)
async def delete_project(
    project_id: int,
    projects: ProjectRepository = Depends(get_project_repository),
):
    """Delete a project together with its palettes."""
    if not await projects.delete(project_id):
        raise _project_not_found(project_id)
    logger.info("Project deleted", extra={"project_id": project_id})
    return PlainTextResponse(
        f"Project with id {project_id} has been removed successfully",
    )
