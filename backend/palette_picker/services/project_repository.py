"""Project Repository: query-builder calls against the projects table.

Invariants:
    - One repository per request, bound to that request's AsyncSession
    - Writes commit before returning; failures roll back and raise DatabaseError
    - Deleting a project deletes its palettes first
"""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.infrastructure.database import translate_db_errors
from palette_picker.models.palette import Palette
from palette_picker.models.project import Project


class ProjectRepository:
    """Persistence for Project rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @translate_db_errors("select")
    async def list_all(self) -> list[Project]:
        result = await self.db.execute(select(Project).order_by(Project.id))
        return list(result.scalars().all())

    @translate_db_errors("select")
    async def get(self, project_id: int) -> Project | None:
        result = await self.db.execute(
            select(Project).where(Project.id == project_id),
        )
        return result.scalar_one_or_none()

    @translate_db_errors("insert")
    async def create(self, name: str) -> int:
        project = Project(name=name)
        self.db.add(project)
        await self.db.commit()
        return project.id

    @translate_db_errors("update")
    async def rename(self, project_id: int, name: str) -> bool:
        """Set a new name. False when no row has that id."""
        result = await self.db.execute(
            update(Project).where(Project.id == project_id).values(name=name),
        )
        await self.db.commit()
        return result.rowcount > 0

    @translate_db_errors("delete")
    async def delete(self, project_id: int) -> bool:
        """Remove the project and its palettes. False when no row has that id."""
        await self.db.execute(
            delete(Palette).where(Palette.projects_id == project_id),
        )
        result = await self.db.execute(
            delete(Project).where(Project.id == project_id),
        )
        await self.db.commit()
        return result.rowcount > 0
