"""Palette Repository: query-builder calls against the palettes table.

Invariants:
    - Color search matches a fragment anywhere in any of the five color columns,
      case-insensitively (ILIKE on Postgres, lower() LIKE on SQLite)
    - Writes commit before returning; failures roll back and raise DatabaseError
"""

from typing import Any

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.core.validate_body import COLOR_FIELDS
from palette_picker.infrastructure.database import translate_db_errors
from palette_picker.models.palette import Palette


class PaletteRepository:
    """Persistence for Palette rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @translate_db_errors("select")
    async def list_all(self, color: str | None = None) -> list[Palette]:
        query = select(Palette).order_by(Palette.id)
        if color:
            pattern = f"%{color}%"
            query = query.where(or_(
                *(getattr(Palette, field).ilike(pattern) for field in COLOR_FIELDS),
            ))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    @translate_db_errors("select")
    async def list_for_project(self, project_id: int) -> list[Palette]:
        result = await self.db.execute(
            select(Palette)
            .where(Palette.projects_id == project_id)
            .order_by(Palette.id),
        )
        return list(result.scalars().all())

    @translate_db_errors("select")
    async def get(self, palette_id: int) -> Palette | None:
        result = await self.db.execute(
            select(Palette).where(Palette.id == palette_id),
        )
        return result.scalar_one_or_none()

    @translate_db_errors("insert")
    async def create(self, fields: dict[str, Any]) -> int:
        palette = Palette(**fields)
        self.db.add(palette)
        await self.db.commit()
        return palette.id

    @translate_db_errors("update")
    async def rename(self, palette_id: int, name: str) -> bool:
        result = await self.db.execute(
            update(Palette).where(Palette.id == palette_id).values(name=name),
        )
        await self.db.commit()
        return result.rowcount > 0

    @translate_db_errors("delete")
    async def delete(self, palette_id: int) -> bool:
        result = await self.db.execute(
            delete(Palette).where(Palette.id == palette_id),
        )
        await self.db.commit()
        return result.rowcount > 0
