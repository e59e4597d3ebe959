"""Palette ORM: a named group of five colors belonging to a project.

Invariants:
    - Always belongs to a Project (projects_id FK, ON DELETE CASCADE)
    - name and all five color columns are non-nullable strings
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from palette_picker.db.base import Base
from palette_picker.models.project import _utcnow


class Palette(Base):
    """Palette entity: five hex-like color strings under one name."""
    __tablename__ = "palettes"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color_one: Mapped[str] = mapped_column(String(32), nullable=False)
    color_two: Mapped[str] = mapped_column(String(32), nullable=False)
    color_three: Mapped[str] = mapped_column(String(32), nullable=False)
    color_four: Mapped[str] = mapped_column(String(32), nullable=False)
    color_five: Mapped[str] = mapped_column(String(32), nullable=False)
    projects_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
