"""Palette Schemas: response shapes for palette endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PaletteResponse(BaseModel):
    """Palette row as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color_one: str
    color_two: str
    color_three: str
    color_four: str
    color_five: str
    projects_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaletteListResponse(BaseModel):
    palettes: list[PaletteResponse]
