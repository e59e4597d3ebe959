"""Palette Routes: listing with color search, lookup, rename, delete.

Invariants:
    - ?color= must be exactly 6 hex characters (no "#"); empty means no filter
    - Palette creation lives under /projects/{id}/palettes (routes/projects.py)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import PlainTextResponse

from palette_picker.api.routes.projects import get_palette_repository
from palette_picker.core.errors import ResourceNotFoundError
from palette_picker.core.validate_body import check_color_query, check_rename_body
from palette_picker.schemas.palette import PaletteListResponse, PaletteResponse
from palette_picker.schemas.project import CreatedResponse
from palette_picker.services.palette_repository import PaletteRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/palettes", tags=["palettes"])


def _palette_not_found(palette_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        f"Could not find palette with an id of {palette_id}",
        "palette", palette_id,
    )


@router.get("", response_model=PaletteListResponse)
async def list_palettes(
    color: str | None = Query(None),
    palettes: PaletteRepository = Depends(get_palette_repository),
):
    """All palettes, or those containing the ?color= hex fragment."""
    fragment = check_color_query(color)
    rows = await palettes.list_all(color=fragment)
    return PaletteListResponse(
        palettes=[PaletteResponse.model_validate(row) for row in rows],
    )


@router.get("/{palette_id}", response_model=PaletteResponse)
async def get_palette(
    palette_id: int,
    palettes: PaletteRepository = Depends(get_palette_repository),
):
    palette = await palettes.get(palette_id)
    if palette is None:
        raise _palette_not_found(palette_id)
    return PaletteResponse.model_validate(palette)


@router.patch("/{palette_id}", response_model=CreatedResponse)
async def rename_palette(
    palette_id: int,
    body: dict[str, Any] | None = Body(default=None),
    palettes: PaletteRepository = Depends(get_palette_repository),
):
    name = check_rename_body(body or {})
    if not await palettes.rename(palette_id, name):
        raise _palette_not_found(palette_id)
    return CreatedResponse(id=palette_id)


@router.delete("/{palette_id}", response_class=PlainTextResponse)
async def delete_palette(
    palette_id: int,
    palettes: PaletteRepository = Depends(get_palette_repository),
):
    if not await palettes.delete(palette_id):
        raise _palette_not_found(palette_id)
    logger.info("Palette deleted", extra={"palette_id": palette_id})
    return PlainTextResponse(
        f"Palette with id {palette_id} has been removed successfully",
    )
