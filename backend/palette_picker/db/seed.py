"""Seed Data: reset both tables and load the sample projects and palettes.

Invariants:
    - reset_and_seed() leaves exactly SEED_PROJECTS in the database
    - Palettes are deleted before projects (FK order)

Usage:
    APP_ENV=development python -m palette_picker.db.seed
"""

import asyncio
import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.config import get_settings
from palette_picker.db.session import create_engine, create_session_factory
from palette_picker.infrastructure.observability import setup_logging
from palette_picker.models.palette import Palette
from palette_picker.models.project import Project

logger = logging.getLogger(__name__)

SEED_PROJECTS: list[dict] = [
    {
        "name": "Living Room",
        "palettes": [
            {
                "name": "Warm Neutrals",
                "color_one": "#F4E1C1", "color_two": "#D9B48F",
                "color_three": "#A47551", "color_four": "#6B4F3A",
                "color_five": "#3E2C23",
            },
            {
                "name": "Coastal",
                "color_one": "#E0F7FA", "color_two": "#80DEEA",
                "color_three": "#26C6DA", "color_four": "#00838F",
                "color_five": "#004D40",
            },
        ],
    },
    {
        "name": "Brand Refresh",
        "palettes": [
            {
                "name": "Sunset",
                "color_one": "#FFB347", "color_two": "#FF7F50",
                "color_three": "#FF6961", "color_four": "#C23B22",
                "color_five": "#5D2E46",
            },
        ],
    },
]


async def reset_and_seed(db: AsyncSession) -> int:
    """Wipe projects and palettes, insert SEED_PROJECTS. Returns projects inserted."""
    await db.execute(delete(Palette))
    await db.execute(delete(Project))
    for entry in SEED_PROJECTS:
        project = Project(name=entry["name"])
        db.add(project)
        await db.flush()
        db.add_all(
            Palette(projects_id=project.id, **palette)
            for palette in entry["palettes"]
        )
    await db.commit()
    return len(SEED_PROJECTS)


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    engine = create_engine(settings.resolved_database_url)
    try:
        async with create_session_factory(engine)() as db:
            count = await reset_and_seed(db)
    finally:
        await engine.dispose()
    logger.info(f"Seeded {count} projects ({settings.app_env})")


if __name__ == "__main__":
    asyncio.run(main())
