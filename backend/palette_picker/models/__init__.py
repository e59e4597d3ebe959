"""ORM Models: SQLAlchemy declarative models for projects and palettes.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project is the aggregate root; palettes scoped by projects_id

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from palette_picker.models.project import Project  # noqa: F401
from palette_picker.models.palette import Palette  # noqa: F401
