"""Initial schema: projects, palettes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "palettes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("color_one", sa.String(32), nullable=False),
        sa.Column("color_two", sa.String(32), nullable=False),
        sa.Column("color_three", sa.String(32), nullable=False),
        sa.Column("color_four", sa.String(32), nullable=False),
        sa.Column("color_five", sa.String(32), nullable=False),
        sa.Column(
            "projects_id", sa.Integer,
            sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_palettes_projects_id", "palettes", ["projects_id"])


def downgrade() -> None:
    op.drop_index("ix_palettes_projects_id", table_name="palettes")
    op.drop_table("palettes")
    op.drop_table("projects")
