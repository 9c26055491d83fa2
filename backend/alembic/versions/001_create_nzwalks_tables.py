"""Create regions, walk_difficulties and walks tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial schema. walks references both other tables with
       ON DELETE CASCADE; walk_difficulties.code is unique.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "regions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("area", sa.Float(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("population", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "walk_difficulties",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("code", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )

    op.create_table(
        "walks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("length", sa.Float(), nullable=False),
        sa.Column("region_id", sa.Uuid(), nullable=False),
        sa.Column("walk_difficulty_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["region_id"], ["regions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["walk_difficulty_id"], ["walk_difficulties.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_walks_region_id", "walks", ["region_id"])
    op.create_index("idx_walks_walk_difficulty_id", "walks", ["walk_difficulty_id"])


def downgrade() -> None:
    """WARNING: destroys all region, walk and difficulty data."""
    op.drop_index("idx_walks_walk_difficulty_id", table_name="walks")
    op.drop_index("idx_walks_region_id", table_name="walks")
    op.drop_table("walks")
    op.drop_table("walk_difficulties")
    op.drop_table("regions")
