"""create authors and courses

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _ordinal(length: int) -> sa.String:
    return sa.String(length).with_variant(sa.String(length, collation="C"), "postgresql")


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("first_name", _ordinal(50), nullable=False),
        sa.Column("last_name", _ordinal(50), nullable=False),
        sa.Column("main_category", _ordinal(50), nullable=False),
    )
    op.create_table(
        "courses",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", _ordinal(100), nullable=False),
        sa.Column("description", sa.String(1500), nullable=True),
        sa.Column(
            "author_id",
            sa.Uuid(),
            sa.ForeignKey("authors.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_courses_author_id", "courses", ["author_id"])


def downgrade() -> None:
    op.drop_index("ix_courses_author_id", table_name="courses")
    op.drop_table("courses")
    op.drop_table("authors")
