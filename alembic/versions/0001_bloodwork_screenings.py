"""bloodwork screenings

Revision ID: 0001_bloodwork_screenings
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_bloodwork_screenings"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "bloodwork_screenings",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("results", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bloodwork_screenings_user_id", "bloodwork_screenings", ["user_id"], unique=False)
    op.create_index("ix_bloodwork_screenings_created_at", "bloodwork_screenings", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_bloodwork_screenings_created_at", table_name="bloodwork_screenings")
    op.drop_index("ix_bloodwork_screenings_user_id", table_name="bloodwork_screenings")
    op.drop_table("bloodwork_screenings")
