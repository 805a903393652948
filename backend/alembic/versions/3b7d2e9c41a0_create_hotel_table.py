"""create_hotel_table

Revision ID: 3b7d2e9c41a0
Revises:
Create Date: 2026-10-19 09:12:40.518233

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b7d2e9c41a0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "hotel",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("rooms", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_hotel_location", "hotel", ["location"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_hotel_location", table_name="hotel")
    op.drop_table("hotel", if_exists=True)
