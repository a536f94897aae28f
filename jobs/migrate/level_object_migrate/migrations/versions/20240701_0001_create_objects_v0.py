"""create objects_v0

Base table for the first level layout. Later versions are created on demand
by the API's /prepare endpoint. Databases that already have the table (it
predates migrations) are left alone.

Revision ID: 20240701_0001
Revises:
Create Date: 2024-07-01 12:00:00.000000

"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import context, op

# revision identifiers, used by Alembic.
revision = "20240701_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # --sql mode has no live connection to inspect
    if not context.is_offline_mode() and sa.inspect(op.get_bind()).has_table("objects_v0"):
        return

    op.create_table(
        "objects_v0",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("object_type", sa.String(length=255)),
        sa.Column("position", sa.String(length=255)),
        sa.Column("scale", sa.String(length=255)),
        sa.Column("rotation", sa.String(length=255)),
        sa.Column("collider", sa.Text()),
    )


def downgrade() -> None:
    op.drop_table("objects_v0")
