"""make fields not null

Revision ID: 20240704_0002
Revises: 20240701_0001
Create Date: 2024-07-04 23:53:59.000000

"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "20240704_0002"
down_revision = "20240701_0001"
branch_labels = None
depends_on = None

_COLUMNS = {
    "object_type": sa.String(length=255),
    "position": sa.String(length=255),
    "scale": sa.String(length=255),
    "rotation": sa.String(length=255),
    "collider": sa.Text(),
}


def upgrade() -> None:
    # Ensure no NULL values exist
    for column in _COLUMNS:
        op.execute(f"UPDATE objects_v0 SET {column} = '' WHERE {column} IS NULL")

    with op.batch_alter_table("objects_v0") as batch_op:
        for column, type_ in _COLUMNS.items():
            batch_op.alter_column(column, existing_type=type_, nullable=False)


def downgrade() -> None:
    with op.batch_alter_table("objects_v0") as batch_op:
        for column, type_ in _COLUMNS.items():
            batch_op.alter_column(column, existing_type=type_, nullable=True)
