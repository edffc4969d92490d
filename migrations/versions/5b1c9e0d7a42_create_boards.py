"""create boards

Revision ID: 5b1c9e0d7a42
Revises:
Create Date: 2026-02-14 11:20:37.102311

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5b1c9e0d7a42'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONDocument = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade():
    op.create_table(
        "boards",
        sa.Column("project_id", sa.String(), primary_key=True),
        sa.Column("cards", JSONDocument, nullable=True, server_default="[]"),
        sa.Column("steps", JSONDocument, nullable=True, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

def downgrade():
    op.drop_table("boards")
