"""Initial schema — users, plants, guardianships.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

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
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "plants",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "owner_user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_plants_owner_user_id", "plants", ["owner_user_id"])

    op.create_table(
        "guardianships",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "plant_id", sa.Integer,
            sa.ForeignKey("plants.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "guardian_user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("end_date >= start_date", name="ck_guardianships_care_period"),
    )
    op.create_index("ix_guardianships_plant_id", "guardianships", ["plant_id"])
    op.create_index("ix_guardianships_guardian_user_id", "guardianships", ["guardian_user_id"])


def downgrade() -> None:
    op.drop_index("ix_guardianships_guardian_user_id", table_name="guardianships")
    op.drop_index("ix_guardianships_plant_id", table_name="guardianships")
    op.drop_table("guardianships")
    op.drop_index("ix_plants_owner_user_id", table_name="plants")
    op.drop_table("plants")
    op.drop_table("users")
