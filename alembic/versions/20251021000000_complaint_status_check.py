"""Restrict complaints.status to Pending, In-Progress, Resolved.

Revision ID: 20251021000000
Revises: 20251020000000
Create Date: 2025-10-21

"""
from typing import Sequence, Union

from alembic import op

revision: str = "20251021000000"
down_revision: Union[str, None] = "20251020000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_check_constraint(
        "ck_complaints_status",
        "complaints",
        "status IN ('Pending', 'In-Progress', 'Resolved')",
    )


def downgrade() -> None:
    op.drop_constraint("ck_complaints_status", "complaints", type_="check")
