"""Create patients table

Revision ID: 001
Revises:
Create Date: 2026-03-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the patients table with the email unique constraint."""
    op.create_table(
        "patients",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("address", sa.String(512), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("registered_date", sa.Date(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "INACTIVE", name="patientstatus"),
            nullable=False,
        ),
        sa.Column("deactivated_date", sa.Date(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_patients")),
        sa.UniqueConstraint("email", name=op.f("uq_patients_email")),
        sa.CheckConstraint(
            "(status = 'INACTIVE') = (deactivated_date IS NOT NULL)",
            name=op.f("ck_patients_deactivated_date_matches_status"),
        ),
    )
    op.create_index("ix_patients_name", "patients", ["name"], unique=False)
    op.create_index("ix_patients_status", "patients", ["status"], unique=False)


def downgrade() -> None:
    """Drop the patients table."""
    op.drop_index("ix_patients_status", table_name="patients")
    op.drop_index("ix_patients_name", table_name="patients")
    op.drop_table("patients")

    # Drop enum type
    sa.Enum(name="patientstatus").drop(op.get_bind(), checkfirst=True)
