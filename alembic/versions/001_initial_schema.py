"""initial_schema

Year counters, recycled appointment IDs and telecalling records.

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - create all tables, indexes, and constraints."""

    # Year counters table (one row per year, seq starts at baseline)
    op.create_table(
        "year_counters",
        sa.Column("key", sa.String(length=50), nullable=False),
        sa.Column(
            "seq", sa.BigInteger(), nullable=False, server_default="10000000"
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("key"),
    )

    # Recycled appointment IDs
    op.create_table(
        "recycled_ids",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_recycled_ids_year", "recycled_ids", ["year"])

    # Telecalling records
    op.create_table(
        "telecalling_records",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("appointment_id", sa.String(length=32), nullable=True),
        sa.Column(
            "status",
            sa.Enum("draft", "active", name="recordstatus"),
            nullable=False,
        ),
        sa.Column("car_registration_number", sa.String(length=32), nullable=False),
        sa.Column("year_of_registration", sa.String(length=8), nullable=False),
        sa.Column("owner_name", sa.String(length=255), nullable=False),
        sa.Column("ownership_serial_number", sa.Integer(), nullable=False),
        sa.Column("make", sa.String(length=100), nullable=False),
        sa.Column("vehicle_model", sa.String(length=100), nullable=False),
        sa.Column("variant", sa.String(length=100), nullable=False),
        sa.Column("year_of_manufacture", sa.String(length=8), nullable=True),
        sa.Column("odometer_reading_in_kms", sa.Float(), nullable=True),
        sa.Column("email_address", sa.String(length=255), nullable=True),
        sa.Column("customer_contact_number", sa.String(length=20), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("zip_code", sa.String(length=12), nullable=True),
        sa.Column("appointment_source", sa.String(length=100), nullable=True),
        sa.Column("vehicle_status", sa.String(length=100), nullable=True),
        sa.Column("allocated_to", sa.String(length=255), nullable=True),
        sa.Column("inspection_status", sa.String(length=50), nullable=False),
        sa.Column("approval_status", sa.String(length=50), nullable=False),
        sa.Column("priority", sa.String(length=20), nullable=False),
        sa.Column("inspection_date_time", sa.DateTime(), nullable=True),
        sa.Column("inspection_address", sa.String(length=500), nullable=True),
        sa.Column("inspection_engineer_number", sa.String(length=20), nullable=True),
        sa.Column("ncd_ucd_name", sa.String(length=255), nullable=True),
        sa.Column("rep_name", sa.String(length=255), nullable=True),
        sa.Column("rep_contact", sa.String(length=20), nullable=True),
        sa.Column("bank_source", sa.String(length=100), nullable=True),
        sa.Column("reference_name", sa.String(length=255), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=True),
        sa.Column("additional_notes", sa.Text(), nullable=True),
        sa.Column(
            "added_by",
            sa.Enum("Customer", "Telecaller", name="addedby"),
            nullable=False,
        ),
        sa.Column("created_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_telecalling_records_appointment_id",
        "telecalling_records",
        ["appointment_id"],
        unique=True,
    )
    op.create_index(
        "ix_telecalling_records_status", "telecalling_records", ["status"]
    )
    op.create_index(
        "ix_telecalling_records_created_at", "telecalling_records", ["created_at"]
    )


def downgrade() -> None:
    """Downgrade schema - drop all tables."""
    op.drop_index("ix_telecalling_records_created_at", "telecalling_records")
    op.drop_index("ix_telecalling_records_status", "telecalling_records")
    op.drop_index("ix_telecalling_records_appointment_id", "telecalling_records")
    op.drop_table("telecalling_records")
    op.drop_index("ix_recycled_ids_year", "recycled_ids")
    op.drop_table("recycled_ids")
    op.drop_table("year_counters")
    sa.Enum(name="addedby").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="recordstatus").drop(op.get_bind(), checkfirst=True)
