"""Fields, time slots and field schedules."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _identity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.Uuid(as_uuid=True), nullable=False),
    ]


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "fields",
        *_identity_columns(),
        sa.Column("code", sa.String(15), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price_per_hour", sa.Integer(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        *_timestamp_columns(),
        sa.UniqueConstraint("code", name="uq_fields_code"),
    )
    op.create_index("ix_fields_uuid", "fields", ["uuid"], unique=True)

    op.create_table(
        "times",
        *_identity_columns(),
        sa.Column("start_time", sa.Time(timezone=False), nullable=False),
        sa.Column("end_time", sa.Time(timezone=False), nullable=False),
        *_timestamp_columns(),
    )
    op.create_index("ix_times_uuid", "times", ["uuid"], unique=True)

    op.create_table(
        "field_schedules",
        *_identity_columns(),
        sa.Column(
            "field_id",
            sa.Integer(),
            sa.ForeignKey("fields.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "time_id",
            sa.Integer(),
            sa.ForeignKey("times.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("AVAILABLE", "BOOKED", name="fieldschedulestatus"),
            nullable=False,
        ),
        *_timestamp_columns(),
        sa.UniqueConstraint(
            "field_id", "date", "time_id", name="uq_field_schedules_field_date_time"
        ),
    )
    op.create_index("ix_field_schedules_uuid", "field_schedules", ["uuid"], unique=True)
    op.create_index("ix_field_schedules_field_id", "field_schedules", ["field_id"])


def downgrade() -> None:
    op.drop_index("ix_field_schedules_field_id", table_name="field_schedules")
    op.drop_index("ix_field_schedules_uuid", table_name="field_schedules")
    op.drop_table("field_schedules")
    op.drop_index("ix_times_uuid", table_name="times")
    op.drop_table("times")
    op.drop_index("ix_fields_uuid", table_name="fields")
    op.drop_table("fields")
    sa.Enum(name="fieldschedulestatus").drop(op.get_bind(), checkfirst=True)
