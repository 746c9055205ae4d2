"""baseline worksite registry schema

Revision ID: 0001_baseline
Revises:
Create Date: 2026-10-18

One table per entity. Cross-entity references are plain id strings.
"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_baseline"
down_revision = None
branch_labels = None
depends_on = None


def _id_column() -> sa.Column:
    return sa.Column("id", sa.String(32), nullable=False)


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def _flag_columns() -> list[sa.Column]:
    return [
        sa.Column("is_active", sa.Boolean(), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=True),
    ]


def _create_common_indexes(table: str, flags: bool = False) -> None:
    op.create_index(f"ix_{table}_created_at", table, ["created_at"])
    if flags:
        op.create_index(f"ix_{table}_is_deleted", table, ["is_deleted"])


def upgrade() -> None:
    op.create_table(
        "customers",
        _id_column(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        *_flag_columns(),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_customers_email"),
    )
    _create_common_indexes("customers", flags=True)

    op.create_table(
        "managers",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("admin", sa.String(32), nullable=True),
        *_flag_columns(),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_common_indexes("managers", flags=True)

    op.create_table(
        "service_companies",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("map", sa.Text(), nullable=True),
        sa.Column("url", sa.String(500), nullable=True),
        *_flag_columns(),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_common_indexes("service_companies", flags=True)

    op.create_table(
        "timesheets",
        _id_column(),
        sa.Column("activity", sa.String(32), nullable=False),
        sa.Column("worker", sa.String(32), nullable=False),
        sa.Column("manager", sa.String(32), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("hours_spent", sa.Float(), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("file", sa.String(500), nullable=False),
        sa.Column("is_pending", sa.Boolean(), nullable=True),
        sa.Column("is_rejected", sa.Boolean(), nullable=True),
        sa.Column("is_accepted", sa.Boolean(), nullable=True),
        sa.Column("is_resubmitted", sa.Boolean(), nullable=True),
        sa.Column("rejection_reason", sa.JSON(), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_common_indexes("timesheets")
    op.create_index("ix_timesheets_activity", "timesheets", ["activity"])
    op.create_index("ix_timesheets_worker", "timesheets", ["worker"])
    op.create_index("ix_timesheets_manager", "timesheets", ["manager"])

    op.create_table(
        "project_statuses",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(32), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_common_indexes("project_statuses")

    op.create_table(
        "location_types",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_common_indexes("location_types")

    op.create_table(
        "locations",
        _id_column(),
        sa.Column("custom_id", sa.String(100), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.String(50), nullable=True),
        sa.Column("longitude", sa.String(50), nullable=True),
        sa.Column("map", sa.Text(), nullable=True),
        sa.Column("nation", sa.String(255), nullable=False),
        sa.Column("street", sa.String(500), nullable=True),
        sa.Column("owner", sa.String(255), nullable=True),
        sa.Column("province", sa.String(255), nullable=False),
        sa.Column("region", sa.String(255), nullable=False),
        sa.Column("image", sa.String(255), nullable=True),
        sa.Column("location_managers", sa.JSON(), nullable=True),
        sa.Column("location_type", sa.String(32), nullable=False),
        sa.Column("is_near_another_location", sa.Boolean(), nullable=True),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_common_indexes("locations")
    op.create_index("ix_locations_location_type", "locations", ["location_type"])

    op.create_table(
        "projects",
        _id_column(),
        sa.Column("custom_id", sa.String(100), nullable=True),
        sa.Column("prev_custom_id", sa.String(100), nullable=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("customer", sa.String(32), nullable=False),
        sa.Column("location", sa.String(32), nullable=False),
        sa.Column("project_manager", sa.String(32), nullable=False),
        sa.Column("admin", sa.String(32), nullable=True),
        sa.Column("status", sa.String(32), nullable=True),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("task", sa.String(255), nullable=False),
        sa.Column("order_number", sa.String(100), nullable=False),
        sa.Column("assignment_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("scheda_radio_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status_history", sa.JSON(), nullable=True),
        *_flag_columns(),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_common_indexes("projects", flags=True)
    op.create_index("ix_projects_customer", "projects", ["customer"])
    op.create_index("ix_projects_location", "projects", ["location"])


def downgrade() -> None:
    for table in (
        "projects",
        "locations",
        "location_types",
        "project_statuses",
        "timesheets",
        "service_companies",
        "managers",
        "customers",
    ):
        op.drop_table(table)
