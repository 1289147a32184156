"""create events table and seed the default names

Revision ID: 0001
Revises:
Create Date: 2026-10-17 00:00:00
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import UTC, datetime

import sqlalchemy as sa
from alembic import op

from event_catalog.catalog import DEFAULT_EVENT_NAMES

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    events = op.create_table(
        "events",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_events"),
        sa.UniqueConstraint("name", name="uq_events_name"),
    )
    op.create_index("ix_events_position_created", "events", ["position", "created_at"])

    now = datetime.now(tz=UTC).replace(tzinfo=None)
    op.bulk_insert(
        events,
        [
            {"id": uuid.uuid4(), "name": name, "position": i, "created_at": now}
            for i, name in enumerate(DEFAULT_EVENT_NAMES)
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_events_position_created", table_name="events")
    op.drop_table("events")
