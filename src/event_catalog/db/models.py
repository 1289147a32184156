"""
event_catalog.db.models

Persistence schema for listed events.

Responsibilities:
- Declare the metadata shared with Alembic (with a constraint naming convention).
- Define the `Event` ORM model read by the model event source.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import Index, MetaData, String, Uuid as SAUuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Migrations name constraints explicitly; these patterns keep autogenerate in agreement.
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _utcnow() -> datetime:
    # Stored as naive UTC.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class Event(Base):
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    # Display order; `EventRepo.all` sorts on it.
    position: Mapped[int] = mapped_column(nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    __table_args__ = (Index("ix_events_position_created", "position", "created_at"),)


# --- Module Notes -----------------------------------------------------------
# The initial Alembic revision (`alembic/versions/0001_create_events.py`) mirrors
# this table by hand; change both together.
