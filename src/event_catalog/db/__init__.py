"""
event_catalog.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM model, engine/session setup, and repositories backing the
  model event source.
"""

# Package marker.
