"""
event_catalog.api

API package for the Event Catalog service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.
