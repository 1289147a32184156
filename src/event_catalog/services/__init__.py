"""
event_catalog.services

Service-layer package.

Responsibilities:
- Build view models from event sources; routers only delegate here.
"""

# Package marker.
