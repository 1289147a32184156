"""
event_catalog.api.routers

HTTP routers, one module per resource.
"""

# Package marker.
