"""
hollywood_stars.api

HTTP API package (FastAPI).

Responsibilities:
- App factory, dependency wiring, error rendering and routers.
"""

# Package marker.
