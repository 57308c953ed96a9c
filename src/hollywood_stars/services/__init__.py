"""
hollywood_stars.services

Service layer.

Responsibilities:
- Own transactions and translate store outcomes into API-facing results.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: they parse HTTP inputs and delegate to services.
