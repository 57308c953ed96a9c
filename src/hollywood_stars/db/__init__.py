"""
hollywood_stars.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the star document model, engine/session setup, and the record store.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on `repositories.stars.StarRepo`, never on ORM queries directly.
