"""
hollywood_stars

Top-level package for the Hollywood Stars directory service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; the API app and the page client import from submodules.
