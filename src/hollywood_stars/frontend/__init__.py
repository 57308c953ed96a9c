"""
hollywood_stars.frontend

API-driven page client for the stars directory.

Responsibilities:
- `client`: HTTP calls against the `/hollywoodStars` API.
- `state`: immutable page state and its transitions.
- `page`: controller binding user actions to API calls.
- `view`: plain-text rendering of the table and edit form.
"""

# Package marker.
