"""
hollywood_stars.domain

Domain schemas shared by the service layer and the API.
"""

# Package marker.
