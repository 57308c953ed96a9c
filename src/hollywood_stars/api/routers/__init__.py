"""
hollywood_stars.api.routers

Router package; `api.app` includes each router explicitly.
"""
