"""
Domain layer - Customer entities and domain errors.

Framework-agnostic objects shared by the repository and HTTP layers.
"""
