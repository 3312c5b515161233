"""
PawMatch - Pet Adoption Matching Service

This package contains the matching service, its in-memory store and seeding
initializer, and the compatibility scoring agents behind the HTTP API.
"""

__version__ = "1.0.0"

from .agent import PawMatchService

__all__ = ["PawMatchService"]
