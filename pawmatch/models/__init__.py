"""Scoring models for PawMatch."""

from .compatibility_model import CompatibilityModel

__all__ = ["CompatibilityModel"]
