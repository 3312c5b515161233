"""Utility modules for PawMatch."""

from .validators import validate_user_input, validate_pet_data
from .helpers import generate_id, get_default_image_for_type

__all__ = [
    "validate_user_input",
    "validate_pet_data",
    "generate_id",
    "get_default_image_for_type",
]
