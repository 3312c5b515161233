"""
Helper utilities for PawMatch.
"""

import random
import string
from typing import Dict

from ..schemas.pet_data import Pet, PetSample

_ID_ALPHABET = string.digits + string.ascii_lowercase

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1517849845537-4d257902454a?q=80&w=400&auto=format&fit=crop"
)

DEFAULT_IMAGES_BY_TYPE: Dict[str, str] = {
    "Dog": "https://images.unsplash.com/photo-1543466835-00a7907e9de1?q=80&w=400&auto=format&fit=crop",
    "Cat": "https://images.unsplash.com/photo-1543852786-1cf6624b9987?q=80&w=400&auto=format&fit=crop",
    "Rabbit": "https://images.unsplash.com/photo-1535241749838-299277b6305f?q=80&w=400&auto=format&fit=crop",
    "Hamster": "https://images.unsplash.com/photo-1425082661705-1834bfd09dca?q=80&w=400&auto=format&fit=crop",
    "Bird": "https://images.unsplash.com/photo-1501720804996-ae418d1ba820?q=80&w=400&auto=format&fit=crop",
}


def generate_id(length: int = 13) -> str:
    """
    Generate a short random base-36 identifier.

    Not cryptographically secure and not checked for collisions.

    Args:
        length: Number of characters

    Returns:
        Identifier string
    """
    return "".join(random.choices(_ID_ALPHABET, k=length))


def get_default_image_for_type(pet_type: str) -> str:
    """
    Get the placeholder photo for a pet type.

    Args:
        pet_type: Pet type name (e.g. "Dog")

    Returns:
        Image URL, a generic one for unknown types
    """
    return DEFAULT_IMAGES_BY_TYPE.get(pet_type, DEFAULT_IMAGE_URL)


def clamp_score(score: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Clamp a score into [min_val, max_val] and round to 2 decimal places."""
    return round(max(min_val, min(max_val, float(score))), 2)


def format_pet_sample(pet: Pet) -> PetSample:
    """Summarize a pet for status reports."""
    return PetSample(id=pet.id, name=pet.name, type=pet.type.value)
