"""
Input validation and sanitization utilities.
"""

from typing import Any, Dict, List, Optional
from pydantic import ValidationError
from loguru import logger

from ..schemas.user_profile import UserCreate
from ..schemas.pet_data import PetCreate
from .helpers import get_default_image_for_type

PET_REQUIRED_FIELDS = ["name", "type", "age", "description", "personality"]
USER_REQUIRED_FIELDS = ["name", "email", "preferences", "lifestyle", "experience"]


class MissingFieldsError(ValueError):
    """Required fields are absent or empty."""

    def __init__(self, missing: List[str], required: List[str]):
        self.missing = missing
        self.required = required
        super().__init__(f"Missing required fields: {', '.join(missing)}")


def sanitize_string(value: str, max_length: int = 1000) -> str:
    """
    Sanitize string input.

    Args:
        value: Input string
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if not isinstance(value, str):
        return str(value)

    # Remove null bytes
    value = value.replace("\x00", "")

    # Truncate to max length
    value = value[:max_length]

    # Strip leading/trailing whitespace
    value = value.strip()

    return value


def find_missing_fields(data: Dict[str, Any], required: List[str]) -> List[str]:
    """
    List required fields that are absent or empty.

    A numeric zero counts as present so a pet aged 0 can be listed.

    Args:
        data: Request data dictionary
        required: Field names that must be present

    Returns:
        Names of the missing fields, in the order given
    """
    missing = []
    for field in required:
        value = data.get(field)
        if value is None:
            missing.append(field)
        elif isinstance(value, bool):
            continue
        elif isinstance(value, (int, float)):
            continue
        elif not value:
            missing.append(field)
    return missing


def require_fields(data: Dict[str, Any], required: List[str]) -> None:
    """
    Raise if any required field is absent or empty.

    Raises:
        MissingFieldsError: Listing the missing fields
    """
    missing = find_missing_fields(data, required)
    if missing:
        raise MissingFieldsError(missing, required)


def validate_pet_data(data: Dict[str, Any]) -> tuple[bool, Optional[str], Optional[PetCreate]]:
    """
    Validate pet data.

    Args:
        data: Pet data dictionary

    Returns:
        Tuple of (is_valid, error_message, pet)
    """
    try:
        data = dict(data)

        # Sanitize string fields
        if "name" in data:
            data["name"] = sanitize_string(data["name"], 100)
        if "description" in data:
            data["description"] = sanitize_string(data["description"], 5000)

        pet = PetCreate(**data)
        if not pet.image_url:
            pet.image_url = get_default_image_for_type(pet.type.value)
        return True, None, pet

    except ValidationError as e:
        logger.warning(f"Pet data validation failed: {e}")
        return False, str(e), None


def validate_user_input(data: Dict[str, Any]) -> tuple[bool, Optional[str], Optional[UserCreate]]:
    """
    Validate user input data.

    Args:
        data: User profile data dictionary

    Returns:
        Tuple of (is_valid, error_message, user)
    """
    try:
        data = dict(data)
        if "name" in data:
            data["name"] = sanitize_string(data["name"], 100)

        user = UserCreate(**data)
        return True, None, user

    except ValidationError as e:
        logger.warning(f"User input validation failed: {e}")
        return False, str(e), None
