"""
Unit tests for input validators.
"""

import pytest

from pawmatch.schemas.pet_data import PetType
from pawmatch.utils.helpers import DEFAULT_IMAGE_URL, DEFAULT_IMAGES_BY_TYPE, generate_id
from pawmatch.utils.validators import (
    MissingFieldsError,
    find_missing_fields,
    require_fields,
    sanitize_string,
    validate_pet_data,
    validate_user_input,
)


@pytest.fixture
def pet_data():
    return {
        "name": "Biscuit",
        "type": "Dog",
        "age": 5,
        "description": "Loves naps.",
        "personality": ["Calm", "Gentle"],
    }


@pytest.fixture
def user_data():
    return {
        "name": "Sam",
        "email": "sam@example.com",
        "preferences": ["Dogs", "Quiet"],
        "lifestyle": "Moderate",
        "experience": "First-time owner",
    }


class TestPetValidation:
    """Tests for validate_pet_data."""

    def test_valid_pet(self, pet_data):
        is_valid, error, pet = validate_pet_data(pet_data)

        assert is_valid is True
        assert error is None
        assert pet.type == PetType.DOG
        assert pet.image_url == DEFAULT_IMAGES_BY_TYPE["Dog"]

    def test_missing_personality_rejected(self, pet_data):
        del pet_data["personality"]

        is_valid, error, pet = validate_pet_data(pet_data)

        assert is_valid is False
        assert "personality" in error
        assert pet is None

    def test_empty_personality_rejected(self, pet_data):
        pet_data["personality"] = []

        is_valid, _, _ = validate_pet_data(pet_data)

        assert is_valid is False

    def test_single_trait_wrapped(self, pet_data):
        pet_data["personality"] = "Calm"

        _, _, pet = validate_pet_data(pet_data)

        assert pet.personality == ["Calm"]

    def test_age_zero_allowed(self, pet_data):
        pet_data["age"] = 0

        is_valid, _, pet = validate_pet_data(pet_data)

        assert is_valid is True
        assert pet.age == 0

    def test_negative_age_rejected(self, pet_data):
        pet_data["age"] = -1

        is_valid, _, _ = validate_pet_data(pet_data)

        assert is_valid is False

    def test_unknown_type_rejected(self, pet_data):
        pet_data["type"] = "Dragon"

        is_valid, _, _ = validate_pet_data(pet_data)

        assert is_valid is False

    def test_other_type_gets_generic_image(self, pet_data):
        pet_data["type"] = "Other"

        _, _, pet = validate_pet_data(pet_data)

        assert pet.image_url == DEFAULT_IMAGE_URL

    def test_supplied_image_kept(self, pet_data):
        pet_data["imageUrl"] = "https://example.com/biscuit.jpg"

        _, _, pet = validate_pet_data(pet_data)

        assert pet.image_url == "https://example.com/biscuit.jpg"

    def test_input_not_mutated(self, pet_data):
        pet_data["name"] = "  Biscuit  "

        _, _, pet = validate_pet_data(pet_data)

        assert pet.name == "Biscuit"
        assert pet_data["name"] == "  Biscuit  "


class TestUserValidation:
    """Tests for validate_user_input."""

    def test_valid_user(self, user_data):
        is_valid, error, user = validate_user_input(user_data)

        assert is_valid is True
        assert user.preferences == ["Dogs", "Quiet"]

    @pytest.mark.parametrize("field", ["name", "email", "preferences", "lifestyle", "experience"])
    def test_missing_field_rejected(self, user_data, field):
        del user_data[field]

        is_valid, error, user = validate_user_input(user_data)

        assert is_valid is False
        assert field in error
        assert user is None

    def test_empty_preferences_rejected(self, user_data):
        user_data["preferences"] = []

        is_valid, _, _ = validate_user_input(user_data)

        assert is_valid is False

    def test_blank_preferences_rejected(self, user_data):
        user_data["preferences"] = ["  "]

        is_valid, _, _ = validate_user_input(user_data)

        assert is_valid is False

    def test_bad_email_rejected(self, user_data):
        user_data["email"] = "not-an-email"

        is_valid, _, _ = validate_user_input(user_data)

        assert is_valid is False

    def test_unknown_lifestyle_rejected(self, user_data):
        user_data["lifestyle"] = "Chaotic"

        is_valid, _, _ = validate_user_input(user_data)

        assert is_valid is False


class TestHelpers:
    """Tests for small helpers."""

    def test_find_missing_fields(self):
        data = {"a": "x", "b": "", "c": 0, "d": [], "e": None}

        assert find_missing_fields(data, ["a", "b", "c", "d", "e", "f"]) == ["b", "d", "e", "f"]

    def test_sanitize_string(self):
        assert sanitize_string("  hi\x00there  ") == "hithere"
        assert sanitize_string("abcdef", max_length=3) == "abc"

    def test_generate_id(self):
        ids = {generate_id() for _ in range(100)}

        assert len(ids) == 100
        assert all(len(i) == 13 and i.isalnum() and i == i.lower() for i in ids)

    def test_require_fields_lists_missing(self, pet_data):
        del pet_data["personality"]
        pet_data["description"] = ""

        with pytest.raises(MissingFieldsError) as exc_info:
            require_fields(pet_data, ["name", "type", "age", "description", "personality"])

        assert exc_info.value.missing == ["description", "personality"]
        assert exc_info.value.required == ["name", "type", "age", "description", "personality"]
        assert isinstance(exc_info.value, ValueError)

    def test_require_fields_accepts_complete_data(self, user_data):
        assert require_fields(user_data, list(user_data)) is None
