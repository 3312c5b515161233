"""
User profile and preferences data models.
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field, EmailStr, field_validator


class Lifestyle(str, Enum):
    """How active the prospective adopter's daily life is."""
    VERY_ACTIVE = "Very Active"
    ACTIVE = "Active"
    MODERATE = "Moderate"
    RELAXED = "Relaxed"
    SEDENTARY = "Sedentary"


class ExperienceLevel(str, Enum):
    """Pet ownership experience levels."""
    FIRST_TIME = "First-time owner"
    SOME_EXPERIENCE = "Some experience"
    EXPERIENCED = "Experienced"
    PROFESSIONAL = "Professional"


# Preference labels offered by the matching form. Preferences are free text,
# these are only the ones the scorer gives meaning to or the form suggests.
PREFERENCE_OPTIONS = [
    "Dogs",
    "Cats",
    "Small animals",
    "Good with children",
    "Low maintenance",
    "High energy",
    "Quiet",
    "Outdoor-loving",
    "Indoor-only",
]


class UserCreate(BaseModel):
    """Profile submitted by a prospective adopter."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
                "preferences": ["Dogs", "High energy"],
                "lifestyle": "Active",
                "experience": "Experienced"
            }
        }
    )

    name: str = Field(..., min_length=1, description="Full name")
    email: EmailStr = Field(..., description="User email address")
    preferences: List[str] = Field(
        ...,
        min_length=1,
        description="Ordered preference labels"
    )
    lifestyle: Lifestyle = Field(..., description="Activity level of the household")
    experience: ExperienceLevel = Field(..., description="Pet ownership experience level")

    @field_validator("preferences")
    @classmethod
    def drop_blank_preferences(cls, v: List[str]) -> List[str]:
        """Strip whitespace and require at least one non-blank label."""
        cleaned = [p.strip() for p in v if p and p.strip()]
        if not cleaned:
            raise ValueError("at least one preference is required")
        return cleaned


class UserProfile(UserCreate):
    """Complete user profile."""

    id: str = Field(..., description="Unique user identifier")
