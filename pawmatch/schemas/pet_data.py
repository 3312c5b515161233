"""
Pet data models and schemas.
"""

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PetType(str, Enum):
    """Types of pets."""
    DOG = "Dog"
    CAT = "Cat"
    RABBIT = "Rabbit"
    HAMSTER = "Hamster"
    BIRD = "Bird"
    OTHER = "Other"


class PetCreate(BaseModel):
    """Fields accepted when listing a new pet for adoption."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Max",
                "type": "Dog",
                "breed": "Golden Retriever",
                "age": 3,
                "description": "Max is a friendly and energetic Golden Retriever...",
                "imageUrl": "https://images.unsplash.com/photo-1552053831-71594a27632d",
                "personality": ["Friendly", "Energetic", "Loyal"]
            }
        }
    )

    name: str = Field(..., min_length=1, description="Pet name")
    type: PetType = Field(..., description="Species/type")
    breed: Optional[str] = Field(default=None, description="Primary breed")
    age: float = Field(..., ge=0, description="Age in years")
    description: str = Field(..., min_length=1, description="Detailed description")
    image_url: Optional[str] = Field(default=None, alias="imageUrl", description="Photo URL")
    personality: List[str] = Field(
        ...,
        min_length=1,
        description="Personality traits"
    )

    @field_validator("personality", mode="before")
    @classmethod
    def wrap_single_trait(cls, v):
        """Accept a single trait string as a one-element list."""
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("breed", mode="before")
    @classmethod
    def blank_breed_to_none(cls, v):
        """Treat an empty breed as unknown."""
        return v or None


class Pet(PetCreate):
    """Complete pet profile as held by the store."""

    id: str = Field(..., description="Unique pet identifier")

    def has_any_trait(self, traits) -> bool:
        """Check whether the pet's personality shares any of the given traits."""
        return any(trait in traits for trait in self.personality)


class PetSample(BaseModel):
    """Minimal pet summary for status reports."""

    id: str
    name: str
    type: str
