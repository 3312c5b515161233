"""Data schemas and models for PawMatch."""

from .user_profile import UserProfile, UserCreate, Lifestyle, ExperienceLevel
from .pet_data import Pet, PetCreate, PetSample, PetType
from .match_data import Match, MatchWithPet, PetScore, ScoringResult

__all__ = [
    "UserProfile",
    "UserCreate",
    "Lifestyle",
    "ExperienceLevel",
    "Pet",
    "PetCreate",
    "PetSample",
    "PetType",
    "Match",
    "MatchWithPet",
    "PetScore",
    "ScoringResult",
]
