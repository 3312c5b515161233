"""
Heuristic compatibility model for pet matching.
Rule-based bonuses on top of a base score, plus a small random jitter.
"""

import numpy as np
from typing import List, Optional, Set, Tuple
from loguru import logger

from ..schemas.pet_data import Pet, PetType
from ..schemas.user_profile import UserProfile, Lifestyle
from ..schemas.match_data import PetScore
from ..utils.helpers import clamp_score

# Preference labels that cover a group of pet types
TYPE_PREFERENCE_GROUPS = {
    "Dogs": {PetType.DOG},
    "Cats": {PetType.CAT},
    "Small animals": {PetType.RABBIT, PetType.HAMSTER, PetType.BIRD},
}

# Checked in order; only the first tier matching the lifestyle can apply
ACTIVITY_TIERS: List[Tuple[Set[Lifestyle], Set[str]]] = [
    ({Lifestyle.VERY_ACTIVE, Lifestyle.ACTIVE}, {"Energetic", "Active", "Playful"}),
    ({Lifestyle.MODERATE}, {"Friendly", "Social", "Gentle"}),
    ({Lifestyle.RELAXED, Lifestyle.SEDENTARY}, {"Calm", "Quiet", "Independent"}),
]


class CompatibilityModel:
    """
    Scores user/pet compatibility with fixed bonuses and random jitter.

    The jitter comes from ``rng``; pass a seeded ``numpy.random.Generator``
    (or ``seed``) to make scores reproducible.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        model_version: str = "1.0",
    ):
        """Initialize the compatibility model."""
        self.model_version = model_version
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.base_score = 0.5
        self.bonuses = {
            "type_preference": 0.15,
            "activity": 0.10,
        }
        self.jitter_range = 0.15
        self.min_score = 0.30
        self.max_score = 0.95

    def type_bonus(self, user: UserProfile, pet: Pet) -> float:
        """Bonus when the user asked for this kind of animal."""
        if pet.type.value in user.preferences:
            return self.bonuses["type_preference"]

        for label, types in TYPE_PREFERENCE_GROUPS.items():
            if label in user.preferences and pet.type in types:
                return self.bonuses["type_preference"]

        return 0.0

    def activity_bonus(self, user: UserProfile, pet: Pet) -> float:
        """Bonus when the pet's temperament suits the user's lifestyle."""
        for lifestyles, traits in ACTIVITY_TIERS:
            if user.lifestyle in lifestyles:
                if pet.has_any_trait(traits):
                    return self.bonuses["activity"]
                return 0.0
        return 0.0

    def base_compatibility(self, user: UserProfile, pet: Pet) -> float:
        """Deterministic part of the score, before jitter and clamping."""
        return self.base_score + self.type_bonus(user, pet) + self.activity_bonus(user, pet)

    def calculate_compatibility_score(self, user: UserProfile, pet: Pet) -> float:
        """
        Calculate compatibility score between a user and a pet.

        Args:
            user: User profile
            pet: Pet to score

        Returns:
            Score clamped to [0.30, 0.95] and rounded to 2 decimals
        """
        score = self.base_compatibility(user, pet)
        score += float(self.rng.uniform(0.0, self.jitter_range))
        return clamp_score(score, self.min_score, self.max_score)

    def score_pets(self, user: UserProfile, pets: List[Pet]) -> List[PetScore]:
        """
        Score every pet for a user.

        Args:
            user: User profile
            pets: Candidate pets

        Returns:
            One PetScore per pet, in input order
        """
        scores = [
            PetScore(pet_id=pet.id, score=self.calculate_compatibility_score(user, pet))
            for pet in pets
        ]
        logger.debug(f"Heuristic scored {len(scores)} pets for user {user.id}")
        return scores
