"""
In-memory entity store for pets, users and matches.

The store lives for the lifetime of the process. One instance is created per
application and handed to the service layer; nothing here is module-global.
"""

from typing import Callable, Dict, List, Optional
from loguru import logger

from .schemas.pet_data import Pet, PetCreate
from .schemas.user_profile import UserCreate, UserProfile
from .schemas.match_data import Match, MatchWithPet
from .utils.helpers import generate_id


class PetStore:
    """
    Plain list-backed store with create/read accessors.

    No indexing, no uniqueness constraints and no locking: duplicate match
    rows for the same (user, pet) pair are allowed.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_id):
        self._id_factory = id_factory
        self._pets: List[Pet] = []
        self._users: List[UserProfile] = []
        self._matches: List[Match] = []

    # Pets

    def pet_count(self) -> int:
        return len(self._pets)

    def list_pets(self) -> List[Pet]:
        """Return all pets, unfiltered and unpaginated."""
        return list(self._pets)

    def get_pet(self, pet_id: str) -> Optional[Pet]:
        return next((pet for pet in self._pets if pet.id == pet_id), None)

    def create_pet(self, pet: PetCreate) -> Pet:
        new_pet = Pet(**pet.model_dump(), id=self._id_factory())
        self._pets.append(new_pet)
        return new_pet

    def clear_pets(self) -> None:
        """Remove every pet. Users and matches are left alone."""
        logger.debug(f"Clearing {len(self._pets)} pets")
        self._pets = []

    # Users

    def create_user(self, user: UserCreate) -> UserProfile:
        new_user = UserProfile(**user.model_dump(), id=self._id_factory())
        self._users.append(new_user)
        return new_user

    def get_user(self, user_id: str) -> Optional[UserProfile]:
        return next((user for user in self._users if user.id == user_id), None)

    def user_count(self) -> int:
        return len(self._users)

    # Matches

    def record_match(
        self,
        pet_id: str,
        user_id: str,
        score: float,
        status: str = "pending"
    ) -> Match:
        """Append a match record unconditionally; no deduplication."""
        match = Match(
            id=self._id_factory(),
            pet_id=pet_id,
            user_id=user_id,
            score=score,
            status=status,
        )
        self._matches.append(match)
        return match

    def matches_for_user(self, user_id: str) -> List[MatchWithPet]:
        """
        Get a user's matches joined to their pets, best score first.

        A match whose pet no longer resolves is returned with ``pet=None``.
        """
        # reversed so the first pet wins on an id collision, like get_pet
        pets_by_id: Dict[str, Pet] = {pet.id: pet for pet in reversed(self._pets)}
        joined = [
            MatchWithPet(**match.model_dump(), pet=pets_by_id.get(match.pet_id))
            for match in self._matches
            if match.user_id == user_id
        ]
        joined.sort(key=lambda m: m.score, reverse=True)
        return joined

    def clear_matches_for_user(self, user_id: str) -> int:
        """Drop a user's matches. Returns how many were removed."""
        before = len(self._matches)
        self._matches = [m for m in self._matches if m.user_id != user_id]
        return before - len(self._matches)

    def match_count(self) -> int:
        return len(self._matches)
