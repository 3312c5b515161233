"""
PawMatch Service - Orchestrator
Coordinates the store, the initializer and the recommendation agent.
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional, Tuple
from loguru import logger

from .config import Settings, get_settings
from .store import PetStore
from .initializer import StoreInitializer
from .sub_agents.recommendation_agent import RecommendationAgent
from .schemas.pet_data import Pet
from .schemas.user_profile import UserProfile, PREFERENCE_OPTIONS
from .schemas.match_data import MatchWithPet, ScoringResult
from .utils.helpers import format_pet_sample
from .utils.validators import (
    PET_REQUIRED_FIELDS,
    USER_REQUIRED_FIELDS,
    require_fields,
    validate_pet_data,
    validate_user_input,
)


class UserNotFoundError(LookupError):
    """No user with the requested id exists."""


class InitializationError(RuntimeError):
    """The store is still empty after a forced re-initialization."""


class MatchOutcome:
    """Matches returned to a caller, plus any scoring advisory."""

    def __init__(self, matches: List[MatchWithPet], scoring: Optional[ScoringResult] = None):
        self.matches = matches
        self.scoring = scoring

    @property
    def warning(self):
        return self.scoring.warning if self.scoring else None


class PawMatchService:
    """
    Main orchestrator for the matching workflow.

    Owns one PetStore and its initializer; construct once per process and
    share the instance with every request handler.
    """

    def __init__(
        self,
        store: Optional[PetStore] = None,
        initializer: Optional[StoreInitializer] = None,
        recommender: Optional[RecommendationAgent] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the service and its sub-systems."""
        logger.info("Initializing PawMatch service")
        self.settings = settings or get_settings()
        self.store = store or PetStore()
        self.initializer = initializer or StoreInitializer(
            self.store,
            max_retries=self.settings.init_max_retries,
            retry_delay=self.settings.init_retry_delay,
        )
        self.recommender = recommender or RecommendationAgent(settings=self.settings)

    def ensure_ready(self) -> bool:
        """Force a re-initialization if the store is empty. True when pets exist."""
        if self.initializer.verify():
            return True
        logger.info("Initialization verification failed, forcing reinitialization")
        self.initializer.ensure_initialized(force=True)
        return self.initializer.verify()

    def list_pets(self) -> List[Pet]:
        self.ensure_ready()
        return self.store.list_pets()

    def create_pet(self, data: Dict[str, Any]) -> Pet:
        """
        Validate and add a pet.

        Raises:
            MissingFieldsError: If a required field is absent or empty
            ValueError: If validation fails
        """
        self.ensure_ready()
        require_fields(data, PET_REQUIRED_FIELDS)
        is_valid, error_msg, pet_data = validate_pet_data(data)
        if not is_valid:
            logger.warning(f"Invalid pet data: {error_msg}")
            raise ValueError(error_msg)

        pet = self.store.create_pet(pet_data)
        logger.info(f"Created new pet: {pet.name} ({pet.type.value})")
        return pet

    def create_user(self, data: Dict[str, Any]) -> UserProfile:
        """
        Validate and register a user profile.

        Raises:
            MissingFieldsError: If a required field is absent or empty
            ValueError: If validation fails
        """
        require_fields(data, USER_REQUIRED_FIELDS)
        is_valid, error_msg, user_data = validate_user_input(data)
        if not is_valid:
            logger.warning(f"Invalid user data: {error_msg}")
            raise ValueError(error_msg)

        user = self.store.create_user(user_data)
        logger.info(f"User created with ID: {user.id}")
        return user

    def find_matches(self, user_id: str, force_reload: bool = False) -> MatchOutcome:
        """
        Score every pet for a user, record the matches and return them.

        Args:
            user_id: User identifier
            force_reload: Reseed the sample catalog first

        Returns:
            MatchOutcome with the user's matches, best first

        Raises:
            InitializationError: If the store cannot be populated
            UserNotFoundError: If the user id does not resolve
        """
        user, pets = self._prepare_match(user_id, force_reload)
        if not pets:
            return MatchOutcome(matches=[])

        scoring = self.recommender.score(user, pets)
        return self._record_matches(user_id, scoring)

    async def find_matches_async(self, user_id: str, force_reload: bool = False) -> MatchOutcome:
        """
        Same as find_matches, for use inside a running event loop.

        Scoring runs in the default executor; store reads and writes stay
        on the loop thread.
        """
        user, pets = self._prepare_match(user_id, force_reload)
        if not pets:
            return MatchOutcome(matches=[])

        # Run in executor to avoid blocking
        loop = asyncio.get_event_loop()
        scoring = await loop.run_in_executor(None, self.recommender.score, user, pets)
        return self._record_matches(user_id, scoring)

    def _prepare_match(self, user_id: str, force_reload: bool) -> Tuple[UserProfile, List[Pet]]:
        if not self.ensure_ready():
            raise InitializationError("System initialization failed. Please try again later.")

        if force_reload:
            logger.info("Force reloading sample data before matching")
            self.initializer.seeder(self.store, True)

        user = self.store.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        pets = self.store.list_pets()
        logger.info(f"Match request for user {user_id}: {len(pets)} pets available")
        return user, pets

    def _record_matches(self, user_id: str, scoring: ScoringResult) -> MatchOutcome:
        if self.settings.match_write_mode == "replace":
            removed = self.store.clear_matches_for_user(user_id)
            logger.debug(f"Replaced {removed} prior matches for user {user_id}")

        for pet_score in scoring.scores:
            self.store.record_match(
                pet_id=pet_score.pet_id,
                user_id=user_id,
                score=pet_score.score,
                status="pending",
            )

        matches = self.store.matches_for_user(user_id)
        logger.info(f"Generated {len(scoring.scores)} matches ({scoring.method}); {len(matches)} on record")
        return MatchOutcome(matches=matches, scoring=scoring)

    def get_matches(self, user_id: str) -> List[MatchWithPet]:
        """Previously recorded matches for a user, best first."""
        if not self.ensure_ready():
            raise InitializationError("System initialization failed. Please try again later.")

        matches = self.store.matches_for_user(user_id)
        if not matches:
            logger.info(f"No matches found for user {user_id}")
        return matches

    def status(self) -> Dict[str, Any]:
        """Read-only snapshot of the store and initializer."""
        pets = self.store.list_pets()
        return {
            "status": "ok",
            "petCount": len(pets),
            "petSample": [
                format_pet_sample(pet).model_dump()
                for pet in pets[: self.settings.pet_sample_size]
            ],
            **self.initializer.status(),
        }

    def reload(self) -> bool:
        """Force a reseed and re-initialization. Administrative; mutates state."""
        logger.info("Force reloading sample data")
        return self.initializer.ensure_initialized(force=True)


# Main entry point for command-line usage
def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point: serve the API or score the sample catalog for one profile."""
    parser = argparse.ArgumentParser(description="PawMatch pet adoption matching")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Bind port")

    match = subparsers.add_parser("match", help="Print ranked matches for a profile")
    match.add_argument("--name", default="Test User", help="Adopter name")
    match.add_argument("--email", default="test@example.com", help="Adopter email")
    match.add_argument(
        "--preferences",
        nargs="+",
        default=["Dogs"],
        help=f"Preference labels, e.g. {', '.join(PREFERENCE_OPTIONS[:3])}",
    )
    match.add_argument("--lifestyle", default="Active", help="Very Active, Active, Moderate, Relaxed or Sedentary")
    match.add_argument("--experience", default="Some experience", help="Pet ownership experience")

    args = parser.parse_args(argv)
    settings = get_settings()

    if args.command == "serve":
        import uvicorn

        uvicorn.run(
            "pawmatch.api:app",
            host=args.host or settings.api_host,
            port=args.port or settings.api_port,
            log_level=settings.log_level.lower(),
        )
        return 0

    service = PawMatchService(settings=settings)
    service.initializer.ensure_initialized()

    try:
        user = service.create_user({
            "name": args.name,
            "email": args.email,
            "preferences": args.preferences,
            "lifestyle": args.lifestyle,
            "experience": args.experience,
        })
        outcome = service.find_matches(user.id)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\n=== PawMatch - Pet Recommendations ===\n")
    print(f"Found {len(outcome.matches)} matches for {user.name}\n")
    if outcome.warning:
        print(f"Note: {outcome.warning}\n")

    for i, match in enumerate(outcome.matches, 1):
        pet = match.pet
        if pet is None:
            continue
        print(f"{i}. {pet.name} - {pet.breed or pet.type.value}")
        print(f"   Match Score: {match.score:.0%}")
        print(f"   {service.recommender.get_recommendation_level(match.score)}")
        print(f"   Personality: {', '.join(pet.personality)}")
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
