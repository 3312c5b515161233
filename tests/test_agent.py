"""
End-to-end tests for the PawMatch service.
Tests the workflow from profile creation to ranked, recorded matches.
"""

import pytest
from unittest.mock import Mock

from pawmatch.agent import PawMatchService, UserNotFoundError, InitializationError, main
from pawmatch.config import Settings
from pawmatch.initializer import StoreInitializer
from pawmatch.schemas.pet_data import PetType
from pawmatch.store import PetStore
from pawmatch.utils.validators import MissingFieldsError


@pytest.fixture
def settings():
    return Settings(openai_api_key=None, random_seed=99, init_retry_delay=0)


@pytest.fixture
def service(settings):
    service = PawMatchService(settings=settings)
    service.initializer.ensure_initialized()
    return service


@pytest.fixture
def sample_user_data():
    return {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "preferences": ["Dogs"],
        "lifestyle": "Active",
        "experience": "Experienced",
    }


class TestServiceInitialization:
    """Service wiring."""

    def test_service_creation(self, service):
        assert service.store is not None
        assert service.initializer.store is service.store
        assert service.recommender.use_llm is False
        assert service.store.pet_count() == 12

    def test_initializer_takes_settings(self):
        settings = Settings(openai_api_key=None, init_max_retries=5, init_retry_delay=0.5)
        service = PawMatchService(settings=settings)

        assert service.initializer.max_retries == 5
        assert service.initializer.retry_delay == 0.5


class TestProfilesAndPets:
    """Creating users and pets through the service."""

    def test_create_user(self, service, sample_user_data):
        user = service.create_user(sample_user_data)

        assert user.id
        assert service.store.get_user(user.id) == user

    def test_create_user_invalid(self, service, sample_user_data):
        sample_user_data["preferences"] = []

        with pytest.raises(ValueError):
            service.create_user(sample_user_data)

    def test_create_pet_visible_in_list(self, service):
        pet = service.create_pet({
            "name": "Pip",
            "type": "Hamster",
            "age": 0.5,
            "description": "Tiny and fast.",
            "personality": ["Active"],
        })

        assert pet in service.list_pets()

    def test_create_pet_without_personality(self, service):
        with pytest.raises(MissingFieldsError) as exc_info:
            service.create_pet({"name": "Pip", "type": "Hamster", "age": 1, "description": "Tiny."})

        assert exc_info.value.missing == ["personality"]

    def test_create_user_missing_email(self, service, sample_user_data):
        sample_user_data["email"] = ""

        with pytest.raises(MissingFieldsError) as exc_info:
            service.create_user(sample_user_data)

        assert exc_info.value.missing == ["email"]
        assert service.store.user_count() == 0


class TestMatching:
    """Complete matching flow."""

    def test_find_matches(self, service, sample_user_data):
        user = service.create_user(sample_user_data)

        outcome = service.find_matches(user.id)

        assert len(outcome.matches) == 12
        assert outcome.warning == "Used fallback matching (OpenAI not available)"
        scores = [m.score for m in outcome.matches]
        assert scores == sorted(scores, reverse=True)

    def test_dogs_rank_high_for_active_dog_lover(self, service, sample_user_data):
        user = service.create_user(sample_user_data)

        outcome = service.find_matches(user.id)

        for match in outcome.matches:
            if match.pet.type == PetType.DOG:
                assert match.score >= 0.65
            else:
                assert match.score < 0.80

    def test_unknown_user(self, service):
        with pytest.raises(UserNotFoundError):
            service.find_matches("nobody")

    def test_no_pets_returns_empty(self, settings, sample_user_data):
        store = PetStore()
        service = PawMatchService(store=store, settings=settings)
        user = service.create_user(sample_user_data)
        # store verifies as populated but the pet list is gone by scoring time
        service.ensure_ready = Mock(return_value=True)

        outcome = service.find_matches(user.id)

        assert outcome.matches == []
        assert store.match_count() == 0

    def test_initialization_failure(self, settings, sample_user_data):
        store = PetStore()
        initializer = StoreInitializer(store, seeder=Mock(return_value=None), retry_delay=0)
        service = PawMatchService(store=store, initializer=initializer, settings=settings)
        user = service.create_user(sample_user_data)

        with pytest.raises(InitializationError):
            service.find_matches(user.id)

    def test_get_matches_after_find(self, service, sample_user_data):
        user = service.create_user(sample_user_data)
        outcome = service.find_matches(user.id)

        assert service.get_matches(user.id) == outcome.matches

    def test_matches_keep_history_by_default(self, service, sample_user_data):
        user = service.create_user(sample_user_data)
        service.find_matches(user.id)
        service.find_matches(user.id)

        assert len(service.get_matches(user.id)) == 24

    @pytest.mark.asyncio
    async def test_find_matches_async(self, service, sample_user_data):
        user = service.create_user(sample_user_data)

        outcome = await service.find_matches_async(user.id)

        assert len(outcome.matches) == 12
        assert service.store.match_count() == 12
        assert outcome.warning == "Used fallback matching (OpenAI not available)"

    def test_replace_mode_keeps_latest_only(self, sample_user_data):
        settings = Settings(openai_api_key=None, match_write_mode="replace")
        service = PawMatchService(settings=settings)
        user = service.create_user(sample_user_data)

        service.find_matches(user.id)
        service.find_matches(user.id)

        assert len(service.get_matches(user.id)) == 12

    def test_reseed_leaves_dangling_matches(self, service, sample_user_data):
        user = service.create_user(sample_user_data)
        service.find_matches(user.id)

        service.reload()

        assert all(m.pet is None for m in service.get_matches(user.id))


class TestStatus:
    """Read-only status and administrative reload."""

    def test_status(self, service):
        status = service.status()

        assert status["petCount"] == 12
        assert status["initialized"] is True
        assert len(status["petSample"]) == 3

    def test_reload_restores_catalog(self, service):
        service.store.clear_pets()

        assert service.reload() is True
        assert service.store.pet_count() == 12


class TestCommandLine:
    """The pawmatch console script."""

    def test_match_command(self, capsys):
        exit_code = main(["match", "--preferences", "Cats", "--lifestyle", "Relaxed"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Found 12 matches" in out
        assert "Match Score" in out

    def test_match_command_invalid_profile(self, capsys):
        exit_code = main(["match", "--lifestyle", "Chaotic"])

        assert exit_code == 1
        assert "Error" in capsys.readouterr().err
