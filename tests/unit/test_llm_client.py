"""
Unit tests for the OpenAI-backed LLMScoringClient.
"""

import json
import pytest
from unittest.mock import MagicMock
from openai import APIConnectionError

from pawmatch.utils.llm_client import LLMScoringClient, LLMScoringError
from pawmatch.schemas.pet_data import Pet
from pawmatch.schemas.user_profile import UserProfile


def completion_with(content):
    """Build a fake chat completion carrying the given message content."""
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = content
    return completion


class TestLLMScoringClient:
    """Unit tests for LLMScoringClient."""

    @pytest.fixture
    def openai_client(self):
        return MagicMock()

    @pytest.fixture
    def client(self, openai_client):
        return LLMScoringClient(model="gpt-test", client=openai_client)

    @pytest.fixture
    def user(self):
        return UserProfile(
            id="user_001",
            name="Test User",
            email="test@example.com",
            preferences=["Dogs", "High energy"],
            lifestyle="Very Active",
            experience="Professional",
        )

    @pytest.fixture
    def pets(self):
        return [
            Pet(id="p1", name="Max", type="Dog", breed="Golden Retriever", age=3,
                description="Friendly retriever.", personality=["Friendly", "Energetic"]),
            Pet(id="p2", name="Luna", type="Cat", breed="Siamese", age=2,
                description="Quiet cat.", personality=["Quiet"]),
        ]

    def test_prompt_mentions_user_and_every_pet(self, client, user, pets):
        prompt = client.build_prompt(user, pets)

        assert "Dogs, High energy" in prompt
        assert "Very Active" in prompt
        assert "Professional" in prompt
        for pet in pets:
            assert f"Pet ID: {pet.id}" in prompt
            assert pet.description in prompt
        assert '"matches"' in prompt

    def test_score_pets_sends_json_request(self, client, openai_client, user, pets):
        openai_client.chat.completions.create.return_value = completion_with(
            json.dumps({"matches": [{"petId": "p1", "score": 0.91}, {"petId": "p2", "score": 0.4}]})
        )

        scores = client.score_pets(user, pets)

        assert [(s.pet_id, s.score) for s in scores] == [("p1", 0.91), ("p2", 0.4)]
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][0]["role"] == "user"

    def test_transport_error_wrapped(self, client, openai_client, user, pets):
        openai_client.chat.completions.create.side_effect = APIConnectionError(request=MagicMock())

        with pytest.raises(LLMScoringError):
            client.score_pets(user, pets)

    def test_no_choices(self, client, openai_client, user, pets):
        completion = MagicMock()
        completion.choices = []
        openai_client.chat.completions.create.return_value = completion

        with pytest.raises(LLMScoringError):
            client.score_pets(user, pets)

    @pytest.mark.parametrize("content", [
        None,
        "",
        "not json at all",
        json.dumps({"results": []}),
        json.dumps({"matches": [{"id": "p1", "value": 0.5}]}),
        json.dumps({"matches": [{"petId": "unknown", "score": 0.5}]}),
    ])
    def test_unusable_replies_raise(self, client, pets, content):
        with pytest.raises(LLMScoringError):
            client.parse_response(content, pets)

    def test_scores_clamped_and_rounded(self, client, pets):
        content = json.dumps({"matches": [
            {"petId": "p1", "score": 1.7},
            {"petId": "p2", "score": "0.456"},
        ]})

        scores = client.parse_response(content, pets)

        assert [s.score for s in scores] == [1.0, 0.46]

    def test_unknown_and_duplicate_ids_dropped(self, client, pets):
        content = json.dumps({"matches": [
            {"petId": "p1", "score": 0.8},
            {"petId": "ghost", "score": 0.9},
            {"petId": "p1", "score": 0.2},
        ]})

        scores = client.parse_response(content, pets)

        assert [(s.pet_id, s.score) for s in scores] == [("p1", 0.8)]
