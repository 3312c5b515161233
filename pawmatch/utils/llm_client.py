"""
Delegated compatibility scoring through the OpenAI chat completions API.
"""

from typing import List, Optional
from loguru import logger
from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from ..config import get_settings
from ..schemas.pet_data import Pet
from ..schemas.user_profile import UserProfile
from ..schemas.match_data import LLMMatchReply, PetScore
from .helpers import clamp_score


class LLMScoringError(Exception):
    """The delegated scoring call failed or returned something unusable."""


class LLMScoringClient:
    """
    Asks a language model to score user/pet compatibility.

    One request per call, no retries. Any failure is raised as
    LLMScoringError so the caller can fall back to the heuristic model.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[OpenAI] = None,
    ):
        settings = get_settings()
        self.model = model or settings.openai_model
        self.client = client or OpenAI(
            api_key=api_key or settings.openai_api_key,
            timeout=timeout or settings.openai_timeout,
        )
        logger.info(f"OpenAI scoring client initialized: {self.model}")

    def build_prompt(self, user: UserProfile, pets: List[Pet]) -> str:
        """Describe the user and every candidate pet for the model."""
        pet_sections = "\n".join(
            f"""
      Pet ID: {pet.id}
      Type: {pet.type.value}
      Breed: {pet.breed}
      Age: {pet.age:g}
      Personality traits: {', '.join(pet.personality)}
      Description: {pet.description}
      """
            for pet in pets
        )

        return f"""Given a user with the following preferences and characteristics:
      - Preferences: {', '.join(user.preferences)}
      - Lifestyle: {user.lifestyle.value}
      - Pet experience: {user.experience.value}

      Please analyze the compatibility with these pets and provide a compatibility score (0-1) for each:
      {pet_sections}

      Provide the response as a JSON object with a "matches" property containing an array of objects with "petId" and "score" properties."""

    def score_pets(self, user: UserProfile, pets: List[Pet]) -> List[PetScore]:
        """
        Score pets with the language model.

        Args:
            user: User profile
            pets: Candidate pets

        Returns:
            Scores for the pets the model rated, at most one per pet

        Raises:
            LLMScoringError: On transport errors or an unusable reply
        """
        prompt = self.build_prompt(user, pets)

        logger.info(f"Sending scoring request to OpenAI for {len(pets)} pets")
        try:
            completion = self.client.chat.completions.create(
                messages=[{"role": "user", "content": prompt}],
                model=self.model,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            raise LLMScoringError(f"OpenAI request failed: {e}") from e

        if not completion.choices:
            raise LLMScoringError("OpenAI returned no choices")

        content = completion.choices[0].message.content
        logger.info(f"OpenAI response received: {'yes' if content else 'no'}")
        return self.parse_response(content, pets)

    def parse_response(self, content: Optional[str], pets: List[Pet]) -> List[PetScore]:
        """
        Parse the model's JSON reply into scores for known pets.

        Unknown pet ids and repeated entries are dropped; scores are clamped
        to [0, 1] and rounded to 2 decimals.

        Raises:
            LLMScoringError: If the reply is empty, malformed or scores no known pet
        """
        if not content:
            raise LLMScoringError("OpenAI returned an empty response")

        try:
            reply = LLMMatchReply.model_validate_json(content)
        except ValidationError as e:
            raise LLMScoringError(f"Could not parse OpenAI response: {e}") from e

        known_ids = {pet.id for pet in pets}
        seen = set()
        scores = []
        for entry in reply.matches:
            if entry.pet_id not in known_ids:
                logger.warning(f"Ignoring score for unknown pet id {entry.pet_id}")
                continue
            if entry.pet_id in seen:
                continue
            seen.add(entry.pet_id)
            scores.append(
                PetScore(pet_id=entry.pet_id, score=clamp_score(entry.score))
            )

        if not scores:
            raise LLMScoringError("OpenAI response contained no scores for known pets")

        logger.info(f"Parsed {len(scores)} scores from OpenAI response")
        return scores
