"""
Recommendation Agent - Matching Intelligence
Scores pets for a user, delegating to a language model when one is configured.
"""

from typing import List, Optional
from loguru import logger

from ..config import Settings, get_settings
from ..schemas.pet_data import Pet
from ..schemas.user_profile import UserProfile
from ..schemas.match_data import PetScore, ScoringResult
from ..models.compatibility_model import CompatibilityModel
from ..utils.llm_client import LLMScoringClient

NO_LLM_WARNING = "Used fallback matching (OpenAI not available)"


class RecommendationAgent:
    """
    Specialized agent for compatibility scoring.

    Uses the LLM scoring client when an OpenAI key is configured and the
    heuristic CompatibilityModel otherwise, or whenever the delegated call fails.
    """

    def __init__(
        self,
        model: Optional[CompatibilityModel] = None,
        llm_client: Optional[LLMScoringClient] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the recommendation agent."""
        self.settings = settings or get_settings()
        self.model = model or CompatibilityModel(seed=self.settings.random_seed)
        self.llm_client = llm_client

        if self.llm_client is None and self.settings.has_openai():
            try:
                self.llm_client = LLMScoringClient(
                    api_key=self.settings.openai_api_key,
                    model=self.settings.openai_model,
                    timeout=self.settings.openai_timeout,
                )
            except Exception as e:
                logger.error(f"Failed to initialize OpenAI client: {e}")
                self.llm_client = None
        elif self.llm_client is None:
            logger.warning("OpenAI API key is missing; using heuristic matching only")

    @property
    def use_llm(self) -> bool:
        return self.llm_client is not None

    def score(self, user: UserProfile, pets: List[Pet]) -> ScoringResult:
        """
        Score every pet for a user.

        Never raises for delegated-scoring problems: those fall back to the
        heuristic model and are reported in ``warning``.

        Args:
            user: User profile
            pets: Candidate pets

        Returns:
            ScoringResult with exactly one score per pet
        """
        if not pets:
            return ScoringResult(scores=[], method="heuristic")

        if not self.use_llm:
            logger.info("Using fallback matching (no OpenAI client)")
            return ScoringResult(
                scores=self.model.score_pets(user, pets),
                method="fallback",
                warning=NO_LLM_WARNING,
            )

        try:
            delegated = self.llm_client.score_pets(user, pets)
        except Exception as e:
            logger.warning(f"Delegated scoring failed: {e}. Falling back to heuristic matching.")
            return ScoringResult(
                scores=self.model.score_pets(user, pets),
                method="fallback",
                warning={
                    "error": "Failed to generate AI-powered matches",
                    "details": str(e),
                    "fallback": "Using default matching algorithm instead",
                },
            )

        return self._fill_missing(user, pets, delegated)

    def _fill_missing(
        self,
        user: UserProfile,
        pets: List[Pet],
        delegated: List[PetScore]
    ) -> ScoringResult:
        """Score heuristically any pets the model left out."""
        scored = {s.pet_id: s for s in delegated}
        missing = [pet for pet in pets if pet.id not in scored]

        if not missing:
            return ScoringResult(
                scores=[scored[pet.id] for pet in pets],
                method="llm",
            )

        logger.warning(f"OpenAI omitted {len(missing)} pets; scoring them heuristically")
        for fallback_score in self.model.score_pets(user, missing):
            scored[fallback_score.pet_id] = fallback_score

        return ScoringResult(
            scores=[scored[pet.id] for pet in pets],
            method="llm",
            warning=f"Delegated scoring omitted {len(missing)} pets; they were scored with the default algorithm",
        )

    def get_recommendation_level(self, score: float) -> str:
        """Get recommendation level based on score."""
        if score >= 0.85:
            return "Excellent Match - Highly Recommended"
        elif score >= 0.70:
            return "Great Match - Strongly Recommended"
        elif score >= 0.60:
            return "Good Match - Recommended"
        elif score >= 0.50:
            return "Fair Match - Consider with Caution"
        else:
            return "Poor Match - Not Recommended"
