"""
Match records and compatibility scoring models.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field

from .pet_data import Pet


class PetScore(BaseModel):
    """Compatibility score for a single pet."""

    model_config = ConfigDict(populate_by_name=True)

    pet_id: str = Field(..., alias="petId", description="Scored pet identifier")
    score: float = Field(..., description="Compatibility score")


class LLMMatchReply(BaseModel):
    """Shape expected from the delegated scoring service."""

    matches: List[PetScore]


class ScoringResult(BaseModel):
    """Scores for a set of pets plus how they were produced."""

    scores: List[PetScore] = Field(default_factory=list)
    method: str = Field(
        default="heuristic",
        description="heuristic, llm, or fallback"
    )
    warning: Optional[Union[str, Dict[str, Any]]] = Field(
        default=None,
        description="Advisory note when scoring was degraded"
    )


class Match(BaseModel):
    """A scored association between a user and a pet."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "k3j9x0q2m1z8a",
                "petId": "a8d0s9f7g6h5j",
                "userId": "u7y6t5r4e3w2q",
                "score": 0.87,
                "status": "pending",
                "createdAt": "2024-05-01T12:00:00"
            }
        }
    )

    id: str = Field(..., description="Unique match identifier")
    pet_id: str = Field(..., alias="petId")
    user_id: str = Field(..., alias="userId")
    score: float = Field(..., ge=0, le=1, description="Compatibility score")
    status: str = Field(default="pending")
    created_at: datetime = Field(default_factory=datetime.utcnow, alias="createdAt")


class MatchWithPet(Match):
    """Match joined to its pet; the pet is None if it no longer resolves."""

    pet: Optional[Pet] = None
