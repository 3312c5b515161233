"""
Evaluation script for the PawMatch heuristic compatibility model.
Runs repeated trials over the sample catalog and summarizes score distributions.
"""

import argparse
import json
from typing import Any, Dict, List
import numpy as np
from loguru import logger

from pawmatch.models.compatibility_model import CompatibilityModel
from pawmatch.schemas.user_profile import UserProfile
from pawmatch.store import PetStore
from pawmatch.utils.sample_data import seed_sample_data

SAMPLE_PROFILES: List[Dict[str, Any]] = [
    {
        "id": "eval_active_dogs",
        "name": "Active Dog Lover",
        "email": "active@example.com",
        "preferences": ["Dogs"],
        "lifestyle": "Active",
        "experience": "Experienced",
    },
    {
        "id": "eval_relaxed_cats",
        "name": "Relaxed Cat Person",
        "email": "relaxed@example.com",
        "preferences": ["Cats", "Quiet"],
        "lifestyle": "Relaxed",
        "experience": "Some experience",
    },
    {
        "id": "eval_moderate_small",
        "name": "Small Animal Fan",
        "email": "small@example.com",
        "preferences": ["Small animals"],
        "lifestyle": "Moderate",
        "experience": "First-time owner",
    },
]


class ScoringEvaluator:
    """Evaluates heuristic scoring over many jittered trials."""

    def __init__(self, trials: int = 200, seed: int = 0):
        """Initialize the evaluator."""
        self.trials = trials
        self.model = CompatibilityModel(seed=seed)
        self.store = PetStore()
        seed_sample_data(self.store)

    def evaluate_profile(self, user: UserProfile) -> Dict[str, Dict[str, float]]:
        """
        Score the catalog repeatedly for one profile.

        Returns:
            Per pet type: mean, min and max score, and the mean deterministic
            score before jitter
        """
        pets = self.store.list_pets()
        samples: Dict[str, List[float]] = {}
        base: Dict[str, List[float]] = {}

        for pet in pets:
            base.setdefault(pet.type.value, []).append(self.model.base_compatibility(user, pet))

        for _ in range(self.trials):
            for pet in pets:
                score = self.model.calculate_compatibility_score(user, pet)
                samples.setdefault(pet.type.value, []).append(score)

        summary = {}
        for pet_type, values in samples.items():
            arr = np.array(values)
            summary[pet_type] = {
                "mean": round(float(arr.mean()), 3),
                "min": float(arr.min()),
                "max": float(arr.max()),
                "base_mean": round(float(np.mean(base[pet_type])), 3),
            }
        return summary

    def evaluate_all(self) -> Dict[str, Any]:
        """Evaluate every sample profile."""
        results = {}
        for profile in SAMPLE_PROFILES:
            user = UserProfile(**profile)
            logger.info(f"Evaluating {user.name} over {self.trials} trials")
            results[user.id] = self.evaluate_profile(user)
        return results


def main():
    """Main evaluation function."""
    parser = argparse.ArgumentParser(description="Evaluate PawMatch heuristic scoring")
    parser.add_argument("--trials", type=int, default=200, help="Trials per profile")
    parser.add_argument("--seed", type=int, default=0, help="Jitter seed")
    args = parser.parse_args()

    evaluator = ScoringEvaluator(trials=args.trials, seed=args.seed)
    results = evaluator.evaluate_all()

    print("\n=== PawMatch Heuristic Scoring Evaluation ===\n")
    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
