"""Configuration settings for the fit scoring engine."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Fit scoring configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `SCORING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Base weights (must sum to 1.0); per-profile adjustments are applied on top
    weight_skill_match: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.30,
        description="Base weight for skill match",
    )
    weight_interest_alignment: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.25,
        description="Base weight for interest alignment",
    )
    weight_experience_relevance: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.20,
        description="Base weight for experience relevance",
    )
    weight_value_alignment: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.15,
        description="Base weight for value alignment",
    )
    weight_market_viability: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.05,
        description="Base weight for market viability",
    )
    weight_learning_curve: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.05,
        description="Base weight for learning curve",
    )

    # Weight adjustment triggers
    experienced_years: Annotated[int, Field(ge=0)] = Field(
        default=5,
        description="Years of experience above which a user counts as experienced",
    )
    junior_years: Annotated[int, Field(ge=0)] = Field(
        default=2,
        description="Years of experience below which a user counts as junior",
    )
    completeness_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.5,
        description="Profile completeness below which skill matching dominates",
    )

    # Skill match tiers
    semantic_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.8,
        description="Similarity a semantic (synonym) match must exceed",
    )
    transferable_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.6,
        description="Similarity a transferable (same category) match must exceed",
    )
    fuzzy_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.7,
        description="Similarity a fuzzy (edit distance) match must exceed",
    )
    missing_skill_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.5,
        description="Best similarity at or below which a required skill is missing",
    )
    suggestion_limit: Annotated[int, Field(gt=0)] = Field(
        default=10,
        description="Maximum number of skill suggestions returned",
    )

    # Ranking
    min_fit_score: Annotated[int, Field(ge=0, le=100)] = Field(
        default=35,
        description="Viability floor: careers scoring below this are dropped",
    )
    max_results: Annotated[int, Field(gt=0)] = Field(
        default=8,
        description="Maximum number of ranked recommendations",
    )
    category_slots: Annotated[int, Field(gt=0)] = Field(
        default=6,
        description="Slots filled with at most one career per category",
    )

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> ScoringConfig:
        """Ensure base weights sum to 1.0 (within tolerance)."""
        weight_sum = (
            self.weight_skill_match
            + self.weight_interest_alignment
            + self.weight_experience_relevance
            + self.weight_value_alignment
            + self.weight_market_viability
            + self.weight_learning_curve
        )
        if abs(weight_sum - 1.0) > 1e-6:
            raise ValueError(
                "Scoring weights must sum to 1.0. "
                f"Got {weight_sum:.6f} "
                f"(skill_match={self.weight_skill_match}, "
                f"interest_alignment={self.weight_interest_alignment}, "
                f"experience_relevance={self.weight_experience_relevance}, "
                f"value_alignment={self.weight_value_alignment}, "
                f"market_viability={self.weight_market_viability}, "
                f"learning_curve={self.weight_learning_curve})."
            )
        return self

    @model_validator(mode="after")
    def validate_ranking_slots(self) -> ScoringConfig:
        """Ensure the category pass fits inside the result size."""
        if self.category_slots > self.max_results:
            raise ValueError(
                f"category_slots ({self.category_slots}) cannot exceed "
                f"max_results ({self.max_results})"
            )
        return self

    def base_weights(self) -> dict[str, float]:
        """Return the base weights keyed by component name."""
        return {
            "skill_match": self.weight_skill_match,
            "interest_alignment": self.weight_interest_alignment,
            "experience_relevance": self.weight_experience_relevance,
            "value_alignment": self.weight_value_alignment,
            "market_viability": self.weight_market_viability,
            "learning_curve": self.weight_learning_curve,
        }


# Singleton instance for easy import
_scoring_config: ScoringConfig | None = None


def get_scoring_config() -> ScoringConfig:
    """Get the scoring configuration singleton."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig()
    return _scoring_config


def reset_scoring_config() -> None:
    """Reset the scoring configuration singleton (useful for testing)."""
    global _scoring_config
    _scoring_config = None
