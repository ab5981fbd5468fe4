"""Career recommendations built from ranked fit scores.

Public API:
    - RecommendationService: Rank a catalog and build recommendations
    - CareerRecommendation, LearningPath, LearningPhase: Output models
    - format_recommendation: Render a recommendation as text
"""

from career_fit.recommendations.models import (
    CareerRecommendation,
    JobMarketData,
    LearningPath,
    LearningPhase,
    RequiredSkill,
)
from career_fit.recommendations.service import RecommendationService, format_recommendation

__all__ = [
    "RecommendationService",
    "CareerRecommendation",
    "JobMarketData",
    "LearningPath",
    "LearningPhase",
    "RequiredSkill",
    "format_recommendation",
]
