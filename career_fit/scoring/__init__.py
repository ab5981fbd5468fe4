"""Fit scoring and skill matching.

This module scores how well catalog careers fit a user by combining six
weighted component scores, and ranks the results for diversity.

Public API:
    - SemanticSkillAnalyzer: Tiered skill matching
    - ScoringEngine: Detailed fit scoring
    - RecommendationRanker: Viability filtering and diversified ranking
    - ProfileService: Load and validate user profiles and assessments
    - ScoringConfig: Configuration settings
"""

from career_fit.scoring.config import ScoringConfig, get_scoring_config, reset_scoring_config
from career_fit.scoring.matchers import (
    SemanticSkillAnalyzer,
    find_matching_skills,
    normalize_skill,
)
from career_fit.scoring.models import (
    CareerAssessmentData,
    CareerProfile,
    ComponentScore,
    DetailedFitScore,
    Education,
    ExperienceLevel,
    Importance,
    MatchQuality,
    MatchType,
    RankedCareer,
    ResumeInfo,
    ScoringFactor,
    ScoringWeights,
    SkillMatch,
    SkillMatchResult,
    SkillRequirement,
    UserProfile,
    WorkExperience,
)
from career_fit.scoring.profile import ProfileService
from career_fit.scoring.ranking import RecommendationRanker
from career_fit.scoring.service import ScoringEngine
from career_fit.scoring.taxonomy import SkillTaxonomy, get_default_taxonomy

__all__ = [
    "SemanticSkillAnalyzer",
    "ScoringEngine",
    "RecommendationRanker",
    "ProfileService",
    "SkillTaxonomy",
    "get_default_taxonomy",
    "normalize_skill",
    "find_matching_skills",
    "UserProfile",
    "WorkExperience",
    "Education",
    "ResumeInfo",
    "CareerAssessmentData",
    "CareerProfile",
    "SkillRequirement",
    "Importance",
    "ExperienceLevel",
    "MatchType",
    "MatchQuality",
    "SkillMatch",
    "SkillMatchResult",
    "ScoringWeights",
    "ScoringFactor",
    "ComponentScore",
    "DetailedFitScore",
    "RankedCareer",
    "ScoringConfig",
    "get_scoring_config",
    "reset_scoring_config",
]
