"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Start every test with fresh config, settings and logging."""
    from career_fit.config.settings import reset_settings
    from career_fit.scoring.config import reset_scoring_config
    from career_fit.utils.logging import reset_logging

    reset_scoring_config()
    reset_settings()
    reset_logging()
    yield
    reset_scoring_config()
    reset_settings()
    reset_logging()


@pytest.fixture
def scoring_config():
    """Scoring config with defaults only (no .env file)."""
    from career_fit.scoring.config import ScoringConfig

    return ScoringConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def analyzer(scoring_config):
    from career_fit.scoring.matchers import SemanticSkillAnalyzer

    return SemanticSkillAnalyzer(config=scoring_config)


@pytest.fixture
def engine(scoring_config, analyzer):
    from career_fit.scoring.service import ScoringEngine

    return ScoringEngine(config=scoring_config, analyzer=analyzer)


@pytest.fixture
def make_profile():
    """Factory for UserProfile objects."""
    from career_fit.scoring.models import ResumeInfo, UserProfile, WorkExperience

    def _make(
        skills=None,
        career_interest="",
        education_level="",
        experience=None,
        resume_skills=None,
        with_resume=False,
    ):
        resume = None
        if with_resume or experience is not None or resume_skills is not None:
            resume = ResumeInfo(
                skills=list(resume_skills or []),
                experience=[
                    WorkExperience(description=description)
                    for description in (experience or [])
                ],
            )
        return UserProfile(
            name="Test User",
            skills=list(skills or []),
            career_interest=career_interest,
            education_level=education_level,
            resume=resume,
        )

    return _make


@pytest.fixture
def make_career():
    """Factory for CareerProfile objects.

    `required` and `preferred` are lists of (skill, importance) pairs.
    """
    from career_fit.scoring.models import CareerProfile, SkillRequirement

    def _make(
        career_id="career",
        title="Role",
        category="Technology",
        subcategory="General",
        required=(("Python", "critical"),),
        preferred=(),
        experience_level="entry",
        keywords=(),
        description="",
        industry_trends=None,
        work_style=(),
    ):
        data = {
            "id": career_id,
            "title": title,
            "description": description,
            "category": category,
            "subcategory": subcategory,
            "required_skills": [
                SkillRequirement(skill=skill, importance=importance)
                for skill, importance in required
            ],
            "preferred_skills": [
                SkillRequirement(skill=skill, importance=importance)
                for skill, importance in preferred
            ],
            "experience_level": experience_level,
            "keywords": list(keywords),
            "work_environment": {"work_style": list(work_style)},
        }
        if industry_trends is not None:
            data["industry_trends"] = industry_trends
        return CareerProfile.model_validate(data)

    return _make


@pytest.fixture
def make_ranked(make_career):
    """Factory for RankedCareer objects with a fixed fit and confidence."""
    from career_fit.scoring.models import (
        COMPONENT_NAMES,
        ComponentScore,
        DetailedFitScore,
        FitComponents,
        RankedCareer,
    )

    def _make(career_id, category, subcategory, overall_fit, confidence=1.0):
        component = ComponentScore(
            score=float(overall_fit),
            weight=1 / len(COMPONENT_NAMES),
            confidence=confidence,
        )
        score = DetailedFitScore(
            overall_fit=overall_fit,
            components=FitComponents(**{name: component for name in COMPONENT_NAMES}),
            confidence=confidence,
        )
        career = make_career(
            career_id=career_id, category=category, subcategory=subcategory
        )
        return RankedCareer(career=career, score=score)

    return _make
