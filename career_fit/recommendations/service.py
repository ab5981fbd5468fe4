"""Build presentable career recommendations from ranked fit scores."""

from __future__ import annotations

import re
from collections.abc import Iterable

from career_fit.recommendations.models import (
    CareerRecommendation,
    JobMarketData,
    LearningPath,
    LearningPhase,
    RequiredSkill,
)
from career_fit.scoring.matchers import find_matching_skills
from career_fit.scoring.models import (
    CareerAssessmentData,
    CareerProfile,
    DetailedFitScore,
    ExperienceLevel,
    Importance,
    ProficiencyLevel,
    RankedCareer,
    UserProfile,
)
from career_fit.scoring.ranking import RecommendationRanker
from career_fit.utils.logging import get_logger

logger = get_logger("recommendations")

PHASE_DURATIONS: dict[ProficiencyLevel, str] = {
    ProficiencyLevel.BEGINNER: "2-4 weeks",
    ProficiencyLevel.INTERMEDIATE: "6-8 weeks",
    ProficiencyLevel.ADVANCED: "3-4 months",
    ProficiencyLevel.EXPERT: "6-12 months",
}
PHASE_HOURS: dict[ProficiencyLevel, int] = {
    ProficiencyLevel.BEGINNER: 40,
    ProficiencyLevel.INTERMEDIATE: 80,
    ProficiencyLevel.ADVANCED: 160,
    ProficiencyLevel.EXPERT: 320,
}
COST_PER_PHASE = 500


class RecommendationService:
    """Rank a catalog for a user and explain each result."""

    def __init__(self, ranker: RecommendationRanker | None = None) -> None:
        self.ranker = ranker or RecommendationRanker()

    @property
    def analyzer(self):
        return self.ranker.engine.analyzer

    def generate_recommendations(
        self,
        profile: UserProfile,
        catalog: Iterable[CareerProfile],
        assessment: CareerAssessmentData | None = None,
    ) -> list[CareerRecommendation]:
        """Return up to `max_results` recommendations, best first."""
        ranked = self.ranker.rank_all(profile, catalog, assessment)
        recommendations = [self.build_recommendation(item, profile) for item in ranked]
        logger.info("Generated %d recommendations", len(recommendations))
        return recommendations

    def build_recommendation(
        self, ranked: RankedCareer, profile: UserProfile
    ) -> CareerRecommendation:
        career, score = ranked.career, ranked.score
        trends = career.industry_trends
        salary = career.salary_range

        return CareerRecommendation(
            id=career.id,
            title=career.title,
            description=career.description,
            fit_score=score.overall_fit,
            confidence=score.confidence,
            match_quality=score.match_quality,
            experience_level=career.experience_level,
            salary_range=salary,
            growth_prospects=career.growth_prospects,
            required_skills=[
                RequiredSkill(
                    id=f"skill_{_slug(requirement.skill)}",
                    name=requirement.skill,
                    category=requirement.category,
                    is_required=requirement.importance == Importance.CRITICAL,
                    priority=requirement.importance,
                )
                for requirement in career.required_skills
            ],
            job_market=JobMarketData(
                demand=trends.demand,
                competitiveness=trends.competitiveness,
                locations=_locations(career),
                industry_growth=trends.growth_percent,
                average_salary=(salary.min + salary.max) / 2,
            ),
            related_roles=list(career.related_careers),
            summary=personalized_summary(career, score),
            learning_path=self.build_learning_path(career, profile),
            reasoning=list(score.reasoning),
        )

    def build_learning_path(
        self, career: CareerProfile, profile: UserProfile
    ) -> LearningPath:
        """One phase per required skill the user is still missing."""
        _, missing_names = find_matching_skills(
            [requirement.skill for requirement in career.required_skills],
            profile.all_skills(),
            self.analyzer,
        )
        missing_set = set(missing_names)
        missing = [r for r in career.required_skills if r.skill in missing_set]

        phases = [
            LearningPhase(
                id=f"phase_{order}",
                order=order,
                title=f"Learn {requirement.skill}",
                description=(
                    f"Develop {requirement.proficiency_level.value} level proficiency "
                    f"in {requirement.skill}"
                ),
                duration=PHASE_DURATIONS.get(requirement.proficiency_level, "4-6 weeks"),
                priority=requirement.importance,
                proficiency_level=requirement.proficiency_level,
                skills=[requirement.skill],
                estimated_hours=PHASE_HOURS.get(requirement.proficiency_level, 60),
            )
            for order, requirement in enumerate(missing, start=1)
        ]

        return LearningPath(
            id=f"path_{career.id}",
            title=f"{career.title} Learning Path",
            description=f"Personalized learning path to become job-ready for {career.title}",
            total_duration=total_duration(len(phases)),
            phases=phases,
            estimated_cost=len(phases) * COST_PER_PHASE,
            difficulty=path_difficulty(len(missing), career.experience_level),
            prerequisites=prerequisites_for(career),
            outcomes=[
                f"Job-ready for {career.title}",
                "Industry-relevant skills",
                "Portfolio projects",
            ],
        )


def personalized_summary(career: CareerProfile, score: DetailedFitScore) -> str:
    components = score.components
    parts = [
        f"This {career.title} role is a {score.match_quality.value} match for your profile."
    ]

    if components.skill_match.score > 70:
        parts.append("Your existing skills align well with the requirements.")
    elif components.skill_match.score > 40:
        parts.append("You have a solid foundation with some skills to develop.")
    else:
        parts.append("This role offers growth opportunities with focused skill development.")

    if components.experience_relevance.score > 70:
        parts.append("Your experience level is well-suited for this position.")
    if components.market_viability.score > 80:
        parts.append("The job market outlook is excellent with strong growth prospects.")

    return " ".join(parts)


def total_duration(phase_count: int) -> str:
    if phase_count == 0:
        return "0 weeks"
    if phase_count <= 2:
        return "2-3 months"
    if phase_count <= 4:
        return "4-6 months"
    return "6-12 months"


def path_difficulty(missing_count: int, level: ExperienceLevel) -> str:
    if level == ExperienceLevel.ENTRY and missing_count <= 3:
        return "beginner"
    if level == ExperienceLevel.SENIOR or missing_count > 5:
        return "advanced"
    return "intermediate"


def prerequisites_for(career: CareerProfile) -> list[str]:
    prerequisites: list[str] = []
    if career.category == "Technology":
        prerequisites.extend(["Basic computer literacy", "Problem-solving mindset"])
    if career.subcategory == "Software Development":
        prerequisites.extend(["Logical thinking", "Attention to detail"])
    if career.experience_level == ExperienceLevel.SENIOR:
        prerequisites.extend(["Leadership experience", "Industry knowledge"])
    return prerequisites


def format_recommendation(recommendation: CareerRecommendation, rank: int | None = None) -> str:
    """Render a recommendation as plain text for the terminal."""
    heading = recommendation.title
    if rank is not None:
        heading = f"{rank}. {heading}"
    salary = recommendation.salary_range
    path = recommendation.learning_path

    lines = [
        heading,
        f"   Fit: {recommendation.fit_score}/100 ({recommendation.match_quality.value}, "
        f"confidence {recommendation.confidence:.2f})",
        f"   Salary: {salary.min:,}-{salary.max:,} {salary.currency} {salary.period}",
        f"   Market: {recommendation.job_market.demand.value} demand, "
        f"{recommendation.job_market.industry_growth:g}% growth",
        f"   {recommendation.summary}",
    ]
    if path.phases:
        skills = ", ".join(phase.skills[0] for phase in path.phases)
        lines.append(
            f"   Learning path: {len(path.phases)} skills to learn ({skills}), "
            f"about {path.total_duration}"
        )
    else:
        lines.append("   Learning path: no skill gaps found")
    return "\n".join(lines)


def _locations(career: CareerProfile) -> list[str]:
    if career.work_environment.remote:
        return ["Remote", "Hybrid", "On-site"]
    return ["On-site"]


def _slug(value: str) -> str:
    return re.sub(r"\s+", "_", value.strip().lower())
