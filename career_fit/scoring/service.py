"""Fit scoring engine implementation."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import replace

from career_fit.scoring.config import ScoringConfig, get_scoring_config
from career_fit.scoring.matchers import SemanticSkillAnalyzer, find_matching_skills
from career_fit.scoring.models import (
    CareerAssessmentData,
    CareerProfile,
    ComponentScore,
    DetailedFitScore,
    ExperienceLevel,
    FitComponents,
    Importance,
    Level,
    MatchQuality,
    MatchType,
    RankedCareer,
    ScoringFactor,
    ScoringWeights,
    SkillMatchResult,
    UserProfile,
)
from career_fit.utils.logging import get_logger

logger = get_logger("scoring")

IMPORTANCE_WEIGHTS: dict[Importance, float] = {
    Importance.CRITICAL: 1.0,
    Importance.IMPORTANT: 0.7,
    Importance.NICE_TO_HAVE: 0.3,
}
PREFERRED_SKILL_FACTOR = 0.5

# Confidence credit per matched skill, by tier.
MATCH_CONFIDENCE_WEIGHTS: dict[MatchType, float] = {
    MatchType.EXACT: 1.0,
    MatchType.SEMANTIC: 0.9,
    MatchType.TRANSFERABLE: 0.7,
    MatchType.FUZZY: 0.5,
}

# (min years, max years, ideal years)
EXPERIENCE_BANDS: dict[ExperienceLevel, tuple[int, int, int]] = {
    ExperienceLevel.ENTRY: (0, 2, 1),
    ExperienceLevel.MID: (2, 7, 4),
    ExperienceLevel.SENIOR: (5, 15, 8),
}

DEMAND_SCORES: dict[Level, float] = {Level.HIGH: 90, Level.MEDIUM: 70, Level.LOW: 50}
COMPETITION_SCORES: dict[Level, float] = {Level.LOW: 90, Level.MEDIUM: 70, Level.HIGH: 50}

CAREER_VALUE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "innovation": ("developer", "engineer", "designer", "architect", "ai", "technology"),
    "leadership": ("manager", "director", "lead", "head", "leadership"),
    "helping others": ("healthcare", "teacher", "consultant", "advisor", "support", "analyst"),
    "creativity": ("designer", "artist", "creative", "marketing", "content"),
    "analysis": ("analyst", "scientist", "researcher", "data"),
    "stability": ("administrator", "coordinator", "specialist", "finance"),
    "flexibility": ("remote", "freelance", "consultant"),
    "work-life balance": ("flexible", "remote", "hybrid"),
}

# Shared leading characters for two title words to count as one stem.
STEM_PREFIX_LENGTH = 5

COMPONENT_LABELS: dict[str, str] = {
    "skill_match": "skill match",
    "interest_alignment": "interest alignment",
    "experience_relevance": "experience relevance",
    "value_alignment": "value alignment",
    "market_viability": "market viability",
    "learning_curve": "learning curve",
}


class ScoringEngine:
    """Multi-criteria fit scoring of careers against a user profile.

    Every score is a pure function of (profile, career, assessment):
    no hidden state, no randomness.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        analyzer: SemanticSkillAnalyzer | None = None,
    ) -> None:
        self.config = config or get_scoring_config()
        self.analyzer = analyzer or SemanticSkillAnalyzer(config=self.config)

    # ------------------------------------------------------------------
    # Weights
    # ------------------------------------------------------------------

    def calculate_profile_completeness(
        self, profile: UserProfile, assessment: CareerAssessmentData | None = None
    ) -> float:
        """Return completeness in [0, 1]; each of five signals is worth 0.2."""
        signals = (
            bool(profile.skills),
            bool(profile.career_interest.strip()),
            bool(profile.education_level.strip()),
            profile.resume is not None,
            assessment is not None,
        )
        return sum(0.2 for present in signals if present)

    def calculate_dynamic_weights(
        self, profile: UserProfile, assessment: CareerAssessmentData | None = None
    ) -> ScoringWeights:
        """Adjust the base weights for this profile and normalize them to 1.0."""
        weights = self.config.base_weights()

        if assessment is not None:
            weights["interest_alignment"] += 0.10
            weights["value_alignment"] += 0.05
            weights["skill_match"] -= 0.10
            weights["experience_relevance"] -= 0.05

        years = profile.years_of_experience
        if years > self.config.experienced_years:
            weights["experience_relevance"] += 0.10
            weights["skill_match"] += 0.05
            weights["learning_curve"] -= 0.05
            weights["interest_alignment"] -= 0.10
        elif years < self.config.junior_years:
            weights["learning_curve"] += 0.10
            weights["interest_alignment"] += 0.05
            weights["experience_relevance"] -= 0.15

        completeness = self.calculate_profile_completeness(profile, assessment)
        if completeness < self.config.completeness_threshold:
            weights["skill_match"] += 0.10
            weights["interest_alignment"] -= 0.05
            weights["value_alignment"] -= 0.05

        return ScoringWeights.normalized(weights)

    # ------------------------------------------------------------------
    # Overall score
    # ------------------------------------------------------------------

    def calculate_detailed_fit_score(
        self,
        profile: UserProfile,
        career: CareerProfile,
        assessment: CareerAssessmentData | None = None,
    ) -> DetailedFitScore:
        """Score one career for one user."""
        weights = self.calculate_dynamic_weights(profile, assessment)

        raw_components = {
            "skill_match": self.score_skill_match(profile, career),
            "interest_alignment": self.score_interest_alignment(profile, career, assessment),
            "experience_relevance": self.score_experience_relevance(profile, career),
            "value_alignment": self.score_value_alignment(profile, career, assessment),
            "market_viability": self.score_market_viability(career),
            "learning_curve": self.score_learning_curve(profile, career),
        }
        components = FitComponents(
            **{
                name: replace(component, weight=getattr(weights, name))
                for name, component in raw_components.items()
            }
        )

        weighted_sum = sum(component.contribution for _, component in components.items())
        overall_fit = _clamp(_round_half_up(weighted_sum), 0, 100)

        confidence = sum(
            component.confidence * component.weight for _, component in components.items()
        )
        confidence = _clamp(confidence, 0.0, 1.0)

        result = DetailedFitScore(
            overall_fit=overall_fit,
            components=components,
            confidence=confidence,
            reasoning=_overall_reasoning(components, overall_fit),
            match_quality=determine_match_quality(overall_fit, confidence),
        )
        logger.debug(
            "Scored %s: fit=%d confidence=%.2f quality=%s",
            career.id,
            result.overall_fit,
            result.confidence,
            result.match_quality.value,
        )
        return result

    def score_one(
        self,
        profile: UserProfile,
        career: CareerProfile,
        assessment: CareerAssessmentData | None = None,
    ) -> DetailedFitScore:
        """Entry point for scoring a single catalog record."""
        return self.calculate_detailed_fit_score(profile, career, assessment)

    def score_all(
        self,
        profile: UserProfile,
        catalog: Iterable[CareerProfile],
        assessment: CareerAssessmentData | None = None,
    ) -> list[RankedCareer]:
        """Score every catalog record; records that fail to score are skipped."""
        scored: list[RankedCareer] = []
        for career in catalog:
            try:
                score = self.calculate_detailed_fit_score(profile, career, assessment)
            except (ValueError, TypeError, AttributeError):
                logger.warning(
                    "Skipping career %r: scoring failed",
                    getattr(career, "id", career),
                    exc_info=True,
                )
                continue
            scored.append(RankedCareer(career=career, score=score))
        return scored

    def format_result(self, career: CareerProfile, result: DetailedFitScore) -> str:
        """Format a detailed fit score for CLI output."""
        lines = [
            f"{career.title} ({career.id})",
            f"Fit: {result.overall_fit}/100 "
            f"(quality={result.match_quality.value}, confidence={result.confidence:.2f})",
        ]
        for name, component in result.components.items():
            lines.append(
                f"  {COMPONENT_LABELS[name]:<21} {component.score:6.1f} "
                f"x {component.weight:.3f} (confidence {component.confidence:.2f})"
            )
            for reason in component.reasoning:
                lines.append(f"    - {reason}")
        lines.extend(result.reasoning)
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def score_skill_match(
        self, profile: UserProfile, career: CareerProfile
    ) -> ComponentScore:
        """Importance-weighted similarity of user skills to career skills."""
        if not career.required_skills:
            return ComponentScore(
                score=0.0,
                confidence=0.0,
                reasoning=["No required skills listed for this career"],
            )

        career_skills = [req.skill for req in career.required_skills]
        career_skills.extend(req.skill for req in career.preferred_skills)
        result = self.analyzer.analyze_skill_matches(profile.all_skills(), career_skills)

        total_score = 0.0
        total_weight = 0.0
        factors: list[ScoringFactor] = []
        reasoning: list[str] = []

        for requirement in career.required_skills:
            importance = IMPORTANCE_WEIGHTS[requirement.importance]
            total_weight += importance
            match = result.best_match_for(requirement.skill)
            if match is None:
                factors.append(
                    ScoringFactor(
                        name=f"Missing: {requirement.skill}",
                        value=0.0,
                        impact=importance,
                        description="No match found for required skill",
                    )
                )
                reasoning.append(f"Missing required skill: {requirement.skill}")
                continue

            total_score += match.similarity * importance
            factors.append(
                ScoringFactor(
                    name=f"Required: {requirement.skill}",
                    value=match.similarity,
                    impact=importance,
                    description=f"{match.match_type.value} match with {match.user_skill}",
                )
            )
            reasoning.append(
                f"{match.match_type.value.capitalize()} match for required skill: "
                f"{requirement.skill}"
            )

        # Unmatched preferred skills stay out of the denominator.
        for requirement in career.preferred_skills:
            importance = IMPORTANCE_WEIGHTS[requirement.importance] * PREFERRED_SKILL_FACTOR
            match = result.best_match_for(requirement.skill)
            if match is None:
                continue
            total_weight += importance
            total_score += match.similarity * importance
            factors.append(
                ScoringFactor(
                    name=f"Preferred: {requirement.skill}",
                    value=match.similarity,
                    impact=importance,
                    description=f"{match.match_type.value} match with {match.user_skill}",
                )
            )

        score = 100.0 * total_score / total_weight
        return ComponentScore(
            score=_clamp(score, 0.0, 100.0),
            confidence=skill_match_confidence(result, len(career.required_skills)),
            factors=factors,
            reasoning=reasoning,
        )

    def score_interest_alignment(
        self,
        profile: UserProfile,
        career: CareerProfile,
        assessment: CareerAssessmentData | None = None,
    ) -> ComponentScore:
        """Compare assessment interests (or the stated interest) with the career."""
        factors: list[ScoringFactor] = []
        reasoning: list[str] = []
        score = 50.0

        if assessment is not None:
            keywords = " ".join(career.keywords).lower()
            description = career.description.lower()
            interests = [i for i in assessment.interests if i.strip()]
            matches = 0
            for interest in interests:
                needle = interest.strip().lower()
                if needle in keywords or needle in description:
                    matches += 1
                    factors.append(
                        ScoringFactor(
                            name=f"Interest: {interest}",
                            value=1.0,
                            impact=0.3,
                            description=f"Career aligns with your interest in {interest}",
                        )
                    )
                    reasoning.append(f"Career matches your interest in {interest}")
            score = min(95.0, 50.0 + matches / max(1, len(assessment.interests)) * 50.0)
            return ComponentScore(
                score=score, confidence=0.9, factors=factors, reasoning=reasoning
            )

        if self._stated_interest_matches(profile.career_interest, career):
            score = 85.0
            factors.append(
                ScoringFactor(
                    name="Career Interest Match",
                    value=0.85,
                    impact=1.0,
                    description=(
                        f"Career aligns with your stated interest in {profile.career_interest}"
                    ),
                )
            )
            reasoning.append(
                f"Career matches your stated interest in {profile.career_interest}"
            )
        return ComponentScore(score=score, confidence=0.6, factors=factors, reasoning=reasoning)

    def score_experience_relevance(
        self, profile: UserProfile, career: CareerProfile
    ) -> ComponentScore:
        """Compare resume experience with the career's seniority band."""
        factors: list[ScoringFactor] = []
        reasoning: list[str] = []
        resume = profile.resume
        level = career.experience_level

        if resume is not None and resume.experience:
            years = resume.years_of_experience
            alignment = experience_alignment(years, level)
            score = alignment * 100.0
            factors.append(
                ScoringFactor(
                    name="Experience Level",
                    value=alignment,
                    impact=1.0,
                    description=f"{years} years experience for {level.value} level role",
                )
            )

            keyword_words = {word for word in " ".join(career.keywords).lower().split() if word}
            relevant = [
                entry
                for entry in resume.experience
                if any(word in entry.description.lower() for word in keyword_words)
            ]
            if relevant:
                score += min(20.0, len(relevant) * 10.0)
                factors.append(
                    ScoringFactor(
                        name="Relevant Experience",
                        value=len(relevant) / len(resume.experience),
                        impact=0.5,
                        description=f"{len(relevant)} relevant work experiences",
                    )
                )
                reasoning.append(f"You have {len(relevant)} relevant work experiences")
            reasoning.append(
                f"Your {years} years of experience compared with this {level.value} level role"
            )
        elif level == ExperienceLevel.ENTRY:
            score = 80.0
            reasoning.append("This entry-level role suits someone starting their career")
        else:
            score = 30.0
            reasoning.append(
                "This role typically requires more experience than you currently have"
            )

        return ComponentScore(
            score=_clamp(score, 0.0, 100.0),
            confidence=0.8 if resume is not None else 0.5,
            factors=factors,
            reasoning=reasoning,
        )

    def score_value_alignment(
        self,
        profile: UserProfile,
        career: CareerProfile,
        assessment: CareerAssessmentData | None = None,
    ) -> ComponentScore:
        """Compare assessment values with the values a career implies."""
        user_values = []
        if assessment is not None:
            user_values = [v.strip().lower() for v in assessment.values if v.strip()]
        if not user_values:
            return ComponentScore(score=50.0, confidence=0.4)

        factors: list[ScoringFactor] = []
        reasoning: list[str] = []
        career_values = extract_career_values(career)
        matches = 0
        for career_value in career_values:
            if any(uv in career_value or career_value in uv for uv in user_values):
                matches += 1
                factors.append(
                    ScoringFactor(
                        name=f"Value: {career_value}",
                        value=1.0,
                        impact=0.4,
                        description=f"Career supports your value of {career_value}",
                    )
                )
                reasoning.append(f"Career aligns with your value of {career_value}")

        score = min(95.0, 40.0 + matches / max(1, len(career_values)) * 60.0)
        return ComponentScore(score=score, confidence=0.8, factors=factors, reasoning=reasoning)

    def score_market_viability(self, career: CareerProfile) -> ComponentScore:
        """Average of demand, growth and competition sub-scores."""
        trends = career.industry_trends
        demand = DEMAND_SCORES[trends.demand]
        growth = _clamp(50.0 + trends.growth_percent * 2.0, 0.0, 100.0)
        competition = COMPETITION_SCORES[trends.competitiveness]

        factors = [
            ScoringFactor(
                name="Market Demand",
                value=demand / 100.0,
                impact=0.4,
                description=f"{trends.demand.value} demand in job market",
            ),
            ScoringFactor(
                name="Industry Growth",
                value=growth / 100.0,
                impact=0.4,
                description=f"{trends.growth_percent:g}% projected growth",
            ),
            ScoringFactor(
                name="Competition Level",
                value=competition / 100.0,
                impact=0.2,
                description=f"{trends.competitiveness.value} competition level",
            ),
        ]
        reasoning = [
            f"Market outlook: {trends.demand.value} demand, "
            f"{trends.growth_percent:g}% growth, "
            f"{trends.competitiveness.value} competition"
        ]
        return ComponentScore(
            score=(demand + growth + competition) / 3.0,
            confidence=0.7,
            factors=factors,
            reasoning=reasoning,
        )

    def score_learning_curve(
        self, profile: UserProfile, career: CareerProfile
    ) -> ComponentScore:
        """Score how much of the critical/important skill set is still missing."""
        user_skills = profile.all_skills()
        critical = [r.skill for r in career.required_skills if r.importance == Importance.CRITICAL]
        important = [
            r.skill for r in career.required_skills if r.importance == Importance.IMPORTANT
        ]

        _, missing_critical = find_matching_skills(critical, user_skills, self.analyzer)
        _, missing_important = find_matching_skills(important, user_skills, self.analyzer)

        critical_gap = len(missing_critical) / len(critical) if critical else 0.0
        important_gap = len(missing_important) / len(important) if important else 0.0
        score = max(20.0, 100.0 - (critical_gap * 60.0 + important_gap * 30.0))

        total = len(critical) + len(important)
        missing = len(missing_critical) + len(missing_important)
        factors = [
            ScoringFactor(
                name="Skill Readiness",
                value=(total - missing) / max(1, total),
                impact=1.0,
                description=f"{missing} skills to develop",
            )
        ]
        if missing == 0:
            reasoning = ["You already have most required skills - easy transition"]
        elif len(missing_critical) <= 2:
            reasoning = ["Manageable learning curve with a few key skills to develop"]
        else:
            reasoning = ["Significant learning required but achievable with dedication"]

        return ComponentScore(
            score=score, confidence=0.8, factors=factors, reasoning=reasoning
        )

    def _stated_interest_matches(self, interest: str, career: CareerProfile) -> bool:
        needle = interest.strip().lower()
        if not needle:
            return False
        haystacks = (career.title, career.category, career.subcategory)
        if any(needle in value.lower() for value in haystacks if value):
            return True
        title_words = career.title.lower().split()
        return all(
            any(_same_stem(word, title_word) for title_word in title_words)
            for word in needle.split()
        )


def skill_match_confidence(result: SkillMatchResult, required_count: int) -> float:
    """Tier-discounted matched-skill count relative to the required skills."""
    credit = sum(
        MATCH_CONFIDENCE_WEIGHTS[match.match_type] for match in result.all_matches
    )
    return min(1.0, credit / max(1, required_count))


def experience_alignment(years: int, level: ExperienceLevel) -> float:
    """Return how well `years` fits a seniority band, in [0.3, 1.0]."""
    minimum, maximum, ideal = EXPERIENCE_BANDS.get(level, EXPERIENCE_BANDS[ExperienceLevel.MID])

    if minimum <= years <= maximum:
        return max(0.7, 1.0 - (abs(years - ideal) / maximum) * 0.3)
    if years < minimum:
        return max(0.3, 0.7 - (minimum - years) * 0.1)
    return max(0.5, 0.9 - (years - maximum) * 0.05)


def extract_career_values(career: CareerProfile) -> list[str]:
    """Infer the work values a career offers from its text."""
    texts = (
        career.title.lower(),
        career.description.lower(),
        " ".join(career.work_environment.work_style).lower(),
    )
    return [
        value
        for value, keywords in CAREER_VALUE_KEYWORDS.items()
        if any(keyword in text for keyword in keywords for text in texts)
    ]


def determine_match_quality(overall_fit: int, confidence: float) -> MatchQuality:
    adjusted = overall_fit * confidence
    if adjusted >= 75:
        return MatchQuality.EXCELLENT
    if adjusted >= 60:
        return MatchQuality.GOOD
    if adjusted >= 40:
        return MatchQuality.FAIR
    return MatchQuality.POOR


def _overall_reasoning(components: FitComponents, overall_fit: int) -> list[str]:
    ranked = sorted(
        components.items(), key=lambda item: item[1].contribution, reverse=True
    )
    top = ", ".join(COMPONENT_LABELS[name] for name, _ in ranked[:2])

    reasoning = [
        f"Overall fit score: {overall_fit}/100",
        f"Top contributing factors: {top}",
    ]
    if overall_fit >= 80:
        reasoning.append("Excellent match - this career aligns very well with your profile")
    elif overall_fit >= 60:
        reasoning.append("Good match - this career has strong potential for you")
    elif overall_fit >= 40:
        reasoning.append("Fair match - consider this career with some skill development")
    else:
        reasoning.append(
            "This career may require significant preparation and skill development"
        )
    return reasoning


def _same_stem(first: str, second: str) -> bool:
    """True for "development"/"developer", false for "product"/"project"."""
    if first == second:
        return True
    if min(len(first), len(second)) >= 3 and (
        first.startswith(second) or second.startswith(first)
    ):
        return True
    shared = 0
    for a, b in zip(first, second):
        if a != b:
            break
        shared += 1
    return shared >= STEM_PREFIX_LENGTH


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value, low, high):
    return max(low, min(high, value))
