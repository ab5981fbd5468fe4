"""Data models for the fit scoring engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Importance(str, Enum):
    """How much a career depends on a skill requirement."""

    CRITICAL = "critical"
    IMPORTANT = "important"
    NICE_TO_HAVE = "nice-to-have"


class ProficiencyLevel(str, Enum):
    """Proficiency a career expects in a skill."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class RequirementCategory(str, Enum):
    """Kind of skill requirement."""

    TECHNICAL = "technical"
    SOFT = "soft"
    DOMAIN = "domain"
    CERTIFICATION = "certification"


class ExperienceLevel(str, Enum):
    """Seniority a career is aimed at."""

    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class Level(str, Enum):
    """Three-step scale used for demand, competitiveness and growth prospects."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MatchType(str, Enum):
    """Skill match tier, in decreasing strictness."""

    EXACT = "exact"
    SEMANTIC = "semantic"
    TRANSFERABLE = "transferable"
    FUZZY = "fuzzy"


class MatchQuality(str, Enum):
    """Qualitative label for a fit score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class _Model(BaseModel):
    """Base model accepting snake_case names and camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict):
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class _FrozenModel(_Model):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


# ---------------------------------------------------------------------------
# User inputs
# ---------------------------------------------------------------------------


class WorkExperience(_Model):
    """Work experience entry extracted from a resume."""

    company: str = Field(default="", description="Company name")
    position: str = Field(
        default="",
        validation_alias=AliasChoices("position", "title"),
        description="Job title held",
    )
    duration: str = Field(default="", description="Free-text duration")
    description: str = Field(default="", description="Role description")
    skills_used: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("skills_used", "skillsUsed", "skills"),
        description="Skills used in this role",
    )


class Education(_Model):
    """Education entry extracted from a resume."""

    institution: str = Field(default="", description="Institution name")
    degree: str = Field(default="", description="Degree level")
    field: str = Field(default="", description="Field of study")
    year: str | None = Field(default=None, description="Graduation year")


class ResumeInfo(_Model):
    """Structured information extracted from a resume."""

    skills: list[str] = Field(default_factory=list, description="Extracted skills")
    experience: list[WorkExperience] = Field(
        default_factory=list, description="Work experience entries"
    )
    education: list[Education] = Field(
        default_factory=list, description="Education entries"
    )
    summary: str = Field(default="", description="Professional summary")

    @property
    def years_of_experience(self) -> int:
        """Years of experience, approximated by the number of entries."""
        return len(self.experience)


class UserProfile(_Model):
    """User profile scored against career records."""

    name: str = Field(..., description="User full name")
    age: int | None = Field(default=None, ge=0, description="Age in years")
    education_level: str = Field(default="", description="Highest education level")
    skills: list[str] = Field(
        default_factory=list, description="Free-text skills, in user order"
    )
    career_interest: str = Field(default="", description="Stated career interest")
    resume: ResumeInfo | None = Field(default=None, description="Parsed resume")
    location: str | None = Field(default=None, description="Current location")

    def all_skills(self) -> list[str]:
        """Return profile skills followed by resume skills."""
        skills = list(self.skills)
        if self.resume is not None:
            skills.extend(self.resume.skills)
        return skills

    @property
    def years_of_experience(self) -> int:
        if self.resume is None:
            return 0
        return self.resume.years_of_experience


class CareerAssessmentData(_FrozenModel):
    """Answers from the career assessment questionnaire."""

    interests: list[str] = Field(default_factory=list)
    values: list[str] = Field(default_factory=list)
    work_style: list[str] = Field(default_factory=list)
    personality_traits: list[str] = Field(default_factory=list)
    career_goals: list[str] = Field(default_factory=list)
    timeframe: str = Field(default="", description="Target timeframe")
    preferred_industries: list[str] = Field(default_factory=list)
    work_environment_preferences: list[str] = Field(default_factory=list)
    completed_at: datetime | None = Field(
        default=None, description="When the assessment was completed"
    )
    version: str = Field(default="1.0", description="Assessment version")


# ---------------------------------------------------------------------------
# Catalog records
# ---------------------------------------------------------------------------


class SkillRequirement(_FrozenModel):
    """A skill a career requires or prefers."""

    skill: str = Field(..., min_length=1, description="Skill name")
    importance: Importance = Field(default=Importance.IMPORTANT)
    proficiency_level: ProficiencyLevel = Field(default=ProficiencyLevel.INTERMEDIATE)
    category: RequirementCategory = Field(default=RequirementCategory.TECHNICAL)


class SalaryRange(_FrozenModel):
    """Salary band for a career."""

    min: int = Field(default=0, ge=0)
    max: int = Field(default=0, ge=0)
    currency: str = Field(default="USD")
    period: str = Field(default="yearly")


class WorkEnvironment(_FrozenModel):
    """Where and how the work happens."""

    remote: bool = False
    hybrid: bool = False
    onsite: bool = True
    team_size: str = ""
    work_style: list[str] = Field(default_factory=list)


class IndustryTrends(_FrozenModel):
    """Job market descriptor for a career."""

    demand: Level = Field(default=Level.MEDIUM)
    growth_percent: float = Field(
        default=0.0,
        validation_alias=AliasChoices("growth_percent", "growthPercent", "growth"),
        description="Projected growth in percent",
    )
    competitiveness: Level = Field(default=Level.MEDIUM)


class CareerProfile(_FrozenModel):
    """Read-only catalog record describing one career."""

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = Field(default="")
    category: str = Field(default="")
    subcategory: str = Field(default="")
    required_skills: list[SkillRequirement] = Field(default_factory=list)
    preferred_skills: list[SkillRequirement] = Field(default_factory=list)
    experience_level: ExperienceLevel = Field(default=ExperienceLevel.MID)
    salary_range: SalaryRange = Field(default_factory=SalaryRange)
    growth_prospects: Level = Field(default=Level.MEDIUM)
    work_environment: WorkEnvironment = Field(default_factory=WorkEnvironment)
    industry_trends: IndustryTrends = Field(default_factory=IndustryTrends)
    related_careers: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Scoring outputs
# ---------------------------------------------------------------------------

COMPONENT_NAMES: tuple[str, ...] = (
    "skill_match",
    "interest_alignment",
    "experience_relevance",
    "value_alignment",
    "market_viability",
    "learning_curve",
)


def _check_unit(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be between 0.0 and 1.0 (got {value})")


@dataclass(frozen=True)
class SkillMatch:
    """Best-effort correspondence between a user skill and a career skill."""

    user_skill: str
    career_skill: str
    similarity: float
    match_type: MatchType
    confidence: float

    def __post_init__(self) -> None:
        _check_unit("similarity", self.similarity)
        _check_unit("confidence", self.confidence)


@dataclass(frozen=True)
class SkillMatchResult:
    """Best matches per career skill, bucketed by tier."""

    exact_matches: list[SkillMatch] = field(default_factory=list)
    semantic_matches: list[SkillMatch] = field(default_factory=list)
    transferable_matches: list[SkillMatch] = field(default_factory=list)
    fuzzy_matches: list[SkillMatch] = field(default_factory=list)
    overall_similarity: float = 0.0
    total_matches: int = 0

    def __post_init__(self) -> None:
        _check_unit("overall_similarity", self.overall_similarity)

    @property
    def all_matches(self) -> list[SkillMatch]:
        """All matches, strictest tier first."""
        return [
            *self.exact_matches,
            *self.semantic_matches,
            *self.transferable_matches,
            *self.fuzzy_matches,
        ]

    def best_match_for(self, career_skill: str) -> SkillMatch | None:
        """Return the match recorded for a career skill (case-insensitive)."""
        target = career_skill.lower()
        for match in self.all_matches:
            if match.career_skill.lower() == target:
                return match
        return None


@dataclass(frozen=True)
class ScoringWeights:
    """Normalized per-component weights; always sum to 1.0."""

    skill_match: float
    interest_alignment: float
    experience_relevance: float
    value_alignment: float
    market_viability: float
    learning_curve: float

    def __post_init__(self) -> None:
        for name in COMPONENT_NAMES:
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"{name} weight must be non-negative (got {value})")
        total = self.total
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Weights must sum to 1.0 (got {total})")

    @property
    def total(self) -> float:
        return sum(getattr(self, name) for name in COMPONENT_NAMES)

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in COMPONENT_NAMES}

    @classmethod
    def normalized(cls, raw: dict[str, float]) -> ScoringWeights:
        """Clamp negatives to zero and divide by the total."""
        clamped = {name: max(0.0, raw.get(name, 0.0)) for name in COMPONENT_NAMES}
        total = sum(clamped.values())
        if total <= 0.0:
            share = 1.0 / len(COMPONENT_NAMES)
            return cls(**{name: share for name in COMPONENT_NAMES})
        return cls(**{name: value / total for name, value in clamped.items()})


@dataclass(frozen=True)
class ScoringFactor:
    """One piece of evidence behind a component score."""

    name: str
    value: float
    impact: float
    description: str


@dataclass(frozen=True)
class ComponentScore:
    """Score for one criterion, with its weight and evidence trail."""

    score: float
    weight: float = 0.0
    confidence: float = 0.0
    factors: list[ScoringFactor] = field(default_factory=list)
    reasoning: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not (0.0 <= self.score <= 100.0):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")
        _check_unit("weight", self.weight)
        _check_unit("confidence", self.confidence)

    @property
    def contribution(self) -> float:
        """Weighted contribution to the overall fit."""
        return self.score * self.weight


@dataclass(frozen=True)
class FitComponents:
    """The six component scores of a detailed fit score."""

    skill_match: ComponentScore
    interest_alignment: ComponentScore
    experience_relevance: ComponentScore
    value_alignment: ComponentScore
    market_viability: ComponentScore
    learning_curve: ComponentScore

    def items(self) -> list[tuple[str, ComponentScore]]:
        return [(name, getattr(self, name)) for name in COMPONENT_NAMES]


@dataclass(frozen=True)
class DetailedFitScore:
    """Calibrated fit of one career for one user."""

    overall_fit: int
    components: FitComponents
    confidence: float
    reasoning: list[str] = field(default_factory=list)
    match_quality: MatchQuality = MatchQuality.POOR

    def __post_init__(self) -> None:
        if not (0 <= self.overall_fit <= 100):
            raise ValueError(
                f"overall_fit must be between 0 and 100 (got {self.overall_fit})"
            )
        _check_unit("confidence", self.confidence)

    @property
    def ranking_score(self) -> float:
        """Fit discounted by confidence, used to order recommendations."""
        return self.overall_fit * self.confidence

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        data = asdict(self)
        data["match_quality"] = self.match_quality.value
        return data


@dataclass(frozen=True)
class RankedCareer:
    """A catalog record paired with its fit score."""

    career: CareerProfile
    score: DetailedFitScore
