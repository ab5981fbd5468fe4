"""Data models for career recommendations."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum

from career_fit.scoring.models import (
    ExperienceLevel,
    Importance,
    Level,
    MatchQuality,
    ProficiencyLevel,
    RequirementCategory,
    SalaryRange,
)


@dataclass(frozen=True)
class RequiredSkill:
    """A required skill as shown to the user."""

    id: str
    name: str
    category: RequirementCategory
    is_required: bool
    priority: Importance


@dataclass(frozen=True)
class LearningPhase:
    """One step of a learning path: acquire a single missing skill."""

    id: str
    order: int
    title: str
    description: str
    duration: str
    priority: Importance
    proficiency_level: ProficiencyLevel
    skills: list[str] = field(default_factory=list)
    estimated_hours: int = 0


@dataclass(frozen=True)
class LearningPath:
    """Ordered plan for closing the skill gap to a career."""

    id: str
    title: str
    description: str
    total_duration: str
    phases: list[LearningPhase] = field(default_factory=list)
    estimated_cost: int = 0
    difficulty: str = "intermediate"
    prerequisites: list[str] = field(default_factory=list)
    outcomes: list[str] = field(default_factory=list)

    @property
    def total_hours(self) -> int:
        return sum(phase.estimated_hours for phase in self.phases)


@dataclass(frozen=True)
class JobMarketData:
    demand: Level
    competitiveness: Level
    locations: list[str]
    industry_growth: float
    average_salary: float


@dataclass(frozen=True)
class CareerRecommendation:
    """A ranked career with everything needed to present it."""

    id: str
    title: str
    description: str
    fit_score: int
    confidence: float
    match_quality: MatchQuality
    experience_level: ExperienceLevel
    salary_range: SalaryRange
    growth_prospects: Level
    required_skills: list[RequiredSkill]
    job_market: JobMarketData
    related_roles: list[str]
    summary: str
    learning_path: LearningPath
    reasoning: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        data = asdict(self)
        data["salary_range"] = self.salary_range.to_dict()
        return _enum_values(data)


def _enum_values(value):
    if isinstance(value, dict):
        return {key: _enum_values(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_enum_values(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value
