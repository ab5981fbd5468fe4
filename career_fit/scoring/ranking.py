"""Viability filtering, ordering and diversification of scored careers."""

from __future__ import annotations

from collections.abc import Iterable

from career_fit.scoring.config import ScoringConfig, get_scoring_config
from career_fit.scoring.models import (
    CareerAssessmentData,
    CareerProfile,
    RankedCareer,
    UserProfile,
)
from career_fit.scoring.service import ScoringEngine
from career_fit.utils.logging import get_logger

logger = get_logger("ranking")


class RecommendationRanker:
    """Turn scored careers into a short, category-diverse recommendation list."""

    def __init__(
        self,
        engine: ScoringEngine | None = None,
        config: ScoringConfig | None = None,
    ) -> None:
        self.config = config or (engine.config if engine is not None else get_scoring_config())
        self.engine = engine or ScoringEngine(config=self.config)

    def rank_all(
        self,
        profile: UserProfile,
        catalog: Iterable[CareerProfile],
        assessment: CareerAssessmentData | None = None,
    ) -> list[RankedCareer]:
        """Score every catalog record for this user and rank the results."""
        scored = self.engine.score_all(profile, catalog, assessment)
        ranked = self.rank(scored)
        logger.info(
            "Ranked %d of %d careers for %s", len(ranked), len(scored), profile.name
        )
        return ranked

    def rank(self, scored: Iterable[RankedCareer]) -> list[RankedCareer]:
        """Filter, sort and diversify already-scored careers.

        The result is not a pure score sort: each pass keeps score order
        internally and the passes are concatenated, so a lower-scored career
        from a new category can precede a higher-scored one.
        """
        viable = [
            item for item in scored if item.score.overall_fit >= self.config.min_fit_score
        ]
        # sorted() is stable, so ties keep catalog order.
        ordered = sorted(viable, key=lambda item: item.score.ranking_score, reverse=True)

        limit = self.config.max_results
        selected: list[RankedCareer] = []
        taken: set[int] = set()
        categories: set[str] = set()
        subcategories: set[str] = set()

        def take(index: int, item: RankedCareer) -> None:
            selected.append(item)
            taken.add(index)
            categories.add(item.career.category)
            subcategories.add(item.career.subcategory)

        # One per category
        for index, item in enumerate(ordered):
            if len(selected) >= min(self.config.category_slots, limit):
                break
            if item.career.category not in categories:
                take(index, item)

        # One per unseen subcategory
        for index, item in enumerate(ordered):
            if len(selected) >= limit:
                break
            if index not in taken and item.career.subcategory not in subcategories:
                take(index, item)

        # Fill by score
        for index, item in enumerate(ordered):
            if len(selected) >= limit:
                break
            if index not in taken:
                take(index, item)

        return selected
