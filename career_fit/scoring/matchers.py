"""Semantic skill matching for fit scoring."""

from __future__ import annotations

import re
from collections.abc import Sequence

from rapidfuzz.distance import Levenshtein

from career_fit.scoring.config import ScoringConfig, get_scoring_config
from career_fit.scoring.models import MatchType, SkillMatch, SkillMatchResult
from career_fit.scoring.taxonomy import SkillTaxonomy, fold_key, get_default_taxonomy

# Applied both before and after punctuation is stripped, so "react.js",
# "reactjs" and "react js" all land on "react".
_SKILL_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "python3": "python",
    "react.js": "react",
    "reactjs": "react",
    "react js": "react",
    "vue.js": "vue",
    "vuejs": "vue",
    "vue js": "vue",
    "c++": "cpp",
    "c#": "csharp",
    "html/css": "html css",
    "front-end": "frontend",
    "front end": "frontend",
    "back-end": "backend",
    "back end": "backend",
    "full-stack": "fullstack",
    "full stack": "fullstack",
    "ui/ux": "ui ux",
    "ai/ml": "ai ml",
}

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

# Per-tier confidence attached to a match.
TIER_CONFIDENCE: dict[MatchType, float] = {
    MatchType.EXACT: 1.0,
    MatchType.SEMANTIC: 0.9,
    MatchType.TRANSFERABLE: 0.7,
    MatchType.FUZZY: 0.6,
}


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for comparison.

    Lowercases, collapses whitespace, replaces punctuation with spaces and
    maps common spellings onto one token ("React.js" -> "react").
    Never raises; an all-punctuation input normalizes to "".
    """
    value = fold_key(str(skill))
    value = _SKILL_ALIASES.get(value, value)
    value = _PUNCTUATION.sub(" ", value)
    value = _WHITESPACE.sub(" ", value).strip()
    return _SKILL_ALIASES.get(value, value)


def edit_similarity(first: str, second: str) -> float:
    """Return 1 - levenshtein / longest length (1.0 for two empty strings)."""
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(first, second) / longest


class SemanticSkillAnalyzer:
    """Decide whether a user skill satisfies a career skill.

    Tiers are tried strictest first and the first one that clears its
    threshold wins: exact, semantic (synonyms), transferable (taxonomy
    category) and fuzzy (edit distance).
    """

    def __init__(
        self,
        taxonomy: SkillTaxonomy | None = None,
        config: ScoringConfig | None = None,
    ) -> None:
        self.taxonomy = taxonomy or get_default_taxonomy()
        self.config = config or get_scoring_config()

    def normalize_skill(self, skill: str) -> str:
        return normalize_skill(skill)

    def calculate_skill_similarity(self, user_skill: str, career_skill: str) -> SkillMatch:
        """Compare two skills and return the first tier that matches."""
        user_token = normalize_skill(user_skill)
        career_token = normalize_skill(career_skill)

        if user_token and career_token:
            if user_token == career_token:
                return self._match(user_skill, career_skill, 1.0, MatchType.EXACT)

            semantic = self._semantic_similarity(user_token, career_token)
            if semantic > self.config.semantic_threshold:
                return self._match(user_skill, career_skill, semantic, MatchType.SEMANTIC)

            transferable = self._transferable_similarity(user_token, career_token)
            if transferable > self.config.transferable_threshold:
                return self._match(
                    user_skill, career_skill, transferable, MatchType.TRANSFERABLE
                )

            fuzzy = edit_similarity(user_token, career_token)
            if fuzzy > self.config.fuzzy_threshold:
                return self._match(user_skill, career_skill, fuzzy, MatchType.FUZZY)

        return SkillMatch(
            user_skill=user_skill,
            career_skill=career_skill,
            similarity=0.0,
            match_type=MatchType.FUZZY,
            confidence=0.0,
        )

    def find_best_match(
        self, user_skills: Sequence[str], career_skill: str
    ) -> SkillMatch | None:
        """Return the highest-similarity match for a career skill.

        Ties keep the earliest user skill. Returns None when nothing matches.
        """
        best: SkillMatch | None = None
        for user_skill in user_skills:
            match = self.calculate_skill_similarity(user_skill, career_skill)
            if match.similarity > 0 and (best is None or match.similarity > best.similarity):
                best = match
        return best

    def analyze_skill_matches(
        self, user_skills: Sequence[str], career_skills: Sequence[str]
    ) -> SkillMatchResult:
        """Find the best user skill for every career skill and bucket by tier.

        One user skill may be the best match for several career skills.
        """
        buckets: dict[MatchType, list[SkillMatch]] = {tier: [] for tier in MatchType}
        total_similarity = 0.0

        for career_skill in career_skills:
            best = self.find_best_match(user_skills, career_skill)
            if best is None:
                continue
            buckets[best.match_type].append(best)
            total_similarity += best.similarity

        total_matches = sum(len(matches) for matches in buckets.values())
        overall = total_similarity / len(career_skills) if career_skills else 0.0

        return SkillMatchResult(
            exact_matches=buckets[MatchType.EXACT],
            semantic_matches=buckets[MatchType.SEMANTIC],
            transferable_matches=buckets[MatchType.TRANSFERABLE],
            fuzzy_matches=buckets[MatchType.FUZZY],
            overall_similarity=min(1.0, overall),
            total_matches=total_matches,
        )

    def get_skill_suggestions(
        self, user_skills: Sequence[str], target_category: str | None = None
    ) -> list[str]:
        """Suggest taxonomy skills from the user's categories (and the target one)."""
        normalized_user = {normalize_skill(skill) for skill in user_skills}
        user_categories = {
            category
            for category in (self.taxonomy.category_of(skill) for skill in normalized_user)
            if category is not None
        }

        suggestions: list[str] = []
        for category in self.taxonomy.categories:
            if category.id not in user_categories and category.id != target_category:
                continue
            for skill in category.skills:
                if normalize_skill(skill) in normalized_user or skill in suggestions:
                    continue
                suggestions.append(skill)

        return suggestions[: self.config.suggestion_limit]

    def _semantic_similarity(self, first: str, second: str) -> float:
        first_synonyms = self.taxonomy.synonyms_of(first)
        second_synonyms = self.taxonomy.synonyms_of(second)

        if second in first_synonyms or first in second_synonyms:
            return 0.95
        if first_synonyms & second_synonyms:
            return 0.85
        if any(first in synonym for synonym in second_synonyms) or any(
            second in synonym for synonym in first_synonyms
        ):
            return 0.75
        return 0.0

    def _transferable_similarity(self, first: str, second: str) -> float:
        first_category = self.taxonomy.category_of(first)
        second_category = self.taxonomy.category_of(second)
        if first_category is None or second_category is None:
            return 0.0
        return self.taxonomy.category_pair_similarity(first_category, second_category)

    @staticmethod
    def _match(
        user_skill: str, career_skill: str, similarity: float, match_type: MatchType
    ) -> SkillMatch:
        return SkillMatch(
            user_skill=user_skill,
            career_skill=career_skill,
            similarity=similarity,
            match_type=match_type,
            confidence=TIER_CONFIDENCE[match_type],
        )


def find_matching_skills(
    required: Sequence[str],
    available: Sequence[str],
    analyzer: SemanticSkillAnalyzer | None = None,
    threshold: float | None = None,
) -> tuple[list[str], list[str]]:
    """Split required skills into matched and missing.

    A required skill is missing when its best similarity against any single
    available skill is at or below `threshold`.
    """
    analyzer = analyzer or SemanticSkillAnalyzer()
    if threshold is None:
        threshold = analyzer.config.missing_skill_threshold

    matched: list[str] = []
    missing: list[str] = []
    for requirement in required:
        best = analyzer.find_best_match(available, requirement)
        if best is not None and best.similarity > threshold:
            matched.append(requirement)
        else:
            missing.append(requirement)
    return matched, missing
