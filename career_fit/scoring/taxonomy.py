"""Static skill taxonomy: categories, synonyms and category relations.

The taxonomy is built once from literal tables and never mutated; a single
instance can be shared by any number of analyzers.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

# (category id, display name, skills), in declaration order.
SKILL_CATEGORIES: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    (
        "programming",
        "Programming Languages",
        ("JavaScript", "Python", "Java", "C++", "TypeScript", "Go", "Rust", "Swift", "Kotlin"),
    ),
    (
        "web-development",
        "Web Development",
        ("HTML", "CSS", "React", "Vue.js", "Angular", "Node.js", "Express", "Django", "Flask"),
    ),
    (
        "data-science",
        "Data Science & Analytics",
        ("SQL", "R", "Pandas", "NumPy", "Tableau", "Power BI", "Statistics", "Machine Learning"),
    ),
    (
        "cloud-platforms",
        "Cloud Platforms",
        ("AWS", "Azure", "Google Cloud", "Docker", "Kubernetes", "Terraform", "Jenkins"),
    ),
    (
        "design",
        "Design & Creative",
        ("Figma", "Adobe Creative Suite", "Sketch", "InVision", "Canva", "Photography", "Video Editing"),
    ),
    (
        "business",
        "Business & Management",
        ("Project Management", "Agile", "Scrum", "Leadership", "Strategy", "Business Analysis"),
    ),
    (
        "marketing",
        "Marketing & Sales",
        ("Digital Marketing", "SEO", "SEM", "Social Media Marketing", "Content Marketing", "Email Marketing"),
    ),
)

# canonical skill -> synonyms
SKILL_SYNONYMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("JavaScript", ("JS", "ECMAScript", "Node.js", "Frontend Development")),
    ("Python", ("Python3", "Data Science", "Machine Learning", "AI")),
    ("React", ("ReactJS", "React.js", "Frontend Framework")),
    ("SQL", ("Database", "MySQL", "PostgreSQL", "Data Querying")),
    ("Machine Learning", ("ML", "AI", "Artificial Intelligence", "Data Science")),
    ("User Experience", ("UX", "User Research", "Usability", "Design Thinking")),
    ("Digital Marketing", ("Online Marketing", "Internet Marketing", "Web Marketing")),
    ("Project Management", ("PM", "Program Management", "Agile", "Scrum")),
)

# Same-category similarity; categories not listed use DEFAULT_CATEGORY_SIMILARITY.
CATEGORY_SIMILARITY: dict[str, float] = {
    "programming": 0.8,
    "web-development": 0.75,
    "data-science": 0.7,
    "cloud-platforms": 0.7,
    "design": 0.65,
}
DEFAULT_CATEGORY_SIMILARITY = 0.6

RELATED_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("programming", "web-development"),
    ("data-science", "programming"),
    ("cloud-platforms", "programming"),
    ("design", "web-development"),
)
RELATED_CATEGORY_SIMILARITY = 0.5


def fold_key(value: str) -> str:
    """Lowercase, trim and collapse whitespace; punctuation is kept."""
    return re.sub(r"\s+", " ", value.strip().lower())


@dataclass(frozen=True)
class SkillCategory:
    """A named group of skills."""

    id: str
    name: str
    skills: tuple[str, ...]


@dataclass(frozen=True)
class SkillTaxonomy:
    """Immutable lookup tables for skill synonyms and categories.

    Keys are folded display names (see `fold_key`), so "Node.js" is stored
    as "node.js" and "Power BI" as "power bi".
    """

    categories: tuple[SkillCategory, ...]
    synonyms: Mapping[str, frozenset[str]]
    skill_categories: Mapping[str, str]
    category_similarity: Mapping[str, float]
    related_categories: frozenset[frozenset[str]]
    default_category_similarity: float = DEFAULT_CATEGORY_SIMILARITY
    related_category_similarity: float = RELATED_CATEGORY_SIMILARITY

    @classmethod
    def build(
        cls,
        categories: Iterable[tuple[str, str, Iterable[str]]] = SKILL_CATEGORIES,
        synonyms: Iterable[tuple[str, Iterable[str]]] = SKILL_SYNONYMS,
        category_similarity: Mapping[str, float] | None = None,
        related_categories: Iterable[tuple[str, str]] = RELATED_CATEGORIES,
    ) -> SkillTaxonomy:
        """Build a taxonomy from literal tables."""
        category_list = tuple(
            SkillCategory(id=category_id, name=name, skills=tuple(skills))
            for category_id, name, skills in categories
        )

        skill_categories: dict[str, str] = {}
        for category in category_list:
            for skill in category.skills:
                # First declaration wins when a skill is listed twice.
                skill_categories.setdefault(fold_key(skill), category.id)

        synonym_sets: dict[str, set[str]] = {}
        for canonical, names in synonyms:
            canonical_key = fold_key(canonical)
            for name in names:
                name_key = fold_key(name)
                synonym_sets.setdefault(canonical_key, set()).add(name_key)
                synonym_sets.setdefault(name_key, set()).add(canonical_key)

        return cls(
            categories=category_list,
            synonyms=MappingProxyType(
                {key: frozenset(values) for key, values in synonym_sets.items()}
            ),
            skill_categories=MappingProxyType(skill_categories),
            category_similarity=MappingProxyType(
                dict(CATEGORY_SIMILARITY if category_similarity is None else category_similarity)
            ),
            related_categories=frozenset(
                frozenset(pair) for pair in related_categories
            ),
        )

    def synonyms_of(self, skill: str) -> frozenset[str]:
        return self.synonyms.get(skill, frozenset())

    def category_of(self, skill: str) -> str | None:
        return self.skill_categories.get(skill)

    def get_category(self, category_id: str) -> SkillCategory | None:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def category_pair_similarity(self, first: str, second: str) -> float:
        """Similarity implied by two skill categories (0.0 if unrelated)."""
        if first == second:
            return self.category_similarity.get(first, self.default_category_similarity)
        if frozenset((first, second)) in self.related_categories:
            return self.related_category_similarity
        return 0.0


_default_taxonomy: SkillTaxonomy | None = None


def get_default_taxonomy() -> SkillTaxonomy:
    """Return the shared taxonomy built from the bundled tables."""
    global _default_taxonomy
    if _default_taxonomy is None:
        _default_taxonomy = SkillTaxonomy.build()
    return _default_taxonomy
