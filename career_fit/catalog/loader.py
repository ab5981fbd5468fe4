"""Career catalog loading and validation."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml
from pydantic import ValidationError

from career_fit.config.settings import Settings, get_settings
from career_fit.scoring.models import CareerProfile
from career_fit.scoring.profile import load_document
from career_fit.utils.logging import get_logger

logger = get_logger("catalog")

BUNDLED_CATALOG = "careers.yaml"


class CatalogService:
    """Service for loading career catalogs from YAML or JSON."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load_catalog(self, path: Path | str | None = None) -> list[CareerProfile]:
        """Load and validate a catalog.

        Falls back to the configured `catalog_path`, then to the bundled
        sample catalog, when no path is given.
        """
        if path is None:
            path = self.settings.catalog_path

        if path is None:
            source = f"bundled:{BUNDLED_CATALOG}"
            raw = (
                resources.files("career_fit.catalog")
                .joinpath("data", BUNDLED_CATALOG)
                .read_text(encoding="utf-8")
            )
            data = yaml.safe_load(raw)
        else:
            source = str(path)
            data = load_document(Path(path), kind="Catalog")

        careers = parse_catalog(data, source)
        logger.info("Loaded %d careers from %s", len(careers), source)
        return careers

    def get_career(
        self, catalog: list[CareerProfile], career_id: str
    ) -> CareerProfile | None:
        """Look up a career by id."""
        for career in catalog:
            if career.id == career_id:
                return career
        return None

    def validate_catalog(self, catalog: list[CareerProfile]) -> list[str]:
        """Return warnings for records that will score poorly."""
        warnings: list[str] = []
        categories = set()
        for career in catalog:
            categories.add(career.category)
            if not career.required_skills:
                warnings.append(f"{career.id}: required skills list is empty")
            if not career.category:
                warnings.append(f"{career.id}: missing category")
            if not career.subcategory:
                warnings.append(f"{career.id}: missing subcategory")
            if not career.keywords:
                warnings.append(f"{career.id}: no keywords")
            if career.salary_range.max < career.salary_range.min:
                warnings.append(f"{career.id}: salary max is below min")
        if catalog and len(categories) < 2:
            warnings.append("Catalog has a single category; ranking cannot diversify")
        return warnings


def parse_catalog(data, source: str = "<catalog>") -> list[CareerProfile]:
    """Validate raw catalog data (a list or a mapping with a `careers` key)."""
    if isinstance(data, dict):
        data = data.get("careers")
    if data is None:
        data = []
    if not isinstance(data, list):
        raise ValueError(f"Catalog must be a list of careers: {source}")

    careers: list[CareerProfile] = []
    seen: set[str] = set()
    for index, record in enumerate(data):
        try:
            career = CareerProfile.model_validate(record)
        except ValidationError as e:
            raise ValueError(f"Invalid career record #{index} in {source}") from e
        if career.id in seen:
            raise ValueError(f"Duplicate career id {career.id!r} in {source}")
        seen.add(career.id)
        careers.append(career)
    return careers
