"""Profile and assessment loading and validation utilities."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from career_fit.config.settings import Settings, get_settings
from career_fit.scoring.models import CareerAssessmentData, UserProfile


class ProfileService:
    """Service for loading and validating user profiles and assessments."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load_profile(self, path: Path | str | None = None) -> UserProfile:
        """Load and validate a profile from YAML or JSON."""
        profile_path = Path(path) if path is not None else self.settings.profile_path
        data = load_mapping(profile_path, kind="Profile")
        return UserProfile.model_validate(data)

    def load_assessment(
        self, path: Path | str | None = None
    ) -> CareerAssessmentData | None:
        """Load assessment answers; returns None when no path is configured."""
        if path is None:
            path = self.settings.assessment_path
        if path is None:
            return None
        data = load_mapping(Path(path), kind="Assessment")
        return CareerAssessmentData.model_validate(data)

    def validate_profile(
        self,
        profile: UserProfile,
        assessment: CareerAssessmentData | None = None,
    ) -> list[str]:
        """Return warnings for profiles that will score with low confidence."""
        warnings: list[str] = []

        if not profile.all_skills():
            warnings.append("Skills list is empty")
        if not profile.career_interest.strip():
            warnings.append("Missing career interest")
        if not profile.education_level.strip():
            warnings.append("Missing education level")
        if profile.resume is None:
            warnings.append("No resume provided; experience scoring uses defaults")
        elif not profile.resume.experience:
            warnings.append("Resume has no work experience entries")
        if assessment is None:
            warnings.append("No assessment provided; interest and value scores are neutral")
        elif not assessment.values:
            warnings.append("Assessment lists no values")

        return warnings


def load_mapping(path: Path, kind: str = "Document") -> dict:
    """Read a YAML or JSON file that must contain a mapping."""
    data = load_document(path, kind)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{kind} must be a mapping/dict: {path}")
    return data


def load_document(path: Path, kind: str = "Document"):
    """Read a YAML or JSON file and return whatever it contains."""
    if not path.exists():
        raise FileNotFoundError(f"{kind} not found: {path}")

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return _load_yaml(path, kind)
    if suffix == ".json":
        return _load_json(path, kind)
    return _load_unknown(path, kind)


def _load_yaml(path: Path, kind: str):
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML {kind.lower()}: {path}") from e


def _load_json(path: Path, kind: str):
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON {kind.lower()}: {path}") from e


def _load_unknown(path: Path, kind: str):
    """Auto-detect the format when the file extension is unknown."""
    raw = path.read_text(encoding="utf-8")
    stripped = raw.lstrip()

    if stripped.startswith("{") or stripped.startswith("["):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {kind.lower()} format: {path}") from e
