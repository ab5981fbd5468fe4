"""Main entry point for the career-fit command line."""

import argparse
import json
import sys
from pathlib import Path

from career_fit import __version__
from career_fit.config.settings import Settings
from career_fit.utils.logging import configure_logging


def _dump_json(payload: object) -> str:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    return json.dumps(payload, indent=2, default=_default)


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to the user profile (YAML/JSON); defaults to PROFILE_PATH",
    )
    parser.add_argument(
        "--assessment",
        type=Path,
        default=None,
        help="Path to career assessment answers (YAML/JSON)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a career catalog (YAML/JSON); defaults to the bundled catalog",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of text",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="career-fit",
        description="Career-Fit: score and rank careers against a user profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m career_fit rank --profile profile.yaml
  python -m career_fit score data-scientist --profile profile.yaml --json
  python -m career_fit suggest --profile profile.yaml --category data-science
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank the catalog and print recommendations",
    )
    _add_input_arguments(rank_parser)

    score_parser = subparsers.add_parser(
        "score",
        help="Print the detailed fit score for one career",
    )
    score_parser.add_argument("career_id", help="Catalog id of the career to score")
    _add_input_arguments(score_parser)

    suggest_parser = subparsers.add_parser(
        "suggest",
        help="Suggest skills to learn next",
    )
    suggest_parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to the user profile (YAML/JSON); defaults to PROFILE_PATH",
    )
    suggest_parser.add_argument(
        "--category",
        default=None,
        help="Skill category id to include (e.g. data-science, cloud-platforms)",
    )
    suggest_parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of text",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValueError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.debug("career-fit v%s running %s", __version__, parsed.mode)

    from career_fit.catalog import CatalogService
    from career_fit.scoring.profile import ProfileService

    profile_service = ProfileService(settings)
    try:
        profile = profile_service.load_profile(parsed.profile)
        assessment = None
        if parsed.mode != "suggest":
            assessment = profile_service.load_assessment(parsed.assessment)
            catalog = CatalogService(settings).load_catalog(parsed.catalog)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for warning in profile_service.validate_profile(profile, assessment):
        logger.info("Profile: %s", warning)

    if parsed.mode == "rank":
        from career_fit.recommendations import RecommendationService, format_recommendation

        recommendations = RecommendationService().generate_recommendations(
            profile, catalog, assessment
        )
        if parsed.json:
            print(_dump_json([r.to_dict() for r in recommendations]))
        elif not recommendations:
            print("No careers cleared the minimum fit score.")
        else:
            blocks = [
                format_recommendation(r, rank=i)
                for i, r in enumerate(recommendations, start=1)
            ]
            print("\n\n".join(blocks))
        return 0

    if parsed.mode == "score":
        from career_fit.scoring import ScoringEngine

        career = CatalogService(settings).get_career(catalog, parsed.career_id)
        if career is None:
            print(f"Error: unknown career id {parsed.career_id!r}", file=sys.stderr)
            return 1

        engine = ScoringEngine()
        result = engine.score_one(profile, career, assessment)
        if parsed.json:
            print(_dump_json({"career_id": career.id, "score": result}))
        else:
            print(engine.format_result(career, result))
        return 0

    if parsed.mode == "suggest":
        from career_fit.scoring import SemanticSkillAnalyzer

        suggestions = SemanticSkillAnalyzer().get_skill_suggestions(
            profile.all_skills(), parsed.category
        )
        if parsed.json:
            print(_dump_json(suggestions))
        elif not suggestions:
            print("No suggestions: none of your skills map to a known category.")
        else:
            for skill in suggestions:
                print(f"- {skill}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
