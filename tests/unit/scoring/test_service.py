"""Tests for the fit scoring engine."""

import pytest

SCENARIO_REQUIRED = (
    ("JavaScript", "critical"),
    ("React", "important"),
    ("Node.js", "important"),
)


class TestDynamicWeights:
    """Test calculate_dynamic_weights."""

    def test_junior_profile_without_assessment(self, engine, make_profile):
        """Juniors shift weight from experience to learning curve and interest."""
        profile = make_profile(
            skills=["Python"], career_interest="Data", education_level="Bachelor"
        )

        weights = engine.calculate_dynamic_weights(profile)

        assert weights.as_dict() == pytest.approx(
            {
                "skill_match": 0.30,
                "interest_alignment": 0.30,
                "experience_relevance": 0.05,
                "value_alignment": 0.15,
                "market_viability": 0.05,
                "learning_curve": 0.15,
            }
        )

    def test_experienced_profile_with_assessment(self, engine, make_profile):
        """Assessment and experience adjustments stack."""
        from career_fit.scoring.models import CareerAssessmentData

        profile = make_profile(
            skills=["Python"],
            career_interest="Data",
            education_level="Bachelor",
            experience=["a", "b", "c", "d", "e", "f"],
        )

        weights = engine.calculate_dynamic_weights(profile, CareerAssessmentData())

        assert weights.as_dict() == pytest.approx(
            {
                "skill_match": 0.25,
                "interest_alignment": 0.25,
                "experience_relevance": 0.25,
                "value_alignment": 0.20,
                "market_viability": 0.05,
                "learning_curve": 0.0,
            }
        )

    def test_incomplete_profile_favours_skill_match(self, engine, make_profile):
        """Profiles below the completeness threshold lean on skills."""
        from career_fit.scoring.models import CareerAssessmentData

        weights = engine.calculate_dynamic_weights(make_profile(), CareerAssessmentData())

        assert weights.skill_match == pytest.approx(0.30)
        assert weights.interest_alignment == pytest.approx(0.35)
        assert weights.value_alignment == pytest.approx(0.15)
        assert weights.experience_relevance == pytest.approx(0.0, abs=1e-9)

    def test_negative_weights_are_clamped_then_normalized(self, make_profile):
        """A negative adjusted weight becomes zero and the rest renormalize."""
        from career_fit.scoring.config import ScoringConfig
        from career_fit.scoring.service import ScoringEngine

        config = ScoringConfig(  # type: ignore[call-arg]
            _env_file=None, weight_skill_match=0.40, weight_experience_relevance=0.10
        )
        engine = ScoringEngine(config=config)
        profile = make_profile(
            skills=["Python"], career_interest="Data", education_level="Bachelor"
        )

        weights = engine.calculate_dynamic_weights(profile)

        assert weights.experience_relevance == 0.0
        assert weights.skill_match == pytest.approx(0.40 / 1.05)
        assert weights.total == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("years", [0, 1, 3, 6, 12])
    @pytest.mark.parametrize("with_assessment", [False, True])
    def test_weights_always_sum_to_one(self, engine, make_profile, years, with_assessment):
        """Normalized weights sum to 1 for every profile shape."""
        from career_fit.scoring.models import CareerAssessmentData

        profile = make_profile(skills=["Python"], experience=["x"] * years)
        assessment = CareerAssessmentData() if with_assessment else None

        weights = engine.calculate_dynamic_weights(profile, assessment)

        assert abs(weights.total - 1.0) <= 1e-9
        assert all(value >= 0.0 for value in weights.as_dict().values())

    def test_profile_completeness(self, engine, make_profile):
        """Each of the five signals is worth 0.2."""
        from career_fit.scoring.models import CareerAssessmentData

        assert engine.calculate_profile_completeness(make_profile()) == 0.0
        full = make_profile(
            skills=["Python"],
            career_interest="Data",
            education_level="Bachelor",
            with_resume=True,
        )
        assert engine.calculate_profile_completeness(
            full, CareerAssessmentData()
        ) == pytest.approx(1.0)


class TestSkillMatch:
    """Test score_skill_match."""

    def test_scenario_score_is_between_40_and_80(self, engine, make_profile, make_career):
        """Critical and one important satisfied, one important missing."""
        career = make_career(required=SCENARIO_REQUIRED)
        profile = make_profile(skills=["JavaScript", "React"])

        component = engine.score_skill_match(profile, career)

        assert component.score == pytest.approx(100 * 1.7 / 2.4)
        assert 40 < component.score < 80
        assert "Missing required skill: Node.js" in component.reasoning

    def test_adding_a_matching_skill_never_lowers_score(
        self, engine, make_profile, make_career
    ):
        """Skill match is monotonic in the user's skills."""
        career = make_career(required=SCENARIO_REQUIRED)

        before = engine.score_skill_match(make_profile(skills=["JavaScript"]), career)
        after = engine.score_skill_match(
            make_profile(skills=["JavaScript", "React"]), career
        )

        assert after.score >= before.score
        assert before.score == pytest.approx(100 / 2.4)

    def test_unmatched_preferred_skills_leave_score_unchanged(
        self, engine, make_profile, make_career
    ):
        """Missing preferred skills stay out of the denominator."""
        profile = make_profile(skills=["Python"])
        required_only = make_career(required=(("Python", "critical"),))
        with_preferred = make_career(
            required=(("Python", "critical"),),
            preferred=(("SQL", "important"), ("Tableau", "important")),
        )

        before = engine.score_skill_match(profile, required_only)
        after = engine.score_skill_match(profile, with_preferred)

        assert before.score == pytest.approx(100.0)
        assert after.score == pytest.approx(100.0)

    def test_matched_preferred_skills_count_at_half_weight(
        self, engine, make_profile, make_career
    ):
        """A matched preferred skill adds half its importance to both sides."""
        career = make_career(
            required=(("Python", "critical"),), preferred=(("Java", "important"),)
        )

        component = engine.score_skill_match(make_profile(skills=["Python"]), career)

        assert component.score == pytest.approx(100 * (1.0 + 0.8 * 0.35) / 1.35)

    def test_resume_skills_are_included(self, engine, make_profile, make_career):
        """Resume skills count toward the inventory."""
        career = make_career(required=(("SQL", "critical"),))
        profile = make_profile(resume_skills=["SQL"])

        assert engine.score_skill_match(profile, career).score == pytest.approx(100.0)

    def test_confidence_uses_tier_weights(self, engine, make_profile, make_career):
        """A transferable match earns 0.7 confidence credit."""
        career = make_career(required=(("Python", "critical"), ("SQL", "critical")))

        component = engine.score_skill_match(make_profile(skills=["Java"]), career)

        assert component.confidence == pytest.approx(0.7 / 2)

    def test_empty_required_skills_is_neutral_zero(self, engine, make_profile, make_career):
        """A record without required skills scores 0 with no confidence."""
        career = make_career(required=())

        component = engine.score_skill_match(make_profile(skills=["Python"]), career)

        assert component.score == 0.0
        assert component.confidence == 0.0
        assert component.reasoning == ["No required skills listed for this career"]


class TestInterestAlignment:
    """Test score_interest_alignment."""

    def test_stated_interest_matches_title_stem(self, engine, make_profile, make_career):
        """'Software Development' aligns with 'Software Developer'."""
        career = make_career(title="Software Developer", subcategory="Engineering")
        profile = make_profile(career_interest="Software Development")

        component = engine.score_interest_alignment(profile, career)

        assert component.score == 85.0
        assert component.confidence == 0.6

    def test_similar_title_with_different_stem_is_neutral(
        self, engine, make_profile, make_career
    ):
        """'Product Manager' does not align with 'Project Manager'."""
        career = make_career(title="Project Manager", category="Business", subcategory="Delivery")
        profile = make_profile(career_interest="Product Manager")

        component = engine.score_interest_alignment(profile, career)

        assert component.score == 50.0
        assert component.reasoning == []

    def test_single_letter_title_words_do_not_match(self, engine, make_profile, make_career):
        career = make_career(title="Role E 1", category="E", subcategory="E-1")

        component = engine.score_interest_alignment(
            make_profile(career_interest="Engineering"), career
        )

        assert component.score == 50.0

    def test_stated_interest_substring_of_category(self, engine, make_profile, make_career):
        """A substring of the category counts as aligned."""
        career = make_career(title="Nurse", category="Healthcare")

        component = engine.score_interest_alignment(
            make_profile(career_interest="healthcare"), career
        )

        assert component.score == 85.0

    def test_no_interest_is_neutral(self, engine, make_profile, make_career):
        """Without an interest or assessment the score is neutral."""
        component = engine.score_interest_alignment(
            make_profile(), make_career(title="Nurse", category="Healthcare")
        )

        assert component.score == 50.0
        assert component.confidence == 0.6

    def test_assessment_interests_found_in_keywords(self, engine, make_profile, make_career):
        """Each assessment interest found adds its share of 50."""
        from career_fit.scoring.models import CareerAssessmentData

        career = make_career(keywords=["programming", "coding"], description="Build software")
        assessment = CareerAssessmentData(interests=["programming", "gardening"])

        component = engine.score_interest_alignment(make_profile(), career, assessment)

        assert component.score == pytest.approx(75.0)
        assert component.confidence == 0.9

    def test_blank_assessment_interests_count_toward_total(
        self, engine, make_profile, make_career
    ):
        """Blank interests never match but still count in the denominator."""
        from career_fit.scoring.models import CareerAssessmentData

        career = make_career(keywords=["programming"], description="Build software")
        assessment = CareerAssessmentData(interests=["programming", " ", ""])

        component = engine.score_interest_alignment(make_profile(), career, assessment)

        assert component.score == pytest.approx(50.0 + 50.0 / 3)

    def test_assessment_with_no_interests_is_neutral(self, engine, make_profile, make_career):
        """An empty interest list keeps 50."""
        from career_fit.scoring.models import CareerAssessmentData

        component = engine.score_interest_alignment(
            make_profile(), make_career(), CareerAssessmentData()
        )

        assert component.score == 50.0


class TestExperienceRelevance:
    """Test score_experience_relevance."""

    def test_no_resume_entry_level(self, engine, make_profile, make_career):
        """Entry-level careers score 80 without a resume."""
        component = engine.score_experience_relevance(
            make_profile(), make_career(experience_level="entry")
        )

        assert component.score == 80.0
        assert component.confidence == 0.5

    def test_no_resume_senior_level(self, engine, make_profile, make_career):
        """Other levels score 30 without a resume."""
        component = engine.score_experience_relevance(
            make_profile(), make_career(experience_level="senior")
        )

        assert component.score == 30.0

    def test_under_qualified_with_relevant_entry(self, engine, make_profile, make_career):
        """Three years for a senior role is 50, plus 10 for a relevant entry."""
        career = make_career(experience_level="senior", keywords=["cloud computing"])
        profile = make_profile(
            experience=["Migrated services to the cloud", "Managed accounts", "Sold shoes"]
        )

        component = engine.score_experience_relevance(profile, career)

        assert component.score == pytest.approx(60.0)
        assert component.confidence == 0.8

    def test_resume_without_entries_uses_defaults(self, engine, make_profile, make_career):
        """A resume with no entries scores like no resume but is more confident."""
        component = engine.score_experience_relevance(
            make_profile(with_resume=True), make_career(experience_level="entry")
        )

        assert component.score == 80.0
        assert component.confidence == 0.8


class TestExperienceAlignment:
    """Test experience_alignment bands."""

    @pytest.mark.parametrize(
        ("years", "level", "expected"),
        [
            (1, "entry", 1.0),
            (0, "entry", 0.85),
            (4, "mid", 1.0),
            (7, "mid", 1.0 - (3 / 7) * 0.3),
            (5, "entry", 0.75),
            (20, "senior", 0.65),
            (0, "senior", 0.3),
        ],
    )
    def test_alignment(self, years, level, expected):
        """In-range, under and over qualification follow the bands."""
        from career_fit.scoring.models import ExperienceLevel
        from career_fit.scoring.service import experience_alignment

        assert experience_alignment(years, ExperienceLevel(level)) == pytest.approx(expected)


class TestValueAlignment:
    """Test score_value_alignment."""

    def test_matching_value_is_capped_at_95(self, engine, make_profile, make_career):
        """A fully matched value set caps at 95."""
        from career_fit.scoring.models import CareerAssessmentData

        career = make_career(title="Software Developer", description="Build software")
        assessment = CareerAssessmentData(values=["Innovation"])

        component = engine.score_value_alignment(make_profile(), career, assessment)

        assert component.score == 95.0
        assert component.confidence == 0.8

    def test_unmatched_value_scores_40(self, engine, make_profile, make_career):
        """No overlap leaves the base 40."""
        from career_fit.scoring.models import CareerAssessmentData

        career = make_career(title="Software Developer", description="Build software")
        assessment = CareerAssessmentData(values=["Stability"])

        component = engine.score_value_alignment(make_profile(), career, assessment)

        assert component.score == 40.0

    def test_without_values_is_neutral(self, engine, make_profile, make_career):
        """No assessment, or no values, gives 50 at low confidence."""
        from career_fit.scoring.models import CareerAssessmentData

        for assessment in (None, CareerAssessmentData()):
            component = engine.score_value_alignment(make_profile(), make_career(), assessment)
            assert component.score == 50.0
            assert component.confidence == 0.4

    def test_extract_career_values(self, make_career):
        """Values are inferred from title, description and work style."""
        from career_fit.scoring.service import extract_career_values

        career = make_career(
            title="Product Manager", description="Own the roadmap", work_style=["remote"]
        )

        assert extract_career_values(career) == [
            "leadership",
            "flexibility",
            "work-life balance",
        ]


class TestMarketViability:
    """Test score_market_viability."""

    def test_average_of_sub_scores(self, engine, make_career):
        """Demand, growth and competition are averaged."""
        career = make_career(
            industry_trends={"demand": "high", "growth": 15, "competitiveness": "medium"}
        )

        component = engine.score_market_viability(career)

        assert component.score == pytest.approx(80.0)
        assert component.confidence == 0.7

    def test_growth_is_clamped(self, engine, make_career):
        """Growth sub-score stays within 0-100."""
        high = make_career(
            industry_trends={"demand": "high", "growth": 40, "competitiveness": "medium"}
        )
        low = make_career(
            industry_trends={"demand": "low", "growth": -30, "competitiveness": "high"}
        )

        assert engine.score_market_viability(high).score == pytest.approx(260 / 3)
        assert engine.score_market_viability(low).score == pytest.approx(100 / 3)


class TestLearningCurve:
    """Test score_learning_curve."""

    def test_gap_ratios(self, engine, make_profile, make_career):
        """Half the critical and all important skills missing scores 40."""
        career = make_career(
            required=(("Python", "critical"), ("SQL", "critical"), ("Excel", "important"))
        )

        component = engine.score_learning_curve(make_profile(skills=["Python"]), career)

        assert component.score == pytest.approx(40.0)
        assert component.confidence == 0.8
        assert component.reasoning == [
            "Manageable learning curve with a few key skills to develop"
        ]

    def test_floor_is_20(self, engine, make_profile, make_career):
        """Missing everything bottoms out at 20."""
        career = make_career(required=(("SQL", "critical"), ("Excel", "important")))

        component = engine.score_learning_curve(make_profile(), career)

        assert component.score == 20.0

    def test_no_gaps_is_easy(self, engine, make_profile, make_career):
        """No missing skills scores 100."""
        component = engine.score_learning_curve(
            make_profile(skills=["Python"]), make_career(required=(("Python", "critical"),))
        )

        assert component.score == 100.0
        assert "easy transition" in component.reasoning[0]


class TestDetailedFitScore:
    """Test calculate_detailed_fit_score."""

    def test_bounds_for_degenerate_inputs(self, engine, make_profile, make_career):
        """Empty skills and empty requirements still give bounded output."""
        result = engine.calculate_detailed_fit_score(make_profile(), make_career(required=()))

        assert 0 <= result.overall_fit <= 100
        assert 0.0 <= result.confidence <= 1.0
        assert result.components.skill_match.score == 0.0

    def test_overall_fit_is_weighted_sum(self, engine, make_profile, make_career):
        """overall_fit is the rounded sum of weighted component scores."""
        result = engine.calculate_detailed_fit_score(
            make_profile(skills=["JavaScript", "React"]),
            make_career(required=SCENARIO_REQUIRED),
        )

        weighted = sum(component.contribution for _, component in result.components.items())
        assert result.overall_fit == int(weighted + 0.5)
        assert sum(c.weight for _, c in result.components.items()) == pytest.approx(1.0)

    def test_scoring_is_deterministic(self, engine, make_profile, make_career):
        """Scoring the same inputs twice gives identical output."""
        from career_fit.scoring.models import CareerAssessmentData

        profile = make_profile(skills=["Python", "SQL"], experience=["Analyzed data"])
        career = make_career(keywords=["data"])
        assessment = CareerAssessmentData(interests=["data"], values=["analysis"])

        first = engine.score_one(profile, career, assessment)
        second = engine.score_one(profile, career, assessment)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_reasoning_summarizes_result(self, engine, make_profile, make_career):
        """Reasoning opens with the score and the top factors."""
        result = engine.calculate_detailed_fit_score(
            make_profile(skills=["Python"]), make_career()
        )

        assert result.reasoning[0] == f"Overall fit score: {result.overall_fit}/100"
        assert result.reasoning[1].startswith("Top contributing factors: ")
        assert len(result.reasoning) == 3

    def test_to_dict_is_json_friendly(self, engine, make_profile, make_career):
        """to_dict returns plain values."""
        import json

        result = engine.calculate_detailed_fit_score(
            make_profile(skills=["Python"]), make_career()
        )
        data = result.to_dict()

        assert data["match_quality"] == result.match_quality.value
        json.dumps(data)


class TestMatchQuality:
    """Test determine_match_quality."""

    @pytest.mark.parametrize(
        ("fit", "confidence", "expected"),
        [
            (75, 1.0, "excellent"),
            (80, 0.9, "good"),
            (50, 0.9, "fair"),
            (50, 0.5, "poor"),
        ],
    )
    def test_thresholds(self, fit, confidence, expected):
        """Quality is bucketed on fit times confidence."""
        from career_fit.scoring.service import determine_match_quality

        assert determine_match_quality(fit, confidence).value == expected


class TestScoreAll:
    """Test score_all."""

    def test_scores_every_record(self, engine, make_profile, make_career):
        """Each catalog record is paired with its score."""
        catalog = [make_career(career_id="a"), make_career(career_id="b")]

        scored = engine.score_all(make_profile(skills=["Python"]), catalog)

        assert [item.career.id for item in scored] == ["a", "b"]

    def test_broken_records_are_skipped(self, engine, make_profile, make_career, caplog):
        """A record that fails to score is logged and skipped."""
        import logging

        catalog = [make_career(career_id="a"), object()]

        with caplog.at_level(logging.WARNING, logger="career_fit"):
            scored = engine.score_all(make_profile(skills=["Python"]), catalog)  # type: ignore[list-item]

        assert [item.career.id for item in scored] == ["a"]
        assert "Skipping career" in caplog.text

    def test_empty_catalog(self, engine, make_profile):
        """An empty catalog gives an empty list."""
        assert engine.score_all(make_profile(), []) == []


class TestFormatResult:
    """Test format_result."""

    def test_format_result_lists_components(self, engine, make_profile, make_career):
        """Formatted output includes the title and every component."""
        career = make_career(title="Data Scientist", career_id="data-scientist")
        result = engine.score_one(make_profile(skills=["Python"]), career)

        text = engine.format_result(career, result)

        assert text.splitlines()[0] == "Data Scientist (data-scientist)"
        assert "skill match" in text
        assert "learning curve" in text
