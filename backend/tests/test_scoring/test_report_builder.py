import pytest

from models.schemas import ParameterScore, TierScore
from services.scoring.report_builder import (
    FRESHER_EXPERIENCE_NOTE,
    build_breakdown,
    build_optimization_plan,
    build_report,
    build_suggestion,
    interview_chance,
    match_quality,
    priority_for,
)
from services.scoring.rubric import (
    FRESHER_TIER_WEIGHTS,
    PARAMETER_MAX_SCORES,
    STANDARD_TIER_WEIGHTS,
    TIER_KEYS,
    TIER_NAMES,
    round_half_up,
)


def params_at(**scores: int) -> dict[str, ParameterScore]:
    return {
        name: ParameterScore(name=name, score=scores.get(name, max_score), max_score=max_score)
        for name, max_score in PARAMETER_MAX_SCORES.items()
    }


def tiers_at(weights: dict[str, int], percentage: int = 60) -> dict[str, TierScore]:
    return {
        key: TierScore(key=key, tier_name=TIER_NAMES[key], percentage=percentage, weight=weights[key])
        for key in TIER_KEYS
    }


@pytest.mark.parametrize("pct,expected", [
    (0, "Critical"), (8, "Critical"), (29, "Critical"),
    (30, "High"), (45, "High"), (59, "High"),
    (60, "Medium"), (70, "Medium"), (79, "Medium"),
    (80, "Low"), (95, "Low"), (100, "Low"),
])
def test_priority_bands(pct, expected):
    assert priority_for(pct) == expected


def test_labels_are_monotonic():
    quality_order = ["Inadequate", "Poor", "Adequate", "Good", "Excellent"]
    chance_order = ["1-2%", "5-12%", "20-30%", "40-60%", "70-80%", "80-90%", "90%+"]
    qualities = [quality_order.index(match_quality(s)) for s in range(101)]
    chances = [chance_order.index(interview_chance(s)) for s in range(101)]
    assert qualities == sorted(qualities)
    assert chances == sorted(chances)
    assert match_quality(85) == "Excellent"
    assert interview_chance(34) == "1-2%"


def test_plan_orders_priorities():
    # 8%, 45%, 70%, 95% of max on 20-point parameters
    params = {
        "a": ParameterScore(name="skillsAlignment", score=19, max_score=20),
        "b": ParameterScore(name="experienceRelevance", score=14, max_score=20),
        "c": ParameterScore(name="keywordMatch", score=9, max_score=20),
        "d": ParameterScore(name="technicalCompetencies", score=2, max_score=25),
    }
    plan = build_optimization_plan(params)
    assert [s.priority for s in plan.suggestions] == ["Critical", "High", "Medium", "Low"]
    assert [s.percentage for s in plan.suggestions] == [8, 45, 70, 95]


def test_plan_sorts_by_potential_within_priority():
    params = params_at(keywordMatch=2, educationScore=1, filenameQuality=0)
    plan = build_optimization_plan(params)
    critical = [s.parameter for s in plan.suggestions if s.priority == "Critical"]
    assert critical == ["keywordMatch", "educationScore", "filenameQuality"]


def test_plan_potential_and_target():
    params = {
        "keywordMatch": ParameterScore(name="keywordMatch", score=5, max_score=25),  # 20%, Critical, gap 20
        "skillsAlignment": ParameterScore(name="skillsAlignment", score=10, max_score=20),  # 50%, High, gap 10
        "grammar": ParameterScore(name="grammar", score=2, max_score=3),  # 67%, Medium
    }
    plan = build_optimization_plan(params)
    assert plan.current_overall_score == 17
    assert plan.potential_improvement == 14 + 7
    assert plan.target_overall_score == 38
    assert plan.priority_actions[0].startswith("Fix Keyword Match:")
    assert plan.priority_actions[1].startswith("Improve Skills Alignment:")
    assert plan.estimated_time == "30 minutes"
    assert plan.difficulty == "Moderate"


def test_plan_from_all_zero_parameters():
    params = params_at(**{name: 0 for name in PARAMETER_MAX_SCORES})
    plan = build_optimization_plan(params)
    assert plan.current_overall_score == 0
    assert plan.potential_improvement == sum(round_half_up(m * 0.7) for m in PARAMETER_MAX_SCORES.values())
    assert plan.potential_improvement == 98
    assert plan.target_overall_score == 98
    assert len(plan.priority_actions) == 3
    assert plan.estimated_time == "4 hours"
    assert plan.difficulty == "Advanced"


def test_overall_and_target_capped_at_100():
    params = params_at(keywordMatch=0)
    plan = build_optimization_plan(params)
    assert plan.current_overall_score == 100
    assert plan.potential_improvement == 18
    assert plan.target_overall_score == 100


def test_suggestion_detail_by_priority():
    critical = build_suggestion(ParameterScore(name="keywordMatch", score=0, max_score=25))
    low = build_suggestion(ParameterScore(name="keywordMatch", score=24, max_score=25))
    assert len(critical.suggestions) == 4
    assert critical.quick_fixes and critical.examples
    assert len(low.suggestions) == 2
    assert low.quick_fixes == [] and low.examples == []
    assert low.improvement_potential == 1


def test_breakdown_order_and_separate_tiers():
    breakdown = build_breakdown(tiers_at(STANDARD_TIER_WEIGHTS), "experienced")
    keys = [item.key for item in breakdown]
    assert keys[0] == "experience"
    assert sorted(keys) == sorted(TIER_KEYS)
    weights = {item.key: item.weight_pct for item in breakdown}
    assert weights["education"] == 6
    assert weights["certifications"] == 4


def test_fresher_breakdown_notes_experience():
    breakdown = build_breakdown(tiers_at(FRESHER_TIER_WEIGHTS), "fresher")
    assert breakdown[0].key == "skills_keywords"
    experience = next(item for item in breakdown if item.key == "experience")
    assert experience.details == FRESHER_EXPERIENCE_NOTE
    assert all(item.role_type == "fresher" for item in breakdown)


def test_report_overall_is_sum_of_parameters():
    scores = {name: 0 for name in PARAMETER_MAX_SCORES}
    scores.update(keywordMatch=20, skillsAlignment=15, formatting=5)
    report = build_report(params_at(**scores), tiers=tiers_at(STANDARD_TIER_WEIGHTS, 80))
    assert report.overall_score == sum(report.scores.values()) == 40
    assert set(report.scores) == set(PARAMETER_MAX_SCORES)
    assert report.match_quality == "Poor"
    assert report.interview_chance == "5-12%"
    assert report.strengths
    assert report.areas_to_improve == []


def test_report_areas_to_improve_skip_fresher_experience():
    tiers = tiers_at(FRESHER_TIER_WEIGHTS, 20)
    report = build_report(params_at(), tiers=tiers, role_type="fresher")
    assert len(report.areas_to_improve) == 7
    assert not any(area.startswith("Experience") for area in report.areas_to_improve)


def test_report_without_tiers():
    report = build_report(params_at())
    assert report.overall_score == 100
    assert report.breakdown == []
    assert report.optimization_plan.potential_improvement == 0
    assert report.optimization_plan.estimated_time == "0 minutes"
