import pytest

from models.schemas import CriticalMetric, ParameterScore, TierScore
from services.scoring.parameter_mapper import (
    PARAMETER_RULES,
    MappingContext,
    ParameterRule,
    apply_floors,
    jd_metric_floor,
    map_to_parameters,
    tier_floor,
)
from services.scoring.rubric import (
    METRIC_KEYS,
    METRIC_MAX_SCORES,
    PARAMETER_MAX_SCORES,
    STANDARD_TIER_WEIGHTS,
    TIER_KEYS,
    TIER_NAMES,
)


def make_tiers(default: int = 0, **overrides: int) -> dict[str, TierScore]:
    return {
        key: TierScore(
            key=key,
            tier_name=TIER_NAMES[key],
            percentage=overrides.get(key, default),
            weight=STANDARD_TIER_WEIGHTS[key],
        )
        for key in TIER_KEYS
    }


def make_metrics(default: int = 0, **overrides: int) -> dict[str, CriticalMetric]:
    return {
        name: CriticalMetric(
            name=name,
            percentage=overrides.get(name, default),
            max_score=METRIC_MAX_SCORES[name],
        )
        for name in METRIC_KEYS
    }


def test_rules_cover_all_parameters():
    assert [r.name for r in PARAMETER_RULES] == list(PARAMETER_MAX_SCORES)


@pytest.mark.parametrize("tier_pct,metric_pct,has_jd", [
    (0, 0, False),
    (0, 100, True),
    (100, 100, True),
    (100, 0, False),
    (37, 63, True),
    (5, 5, True),
])
def test_parameter_bounds(tier_pct, metric_pct, has_jd):
    params = map_to_parameters(make_tiers(tier_pct), make_metrics(metric_pct), has_jd)
    assert list(params) == list(PARAMETER_MAX_SCORES)
    for name, param in params.items():
        assert param.max_score == PARAMETER_MAX_SCORES[name]
        assert 0 <= param.score <= param.max_score


def test_perfect_inputs_reach_every_max():
    params = map_to_parameters(make_tiers(100), make_metrics(100), has_jd=True)
    assert all(p.score == p.max_score for p in params.values())
    assert sum(p.score for p in params.values()) == sum(PARAMETER_MAX_SCORES.values())


def test_no_evidence_means_zero():
    params = map_to_parameters(make_tiers(0), make_metrics(0), has_jd=False)
    assert all(p.score == 0 for p in params.values())


def test_jd_metrics_ignored_without_jd():
    with_metrics = map_to_parameters(make_tiers(0), make_metrics(90), has_jd=False)
    # only the JD-independent quantified metric may contribute
    nonzero = {name for name, p in with_metrics.items() if p.score}
    assert nonzero == {"quantifiedAchievements"}


def test_zero_score_scenario_fixed():
    """JD match 50%, tech alignment 60%, quantified 35%: no JD-aware parameter stays 0."""
    tiers = make_tiers(10)
    metrics = make_metrics(
        jd_keywords_match=50,
        technical_skills_alignment=60,
        quantified_results_presence=35,
    )
    params = map_to_parameters(tiers, metrics, has_jd=True)
    assert params["keywordMatch"].score >= 5
    assert params["skillsAlignment"].score >= 4
    assert params["experienceRelevance"].score >= 2
    assert params["keywordMatch"].score == 13  # 50% of 25, half-up
    assert params["skillsAlignment"].score == 12


def test_tier_floor_gives_partial_credit_without_jd():
    tiers = make_tiers(4, education=10, basic_structure=10)
    params = map_to_parameters(tiers, make_metrics(0), has_jd=False)
    assert params["keywordMatch"].score == 3
    assert params["educationScore"].score == 2
    assert params["formatting"].score == 2
    assert params["filenameQuality"].score == 1
    # 4% of a weight of 4 rounds to a tier score of 0, so no floor applies
    assert params["certifications"].score == 0


def test_jd_floor_requires_nonzero_source_tier():
    tiers = make_tiers(0)
    metrics = make_metrics(0, experience_relevance=40)
    params = map_to_parameters(tiers, metrics, has_jd=True)
    # scaled metric still counts, but the extra floor needs experience evidence
    assert params["experienceRelevance"].score == 6
    assert params["industryExperience"].score == 0


def test_quantified_floor_needs_quantified_evidence():
    tiers = make_tiers(0, experience=90, competitive=90)
    without = map_to_parameters(tiers, make_metrics(0), has_jd=False)
    assert without["quantifiedAchievements"].score == 0

    with_some = map_to_parameters(tiers, make_metrics(0, quantified_results_presence=10), has_jd=False)
    # 10% of 8 rounds to 1; the competitive floor lifts it to 40% of 8
    assert with_some["quantifiedAchievements"].score == 3


def test_floors_run_before_clamp():
    param = ParameterScore(name="grammar", score=1, max_score=3)
    ctx = MappingContext(tiers=make_tiers(50), metrics=make_metrics(0), has_jd=False)
    floored = apply_floors(param, (tier_floor("qualitative", 10),), ctx)
    assert floored.score == 3


def test_later_floor_never_lowers():
    param = ParameterScore(name="keywordMatch", score=0, max_score=25)
    ctx = MappingContext(tiers=make_tiers(50), metrics=make_metrics(80), has_jd=True)
    floors = (
        jd_metric_floor("jd_keywords_match", 15),
        jd_metric_floor("jd_keywords_match", 5),
        tier_floor("skills_keywords", 3),
    )
    assert apply_floors(param, floors, ctx).score == 15


def test_custom_rules_table():
    rules = (ParameterRule("keywordMatch", "skills_keywords"),)
    params = map_to_parameters(make_tiers(40), make_metrics(100), has_jd=True, rules=rules)
    assert list(params) == ["keywordMatch"]
    assert params["keywordMatch"].score == 10


@pytest.mark.parametrize("tier", TIER_KEYS)
def test_monotonic_in_each_tier(tier):
    metrics = make_metrics(30)
    previous = None
    for pct in range(0, 101, 10):
        params = map_to_parameters(make_tiers(20, **{tier: pct}), metrics, has_jd=True)
        scores = {name: p.score for name, p in params.items()}
        if previous is not None:
            assert all(scores[name] >= previous[name] for name in scores)
        previous = scores


def test_parameter_score_bounds_only_on_clamp():
    over = ParameterScore(name="grammar", score=7, max_score=3)
    assert over.score == 7
    assert over.clamped().score == 3
    assert ParameterScore(name="grammar", score=-2, max_score=3).clamped().score == 0
    assert over.raise_to(5) is over
    assert ParameterScore(name="grammar", score=1, max_score=3).raise_to(2).score == 2
