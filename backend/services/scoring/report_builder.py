"""Report builder: overall score, labels, breakdown and optimization plan."""

import logging
from collections.abc import Mapping

from models.responses import (
    BreakdownItem,
    MissingKeywords,
    OptimizationPlan,
    ParameterSuggestion,
    ScoreReport,
)
from models.schemas import CriticalMetric, ParameterScore, TierScore
from services.scoring.advice import DISPLAY_NAMES, EXAMPLES, QUICK_FIXES, SUGGESTIONS
from services.scoring.role_detector import FRESHER
from services.scoring.rubric import OVERALL_SCORE_CAP, round_half_up

logger = logging.getLogger(__name__)

PRIORITY_ORDER: dict[str, int] = {"Critical": 0, "High": 1, "Medium": 2, "Low": 3}

# Score thresholds are checked top-down; each band is monotonic in the score
_MATCH_QUALITY_BANDS: list[tuple[int, str]] = [
    (85, "Excellent"),
    (70, "Good"),
    (50, "Adequate"),
    (30, "Poor"),
]
_INTERVIEW_CHANCE_BANDS: list[tuple[int, str]] = [
    (95, "90%+"),
    (90, "80-90%"),
    (80, "70-80%"),
    (70, "40-60%"),
    (55, "20-30%"),
    (35, "5-12%"),
]

# Minutes of work and difficulty points per suggestion, by priority
_EFFORT_MINUTES = {"Critical": 15, "High": 10, "Medium": 5, "Low": 2}
_EFFORT_DIFFICULTY = {"Critical": 3, "High": 2, "Medium": 1, "Low": 0}

_TIER_PRIORITY: dict[str, list[str]] = {
    "fresher": [
        "skills_keywords", "education", "certifications", "content_structure",
        "basic_structure", "qualitative", "competitive", "experience",
    ],
    "experienced": [
        "experience", "skills_keywords", "content_structure", "basic_structure",
        "competitive", "qualitative", "education", "certifications",
    ],
}

FRESHER_EXPERIENCE_NOTE = "Experience section not required for fresher roles"


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

def overall_score(parameters: Mapping[str, ParameterScore], cap: int = OVERALL_SCORE_CAP) -> int:
    """Sum of the parameter scores, capped (the parameter maxima add up to more)."""
    return min(cap, sum(p.score for p in parameters.values()))


def match_quality(score: int) -> str:
    for threshold, label in _MATCH_QUALITY_BANDS:
        if score >= threshold:
            return label
    return "Inadequate"


def interview_chance(score: int) -> str:
    for threshold, label in _INTERVIEW_CHANCE_BANDS:
        if score >= threshold:
            return label
    return "1-2%"


def priority_for(percentage: int) -> str:
    if percentage < 30:
        return "Critical"
    if percentage < 60:
        return "High"
    if percentage < 80:
        return "Medium"
    return "Low"


def summarize(score: int, has_jd: bool) -> str:
    target = "this job description" if has_jd else "general ATS standards"
    if score >= 85:
        return f"Excellent resume: it is well optimised against {target} and should pass most ATS filters."
    if score >= 70:
        return f"Strong resume with a good fit for {target}; a few targeted improvements will make it stand out."
    if score >= 50:
        return f"Adequate resume: it covers the basics for {target} but misses several signals recruiters look for."
    if score >= 30:
        return f"Weak match against {target}; significant revisions are needed to get past ATS screening."
    return f"The resume is unlikely to pass ATS screening for {target} without a substantial rewrite."


# ---------------------------------------------------------------------------
# Optimization plan
# ---------------------------------------------------------------------------

def _format_minutes(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes} minutes"
    hours, rest = divmod(minutes, 60)
    hour_label = "hour" if hours == 1 else "hours"
    return f"{hours} {hour_label} {rest} minutes" if rest else f"{hours} {hour_label}"


def _difficulty(points: int) -> str:
    if points < 5:
        return "Easy"
    if points < 15:
        return "Moderate"
    return "Advanced"


def build_suggestion(param: ParameterScore) -> ParameterSuggestion:
    percentage = param.percentage
    priority = priority_for(percentage)
    lines = SUGGESTIONS.get(param.name, [])
    if priority == "High":
        lines = lines[:3]
    elif priority != "Critical":
        lines = lines[:2]

    return ParameterSuggestion(
        parameter=param.name,
        display_name=DISPLAY_NAMES.get(param.name, param.name),
        current_score=param.score,
        max_score=param.max_score,
        percentage=percentage,
        priority=priority,
        improvement_potential=param.max_score - param.score,
        suggestions=list(lines),
        quick_fixes=[] if priority == "Low" else list(QUICK_FIXES.get(param.name, [])),
        examples=[EXAMPLES[param.name]] if priority in ("Critical", "High") and param.name in EXAMPLES else [],
    )


def build_optimization_plan(
    parameters: Mapping[str, ParameterScore],
    cap: int = OVERALL_SCORE_CAP,
) -> OptimizationPlan:
    """Prioritised improvement plan.

    Suggestions are ordered Critical > High > Medium > Low, then by
    improvement potential (largest first). ``sorted`` is stable, so equal
    keys keep the parameter order.
    """
    current = overall_score(parameters, cap)
    suggestions = sorted(
        (build_suggestion(p) for p in parameters.values()),
        key=lambda s: (PRIORITY_ORDER[s.priority], -s.improvement_potential),
    )

    urgent = [s for s in suggestions if s.priority in ("Critical", "High")]
    potential = sum(round_half_up(s.improvement_potential * 0.7) for s in urgent)

    actions = [
        f"Fix {s.display_name}: {s.suggestions[0]}"
        for s in suggestions if s.priority == "Critical" and s.suggestions
    ][:3]
    actions += [
        f"Improve {s.display_name}: {s.suggestions[0]}"
        for s in suggestions if s.priority == "High" and s.suggestions
    ][:2]

    open_items = [s for s in suggestions if s.improvement_potential > 0]
    minutes = sum(_EFFORT_MINUTES[s.priority] for s in open_items)
    difficulty = sum(_EFFORT_DIFFICULTY[s.priority] for s in open_items)

    return OptimizationPlan(
        current_overall_score=current,
        target_overall_score=min(cap, current + potential),
        potential_improvement=potential,
        suggestions=suggestions,
        priority_actions=actions,
        estimated_time=_format_minutes(minutes),
        difficulty=_difficulty(difficulty),
    )


# ---------------------------------------------------------------------------
# Tier breakdown
# ---------------------------------------------------------------------------

def _tier_details(tier: TierScore, role_type: str) -> str:
    if role_type == FRESHER and tier.key == "experience":
        return FRESHER_EXPERIENCE_NOTE
    if tier.percentage >= 80:
        band = "Strong"
    elif tier.percentage >= 60:
        band = "Good"
    elif tier.percentage >= 40:
        band = "Needs improvement"
    else:
        band = "Weak"
    if tier.top_issues:
        return f"{band}: {tier.top_issues[0]}"
    return band


def build_breakdown(tiers: Mapping[str, TierScore], role_type: str) -> list[BreakdownItem]:
    order = _TIER_PRIORITY.get(role_type, _TIER_PRIORITY["experienced"])
    return [
        BreakdownItem(
            key=key,
            tier_name=tiers[key].tier_name,
            weight_pct=tiers[key].weight,
            score=tiers[key].score,
            percentage=tiers[key].percentage,
            details=_tier_details(tiers[key], role_type),
            role_type=role_type,
        )
        for key in order
        if key in tiers
    ]


def _strengths(tiers: Mapping[str, TierScore]) -> list[str]:
    return [
        f"{t.tier_name} ({t.percentage}%)"
        for t in sorted(tiers.values(), key=lambda t: -t.percentage)
        if t.percentage >= 75
    ]


def _areas_to_improve(tiers: Mapping[str, TierScore], role_type: str) -> list[str]:
    areas = []
    for t in sorted(tiers.values(), key=lambda t: t.percentage):
        if t.percentage >= 50:
            break
        if role_type == FRESHER and t.key == "experience":
            continue
        issue = t.top_issues[0] if t.top_issues else "low score"
        areas.append(f"{t.tier_name}: {issue}")
    return areas


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def build_report(
    parameters: Mapping[str, ParameterScore],
    tiers: Mapping[str, TierScore] | None = None,
    metrics: Mapping[str, CriticalMetric] | None = None,
    role_type: str = "experienced",
    has_jd: bool = False,
    matched_keywords: list[str] | None = None,
    missing_keywords: MissingKeywords | None = None,
    keyword_density: dict[str, float] | None = None,
    score_cap: int = OVERALL_SCORE_CAP,
) -> ScoreReport:
    """Assemble the score report from mapped parameters.

    Only ``parameters`` is required; tiers and metrics add the breakdown
    and transparency fields.
    """
    tiers = tiers or {}
    score = overall_score(parameters, score_cap)

    report = ScoreReport(
        overall_score=score,
        match_quality=match_quality(score),
        interview_chance=interview_chance(score),
        scores={name: p.score for name, p in parameters.items()},
        breakdown=build_breakdown(tiers, role_type),
        optimization_plan=build_optimization_plan(parameters, score_cap),
        summary=summarize(score, has_jd),
        strengths=_strengths(tiers),
        areas_to_improve=_areas_to_improve(tiers, role_type),
        matched_keywords=matched_keywords or [],
        missing_keywords=missing_keywords or MissingKeywords(),
        keyword_density=keyword_density or {},
        has_jd=has_jd,
        role_type=role_type,
        tier_scores=dict(tiers),
        critical_metrics=dict(metrics or {}),
    )
    logger.debug("Report built: overall=%d quality=%s", score, report.match_quality)
    return report
