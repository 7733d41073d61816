"""Parameter mapper: tiers + critical metrics -> 16 rubric parameters.

Every parameter is computed the same way:

    base    = source percentage scaled to the parameter max
    floored = reduce(rule, rules, base)     # each rule may only raise
    final   = clamp(floored, 0, max)

Rules are small pure functions ``(ParameterScore, MappingContext) ->
ParameterScore`` applied left to right. A rule only fires on positive
evidence (a nonzero tier score or a positive JD metric), so a parameter
whose source tier is 0 with no JD (or a zero metric) stays at 0. The clamp
runs once, after all floors, so no floor can exceed the parameter max.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import reduce

from models.schemas import CriticalMetric, ParameterScore, TierScore
from services.scoring.rubric import (
    DEFAULT_RUBRIC,
    JD_RELATIVE_METRICS,
    Rubric,
    round_half_up,
    scale,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MappingContext:
    tiers: Mapping[str, TierScore]
    metrics: Mapping[str, CriticalMetric]
    has_jd: bool

    def tier_percentage(self, key: str) -> int:
        tier = self.tiers.get(key)
        return tier.percentage if tier else 0

    def tier_score(self, key: str) -> int:
        tier = self.tiers.get(key)
        return tier.score if tier else 0

    def metric_percentage(self, name: str) -> int:
        """Metric percentage, forced to 0 for JD-relative metrics without a JD."""
        if name in JD_RELATIVE_METRICS and not self.has_jd:
            return 0
        metric = self.metrics.get(name)
        return metric.percentage if metric else 0


FloorRule = Callable[[ParameterScore, MappingContext], ParameterScore]


# ---------------------------------------------------------------------------
# Rule constructors
# ---------------------------------------------------------------------------

def jd_metric_scaled(metric: str) -> FloorRule:
    """With a JD and a positive metric, raise to the metric scaled onto the max."""
    def rule(param: ParameterScore, ctx: MappingContext) -> ParameterScore:
        pct = ctx.metric_percentage(metric)
        if ctx.has_jd and pct > 0:
            return param.raise_to(scale(pct, param.max_score))
        return param
    rule.__name__ = f"jd_metric_scaled[{metric}]"
    return rule


def jd_metric_floor(metric: str, minimum: int, above: int = 0, tier: str | None = None) -> FloorRule:
    """With a JD and ``metric > above``, raise to ``minimum``.

    When ``tier`` is given, the source tier must also have a nonzero score.
    """
    def rule(param: ParameterScore, ctx: MappingContext) -> ParameterScore:
        if not ctx.has_jd or ctx.metric_percentage(metric) <= above:
            return param
        if tier is not None and ctx.tier_score(tier) <= 0:
            return param
        return param.raise_to(minimum)
    rule.__name__ = f"jd_metric_floor[{metric}>{above}->{minimum}]"
    return rule


def metric_floor(metric: str, minimum: int, above: int = 0) -> FloorRule:
    """JD-independent metric floor (quantified results)."""
    def rule(param: ParameterScore, ctx: MappingContext) -> ParameterScore:
        if ctx.metric_percentage(metric) > above:
            return param.raise_to(minimum)
        return param
    rule.__name__ = f"metric_floor[{metric}>{above}->{minimum}]"
    return rule


def tier_floor(tier: str, minimum: int) -> FloorRule:
    """If the tier's raw score is positive, raise to ``minimum``."""
    def rule(param: ParameterScore, ctx: MappingContext) -> ParameterScore:
        if ctx.tier_score(tier) > 0:
            return param.raise_to(minimum)
        return param
    rule.__name__ = f"tier_floor[{tier}->{minimum}]"
    return rule


def tier_fraction_floor(
    tier: str,
    fraction: float,
    above: int,
    requires_tier: str | None = None,
    requires_metric: str | None = None,
) -> FloorRule:
    """If the tier percentage exceeds ``above``, raise to ``fraction`` of the max.

    Cross-tier floors also require evidence in the parameter's own source
    (``requires_tier`` score or ``requires_metric`` percentage above 0).
    """
    def rule(param: ParameterScore, ctx: MappingContext) -> ParameterScore:
        if requires_tier is not None and ctx.tier_score(requires_tier) <= 0:
            return param
        if requires_metric is not None and ctx.metric_percentage(requires_metric) <= 0:
            return param
        if ctx.tier_percentage(tier) > above:
            return param.raise_to(round_half_up(param.max_score * fraction))
        return param
    rule.__name__ = f"tier_fraction_floor[{tier}>{above}->{fraction}]"
    return rule


def jd_metric_fraction_floor(metric: str, fraction: float, above: int, tier: str | None = None) -> FloorRule:
    """With a JD and ``metric > above``, raise to ``fraction`` of the max."""
    def rule(param: ParameterScore, ctx: MappingContext) -> ParameterScore:
        if tier is not None and ctx.tier_score(tier) <= 0:
            return param
        if ctx.has_jd and ctx.metric_percentage(metric) > above:
            return param.raise_to(round_half_up(param.max_score * fraction))
        return param
    rule.__name__ = f"jd_metric_fraction_floor[{metric}>{above}->{fraction}]"
    return rule


# ---------------------------------------------------------------------------
# Parameter table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParameterRule:
    name: str
    source: str  # tier key, or "metric:<name>"
    floors: tuple[FloorRule, ...] = ()


PARAMETER_RULES: tuple[ParameterRule, ...] = (
    ParameterRule("keywordMatch", "skills_keywords", (
        jd_metric_scaled("jd_keywords_match"),
        jd_metric_floor("jd_keywords_match", 5, tier="skills_keywords"),
        tier_floor("skills_keywords", 3),
    )),
    ParameterRule("skillsAlignment", "skills_keywords", (
        jd_metric_scaled("technical_skills_alignment"),
        jd_metric_fraction_floor("technical_skills_alignment", 0.4, above=30, tier="skills_keywords"),
        jd_metric_floor("technical_skills_alignment", 4, tier="skills_keywords"),
        tier_floor("skills_keywords", 2),
    )),
    ParameterRule("experienceRelevance", "experience", (
        jd_metric_scaled("experience_relevance"),
        jd_metric_floor("experience_relevance", 3, tier="experience"),
        jd_metric_fraction_floor("jd_keywords_match", 0.4, above=30, tier="experience"),
        tier_floor("experience", 2),
    )),
    ParameterRule("technicalCompetencies", "skills_keywords", (
        jd_metric_scaled("technical_skills_alignment"),
        jd_metric_floor("technical_skills_alignment", 3, tier="skills_keywords"),
        tier_floor("skills_keywords", 2),
    )),
    ParameterRule("educationScore", "education", (
        tier_floor("education", 2),
    )),
    ParameterRule("quantifiedAchievements", "metric:quantified_results_presence", (
        metric_floor("quantified_results_presence", 2),
        tier_fraction_floor("experience", 0.25, above=40, requires_metric="quantified_results_presence"),
        tier_fraction_floor("competitive", 0.4, above=60, requires_metric="quantified_results_presence"),
    )),
    ParameterRule("employmentHistory", "experience", (
        tier_floor("experience", 2),
    )),
    ParameterRule("industryExperience", "competitive", (
        jd_metric_floor("experience_relevance", 2, tier="experience"),
        tier_floor("competitive", 1),
    )),
    ParameterRule("jobTitleMatch", "experience", (
        jd_metric_scaled("job_title_relevance"),
        jd_metric_floor("job_title_relevance", 3, tier="experience"),
        tier_floor("experience", 1),
    )),
    ParameterRule("careerProgression", "experience", (
        tier_floor("experience", 1),
        tier_fraction_floor("competitive", 0.5, above=50, requires_tier="experience"),
    )),
    ParameterRule("certifications", "certifications", (
        tier_floor("certifications", 1),
    )),
    ParameterRule("formatting", "basic_structure", (
        tier_floor("basic_structure", 2),
    )),
    ParameterRule("contentQuality", "content_structure", (
        tier_floor("content_structure", 1),
    )),
    ParameterRule("grammar", "qualitative", (
        tier_floor("qualitative", 1),
    )),
    ParameterRule("resumeLength", "basic_structure", (
        tier_floor("basic_structure", 1),
    )),
    ParameterRule("filenameQuality", "basic_structure", (
        tier_floor("basic_structure", 1),
    )),
)


def _source_percentage(source: str, ctx: MappingContext) -> int:
    if source.startswith("metric:"):
        return ctx.metric_percentage(source.split(":", 1)[1])
    return ctx.tier_percentage(source)


def apply_floors(param: ParameterScore, floors: tuple[FloorRule, ...], ctx: MappingContext) -> ParameterScore:
    """Apply floor rules left to right, then clamp once to ``[0, max]``."""
    floored = reduce(lambda current, rule: rule(current, ctx), floors, param)
    return floored.clamped()


def map_to_parameters(
    tiers: Mapping[str, TierScore],
    metrics: Mapping[str, CriticalMetric],
    has_jd: bool,
    rubric: Rubric = DEFAULT_RUBRIC,
    rules: tuple[ParameterRule, ...] = PARAMETER_RULES,
) -> dict[str, ParameterScore]:
    """Map tier scores and critical metrics onto the 16 parameters.

    Output order follows ``rules`` (largest parameters first).
    """
    ctx = MappingContext(tiers=tiers, metrics=metrics, has_jd=has_jd)

    parameters: dict[str, ParameterScore] = {}
    for param_rule in rules:
        max_score = rubric.parameter_max_scores[param_rule.name]
        base = ParameterScore(
            name=param_rule.name,
            score=scale(_source_percentage(param_rule.source, ctx), max_score),
            max_score=max_score,
        )
        final = apply_floors(base, param_rule.floors, ctx)
        if final.score != base.score:
            logger.debug("Parameter %s: base %d -> %d", param_rule.name, base.score, final.score)
        parameters[param_rule.name] = final
    return parameters
