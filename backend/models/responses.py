from pydantic import BaseModel

from models.schemas import CriticalMetric, TierScore


class BreakdownItem(BaseModel):
    key: str
    tier_name: str
    weight_pct: int
    score: int
    percentage: int = 0
    details: str = ""
    role_type: str = "experienced"


class ParameterSuggestion(BaseModel):
    parameter: str
    display_name: str = ""
    current_score: int
    max_score: int
    percentage: int
    priority: str  # Critical | High | Medium | Low
    improvement_potential: int
    suggestions: list[str] = []
    quick_fixes: list[str] = []
    examples: list[str] = []


class OptimizationPlan(BaseModel):
    current_overall_score: int = 0
    target_overall_score: int = 0
    potential_improvement: int = 0
    suggestions: list[ParameterSuggestion] = []
    priority_actions: list[str] = []
    estimated_time: str = ""
    difficulty: str = "Easy"


class MissingKeywords(BaseModel):
    critical: list[str] = []
    important: list[str] = []
    optional: list[str] = []


class ScoreReport(BaseModel):
    overall_score: int = 0
    match_quality: str = ""
    interview_chance: str = ""
    scores: dict[str, int] = {}
    breakdown: list[BreakdownItem] = []
    optimization_plan: OptimizationPlan = OptimizationPlan()
    summary: str = ""
    strengths: list[str] = []
    areas_to_improve: list[str] = []
    matched_keywords: list[str] = []
    missing_keywords: MissingKeywords = MissingKeywords()
    keyword_density: dict[str, float] = {}  # matched keyword -> % of resume words
    has_jd: bool = False
    role_type: str = "experienced"
    tier_scores: dict[str, TierScore] = {}
    critical_metrics: dict[str, CriticalMetric] = {}
    # Set by the host, not by the scoring engine
    normalization_method: str = "provided"
