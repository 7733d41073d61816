"""Tier scorer output: one percentage-based score per resume tier."""

from pydantic import BaseModel, Field, model_validator

from services.scoring.rubric import scale


class TierScore(BaseModel):
    """Score of a single tier.

    ``score`` is always derived from ``percentage`` and ``weight``; any value
    passed in is overwritten so the two can never disagree.
    """
    key: str
    tier_name: str
    percentage: int = Field(0, ge=0, le=100)
    weight: int = Field(0, ge=0)
    score: int = 0
    top_issues: list[str] = []

    @model_validator(mode="after")
    def derive_score(self) -> "TierScore":
        self.score = scale(self.percentage, self.weight)
        return self
