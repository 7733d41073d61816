"""Critical metrics: job-description-aware signals used as floors."""

from pydantic import BaseModel, Field, model_validator

from services.scoring.rubric import scale


class CriticalMetric(BaseModel):
    name: str
    percentage: int = Field(0, ge=0, le=100)
    max_score: int = 0
    score: int = 0
    details: str = ""

    @model_validator(mode="after")
    def derive_score(self) -> "CriticalMetric":
        self.score = scale(self.percentage, self.max_score)
        return self
