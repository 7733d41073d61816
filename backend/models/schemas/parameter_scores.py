"""Parameter mapper output: the 16 rubric parameters."""

from pydantic import BaseModel

from services.scoring.rubric import percent


class ParameterScore(BaseModel):
    name: str
    score: int = 0
    max_score: int

    def raise_to(self, floor: int) -> "ParameterScore":
        """Return a copy whose score is at least ``floor``. Never lowers."""
        if floor <= self.score:
            return self
        return self.model_copy(update={"score": floor})

    def clamped(self) -> "ParameterScore":
        bounded = max(0, min(self.score, self.max_score))
        if bounded == self.score:
            return self
        return self.model_copy(update={"score": bounded})

    @property
    def percentage(self) -> int:
        return percent(self.score, self.max_score)
