from pydantic import BaseModel

from tuitionmatch.domain.models import MatchingCriteria, Recommendation, SplitStrategy


class RecommendResponse(BaseModel):
    best_card: Recommendation | None
    recommendations: list[Recommendation]
    split_strategy: SplitStrategy | None
    split_explanation: str | None = None
    criteria: MatchingCriteria
    total_eligible: int
