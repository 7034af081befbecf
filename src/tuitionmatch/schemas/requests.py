from pydantic import Field

from tuitionmatch.domain.models import MatchingCriteria


class RecommendRequest(MatchingCriteria):
    limit: int | None = Field(default=None, ge=1)

    def to_criteria(self) -> MatchingCriteria:
        return MatchingCriteria.model_validate(self.model_dump(exclude={"limit"}))
