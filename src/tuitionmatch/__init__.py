from tuitionmatch.domain.errors import CatalogUnavailableError, MatchingInputError
from tuitionmatch.domain.models import (
    CardRecord,
    CreditTier,
    EngineConfig,
    MatchingCriteria,
    MatchResult,
    RecentApplications,
    Recommendation,
    RewardsType,
    SplitAllocation,
    SplitStrategy,
    ValueBreakdown,
)
from tuitionmatch.engine.matcher import match_cards

__all__ = [
    "CardRecord",
    "CatalogUnavailableError",
    "CreditTier",
    "EngineConfig",
    "MatchResult",
    "MatchingCriteria",
    "MatchingInputError",
    "RecentApplications",
    "Recommendation",
    "RewardsType",
    "SplitAllocation",
    "SplitStrategy",
    "ValueBreakdown",
    "match_cards",
]
