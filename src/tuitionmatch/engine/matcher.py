import math

from tuitionmatch.domain.errors import MatchingInputError
from tuitionmatch.domain.models import CardRecord, EngineConfig, MatchingCriteria, MatchResult
from tuitionmatch.engine.eligibility import filter_eligible
from tuitionmatch.engine.selectors import rank_cards
from tuitionmatch.engine.splitter import optimize_split


def _validate(cards: list[CardRecord] | None, criteria: MatchingCriteria | None) -> None:
    if cards is None:
        raise MatchingInputError("A card catalog is required.")
    if criteria is None:
        raise MatchingInputError("Matching criteria are required.")

    for field in ("credit_tier", "preferred_rewards_type", "recent_applications"):
        if getattr(criteria, field, None) is None:
            raise MatchingInputError(f"Criteria field '{field}' is required.")

    tuition = criteria.tuition_amount
    if tuition is None or not math.isfinite(tuition) or tuition <= 0:
        raise MatchingInputError("Tuition amount must be a positive number.")

    spend = criteria.monthly_spend_capacity
    if spend is None or not math.isfinite(spend) or spend < 0:
        raise MatchingInputError("Monthly spend capacity must be a non-negative number.")


def match_cards(
    cards: list[CardRecord] | None,
    criteria: MatchingCriteria | None,
    config: EngineConfig | None = None,
) -> MatchResult:
    _validate(cards, criteria)
    config = config or EngineConfig()

    eligible = filter_eligible(list(cards), criteria, config)
    recommendations = rank_cards(eligible, criteria, config)
    split_strategy = optimize_split(recommendations, criteria, config)

    return MatchResult(
        recommendations=recommendations,
        split_strategy=split_strategy,
        total_candidates=len(cards),
        total_eligible=len(eligible),
    )
