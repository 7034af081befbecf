"""
Split optimizer.

Greedy allocation of one tuition payment across up to ``split_max_cards``
cards so that each card receives just enough to clear its signup bonus.
The top-ranked card is always part of the split and receives the
remainder. At most one card per exclusive family (e.g. Chase Ink) is used.
The search is bounded to the top ``split_candidate_limit`` ranked cards and
is not guaranteed to find the best possible split.
"""

import logging

from tuitionmatch.domain.models import (
    CardRecord,
    EngineConfig,
    MatchingCriteria,
    Recommendation,
    SplitAllocation,
    SplitStrategy,
)
from tuitionmatch.engine.evaluator import evaluate_card, required_allocation_cents

logger = logging.getLogger(__name__)


def _split_family(card: CardRecord, config: EngineConfig) -> str | None:
    label = f"{card.issuer} {card.name}".lower()
    for family in config.split_exclusive_families:
        if family.strip() and family.strip().lower() in label:
            return family.strip().lower()
    return None


def _assign_minimums(
    candidates: list[Recommendation], criteria: MatchingCriteria, config: EngineConfig
) -> list[tuple[CardRecord, int]]:
    remaining = criteria.tuition_cents
    top_card = candidates[0].card
    top_needed = required_allocation_cents(top_card, criteria)
    if top_needed > remaining:
        top_needed = 0
    remaining -= top_needed

    assignments: list[tuple[CardRecord, int]] = [(top_card, top_needed)]
    families = {_split_family(top_card, config)} - {None}

    for recommendation in candidates[1:]:
        if len(assignments) >= config.split_max_cards:
            break
        card = recommendation.card
        needed = required_allocation_cents(card, criteria)
        if needed <= 0 or needed > remaining:
            continue
        family = _split_family(card, config)
        if family is not None and family in families:
            logger.debug("Split skips %s, %s card already assigned", card.name, family)
            continue
        if family is not None:
            families.add(family)
        assignments.append((card, needed))
        remaining -= needed
        logger.debug("Split assigns %d cents to %s", needed, card.name)

    assignments[0] = (top_card, top_needed + remaining)
    return assignments


def optimize_split(
    recommendations: list[Recommendation], criteria: MatchingCriteria, config: EngineConfig
) -> SplitStrategy | None:
    """
    Return a split strategy that beats the best single card, or None.

    Args:
        recommendations: Ranked recommendations, best first
        criteria: The user's matching criteria
        config: Engine configuration bounding the search

    Returns:
        SplitStrategy whose allocations sum to the tuition amount, or None
    """
    if len(recommendations) < 2:
        return None

    candidates = recommendations[: config.split_candidate_limit]
    assignments = _assign_minimums(candidates, criteria, config)
    if len(assignments) < 2:
        return None

    allocations: list[SplitAllocation] = []
    for card, allocated in assignments:
        allocations.append(
            SplitAllocation(
                card=card,
                allocated_cents=allocated,
                breakdown=evaluate_card(card, criteria, config, allocated_cents=allocated),
            )
        )

    total = sum(item.breakdown.net_value_cents for item in allocations)
    best_single = recommendations[0].estimated_savings_cents
    if total <= best_single:
        logger.debug("Split total %d cents does not beat single card %d cents", total, best_single)
        return None

    return SplitStrategy(cards=allocations, total_savings_cents=total)
