from decimal import Decimal

from tuitionmatch.domain.models import CardRecord, EngineConfig, MatchingCriteria, ValueBreakdown
from tuitionmatch.domain.money import apply_rate


def processing_fee_cents(amount_cents: int, config: EngineConfig) -> int:
    if amount_cents <= 0:
        return 0
    return apply_rate(amount_cents, config.processing_fee_rate) + config.processing_fixed_fee_cents


def projected_spend_cents(card: CardRecord, criteria: MatchingCriteria) -> int:
    """Spend the user can put on the card from ordinary monthly spending during the bonus window."""
    return criteria.monthly_spend_cents * card.signup_bonus_months


def required_allocation_cents(card: CardRecord, criteria: MatchingCriteria) -> int:
    """Minimum tuition allocation that still clears the card's bonus spend requirement."""
    requirement = card.spend_requirement_cents
    if requirement is None:
        return 0
    return max(requirement - projected_spend_cents(card, criteria), 0)


def evaluate_card(
    card: CardRecord,
    criteria: MatchingCriteria,
    config: EngineConfig,
    allocated_cents: int | None = None,
) -> ValueBreakdown:
    if allocated_cents is None:
        allocated_cents = criteria.tuition_cents

    fee = processing_fee_cents(allocated_cents, config)

    requirement = card.spend_requirement_cents
    bonus_attained = requirement is None or allocated_cents + projected_spend_cents(card, criteria) >= requirement
    bonus = card.bonus_cents if bonus_attained else 0

    rewards = 0
    if card.rewards_rate is not None:
        rewards = apply_rate(allocated_cents, Decimal(str(card.rewards_rate)) / 100)

    annual_fee = 0 if card.first_year_waived else card.annual_fee_cents

    net_value = bonus + rewards - annual_fee - fee

    return ValueBreakdown(
        allocated_cents=allocated_cents,
        signup_bonus_cents=bonus,
        rewards_cents=rewards,
        processing_fee_cents=fee,
        annual_fee_cents=annual_fee,
        net_value_cents=net_value,
        bonus_attained=bonus_attained,
    )
