from decimal import ROUND_HALF_UP, Decimal

from tuitionmatch.domain.models import CardRecord, SplitStrategy, ValueBreakdown


def format_currency(amount: float) -> str:
    """Render a dollar amount as whole US dollars, e.g. ``$1,235`` or ``-$95``."""
    whole = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    return f"{sign}${abs(whole):,}"


def _requirement_text(card: CardRecord) -> str:
    if card.spend_requirement_cents is None:
        return "no spend requirement"
    return f"spend {format_currency(card.signup_bonus_spend)} in {card.signup_bonus_months} months"


def explain_breakdown(card: CardRecord, breakdown: ValueBreakdown) -> str:
    lines: list[str] = []

    if breakdown.signup_bonus_cents > 0:
        lines.append(f"Signup bonus: {format_currency(breakdown.signup_bonus)} ({_requirement_text(card)})")
    elif card.bonus_cents > 0:
        lines.append(f"Signup bonus: not reachable ({_requirement_text(card)})")

    rate = card.rewards_rate or 0
    lines.append(
        f"Rewards on {format_currency(breakdown.allocated_amount)} tuition: "
        f"{format_currency(breakdown.rewards)} ({rate:g}% back)"
    )

    if breakdown.annual_fee_cents > 0:
        lines.append(f"Annual fee: {format_currency(-breakdown.annual_fee_charged)}")
    elif card.annual_fee_cents > 0 and card.first_year_waived:
        lines.append(f"Annual fee: {format_currency(card.annual_fee)} (waived first year)")

    lines.append(f"Processing fee: {format_currency(-breakdown.processing_fee)}")
    lines.append(f"Net first-year value: {format_currency(breakdown.net_value)}")
    return "\n".join(lines)


def explain_split(strategy: SplitStrategy) -> str:
    lines = [
        f"Pay {format_currency(item.allocated_amount)} with {item.card.name}: "
        f"{format_currency(item.breakdown.net_value)} net first-year value"
        for item in strategy.cards
    ]
    lines.append(f"Combined first-year value: {format_currency(strategy.total_savings)}")
    return "\n".join(lines)
