from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("1")


def to_cents(amount: float | int | Decimal) -> int:
    """Convert a dollar amount to integer cents, rounding half away from zero."""
    return int((Decimal(str(amount)) * 100).quantize(CENT, rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> float:
    return cents / 100


def apply_rate(cents: int, rate: float | Decimal) -> int:
    """Multiply a cent amount by a fractional rate and round to the cent."""
    product = Decimal(cents) * Decimal(str(rate))
    return int(product.quantize(CENT, rounding=ROUND_HALF_UP))
