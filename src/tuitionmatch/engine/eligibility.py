import logging

from tuitionmatch.domain.models import CardRecord, EngineConfig, MatchingCriteria, RecentApplications

logger = logging.getLogger(__name__)

NO_PARTNER_PREFERENCE = ("any", "no preference", "any / no preference")


def _normalize(values: list[str]) -> list[str]:
    return [value.strip().lower() for value in values if value and value.strip()]


def _already_held(card: CardRecord, held: list[str]) -> bool:
    name = card.name.lower()
    issuer = card.issuer.lower()
    return any(entry == issuer or entry in name or name in entry for entry in held)


def partner_matches(card_partner: str, partners: list[str]) -> bool:
    """True when a card's partner and one of the normalized preferred partners name each other."""
    card_partner = card_partner.lower()
    return any(partner in card_partner or card_partner in partner for partner in partners)


def _partner_allowed(card: CardRecord, partners: list[str]) -> bool:
    if not card.travel_partner or not partners:
        return True
    if any(partner in NO_PARTNER_PREFERENCE for partner in partners):
        return True
    return partner_matches(card.travel_partner, partners)


def exclusion_reason(card: CardRecord, criteria: MatchingCriteria, config: EngineConfig) -> str | None:
    """Return why a card is excluded for these criteria, or None when it is eligible."""
    if not card.active:
        return "inactive"

    if card.min_credit_tier is not None and card.min_credit_tier.rank > criteria.credit_tier.rank:
        return f"requires {card.min_credit_tier.value} credit"

    if _already_held(card, _normalize(criteria.current_cards)):
        return "already held"

    if card.is_business_card and not criteria.open_to_business_cards:
        return "business card not accepted"

    issuer = card.issuer.lower()
    if criteria.recent_applications == RecentApplications.FIVE_PLUS and issuer in _normalize(
        config.strict_velocity_issuers
    ):
        return "issuer velocity limit"

    if issuer in _normalize(config.lifetime_bonus_issuers):
        previously_held = _normalize(criteria.previously_held_cards)
        if any(entry in card.name.lower() or card.name.lower() in entry for entry in previously_held):
            return "lifetime bonus already received"

    if not _partner_allowed(card, _normalize(criteria.preferred_travel_partners)):
        return f"travel partner {card.travel_partner} not preferred"

    return None


def filter_eligible(cards: list[CardRecord], criteria: MatchingCriteria, config: EngineConfig) -> list[CardRecord]:
    eligible: list[CardRecord] = []
    for card in cards:
        reason = exclusion_reason(card, criteria, config)
        if reason is None:
            eligible.append(card)
        else:
            logger.debug("Excluded %s (%s): %s", card.name, card.issuer, reason)
    return eligible
