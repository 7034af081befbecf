from tuitionmatch.domain.models import CardRecord, EngineConfig, MatchingCriteria, Recommendation, RewardsType
from tuitionmatch.engine.eligibility import partner_matches
from tuitionmatch.engine.evaluator import evaluate_card
from tuitionmatch.engine.explainer import explain_breakdown

REWARDS_TYPE_MATCH_MULTIPLIER = 1.2
TRAVEL_PARTNER_MATCH_MULTIPLIER = 1.4


def preference_multiplier(card: CardRecord, criteria: MatchingCriteria) -> float:
    partners = [partner.strip().lower() for partner in criteria.preferred_travel_partners if partner.strip()]
    if card.travel_partner and partner_matches(card.travel_partner, partners):
        return TRAVEL_PARTNER_MATCH_MULTIPLIER
    preferred = criteria.preferred_rewards_type
    if preferred != RewardsType.FLEXIBLE and card.rewards_type == preferred:
        return REWARDS_TYPE_MATCH_MULTIPLIER
    return 1.0


def rank_cards(cards: list[CardRecord], criteria: MatchingCriteria, config: EngineConfig) -> list[Recommendation]:
    evaluations = [(card, evaluate_card(card, criteria, config)) for card in cards]
    evaluations.sort(key=lambda item: (-item[1].net_value_cents, item[0].name, item[0].issuer))
    return [
        Recommendation(
            card=card,
            breakdown=breakdown,
            estimated_savings_cents=breakdown.net_value_cents,
            rank=index,
            preference_multiplier=preference_multiplier(card, criteria),
            reasoning=explain_breakdown(card, breakdown),
        )
        for index, (card, breakdown) in enumerate(evaluations, start=1)
    ]
