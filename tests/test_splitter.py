from tuitionmatch.domain.models import EngineConfig
from tuitionmatch.engine.selectors import rank_cards
from tuitionmatch.engine.splitter import optimize_split


def _two_bonus_cards(make_card):
    return [
        make_card(name="Alpha", signup_bonus_value=750, signup_bonus_spend=4000, annual_fee=95, rewards_rate=2),
        make_card(name="Beta", signup_bonus_value=600, signup_bonus_spend=4000, first_year_waived=True, rewards_rate=2),
    ]


def test_split_unlocks_two_bonuses(make_card, make_criteria, config) -> None:
    criteria = make_criteria(tuition_amount=15000)
    ranked = rank_cards(_two_bonus_cards(make_card), criteria, config)

    split = optimize_split(ranked, criteria, config)

    assert split is not None
    allocations = {item.card.name: item.allocated_cents for item in split.cards}
    assert allocations == {"Alpha": 1100000, "Beta": 400000}
    assert sum(allocations.values()) == criteria.tuition_cents
    assert all(item.breakdown.bonus_attained for item in split.cards)
    assert split.total_savings_cents == 55570 + 56370
    assert split.total_savings_cents > ranked[0].estimated_savings_cents
    assert ranked[0].estimated_savings_cents == 51970


def test_no_split_with_single_card(make_card, make_criteria, config) -> None:
    criteria = make_criteria(tuition_amount=15000)
    ranked = rank_cards(_two_bonus_cards(make_card)[:1], criteria, config)

    assert optimize_split(ranked, criteria, config) is None


def test_no_split_when_tuition_below_requirements(make_card, make_criteria, config) -> None:
    criteria = make_criteria(tuition_amount=3000)
    ranked = rank_cards(_two_bonus_cards(make_card), criteria, config)

    assert optimize_split(ranked, criteria, config) is None


def test_no_split_when_only_one_bonus_fits(make_card, make_criteria, config) -> None:
    criteria = make_criteria(tuition_amount=5000)
    ranked = rank_cards(_two_bonus_cards(make_card), criteria, config)

    assert optimize_split(ranked, criteria, config) is None


def test_no_split_when_single_card_is_better(make_card, make_criteria, config) -> None:
    cards = [
        make_card(name="Keeper", signup_bonus_value=100, signup_bonus_spend=4000, first_year_waived=True),
        make_card(name="Costly", signup_bonus_value=10, signup_bonus_spend=4000, annual_fee=95),
    ]
    criteria = make_criteria(tuition_amount=8000)
    ranked = rank_cards(cards, criteria, config)

    assert optimize_split(ranked, criteria, config) is None


def test_split_is_bounded_to_max_cards(make_card, make_criteria, config) -> None:
    cards = [
        make_card(name=f"Card {index}", signup_bonus_value=300, signup_bonus_spend=1000, first_year_waived=True)
        for index in range(5)
    ]
    criteria = make_criteria(tuition_amount=10000)
    ranked = rank_cards(cards, criteria, config)

    split = optimize_split(ranked, criteria, config)

    assert split is not None
    assert [item.card.name for item in split.cards] == ["Card 0", "Card 1", "Card 2"]
    assert [item.allocated_cents for item in split.cards] == [800000, 100000, 100000]

    two_card = optimize_split(ranked, criteria, EngineConfig(split_max_cards=2))
    assert two_card is not None
    assert len(two_card.cards) == 2


def test_split_keeps_top_card_without_requirement(make_card, make_criteria, config) -> None:
    cards = [
        make_card(name="Free Bonus", signup_bonus_value=700),
        *_two_bonus_cards(make_card),
    ]
    criteria = make_criteria(tuition_amount=15000)
    ranked = rank_cards(cards, criteria, config)

    split = optimize_split(ranked, criteria, config)

    assert ranked[0].card.name == "Free Bonus"
    assert split is not None
    assert {item.card.name: item.allocated_cents for item in split.cards} == {
        "Free Bonus": 700000,
        "Alpha": 400000,
        "Beta": 400000,
    }
    assert split.total_savings_cents == 63670 + 61870 + 56370
    assert split.total_savings_cents == 181910


def test_split_candidates_limited(make_card, make_criteria) -> None:
    cards = [
        make_card(name="A", signup_bonus_value=2000),
        make_card(name="B", signup_bonus_value=1900),
        *_two_bonus_cards(make_card),
    ]
    criteria = make_criteria(tuition_amount=15000)
    config = EngineConfig(split_candidate_limit=2)
    ranked = rank_cards(cards, criteria, config)

    assert optimize_split(ranked, criteria, config) is None


def _ink_cards(make_card):
    return [
        make_card(
            name="Chase Ink Business Preferred",
            issuer="Chase",
            signup_bonus_value=1000,
            signup_bonus_spend=8000,
            annual_fee=95,
            rewards_rate=3,
        ),
        make_card(
            name="Chase Ink Business Cash",
            issuer="Chase",
            signup_bonus_value=750,
            signup_bonus_spend=6000,
            first_year_waived=True,
            rewards_rate=1,
        ),
        make_card(name="Beta", signup_bonus_value=600, signup_bonus_spend=4000, first_year_waived=True, rewards_rate=2),
    ]


def test_split_uses_one_card_per_exclusive_family(make_card, make_criteria, config) -> None:
    criteria = make_criteria(tuition_amount=20000)
    ranked = rank_cards(_ink_cards(make_card), criteria, config)

    split = optimize_split(ranked, criteria, config)

    assert [item.card.name for item in ranked] == ["Chase Ink Business Preferred", "Beta", "Chase Ink Business Cash"]
    assert split is not None
    assert {item.card.name: item.allocated_cents for item in split.cards} == {
        "Chase Ink Business Preferred": 1600000,
        "Beta": 400000,
    }
    assert split.total_savings_cents == 92070 + 56370


def test_split_without_exclusive_families_mixes_ink_cards(make_card, make_criteria) -> None:
    config = EngineConfig(split_exclusive_families=[])
    criteria = make_criteria(tuition_amount=20000)
    ranked = rank_cards(_ink_cards(make_card), criteria, config)

    split = optimize_split(ranked, criteria, config)

    assert split is not None
    assert {item.card.name: item.allocated_cents for item in split.cards} == {
        "Chase Ink Business Preferred": 1000000,
        "Beta": 400000,
        "Chase Ink Business Cash": 600000,
    }
    assert split.total_savings_cents == 91470 + 56370 + 63570
