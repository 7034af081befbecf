from pathlib import Path

import pytest

from tuitionmatch.domain.models import CardRecord, EngineConfig, MatchingCriteria

SAMPLE_CATALOG = Path(__file__).resolve().parents[1] / "data" / "cards" / "sample_cards.json"


@pytest.fixture
def sample_catalog_path() -> Path:
    return SAMPLE_CATALOG


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def make_card():
    def _make_card(**overrides) -> CardRecord:
        payload = {
            "name": "Test Card",
            "issuer": "Test Bank",
            "signup_bonus_value": 0,
            "signup_bonus_spend": None,
            "annual_fee": 0,
            "first_year_waived": False,
            "rewards_rate": 2,
            "rewards_type": "cash_back",
        }
        payload.update(overrides)
        return CardRecord.model_validate(payload)

    return _make_card


@pytest.fixture
def make_criteria():
    def _make_criteria(**overrides) -> MatchingCriteria:
        payload = {
            "credit_tier": "excellent",
            "current_cards": [],
            "monthly_spend_capacity": 0,
            "preferred_rewards_type": "flexible",
            "open_to_business_cards": False,
            "tuition_amount": 10000,
        }
        payload.update(overrides)
        return MatchingCriteria.model_validate(payload)

    return _make_criteria
