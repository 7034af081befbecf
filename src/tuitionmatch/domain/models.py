from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from tuitionmatch.domain.money import from_cents, to_cents


class CreditTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    BELOW = "below"

    @property
    def rank(self) -> int:
        return _TIER_RANKS[self]

    @classmethod
    def from_score(cls, score: int) -> "CreditTier":
        """Lowest tier whose minimum score meets a required score."""
        for minimum, tier in _TIER_MINIMUM_SCORES:
            if score <= minimum:
                return tier
        return cls.EXCELLENT


_TIER_RANKS = {
    CreditTier.BELOW: 0,
    CreditTier.FAIR: 1,
    CreditTier.GOOD: 2,
    CreditTier.EXCELLENT: 3,
}

_TIER_MINIMUM_SCORES = (
    (300, CreditTier.BELOW),
    (650, CreditTier.FAIR),
    (700, CreditTier.GOOD),
    (750, CreditTier.EXCELLENT),
)


class RewardsType(str, Enum):
    CASH_BACK = "cash_back"
    TRAVEL_POINTS = "travel_points"
    STATEMENT_CREDITS = "statement_credits"
    FLEXIBLE = "flexible"


class RecentApplications(str, Enum):
    NONE = "0"
    ONE_TO_TWO = "1-2"
    THREE_TO_FOUR = "3-4"
    FIVE_PLUS = "5+"


class CardRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    issuer: str
    signup_bonus_value: float = Field(default=0, ge=0)
    signup_bonus_spend: float | None = Field(default=None, ge=0)
    signup_bonus_months: int = Field(default=3, ge=1)
    annual_fee: float = Field(default=0, ge=0)
    first_year_waived: bool = False
    rewards_rate: float | None = Field(default=None, ge=0)
    rewards_type: RewardsType
    min_credit_tier: CreditTier | None = None
    is_business_card: bool = False
    active: bool = True
    travel_partner: str | None = None
    application_url: str | None = None

    @field_validator("min_credit_tier", mode="before")
    @classmethod
    def tier_from_score(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return CreditTier.from_score(int(value))
        return value

    @property
    def bonus_cents(self) -> int:
        return to_cents(self.signup_bonus_value)

    @property
    def spend_requirement_cents(self) -> int | None:
        if not self.signup_bonus_spend:
            return None
        return to_cents(self.signup_bonus_spend)

    @property
    def annual_fee_cents(self) -> int:
        return to_cents(self.annual_fee)


class MatchingCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    credit_tier: CreditTier
    current_cards: list[str] = Field(default_factory=list)
    monthly_spend_capacity: float = Field(default=0, ge=0, allow_inf_nan=False)
    preferred_rewards_type: RewardsType
    open_to_business_cards: bool = False
    tuition_amount: float = Field(gt=0, allow_inf_nan=False)
    recent_applications: RecentApplications = RecentApplications.NONE
    preferred_travel_partners: list[str] = Field(default_factory=list)
    previously_held_cards: list[str] = Field(default_factory=list)

    @property
    def tuition_cents(self) -> int:
        return to_cents(self.tuition_amount)

    @property
    def monthly_spend_cents(self) -> int:
        return to_cents(self.monthly_spend_capacity)


class EngineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    processing_fee_rate: float = Field(default=0.029, ge=0)
    processing_fixed_fee_cents: int = Field(default=30, ge=0)
    split_candidate_limit: int = Field(default=6, ge=2)
    split_max_cards: int = Field(default=3, ge=2, le=3)
    strict_velocity_issuers: list[str] = Field(default_factory=lambda: ["Chase"])
    lifetime_bonus_issuers: list[str] = Field(default_factory=lambda: ["American Express"])
    split_exclusive_families: list[str] = Field(default_factory=lambda: ["Chase Ink"])


class ValueBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    allocated_cents: int
    signup_bonus_cents: int
    rewards_cents: int
    processing_fee_cents: int
    annual_fee_cents: int
    net_value_cents: int
    bonus_attained: bool

    @computed_field
    @property
    def allocated_amount(self) -> float:
        return from_cents(self.allocated_cents)

    @computed_field
    @property
    def signup_bonus(self) -> float:
        return from_cents(self.signup_bonus_cents)

    @computed_field
    @property
    def rewards(self) -> float:
        return from_cents(self.rewards_cents)

    @computed_field
    @property
    def processing_fee(self) -> float:
        return from_cents(self.processing_fee_cents)

    @computed_field
    @property
    def annual_fee_charged(self) -> float:
        return from_cents(self.annual_fee_cents)

    @computed_field
    @property
    def net_value(self) -> float:
        return from_cents(self.net_value_cents)


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: CardRecord
    breakdown: ValueBreakdown
    estimated_savings_cents: int
    rank: int = Field(ge=1)
    preference_multiplier: float = 1.0
    reasoning: str = ""

    @computed_field
    @property
    def estimated_savings(self) -> float:
        return from_cents(self.estimated_savings_cents)


class SplitAllocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: CardRecord
    allocated_cents: int
    breakdown: ValueBreakdown

    @computed_field
    @property
    def allocated_amount(self) -> float:
        return from_cents(self.allocated_cents)


class SplitStrategy(BaseModel):
    model_config = ConfigDict(frozen=True)

    cards: list[SplitAllocation]
    total_savings_cents: int

    @computed_field
    @property
    def total_savings(self) -> float:
        return from_cents(self.total_savings_cents)


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    recommendations: list[Recommendation] = Field(default_factory=list)
    split_strategy: SplitStrategy | None = None
    total_candidates: int = 0
    total_eligible: int = 0
