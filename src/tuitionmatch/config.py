from pydantic_settings import BaseSettings, SettingsConfigDict

from tuitionmatch.domain.models import EngineConfig


class Settings(BaseSettings):
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    card_catalog_file: str = "data/cards/sample_cards.json"
    log_level: str = "INFO"

    processing_fee_rate: float = 0.029
    processing_fixed_fee_cents: int = 30
    split_candidate_limit: int = 6
    split_max_cards: int = 3
    strict_velocity_issuers: list[str] = ["Chase"]
    lifetime_bonus_issuers: list[str] = ["American Express"]
    split_exclusive_families: list[str] = ["Chase Ink"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            processing_fee_rate=self.processing_fee_rate,
            processing_fixed_fee_cents=self.processing_fixed_fee_cents,
            split_candidate_limit=self.split_candidate_limit,
            split_max_cards=self.split_max_cards,
            strict_velocity_issuers=self.strict_velocity_issuers,
            lifetime_bonus_issuers=self.lifetime_bonus_issuers,
            split_exclusive_families=self.split_exclusive_families,
        )


settings = Settings()
