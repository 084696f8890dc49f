from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from profit_challenge.challenge.models import Currency


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JSON key-value file holding the challenge blob.
    PDC_STORE_PATH: str = "data/challenge.json"
    # Display currency for newly started challenges.
    PDC_CURRENCY: Currency = Currency.EUR
    # How far the projection runs past the last snapshot.
    PDC_HORIZON_DAYS: int = 365

    # Snake_case accessors used across the codebase.
    @property
    def store_path(self) -> str:
        return self.PDC_STORE_PATH

    @property
    def currency(self) -> Currency:
        return self.PDC_CURRENCY

    @property
    def horizon_days(self) -> int:
        return max(0, int(self.PDC_HORIZON_DAYS))


def load_settings() -> Settings:
    return Settings()
